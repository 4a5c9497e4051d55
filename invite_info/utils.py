"""Utility functions for invite handling."""

import re

_INVITE_URL_RE = re.compile(
    r"^(?:https?://)?(?:www\.)?(?:discord\.gg|discord(?:app)?\.com/invite)/",
    re.IGNORECASE,
)


def normalize_invite_code(raw: str) -> str:
    """Reduce user input to a bare invite code.

    Accepts either a code or a pasted invite link.

    Args:
        raw: Text typed into the lookup form

    Returns:
        The invite code, or an empty string if nothing usable was given
    """
    code = raw.strip()
    code = _INVITE_URL_RE.sub("", code)
    # Drop any query string or trailing path from a pasted link
    code = code.split("?", 1)[0].split("#", 1)[0].split("/", 1)[0]
    return code.strip()
