"""Invite lookup exception hierarchy."""

from __future__ import annotations

from typing import Optional

GENERIC_FAILURE_MESSAGE = "Invalid invite or API error"
FALLBACK_FAILURE_MESSAGE = "Failed to fetch invite data"


class InviteLookupError(Exception):
    """Base class for every way a lookup can fail.

    ``message`` is the text shown to the user in the error banner.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class LookupFailed(InviteLookupError):
    """Raised when Discord answers with a non-2xx status."""

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(GENERIC_FAILURE_MESSAGE)


class NetworkOrParseFailure(InviteLookupError):
    """Raised on transport errors, timeouts and undecodable bodies."""

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail or FALLBACK_FAILURE_MESSAGE)


class InviteSchemaMismatch(InviteLookupError):
    """Raised when the body is valid JSON but not an invite object."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Unexpected invite payload: {detail}")
