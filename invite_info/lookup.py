from __future__ import annotations

import asyncio
import functools
import json
import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import aiohttp

from .config import Settings
from .errors import LookupFailed, NetworkOrParseFailure
from .models import InviteRecord, decode_invite

logger = logging.getLogger(__name__)

LOOKUP_PARAMS = {"with_counts": "true", "with_expiration": "true"}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


# Strict decoding: NaN and Infinity are not JSON
_loads = functools.partial(json.loads, parse_constant=_reject_constant)


@dataclass(frozen=True)
class InviteLookup:
    """A successful lookup: the validated record plus the body exactly as decoded."""

    record: InviteRecord
    payload: dict[str, Any]


class InviteClient:
    """Fetches invite metadata from Discord's public invite endpoint."""

    def __init__(self, settings: Settings, session: Optional[aiohttp.ClientSession] = None):
        self.settings = settings
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self.settings.lookup_timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    def invite_url(self, code: str) -> str:
        base = self.settings.discord_api_base_url.rstrip("/")
        return f"{base}/invites/{quote(code, safe='')}"

    async def fetch_invite(self, code: str) -> InviteLookup:
        """Look up a single invite code.

        Raises LookupFailed for non-2xx answers, NetworkOrParseFailure when
        the request or JSON decoding breaks and InviteSchemaMismatch when the
        body is not an invite.
        """
        session = await self._get_session()
        url = self.invite_url(code)
        headers = {"User-Agent": self.settings.lookup_user_agent}

        try:
            async with session.get(url, params=LOOKUP_PARAMS, headers=headers) as response:
                if not 200 <= response.status < 300:
                    logger.warning("Invite lookup for %r failed with HTTP %s", code, response.status)
                    raise LookupFailed(response.status)
                payload = await response.json(loads=_loads, content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            logger.warning("Invite lookup for %r raised %s: %s", code, type(exc).__name__, exc)
            raise NetworkOrParseFailure(str(exc)) from exc

        if payload is None:
            logger.warning("Invite lookup for %r returned an empty body", code)
            raise NetworkOrParseFailure("Empty response body")

        record = decode_invite(payload)
        logger.info("Resolved invite %r to guild %r", code, record.guild.name if record.guild else None)
        return InviteLookup(record=record, payload=payload)

    async def close(self) -> None:
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None
