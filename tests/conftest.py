"""Pytest configuration and shared fixtures."""

import copy
import json

import pytest
from unittest.mock import AsyncMock, MagicMock

from invite_info.config import Settings
from invite_info.lookup import InviteClient, InviteLookup
from invite_info.models import InviteRecord

SAMPLE_INVITE = {
    "code": "abcd1234",
    "type": 0,
    "expires_at": None,
    "guild": {
        "id": "1",
        "name": "Test",
        "splash": None,
        "banner": None,
        "description": None,
        "icon": None,
        "features": [],
        "verification_level": 0,
        "vanity_url_code": None,
    },
    "channel": {"id": "2", "name": "general", "type": 0},
}


class FakeResponse:
    """Stand-in for an aiohttp response used as an async context manager."""

    def __init__(self, status=200, body=None, json_error=None, text=None):
        self.status = status
        self._body = body
        self._json_error = json_error
        self._text = text

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def json(self, *, loads=json.loads, content_type="application/json"):
        if self._json_error is not None:
            raise self._json_error
        if self._text is not None:
            # aiohttp hands back None for an empty body
            return loads(self._text) if self._text.strip() else None
        return self._body


class FakeSession:
    """Records GET calls and hands back a canned response or raises."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self):
        self.closed = True


@pytest.fixture
def sample_invite():
    return copy.deepcopy(SAMPLE_INVITE)


@pytest.fixture
def test_settings():
    """Create settings for testing."""
    return Settings(
        discord_api_base_url="https://discord.test/api/v9",
        lookup_timeout_seconds=None,
        lookup_user_agent="InviteInfo-Test/1.0",
        api_host="127.0.0.1",
        api_port=8000,
        rate_limit="100/minute",
        rate_limit_enabled=False,
        log_dir="",
        log_level="INFO",
    )


@pytest.fixture
def mock_client(sample_invite):
    """InviteClient double whose lookups succeed with the sample invite."""
    client = MagicMock(spec=InviteClient)
    client.fetch_invite = AsyncMock(return_value=InviteLookup(
        record=InviteRecord.model_validate(sample_invite),
        payload=sample_invite,
    ))
    client.close = AsyncMock()
    return client
