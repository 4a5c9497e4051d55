from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InviteSchemaMismatch


class InviteGuild(BaseModel):
    """Partial guild object embedded in an invite."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Guild snowflake.")
    name: str = Field(..., description="Guild name.")
    splash: Optional[str] = Field(None, description="Splash image hash.")
    banner: Optional[str] = Field(None, description="Banner image hash.")
    description: Optional[str] = Field(None, description="Guild description, for discoverable guilds.")
    icon: Optional[str] = Field(None, description="Icon image hash.")
    features: list[str] = Field(default_factory=list, description="Enabled guild feature flags.")
    verification_level: int = Field(0, description="Verification level required to chat.")
    vanity_url_code: Optional[str] = Field(None, description="Vanity invite code, if any.")


class InviteChannel(BaseModel):
    """Partial channel object the invite points at."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Channel snowflake.")
    name: Optional[str] = Field(None, description="Channel name.")
    type: int = Field(..., description="Channel type.")


class InviteRecord(BaseModel):
    """Invite object as returned by ``GET /invites/{code}``."""

    model_config = ConfigDict(extra="allow")

    code: str = Field(..., description="The invite code.")
    type: int = Field(0, description="Invite type (guild, group DM, friend).")
    expires_at: Optional[str] = Field(None, description="ISO8601 expiry, null when the invite never expires.")
    guild: Optional[InviteGuild] = Field(None, description="Guild the invite is for.")
    channel: Optional[InviteChannel] = Field(None, description="Channel the invite is for.")
    approximate_member_count: Optional[int] = Field(None, description="Approximate total members.")
    approximate_presence_count: Optional[int] = Field(None, description="Approximate online members.")


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "body"
    return f"{location}: {first.get('msg', 'invalid value')}"


def decode_invite(payload: Any) -> InviteRecord:
    """Validate a decoded JSON body against the invite shape.

    Raises InviteSchemaMismatch when it does not fit.
    """
    if not isinstance(payload, dict):
        raise InviteSchemaMismatch(f"expected a JSON object, got {type(payload).__name__}")
    try:
        return InviteRecord.model_validate(payload)
    except ValidationError as exc:
        raise InviteSchemaMismatch(_describe(exc)) from exc
