"""Tests for invite payload decoding."""

import pytest

from invite_info.errors import InviteSchemaMismatch
from invite_info.models import InviteRecord, decode_invite


def test_decode_full_invite(sample_invite):
    """A complete invite decodes into nested models."""
    sample_invite["approximate_member_count"] = 1523
    sample_invite["approximate_presence_count"] = 412
    record = decode_invite(sample_invite)

    assert isinstance(record, InviteRecord)
    assert record.code == "abcd1234"
    assert record.expires_at is None
    assert record.guild.id == "1"
    assert record.guild.features == []
    assert record.guild.verification_level == 0
    assert record.channel.type == 0
    assert record.approximate_member_count == 1523
    assert record.approximate_presence_count == 412


def test_decode_without_counts(sample_invite):
    """Counts are optional."""
    record = decode_invite(sample_invite)
    assert record.approximate_member_count is None
    assert record.approximate_presence_count is None


def test_decode_keeps_unknown_fields(sample_invite):
    """Fields Discord adds later are accepted."""
    sample_invite["inviter"] = {"id": "9", "username": "someone"}
    sample_invite["guild"]["nsfw_level"] = 0
    record = decode_invite(sample_invite)

    assert record.model_extra["inviter"]["username"] == "someone"
    assert record.guild.model_extra["nsfw_level"] == 0


def test_decode_group_dm_invite_without_guild():
    """Group DM invites carry no guild."""
    record = decode_invite({"code": "xyz", "type": 1, "channel": {"id": "5", "name": None, "type": 3}})
    assert record.guild is None
    assert record.channel.type == 3


@pytest.mark.parametrize("payload", [None, [], "abcd1234", 42])
def test_decode_rejects_non_objects(payload):
    """Only JSON objects can be invites."""
    with pytest.raises(InviteSchemaMismatch) as exc_info:
        decode_invite(payload)
    assert "expected a JSON object" in exc_info.value.message


def test_decode_reports_first_bad_field(sample_invite):
    """The error names where the payload went wrong."""
    sample_invite["guild"]["verification_level"] = "high"
    with pytest.raises(InviteSchemaMismatch) as exc_info:
        decode_invite(sample_invite)
    assert exc_info.value.detail.startswith("guild.verification_level:")
