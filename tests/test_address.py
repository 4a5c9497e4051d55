"""Tests for page address synchronisation."""

from invite_info.address import PageAddress


def test_default_address():
    address = PageAddress()
    assert address.current == "/"
    assert address.pushed is None


def test_sync_invite_pushes_shareable_address():
    """A successful lookup writes ?invite= into the address."""
    address = PageAddress("/", "")
    address.sync_invite("abcd1234")
    assert address.pushed == "/?invite=abcd1234"
    assert address.current == "/?invite=abcd1234"


def test_sync_invite_replaces_other_params():
    address = PageAddress("/", "invite=old&foo=bar")
    address.sync_invite("new")
    assert address.current == "/?invite=new"


def test_sync_invite_skips_when_already_current():
    """Loading ?invite=abc123 does not push the same address again."""
    address = PageAddress("/", "invite=abc123")
    address.sync_invite("abc123")
    assert address.pushed is None
    assert address.current == "/?invite=abc123"


def test_invite_address_is_encoded():
    address = PageAddress("/")
    assert address.invite_address("a b&c") == "/?invite=a+b%26c"
