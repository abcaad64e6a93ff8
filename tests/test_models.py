import dataclasses

import pytest

from core.models import Entry


def test_entry_positive_ttl_sets_expiry(clock):
    e = Entry.create(b"v", 3000)
    assert e.expires_at == clock.now_ms + 3000
    assert not e.is_expired()
    assert e.remaining_ttl() == 3000


def test_entry_non_positive_ttl_never_expires(clock):
    for ttl in (0, -1, -500):
        e = Entry.create(b"v", ttl)
        assert e.expires_at is None
        clock.advance(10**9)
        assert not e.is_expired()
        assert e.remaining_ttl() is None


def test_entry_expiry_is_strict(clock):
    e = Entry.create(b"v", 100)

    clock.advance(100)
    assert not e.is_expired()
    assert e.remaining_ttl() == 0

    clock.advance(1)
    assert e.is_expired()
    assert e.remaining_ttl() == -1


def test_entry_is_immutable(clock):
    e = Entry.create(b"v", 100)
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.value = b"other"
    assert e.value == b"v"
