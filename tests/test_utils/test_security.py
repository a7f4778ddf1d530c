"""Tests for password hashing."""

import pytest

from birthday_tracker.utils.security import hash_password, verify_password


def test_hash_is_salted() -> None:
    first = hash_password("pw123")
    second = hash_password("pw123")

    assert first != second
    assert first.startswith("$2")


def test_verify_password() -> None:
    digest = hash_password("pw123")

    assert verify_password("pw123", digest)
    assert not verify_password("pw124", digest)
    assert not verify_password("", digest)


def test_malformed_digest_raises() -> None:
    with pytest.raises(ValueError):
        verify_password("pw123", "not-a-bcrypt-digest")
