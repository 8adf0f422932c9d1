from __future__ import annotations

import pytest

from loginsystem.application.services.password_hashing import WerkzeugPasswordHasher


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


def test_hash_then_verify_accepts_same_password(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("correct horse")

    assert hashed != "correct horse"
    assert hasher.verify("correct horse", hashed) is True


def test_verify_rejects_other_password(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("correct horse")

    assert hasher.verify("battery staple", hashed) is False
    assert hasher.verify("Correct horse", hashed) is False


def test_each_hash_gets_its_own_salt(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("pass")
    second = hasher.hash("pass")

    assert first != second
    assert hasher.verify("pass", first)
    assert hasher.verify("pass", second)


def test_default_method_is_scrypt() -> None:
    hashed = WerkzeugPasswordHasher().hash("pass")

    assert hashed.startswith("scrypt:")


def test_unreadable_hash_raises_value_error(hasher: WerkzeugPasswordHasher) -> None:
    with pytest.raises(ValueError):
        hasher.verify("pass", "bogus$salt$digest")


@pytest.mark.parametrize("stored", ["not-a-werkzeug-hash", "", "pbkdf2:sha256$onlysalt"])
def test_hash_without_salt_and_digest_raises_value_error(
    hasher: WerkzeugPasswordHasher, stored: str
) -> None:
    with pytest.raises(ValueError):
        hasher.verify("pass", stored)
