from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from loginsystem.domain import InvariantViolationError
from loginsystem.domain.users.entities import SessionToken, User


def test_user_new_has_no_id_yet() -> None:
    user = User.new("alice", "hashed:secret")

    assert user.id == 0
    assert user.username == "alice"
    assert user.created_at.tzinfo is not None


@pytest.mark.parametrize(
    ("username", "password_hash", "field"),
    [("", "hashed:x", "username"), ("alice", "", "password_hash"), (None, "hashed:x", "username")],
)
def test_user_requires_username_and_hash(username, password_hash, field) -> None:
    with pytest.raises(InvariantViolationError) as info:
        User(id=1, username=username, password_hash=password_hash, created_at=datetime.now(UTC))

    assert info.value.field == field
    assert info.value.to_dict()["error"] == "invariant_violation"


def test_session_token_expiry() -> None:
    now = datetime.now(UTC)
    live = SessionToken(user_id=1, token="abc", expires_at=now + timedelta(minutes=5))
    dead = SessionToken(user_id=1, token="abc", expires_at=now - timedelta(seconds=1))

    assert live.is_expired(now) is False
    assert dead.is_expired(now) is True


def test_session_token_naive_expiry_is_treated_as_utc() -> None:
    naive = (datetime.now(UTC) - timedelta(minutes=1)).replace(tzinfo=None)

    assert SessionToken(user_id=1, token="abc", expires_at=naive).is_expired() is True
