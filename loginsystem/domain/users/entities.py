# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from loginsystem.domain.exceptions import InvariantViolation


def _require_text(value: object, field: str) -> None:
    if not isinstance(value, str) or not value:
        raise InvariantViolation("is required", field=field)


@dataclass(slots=True, frozen=True)
class User:
    """Account that can sign in; only the credential store creates these."""

    id: int
    username: str
    password_hash: str
    created_at: datetime

    def __post_init__(self) -> None:
        _require_text(self.username, "username")
        _require_text(self.password_hash, "password_hash")

    @classmethod
    def new(cls, username: str, password_hash: str) -> User:
        """Build a not-yet-persisted user; the repository assigns the id."""

        return cls(id=0, username=username, password_hash=password_hash, created_at=datetime.now(UTC))


@dataclass(slots=True, frozen=True)
class SessionToken:
    """Server-side half of a session: the opaque token maps to a user id only."""

    user_id: int
    token: str
    expires_at: datetime

    def __post_init__(self) -> None:
        _require_text(self.token, "token")

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(UTC)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return expires_at <= now
