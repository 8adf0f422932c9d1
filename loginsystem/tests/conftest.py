from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from loginsystem.domain.users.entities import SessionToken, User
from loginsystem.domain.users.exceptions import DuplicateUserError
from loginsystem.domain.users.repositories import PasswordHasher, SessionTokenRepository, UserRepository
from loginsystem.shared.config import AdminConfig, AppConfig, DatabaseConfig, SecurityConfig

FAST_HASH_METHOD = "pbkdf2:sha256:1000"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def find_by_id(self, user_id: int) -> User | None:
        for user in self._users.values():
            if user.id == user_id:
                return user
        return None

    def exists(self, username: str) -> bool:
        return username in self._users

    def add(self, user: User) -> User:
        if user.username in self._users:
            raise DuplicateUserError(user.username)
        new_user = User(
            id=self._seq,
            username=user.username,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._seq += 1
        self._users[new_user.username] = new_user
        return new_user

    def remove(self, username: str) -> None:
        self._users.pop(username, None)


class InMemoryTokenRepository(SessionTokenRepository):
    def __init__(self) -> None:
        self._tokens: dict[str, SessionToken] = {}
        self._seq = 1

    def issue(self, user_id: int, lifetime: timedelta) -> SessionToken:
        token = SessionToken(
            user_id=user_id,
            token=f"token-{self._seq}",
            expires_at=datetime.now(UTC) + lifetime,
        )
        self._seq += 1
        self._tokens[token.token] = token
        return token

    def find(self, token: str) -> SessionToken | None:
        found = self._tokens.get(token)
        if found is None or found.is_expired():
            return None
        return found

    def revoke(self, token: str) -> None:
        self._tokens.pop(token, None)

    def purge_expired(self) -> int:
        expired = [key for key, value in self._tokens.items() if value.is_expired()]
        for key in expired:
            del self._tokens[key]
        return len(expired)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed.startswith("hashed:"):
            raise ValueError("unsupported hash")
        return hashed == f"hashed:{password}"


@pytest.fixture(autouse=True)
def isolated_log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "app.log"))


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens() -> InMemoryTokenRepository:
    return InMemoryTokenRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        app_env="test",
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'loginsystem.db'}"),
        security=SecurityConfig(password_hash_method=FAST_HASH_METHOD, session_lifetime=3600),
        admin=AdminConfig(username="admin", password="pass"),
    )
