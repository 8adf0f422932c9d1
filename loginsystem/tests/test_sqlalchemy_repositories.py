from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import pytest
from sqlalchemy import delete

from loginsystem.domain.users.entities import User
from loginsystem.domain.users.exceptions import DuplicateUserError
from loginsystem.infrastructure.db import Database
from loginsystem.infrastructure.db import models
from loginsystem.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionTokenRepository,
    SqlAlchemyUserRepository,
)
from loginsystem.shared.config import DatabaseConfig
from loginsystem.shared.errors import StoreError


@pytest.fixture()
def database(tmp_path: Path):
    db = Database(DatabaseConfig(url=f"sqlite:///{tmp_path / 'repo.db'}"))
    db.init_db()
    yield db
    db.drop_all()
    db.dispose()


@pytest.fixture()
def user_repo(database: Database) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(database)


@pytest.fixture()
def token_repo(database: Database) -> SqlAlchemySessionTokenRepository:
    return SqlAlchemySessionTokenRepository(database)


def test_add_and_find_user(user_repo: SqlAlchemyUserRepository) -> None:
    created = user_repo.add(User.new("alice", "hashed:secret"))

    assert created.id > 0
    assert user_repo.find_by_username("alice") == created
    assert user_repo.find_by_id(created.id) == created
    assert user_repo.exists("alice") is True
    assert user_repo.exists("ALICE") is False
    assert user_repo.find_by_username("bob") is None
    assert user_repo.find_by_id(created.id + 1) is None


def test_username_is_unique(user_repo: SqlAlchemyUserRepository) -> None:
    user_repo.add(User.new("admin", "hashed:a"))

    with pytest.raises(DuplicateUserError):
        user_repo.add(User.new("admin", "hashed:b"))

    assert user_repo.find_by_username("admin").password_hash == "hashed:a"


def test_issue_find_and_revoke_token(user_repo, token_repo) -> None:
    alice = user_repo.add(User.new("alice", "hashed:secret"))

    issued = token_repo.issue(alice.id, timedelta(hours=1))

    found = token_repo.find(issued.token)
    assert found is not None
    assert found.user_id == alice.id
    token_repo.revoke(issued.token)
    token_repo.revoke(issued.token)
    assert token_repo.find(issued.token) is None


def test_expired_tokens_are_invisible_and_purged(user_repo, token_repo) -> None:
    alice = user_repo.add(User.new("alice", "hashed:secret"))
    stale = token_repo.issue(alice.id, timedelta(seconds=-5))
    live = token_repo.issue(alice.id, timedelta(hours=1))

    assert token_repo.find(stale.token) is None
    assert token_repo.purge_expired() == 1
    assert token_repo.find(live.token) is not None


def test_deleting_user_cascades_to_tokens(database, user_repo, token_repo) -> None:
    alice = user_repo.add(User.new("alice", "hashed:secret"))
    issued = token_repo.issue(alice.id, timedelta(hours=1))

    with database.session_scope() as session:
        session.execute(delete(models.User).where(models.User.id == alice.id))

    assert token_repo.find(issued.token) is None


def test_database_faults_surface_as_store_error(database, user_repo) -> None:
    database.drop_all()

    with pytest.raises(StoreError) as info:
        user_repo.find_by_username("alice")

    assert info.value.context == {"operation": "users.find_by_username"}
