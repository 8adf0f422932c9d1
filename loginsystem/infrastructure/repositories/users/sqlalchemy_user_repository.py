# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime, timedelta

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from loginsystem.domain.users.entities import SessionToken as DomainSessionToken
from loginsystem.domain.users.entities import User as DomainUser
from loginsystem.domain.users.exceptions import DuplicateUserError
from loginsystem.domain.users.repositories import SessionTokenRepository, UserRepository
from loginsystem.infrastructure.db import Database
from loginsystem.infrastructure.db.models import SessionToken, User, token_default_exp
from loginsystem.shared.errors import StoreError
from loginsystem.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    created_at = row.created_at
    if created_at is not None and created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=created_at or datetime.now(UTC),
    )


class _SqlAlchemyRepository:
    def __init__(self, database: Database) -> None:
        self._database = database

    @contextmanager
    def _scope(self, operation: str) -> Iterator[Session]:
        try:
            with self._database.session_scope() as session:
                yield session
        except SQLAlchemyError as exc:
            logger.error(f"{operation}: store fault {type(exc).__name__}")
            raise StoreError(operation) from exc


class SqlAlchemyUserRepository(_SqlAlchemyRepository, UserRepository):
    def find_by_username(self, username: str) -> DomainUser | None:
        with self._scope("users.find_by_username") as session:
            row = session.scalars(select(User).where(User.username == username)).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with self._scope("users.find_by_id") as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def exists(self, username: str) -> bool:
        with self._scope("users.exists") as session:
            found = session.scalar(select(User.id).where(User.username == username).limit(1))
            return found is not None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with self._database.session_scope() as session:
                row = User(
                    username=user.username,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.warning(f"users.add: username already taken username={user.username}")
            raise DuplicateUserError(user.username) from exc
        except SQLAlchemyError as exc:
            logger.error(f"users.add: store fault {type(exc).__name__}")
            raise StoreError("users.add") from exc


class SqlAlchemySessionTokenRepository(_SqlAlchemyRepository, SessionTokenRepository):
    def issue(self, user_id: int, lifetime: timedelta) -> DomainSessionToken:
        with self._scope("sessions.issue") as session:
            token_value = secrets.token_urlsafe(48)
            row = SessionToken(
                user_id=user_id,
                token=token_value,
                expires_at=token_default_exp(lifetime),
            )
            session.add(row)
            return DomainSessionToken(user_id=user_id, token=token_value, expires_at=row.expires_at)

    def find(self, token: str) -> DomainSessionToken | None:
        with self._scope("sessions.find") as session:
            row = session.scalars(
                select(SessionToken).where(
                    SessionToken.token == token,
                    SessionToken.expires_at > datetime.now(UTC),
                )
            ).first()
            if not row:
                return None
            return DomainSessionToken(user_id=row.user_id, token=row.token, expires_at=row.expires_at)

    def revoke(self, token: str) -> None:
        with self._scope("sessions.revoke") as session:
            session.execute(delete(SessionToken).where(SessionToken.token == token))

    def purge_expired(self) -> int:
        with self._scope("sessions.purge_expired") as session:
            result = session.execute(
                delete(SessionToken).where(SessionToken.expires_at <= datetime.now(UTC))
            )
            return result.rowcount or 0
