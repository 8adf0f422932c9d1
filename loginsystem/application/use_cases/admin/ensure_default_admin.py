# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from loginsystem.domain.users.entities import User
from loginsystem.domain.users.exceptions import DuplicateUserError
from loginsystem.domain.users.repositories import PasswordHasher, UserRepository
from loginsystem.shared.logging import logger


class EnsureDefaultAdminUseCase:
    """Create the default administrator account unless it already exists.

    Two first runs racing each other both pass the existence check; the
    unique index on ``users.username`` makes the losing insert raise
    :class:`DuplicateUserError`, which is reported to the caller as is.
    """

    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        username: str,
        password: str,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._username = username
        self._password = password

    def execute(self) -> User:
        existing = self._users.find_by_username(self._username)
        if existing is not None:
            logger.info(f"admin_setup: user '{self._username}' already exists")
            return existing

        hashed = self._password_hasher.hash(self._password)
        try:
            created = self._users.add(User.new(self._username, hashed))
        except DuplicateUserError:
            logger.warning(f"admin_setup: '{self._username}' was created concurrently")
            raise
        logger.info(f"admin_setup: created default admin '{self._username}' id={created.id}")
        return created
