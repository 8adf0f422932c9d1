# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from loginsystem.domain.users.entities import User
from loginsystem.domain.users.exceptions import UnknownUserError, WrongPasswordError
from loginsystem.domain.users.repositories import PasswordHasher, UserRepository
from loginsystem.shared.errors import StoreError


class AuthenticateUserUseCase:
    """Resolve a username/password pair to a user or raise why it failed.

    Lookup is an exact, case-sensitive match. A stored hash the hasher
    cannot read is a store fault, not a wrong password.
    """

    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> User:
        user = self._users.find_by_username(username)
        if user is None:
            raise UnknownUserError()

        try:
            password_valid = self._password_hasher.verify(password, user.password_hash)
        except ValueError as exc:
            raise StoreError("users.verify_password") from exc

        if not password_valid:
            raise WrongPasswordError()
        return user
