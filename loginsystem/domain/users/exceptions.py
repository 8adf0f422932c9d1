# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from loginsystem.shared.errors.base import DomainError


class DuplicateUserError(DomainError):
    code = "duplicate_user"
    status = HTTPStatus.CONFLICT

    def __init__(self, username: str) -> None:
        super().__init__(context={"username": username})
        self.username = username


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Incorrect username or password."


class UnknownUserError(InvalidCredentialsError):
    message = "Incorrect Username."


class WrongPasswordError(InvalidCredentialsError):
    message = "Incorrect Password."
