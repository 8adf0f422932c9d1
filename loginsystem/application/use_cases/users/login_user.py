# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from loginsystem.application.services.session_manager import SessionManager
from loginsystem.application.use_cases.users.authenticate_user import AuthenticateUserUseCase
from loginsystem.domain.users.entities import SessionToken
from loginsystem.domain.users.exceptions import InvalidCredentialsError
from loginsystem.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        authenticate: AuthenticateUserUseCase,
        sessions: SessionManager,
    ) -> None:
        self._authenticate = authenticate
        self._sessions = sessions

    def execute(
        self,
        username: str,
        password: str,
        *,
        previous_token: str | None = None,
        ip_address: str | None = None,
    ) -> SessionToken:
        try:
            user = self._authenticate.execute(username, password)
        except InvalidCredentialsError as exc:
            logger.warning(f"auth.login: rejected username={username} ip={ip_address} reason={exc.message}")
            raise

        token = self._sessions.login(user, previous_token=previous_token)
        logger.info(f"auth.login: ok username={username} user_id={user.id} ip={ip_address}")
        return token
