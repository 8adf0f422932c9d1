# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session lifecycle: Anonymous -> Authenticated -> Anonymous."""

from __future__ import annotations

from datetime import timedelta

from loginsystem.domain.users.entities import SessionToken, User
from loginsystem.domain.users.repositories import SessionTokenRepository, UserRepository
from loginsystem.shared.logging import logger


class SessionManager:
    """Maps opaque session tokens to user ids held in the token store.

    Only the user id is persisted; the user itself is reloaded from the
    credential store on every lookup, so a deleted user makes its sessions
    anonymous without any cleanup.
    """

    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenRepository,
        lifetime: timedelta,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._lifetime = lifetime

    def login(self, user: User, *, previous_token: str | None = None) -> SessionToken:
        purged = self._tokens.purge_expired()
        if purged:
            logger.debug(f"sessions: purged {purged} expired tokens")
        token = self._tokens.issue(user.id, self._lifetime)
        if previous_token and previous_token != token.token:
            self._tokens.revoke(previous_token)
        logger.info(
            f"sessions: issued for user={user.id} exp={token.expires_at.isoformat()} tok={token.token[:8]}…"
        )
        return token

    def current_user(self, token: str | None) -> User | None:
        if not token:
            return None
        session = self._tokens.find(token)
        if session is None or session.is_expired():
            return None
        user = self._users.find_by_id(session.user_id)
        if user is None:
            logger.info(f"sessions: token for missing user={session.user_id} treated as anonymous")
        return user

    def is_authenticated(self, token: str | None) -> bool:
        return self.current_user(token) is not None

    def logout(self, token: str | None) -> None:
        if not token:
            return
        self._tokens.revoke(token)
