"""Use-case for ending a browser session."""

from __future__ import annotations

from loginsystem.application.services.session_manager import SessionManager


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionManager) -> None:
        self._sessions = sessions

    def execute(self, token: str | None) -> None:
        self._sessions.logout(token)
