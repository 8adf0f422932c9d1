# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from typing import Protocol

from .entities import SessionToken, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def exists(self, username: str) -> bool: ...
    def add(self, user: User) -> User: ...


class SessionTokenRepository(Protocol):
    def issue(self, user_id: int, lifetime: timedelta) -> SessionToken: ...
    def find(self, token: str) -> SessionToken | None: ...
    def revoke(self, token: str) -> None: ...
    def purge_expired(self) -> int: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
