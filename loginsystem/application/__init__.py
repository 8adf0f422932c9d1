# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import WerkzeugPasswordHasher
from .services.session_manager import SessionManager
from .use_cases.admin.ensure_default_admin import EnsureDefaultAdminUseCase
from .use_cases.users.authenticate_user import AuthenticateUserUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.logout_user import LogoutUserUseCase

__all__ = [
    "AuthenticateUserUseCase",
    "EnsureDefaultAdminUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "SessionManager",
    "WerkzeugPasswordHasher",
]
