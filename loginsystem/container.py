"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from loginsystem.application.services.password_hashing import WerkzeugPasswordHasher
from loginsystem.application.services.session_manager import SessionManager
from loginsystem.application.use_cases.admin.ensure_default_admin import EnsureDefaultAdminUseCase
from loginsystem.application.use_cases.users.authenticate_user import AuthenticateUserUseCase
from loginsystem.application.use_cases.users.login_user import LoginUserUseCase
from loginsystem.application.use_cases.users.logout_user import LogoutUserUseCase
from loginsystem.infrastructure.db import Database
from loginsystem.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionTokenRepository,
    SqlAlchemyUserRepository,
)
from loginsystem.interfaces.http.controllers.auth_controller import AuthController
from loginsystem.interfaces.http.controllers.pages_controller import PagesController
from loginsystem.interfaces.http.controllers.setup_controller import SetupController
from loginsystem.interfaces.http.session_cookie import SessionCookie
from loginsystem.shared.config import AppConfig


class Container:
    """Object graph for one application instance; nothing here is process-global."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.security.password_hash_method)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def session_token_repository(self) -> SqlAlchemySessionTokenRepository:
        return SqlAlchemySessionTokenRepository(self.database)

    @cached_property
    def session_manager(self) -> SessionManager:
        return SessionManager(
            users=self.user_repository,
            tokens=self.session_token_repository,
            lifetime=timedelta(seconds=self.config.security.session_lifetime),
        )

    @cached_property
    def session_cookie(self) -> SessionCookie:
        security = self.config.security
        return SessionCookie(
            name=security.session_cookie_name,
            max_age=security.session_lifetime,
            secure=security.cookie_secure,
            samesite=security.cookie_samesite,
        )

    @cached_property
    def authenticate_user_use_case(self) -> AuthenticateUserUseCase:
        return AuthenticateUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            authenticate=self.authenticate_user_use_case,
            sessions=self.session_manager,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_manager)

    @cached_property
    def ensure_default_admin_use_case(self) -> EnsureDefaultAdminUseCase:
        return EnsureDefaultAdminUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            username=self.config.admin.username,
            password=self.config.admin.password,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            sessions=self.session_manager,
            cookie=self.session_cookie,
        )

    @cached_property
    def pages_controller(self) -> PagesController:
        return PagesController(sessions=self.session_manager, cookie=self.session_cookie)

    @cached_property
    def setup_controller(self) -> SetupController:
        return SetupController(ensure_admin_use_case=self.ensure_default_admin_use_case)
