# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, redirect, render_template, request, url_for
from pydantic import ValidationError

from loginsystem.application.services.session_manager import SessionManager
from loginsystem.application.use_cases.users.login_user import LoginUserUseCase
from loginsystem.application.use_cases.users.logout_user import LogoutUserUseCase
from loginsystem.domain.users.exceptions import InvalidCredentialsError
from loginsystem.interfaces.http.dto.auth import LoginRequestDTO
from loginsystem.interfaces.http.guards import require_anonymous
from loginsystem.interfaces.http.session_cookie import SessionCookie
from loginsystem.shared.errors.validation import format_pydantic_errors
from loginsystem.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


def _login_payload() -> dict[str, Any]:
    if request.form:
        return request.form.to_dict()
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _login_failed() -> Response:
    return redirect(url_for("auth.login_page", error="true"))


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        sessions: SessionManager,
        cookie: SessionCookie,
    ) -> None:
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._sessions = sessions
        self._cookie = cookie

    def login_page(self) -> str:
        return render_template(
            "login.html",
            title="Login",
            error=request.args.get("error") == "true",
        )

    def login(self) -> Response:
        try:
            dto = LoginRequestDTO.model_validate(_login_payload())
        except ValidationError as exc:
            fields = format_pydantic_errors(exc)["fields"]
            logger.info(f"auth.login: invalid payload fields={fields}")
            return _login_failed()

        try:
            token = self._login_use_case.execute(
                dto.username,
                dto.password,
                previous_token=self._cookie.read(request) or None,
                ip_address=_get_client_ip(),
            )
        except InvalidCredentialsError:
            return _login_failed()

        response = redirect(url_for("pages.home"))
        return self._cookie.attach(response, token.token)

    def logout(self) -> Response:
        self._logout_use_case.execute(self._cookie.read(request))
        response = redirect(url_for("pages.home"))
        self._cookie.clear(response)
        logger.info("auth.logout: ok")
        return response

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule(
            "/login",
            endpoint="login_page",
            view_func=require_anonymous(self._sessions, self._cookie)(self.login_page),
            methods=["GET"],
        )
        bp.add_url_rule("/login", endpoint="login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["GET"])
        return bp
