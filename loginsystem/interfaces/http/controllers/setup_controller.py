# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, redirect, url_for

from loginsystem.application.use_cases.admin.ensure_default_admin import EnsureDefaultAdminUseCase


class SetupController:
    def __init__(self, *, ensure_admin_use_case: EnsureDefaultAdminUseCase) -> None:
        self._ensure_admin_use_case = ensure_admin_use_case

    def setup(self) -> Response:
        self._ensure_admin_use_case.execute()
        return redirect(url_for("auth.login_page"))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("setup", __name__)
        bp.add_url_rule("/setup", view_func=self.setup, methods=["GET"])
        return bp
