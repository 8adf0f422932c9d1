# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, g, render_template

from loginsystem.application.services.session_manager import SessionManager
from loginsystem.interfaces.http.guards import require_authenticated
from loginsystem.interfaces.http.session_cookie import SessionCookie


class PagesController:
    def __init__(self, *, sessions: SessionManager, cookie: SessionCookie) -> None:
        self._sessions = sessions
        self._cookie = cookie

    def home(self) -> str:
        return render_template("index.html", title="Home", user=g.user)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("pages", __name__)
        bp.add_url_rule(
            "/",
            endpoint="home",
            view_func=require_authenticated(self._sessions, self._cookie)(self.home),
            methods=["GET"],
        )
        return bp
