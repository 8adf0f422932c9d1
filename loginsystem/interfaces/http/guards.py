# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Route guards deciding whether a view runs for the current session."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from flask import g, redirect, request, url_for

from loginsystem.application.services.session_manager import SessionManager
from loginsystem.interfaces.http.session_cookie import SessionCookie
from loginsystem.shared.logging import logger

LOGIN_ENDPOINT = "auth.login_page"
HOME_ENDPOINT = "pages.home"


def require_authenticated(
    sessions: SessionManager,
    cookie: SessionCookie,
    *,
    login_endpoint: str = LOGIN_ENDPOINT,
) -> Callable[[Callable], Callable]:
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def inner(*a, **kw):
            user = sessions.current_user(cookie.read(request))
            if user is None:
                logger.debug(f"guard: anonymous on {request.method} {request.path}, redirecting to login")
                return redirect(url_for(login_endpoint))
            g.user = user
            g.user_id = user.id
            return f(*a, **kw)

        return inner

    return decorator


def require_anonymous(
    sessions: SessionManager,
    cookie: SessionCookie,
    *,
    home_endpoint: str = HOME_ENDPOINT,
) -> Callable[[Callable], Callable]:
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def inner(*a, **kw):
            if sessions.is_authenticated(cookie.read(request)):
                logger.debug(f"guard: already signed in on {request.method} {request.path}, redirecting home")
                return redirect(url_for(home_endpoint))
            return f(*a, **kw)

        return inner

    return decorator


__all__ = ["require_anonymous", "require_authenticated"]
