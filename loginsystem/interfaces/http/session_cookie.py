# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from flask import Request, Response


@dataclass(slots=True, frozen=True)
class SessionCookie:
    """Carries the session token between the browser and the server."""

    name: str
    max_age: int
    secure: bool = False
    samesite: str = "Lax"

    def read(self, request: Request) -> str:
        auth = request.headers.get("Authorization", "")
        if auth.startswith("Bearer "):
            bearer = auth[7:].strip()
            if bearer:
                return bearer
        return request.cookies.get(self.name, "")

    def attach(self, response: Response, token: str) -> Response:
        response.set_cookie(
            self.name,
            token,
            httponly=True,
            samesite=self.samesite,
            secure=self.secure,
            max_age=self.max_age,
        )
        return response

    def clear(self, response: Response) -> Response:
        response.delete_cookie(self.name, httponly=True, samesite=self.samesite, secure=self.secure)
        return response
