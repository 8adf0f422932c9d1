# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from loginsystem.container import Container
from loginsystem.infrastructure.admin_setup import setup_admin_user
from loginsystem.shared.config import AppConfig, load_config
from loginsystem.shared.logging import logger, setup_logging
from loginsystem.shared.middleware.error_handler import configure_error_handling
from loginsystem.shared.middleware.request_logger import configure_request_logging

EXTENSION_KEY = "loginsystem"


def get_container(app: Flask) -> Container:
    return app.extensions[EXTENSION_KEY]


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(debug_mode=config.debug_logging)

    container = Container(config)
    container.database.init_db()

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    app.register_blueprint(container.pages_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.setup_controller.as_blueprint())

    if config.bootstrap_admin_on_startup:
        setup_admin_user(container.ensure_default_admin_use_case)

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")

        resp.headers.setdefault("Referrer-Policy", "no-referrer")

        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")

        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=(), magnetometer=(), gyroscope=()",
        )

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=3000, debug=load_config().debug_logging)
