# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from loginsystem.application.use_cases.admin.ensure_default_admin import EnsureDefaultAdminUseCase
from loginsystem.domain.users.exceptions import DuplicateUserError
from loginsystem.shared.logging import logger


class AdminSetupError(Exception):
    pass


class AdminSetup:
    def __init__(self, use_case: EnsureDefaultAdminUseCase) -> None:
        self._use_case = use_case

    def setup_admin_user(self) -> None:
        try:
            self._use_case.execute()
        except DuplicateUserError:
            # another worker won the first-run race; the account exists
            logger.warning("admin_setup: default admin created by a concurrent worker")
        except Exception as e:
            logger.error(f"admin_setup: Failed to setup admin user: {e}")
            raise AdminSetupError(f"Failed to setup admin user: {e}") from e


def setup_admin_user(use_case: EnsureDefaultAdminUseCase) -> None:
    AdminSetup(use_case).setup_admin_user()


__all__ = [
    "AdminSetup",
    "AdminSetupError",
    "setup_admin_user",
]
