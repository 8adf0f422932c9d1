from .base import AppError, DomainError, InfrastructureError, StoreError
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "StoreError",
    "handle_app_error",
    "register_error_handler",
]
