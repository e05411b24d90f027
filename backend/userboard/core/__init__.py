"""
Core module - error taxonomy shared by the store, services and routers.
"""
from userboard.core.exceptions import (
    UserboardError,
    ValidationError,
    Conflict,
    NotFound,
    InvalidCredentials,
    StorageUnavailable,
)

__all__ = [
    "UserboardError",
    "ValidationError",
    "Conflict",
    "NotFound",
    "InvalidCredentials",
    "StorageUnavailable",
]
