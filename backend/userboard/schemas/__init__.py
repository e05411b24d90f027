"""
Request and response schemas for API endpoints.
"""
from userboard.schemas.auth import LoginRequest, LoginResponse
from userboard.schemas.user import UserCreate, UserUpdate, UserResponse
from userboard.schemas.dashboard import (
    SummaryResponse,
    ClearLoginsResponse,
)

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    # User
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    # Dashboard
    "SummaryResponse",
    "ClearLoginsResponse",
]
