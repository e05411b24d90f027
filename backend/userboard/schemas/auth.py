"""
Login request/response schemas.
"""
from pydantic import BaseModel, Field

from userboard.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """Login request body."""
    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")


class LoginResponse(UserResponse):
    """Public view of the authenticated user."""
    pass
