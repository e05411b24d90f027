"""
User request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field

from userboard.models.user import User, UserStatus


class UserCreate(BaseModel):
    """User creation request (signup or admin create)."""
    username: str = Field(..., description="Unique username")
    email: str = Field(..., description="Unique email address")
    password: str = Field(..., description="Password (stored as given)")
    status: UserStatus = Field(default=UserStatus.ACTIVE, description="Account status")


class UserUpdate(BaseModel):
    """
    Partial user update.

    Fields left out (or sent as null) keep their stored value.
    """
    username: Optional[str] = Field(None, description="New username")
    email: Optional[str] = Field(None, description="New email address")
    password: Optional[str] = Field(None, description="New password")
    status: Optional[UserStatus] = Field(None, description="New account status")

    def changes(self) -> dict:
        """Fields the caller actually set to a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True, mode="json")


class UserResponse(BaseModel):
    """User information response (excludes the password)."""
    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="User email")
    status: UserStatus = Field(..., description="Account status")

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            status=user.status,
        )
