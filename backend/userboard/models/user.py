"""
User model for the users collection.
"""
from enum import Enum

from pydantic import BaseModel, Field


class UserStatus(str, Enum):
    """User account status."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class User(BaseModel):
    """
    User record as stored in the document's `users` collection.

    Keys this model does not know about are kept, so rewriting the
    document never drops fields added by other tooling.
    """
    id: int = Field(..., gt=0, description="Unique user ID")
    username: str = Field(..., min_length=1, description="Unique username (case-sensitive)")
    email: str = Field(..., min_length=1, description="Unique email address")
    password: str = Field(..., min_length=1, description="Plaintext password")
    status: UserStatus = Field(
        default=UserStatus.ACTIVE,
        description="Account status"
    )

    class Config:
        extra = "allow"
        use_enum_values = True
