"""
Pydantic models for the persisted document and its records.
"""
from userboard.models.user import User, UserStatus
from userboard.models.login import LoginEvent
from userboard.models.document import Collections, Document, Timeframes

__all__ = [
    "User",
    "UserStatus",
    "LoginEvent",
    "Collections",
    "Document",
    "Timeframes",
]
