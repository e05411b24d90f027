"""
The persisted document: every collection the service stores, in one JSON object.
"""
from typing import Any

from pydantic import BaseModel, Field

from userboard.models.login import LoginEvent
from userboard.models.user import User


class Collections:
    """Collection keys in the persisted document (wire names)."""
    USERS = "users"
    LOGINS = "loginsToday"
    USAGE_METRICS = "usageMetrics"
    USER_ACTIVITY = "userActivity"
    ANOMALIES = "anomalies"
    SYSTEM_STATUS = "systemStatus"
    TOP_PAGES = "topPages"


class Timeframes:
    """Known usageMetrics keys."""
    DAILY = "daily"
    MONTHLY = "monthly"


class Document(BaseModel):
    """
    Whole-document model.

    Absent collections come back empty. Only `users` and `loginsToday`
    are schema-checked; the dashboard feeds are opaque. Unknown top-level
    keys are carried through so a rewrite keeps them.
    """
    users: list[User] = Field(default_factory=list, alias=Collections.USERS)
    logins_today: list[LoginEvent] = Field(
        default_factory=list,
        alias=Collections.LOGINS,
        description="All raw login events, not only today's",
    )
    # Opaque pass-through data: stored and served as-is, never validated
    usage_metrics: Any = Field(default_factory=dict, alias=Collections.USAGE_METRICS)
    user_activity: list[Any] = Field(default_factory=list, alias=Collections.USER_ACTIVITY)
    anomalies: list[Any] = Field(default_factory=list, alias=Collections.ANOMALIES)
    system_status: Any = Field(default_factory=dict, alias=Collections.SYSTEM_STATUS)
    top_pages: list[Any] = Field(default_factory=list, alias=Collections.TOP_PAGES)

    class Config:
        populate_by_name = True
        extra = "allow"

    def find_user(self, user_id: int) -> User | None:
        """Return the user with `user_id`, or None."""
        for user in self.users:
            if user.id == user_id:
                return user
        return None

    def next_user_id(self) -> int:
        """One greater than the highest assigned id, or 1 when empty."""
        return max((user.id for user in self.users), default=0) + 1
