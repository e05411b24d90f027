"""
Dashboard aggregate schemas.
"""
from datetime import datetime

from pydantic import BaseModel, Field


class SummaryResponse(BaseModel):
    """Headline counters for the dashboard summary cards."""
    total_users: int = Field(..., alias="totalUsers", description="Number of users")
    active_users: int = Field(..., alias="activeUsers", description="Users with status active")
    logins_today: int = Field(
        ...,
        alias="loginsToday",
        description="Distinct usernames that logged in on today's date",
    )
    anomalies: int = Field(..., description="Number of recorded anomalies")
    last_updated: datetime = Field(
        ...,
        alias="lastUpdated",
        description="When this summary was computed",
    )

    class Config:
        populate_by_name = True


class ClearLoginsResponse(BaseModel):
    """Result of clearing the login event log."""
    cleared: int = Field(..., description="Number of login events removed")
