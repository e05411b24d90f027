"""
Login event model for the loginsToday collection.
"""
import datetime as dt

from pydantic import BaseModel, Field


class LoginEvent(BaseModel):
    """
    One successful authentication.

    `date` duplicates the calendar day of `timestamp` so the per-day
    aggregates can filter without parsing instants.
    """
    username: str = Field(..., description="Username at time of login")
    timestamp: dt.datetime = Field(..., description="Instant of the login")
    date: dt.date = Field(..., description="Local calendar day of the login")

    @classmethod
    def at(cls, username: str, moment: dt.datetime) -> "LoginEvent":
        """Build an event for `username` logging in at `moment`."""
        return cls(username=username, timestamp=moment, date=moment.date())
