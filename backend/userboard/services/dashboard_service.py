"""
Dashboard aggregates computed from the current document.

Nothing is cached: each call loads the document and derives its view.
"Today" is the process's local calendar date.
"""
from datetime import date, datetime
from typing import Any, Callable, Optional

from userboard.database.store import DocumentStore
from userboard.models.document import Document, Timeframes
from userboard.models.user import UserStatus
from userboard.schemas.dashboard import SummaryResponse
from userboard.services.auth_service import local_now

TIMEFRAMES = (Timeframes.DAILY, Timeframes.MONTHLY)


def count_unique_logins(document: Document, day: date) -> int:
    """Distinct usernames with a login event on `day`."""
    return len({event.username for event in document.logins_today if event.date == day})


class DashboardService:
    """Read-only views over the document."""

    def __init__(
        self,
        store: DocumentStore,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.store = store
        self.clock = clock or local_now

    def summary(self) -> SummaryResponse:
        """Headline counters; `lastUpdated` is the time of this call."""
        document = self.store.load()
        now = self.clock()
        return SummaryResponse(
            total_users=len(document.users),
            active_users=sum(
                1 for u in document.users if u.status == UserStatus.ACTIVE.value
            ),
            logins_today=count_unique_logins(document, now.date()),
            anomalies=len(document.anomalies),
            last_updated=now,
        )

    def usage_metrics(self, timeframe: str) -> list[Any]:
        """Stored series for `timeframe`, or [] when absent or unknown."""
        if timeframe not in TIMEFRAMES:
            return []
        metrics = self.store.load().usage_metrics
        series = metrics.get(timeframe) if isinstance(metrics, dict) else None
        return series if isinstance(series, list) else []

    def user_activity(self) -> list[Any]:
        return self.store.load().user_activity

    def anomalies(self) -> list[Any]:
        return self.store.load().anomalies

    def system_status(self) -> Any:
        return self.store.load().system_status

    def top_pages(self) -> list[Any]:
        return self.store.load().top_pages
