"""
Dashboard router for summary counters and data feeds.
"""
from typing import Any

from fastapi import APIRouter, Depends, Query

from userboard.database.store import DocumentStore
from userboard.dependencies.store import get_store
from userboard.models.document import Timeframes
from userboard.schemas.dashboard import SummaryResponse
from userboard.services.dashboard_service import DashboardService

router = APIRouter(prefix="/api", tags=["Dashboard"])


def get_dashboard_service(store: DocumentStore = Depends(get_store)) -> DashboardService:
    """Dependency to get DashboardService instance."""
    return DashboardService(store)


@router.get(
    "/summary",
    response_model=SummaryResponse,
    summary="Summary counters",
)
def get_summary(dashboard_service: DashboardService = Depends(get_dashboard_service)):
    """
    Total and active users, distinct logins today, anomaly count and the
    time the summary was computed.
    """
    return dashboard_service.summary()


@router.get(
    "/usage",
    response_model=list[Any],
    summary="Usage metrics",
)
def get_usage(
    timeframe: str = Query(Timeframes.DAILY, description="`daily` or `monthly`"),
    dashboard_service: DashboardService = Depends(get_dashboard_service),
):
    """
    Usage series for a timeframe, returned as stored. Daily points carry
    `date`, monthly points `month`, plus `users`, `sessions` and `duration`.
    Unknown timeframes return an empty list.
    """
    return dashboard_service.usage_metrics(timeframe)


@router.get("/user-activity", response_model=list[Any], summary="User activity")
def get_user_activity(dashboard_service: DashboardService = Depends(get_dashboard_service)):
    return dashboard_service.user_activity()


@router.get("/anomalies", response_model=list[Any], summary="Anomalies")
def get_anomalies(dashboard_service: DashboardService = Depends(get_dashboard_service)):
    return dashboard_service.anomalies()


@router.get("/system-status", response_model=Any, summary="System status")
def get_system_status(dashboard_service: DashboardService = Depends(get_dashboard_service)):
    return dashboard_service.system_status()


@router.get("/top-pages", response_model=list[Any], summary="Top pages")
def get_top_pages(dashboard_service: DashboardService = Depends(get_dashboard_service)):
    return dashboard_service.top_pages()
