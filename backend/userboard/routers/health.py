"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, Depends, status

from userboard.core.exceptions import StorageUnavailable
from userboard.database.store import DocumentStore
from userboard.dependencies.store import get_store

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
def readiness_check(store: DocumentStore = Depends(get_store)):
    """
    Readiness check that verifies the document store can be read.
    """
    checks = {
        "api": "healthy",
        "store": "unknown",
    }

    try:
        store.load()
        checks["store"] = "healthy"
    except StorageUnavailable as e:
        checks["store"] = f"unhealthy: {e.message}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
