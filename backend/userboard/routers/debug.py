"""
Debug router. Every route answers 404 unless `debug` is enabled in settings.
"""
from fastapi import APIRouter, Depends

from userboard.config import get_settings
from userboard.core.exceptions import NotFound
from userboard.routers.auth import get_auth_service
from userboard.schemas.dashboard import ClearLoginsResponse
from userboard.services.auth_service import AuthService


def require_debug() -> None:
    """Hide debug routes when debug mode is off."""
    if not get_settings().debug:
        raise NotFound("Not Found")


router = APIRouter(
    prefix="/api/debug",
    tags=["Debug"],
    dependencies=[Depends(require_debug)],
)


@router.delete(
    "/logins",
    response_model=ClearLoginsResponse,
    summary="Clear login events",
)
def clear_logins(auth_service: AuthService = Depends(get_auth_service)):
    """Remove every recorded login event."""
    return ClearLoginsResponse(cleared=auth_service.clear_login_events())
