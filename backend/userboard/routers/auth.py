"""
Authentication router for login.
"""
from fastapi import APIRouter, Depends

from userboard.database.store import DocumentStore
from userboard.dependencies.store import get_store
from userboard.schemas.auth import LoginRequest, LoginResponse
from userboard.services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["Authentication"])


def get_auth_service(store: DocumentStore = Depends(get_store)) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(store)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login",
)
def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Check a username/password pair and record the login.

    Returns the public user record. Unknown usernames and wrong
    passwords both answer 401 with the same message.
    """
    user = auth_service.authenticate(body.username, body.password)
    return LoginResponse.from_user(user)
