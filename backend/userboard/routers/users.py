"""
Users router for account CRUD.
"""
from fastapi import APIRouter, Depends, status

from userboard.database.store import DocumentStore
from userboard.dependencies.store import get_store
from userboard.schemas.user import UserCreate, UserResponse, UserUpdate
from userboard.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["Users"])


def get_user_service(store: DocumentStore = Depends(get_store)) -> UserService:
    """Dependency to get UserService instance."""
    return UserService(store)


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List users",
)
def list_users(user_service: UserService = Depends(get_user_service)):
    """List all users in creation order. Passwords are never returned."""
    return [UserResponse.from_user(u) for u in user_service.list_users()]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
)
def get_user(user_id: int, user_service: UserService = Depends(get_user_service)):
    """Get a single user by ID."""
    return UserResponse.from_user(user_service.get_user(user_id))


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
def create_user(
    body: UserCreate,
    user_service: UserService = Depends(get_user_service),
):
    """
    Create a user account.

    - **username**: Must be unique (case-sensitive)
    - **email**: Must be unique
    - **password**: Required
    - **status**: `active` (default) or `inactive`
    """
    return UserResponse.from_user(user_service.create_user(body))


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user",
)
@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user (partial)",
)
def update_user(
    user_id: int,
    body: UserUpdate,
    user_service: UserService = Depends(get_user_service),
):
    """
    Update user fields.

    Only the fields present in the body change; everything else keeps
    its stored value.
    """
    return UserResponse.from_user(user_service.update_user(user_id, body))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user",
)
def delete_user(user_id: int, user_service: UserService = Depends(get_user_service)):
    """
    Delete a user.

    Deleting an ID that does not exist also returns 204.
    """
    user_service.delete_user(user_id)
