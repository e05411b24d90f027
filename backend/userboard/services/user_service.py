"""
User account service: CRUD over the users collection.
"""
import logging
from typing import Optional

from userboard.core.exceptions import Conflict, NotFound, ValidationError
from userboard.database.store import DocumentStore
from userboard.models.document import Document
from userboard.models.user import User
from userboard.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger("userboard.users")

REQUIRED_FIELDS = ("username", "email", "password")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class UserService:
    """Service for user account operations."""

    def __init__(self, store: DocumentStore):
        """Initialize with the document store."""
        self.store = store

    def list_users(self) -> list[User]:
        """Return all users in insertion order."""
        return self.store.load().users

    def get_user(self, user_id: int) -> User:
        """
        Get user by ID.

        Raises:
            NotFound: If no user has that ID
        """
        user = self.store.load().find_user(user_id)
        if user is None:
            raise NotFound(f"User {user_id} not found")
        return user

    def create_user(self, request: UserCreate) -> User:
        """
        Create a new user.

        Args:
            request: Username, email, password and optional status

        Returns:
            The stored user with its assigned ID

        Raises:
            ValidationError: If username, email or password is blank
            Conflict: If the username or email is already taken
        """
        missing = [name for name in REQUIRED_FIELDS if _is_blank(getattr(request, name))]
        if missing:
            raise ValidationError(
                f"Username, email, and password are all required (missing: {', '.join(missing)})"
            )

        with self.store.transaction() as document:
            self._check_unique(document, request.username, request.email)
            user = User(
                id=document.next_user_id(),
                username=request.username,
                email=request.email,
                password=request.password,
                status=request.status,
            )
            document.users.append(user)

        logger.info(f"Created user {user.id} ({user.username})")
        return user

    def update_user(self, user_id: int, request: UserUpdate) -> User:
        """
        Merge the set fields of `request` into a stored user.

        Raises:
            ValidationError: If a field is set to a blank value
            NotFound: If no user has that ID
            Conflict: If the new username or email belongs to another user
        """
        changes = request.changes()
        blank = [name for name in REQUIRED_FIELDS if name in changes and _is_blank(changes[name])]
        if blank:
            raise ValidationError(f"Fields cannot be empty: {', '.join(blank)}")

        with self.store.transaction() as document:
            index = next(
                (i for i, u in enumerate(document.users) if u.id == user_id), None
            )
            if index is None:
                raise NotFound(f"User {user_id} not found")

            self._check_unique(
                document,
                changes.get("username"),
                changes.get("email"),
                exclude_id=user_id,
            )

            merged = User.model_validate({**document.users[index].model_dump(), **changes})
            document.users[index] = merged

        logger.info(f"Updated user {user_id}: {sorted(changes)}")
        return merged

    def delete_user(self, user_id: int) -> None:
        """
        Delete a user.

        Deleting an ID that does not exist succeeds without writing.
        """
        if self.store.load().find_user(user_id) is None:
            return

        with self.store.transaction() as document:
            document.users = [u for u in document.users if u.id != user_id]

        logger.info(f"Deleted user {user_id}")

    @staticmethod
    def _check_unique(
        document: Document,
        username: Optional[str],
        email: Optional[str],
        exclude_id: Optional[int] = None,
    ) -> None:
        for other in document.users:
            if other.id == exclude_id:
                continue
            if username is not None and other.username == username:
                raise Conflict("Username already exists")
            if email is not None and other.email == email:
                raise Conflict("Email already exists")
