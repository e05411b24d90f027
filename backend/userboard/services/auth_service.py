"""
Authentication service: credential check and login recording.
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from userboard.core.exceptions import InvalidCredentials
from userboard.database.store import DocumentStore
from userboard.models.login import LoginEvent
from userboard.models.user import User

logger = logging.getLogger("userboard.auth")


def local_now() -> datetime:
    """Current instant in the process's local timezone."""
    return datetime.now().astimezone()


class AuthService:
    """Service for authentication operations."""

    def __init__(
        self,
        store: DocumentStore,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize with the document store and an optional clock."""
        self.store = store
        self.clock = clock or local_now

    def authenticate(self, username: str, password: str) -> User:
        """
        Verify credentials and record the login.

        The lookup and the event append happen in one store transaction.

        Args:
            username: Exact (case-sensitive) username
            password: Plaintext password

        Returns:
            The matching user

        Raises:
            InvalidCredentials: If no user matches; unknown users and wrong
                passwords are reported the same way
        """
        if not username or not password:
            raise InvalidCredentials()

        with self.store.transaction() as document:
            user = next(
                (
                    u for u in document.users
                    if u.username == username and u.password == password
                ),
                None,
            )
            if user is None:
                # Leaving the block by exception skips the save
                logger.warning(f"Failed login attempt for username '{username}'")
                raise InvalidCredentials()

            document.logins_today.append(LoginEvent.at(user.username, self.clock()))

        logger.info(f"User {user.id} ({user.username}) logged in")
        return user

    def clear_login_events(self) -> int:
        """
        Remove every recorded login event (debug only).

        Returns:
            Number of events removed
        """
        with self.store.transaction() as document:
            cleared = len(document.logins_today)
            document.logins_today = []

        logger.info(f"Cleared {cleared} login event(s)")
        return cleared
