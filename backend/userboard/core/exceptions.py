"""Exception hierarchy for Userboard.

Every domain error derives from :class:`UserboardError` and carries the
HTTP status and short error code the API reports for it, so routers never
translate errors themselves::

    try:
        service.create_user(body)
    except UserboardError as e:
        print(e.status_code, e.code, e.message)
"""
from fastapi import status


class UserboardError(Exception):
    """Base exception for all Userboard errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"

    def __init__(self, message: str = "Internal error"):
        super().__init__(message)
        self.message = message


# ── Client errors ────────────────────────────────────────────


class ValidationError(UserboardError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"


class Conflict(UserboardError):
    """Username or email already taken."""

    status_code = status.HTTP_409_CONFLICT
    code = "conflict"


class NotFound(UserboardError):
    """No record with the requested id."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class InvalidCredentials(UserboardError):
    """Username/password pair did not match any user."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "invalid_credentials"

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)


# ── Storage ──────────────────────────────────────────────────


class StorageUnavailable(UserboardError):
    """The document could not be read or written.

    Raised for permission problems, I/O failures and corrupt (unparseable
    or schema-invalid) documents. Never retried by the store.
    """

    code = "storage_unavailable"
