"""
Store dependency.

The store is created once in the application lifespan and kept on
`app.state`; handlers receive it through `Depends(get_store)`.
"""
from fastapi import Request

from userboard.database.store import DocumentStore


def get_store(request: Request) -> DocumentStore:
    """Return the application's document store."""
    return request.app.state.store
