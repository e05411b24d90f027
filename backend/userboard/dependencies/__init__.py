"""
Dependencies for dependency injection in routes.
"""
from userboard.dependencies.store import get_store

__all__ = ["get_store"]
