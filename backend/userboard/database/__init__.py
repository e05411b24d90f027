"""
Database module - the JSON document store.
"""
from userboard.database.store import DocumentStore

__all__ = ["DocumentStore"]
