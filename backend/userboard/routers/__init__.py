"""
API Routers module.
"""
from userboard.routers import auth, dashboard, debug, health, users

__all__ = ["auth", "dashboard", "debug", "health", "users"]
