"""
Service layer for business logic.
"""
from userboard.services.auth_service import AuthService
from userboard.services.user_service import UserService
from userboard.services.dashboard_service import DashboardService

__all__ = [
    "AuthService",
    "UserService",
    "DashboardService",
]
