"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with service instances bound
to the per-test document store and helpers for checking API errors.
"""

import pytest


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def user_service(store):
    """UserService over the per-test store."""
    from userboard.services.user_service import UserService
    return UserService(store)


@pytest.fixture
def auth_service(store, clock):
    """AuthService over the per-test store with a fixed clock."""
    from userboard.services.auth_service import AuthService
    return AuthService(store, clock=clock)


@pytest.fixture
def dashboard_service(store, clock):
    """DashboardService over the per-test store with a fixed clock."""
    from userboard.services.dashboard_service import DashboardService
    return DashboardService(store, clock=clock)


@pytest.fixture
def create_user(user_service):
    """
    Create a user through the service.

    Usage:
        user = create_user(username="carol", email="c@x.com")
    """
    from userboard.schemas.user import UserCreate

    def _create(username: str, email: str, password: str = "secret", **extra):
        return user_service.create_user(
            UserCreate(username=username, email=email, password=password, **extra)
        )
    return _create


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, code: str = None, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "error" in data
        assert "detail" in data
        if code:
            assert data["error"] == code
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert
