"""
Global test fixtures for Userboard.

This module provides shared fixtures for all tests including:
- A temporary JSON document per test
- Settings pointed at that document
- FastAPI sync and async test clients
- User payload factories and a controllable clock
"""

import json
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# Document Store Fixtures
# =============================================================================

@pytest.fixture
def data_file(tmp_path) -> Path:
    """Path of the JSON document for this test (not created yet)."""
    return tmp_path / "db.json"


@pytest.fixture
def store(data_file):
    """A DocumentStore backed by the per-test data file."""
    from userboard.database.store import DocumentStore
    return DocumentStore(data_file)


@pytest.fixture
def write_document(data_file):
    """
    Write a raw document to the data file.

    Usage:
        write_document({"users": [...], "anomalies": [...]})
    """
    def _write(document: dict[str, Any]) -> Path:
        data_file.parent.mkdir(parents=True, exist_ok=True)
        data_file.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return data_file
    return _write


@pytest.fixture
def read_document(data_file):
    """Read the raw JSON document back from disk."""
    def _read() -> dict[str, Any]:
        return json.loads(data_file.read_text(encoding="utf-8"))
    return _read


@pytest.fixture
def dashboard_document() -> dict:
    """A document with usage, activity, anomaly and status data."""
    return {
        "users": [],
        "loginsToday": [],
        "usageMetrics": {
            "daily": [
                {"date": "2026-03-13", "users": 120, "sessions": 340, "duration": 12.5},
                {"date": "2026-03-14", "users": 98, "sessions": 301, "duration": 11},
            ],
            "monthly": [
                {"month": "Feb", "users": 2100, "sessions": 8800, "duration": 13.2},
            ],
        },
        "userActivity": [
            {
                "id": 1,
                "username": "alice",
                "email": "alice@example.com",
                "status": "active",
                "location": "Berlin",
                "device": "Desktop",
                "actions": 42,
                "sessionDuration": "12m",
                "lastLogin": "2026-03-14T08:00:00Z",
            }
        ],
        "anomalies": [
            {"id": 1, "type": "spike", "description": "Login spike", "severity": "high"},
            {"id": 2, "type": "drop", "description": "Session drop", "severity": "low"},
        ],
        "systemStatus": {"api": "operational", "database": "operational", "uptime": "99.9%"},
        "topPages": [{"path": "/dashboard", "views": 1200}],
    }


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def settings_override(monkeypatch, data_file):
    """
    Point application settings at the per-test data file.

    Settings are cached, so the cache is cleared before and after.
    """
    from userboard.config import get_settings

    monkeypatch.setenv("DATA_FILE", str(data_file))
    monkeypatch.setenv("DEBUG", "false")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def debug_enabled(monkeypatch, settings_override):
    """Turn on debug routes for this test."""
    from userboard.config import get_settings

    monkeypatch.setenv("DEBUG", "true")
    get_settings.cache_clear()
    yield get_settings()


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def bob_data() -> dict:
    """Signup payload for bob."""
    return {"username": "bob", "email": "b@x.com", "password": "pw"}


@pytest.fixture
def alice_data() -> dict:
    """Signup payload for alice."""
    return {
        "username": "alice",
        "email": "alice@example.com",
        "password": "alice123",
        "status": "active",
    }


# =============================================================================
# Clock Fixtures
# =============================================================================

class FixedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock() -> FixedClock:
    """Clock fixed at 2026-03-14 09:30 UTC."""
    return FixedClock(datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc))


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(settings_override):
    """
    FastAPI app for testing.

    Settings point at the per-test data file before the lifespan opens
    the store.
    """
    from userboard.main import app
    return app


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Runs the lifespan, so the store is opened from settings.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app, store):
    """
    Create an async test client.

    ASGITransport does not run the lifespan, so the store is attached
    to the app directly.
    """
    from httpx import AsyncClient, ASGITransport

    app.state.store = store
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
