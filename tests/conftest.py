# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a controllable clock, a small store and an HTTP client
# =============================================================================

import os
from datetime import datetime, timedelta, timezone

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.main which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("PORT", "3000")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.models.user import User
from core.services.user_store import UserStore


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def clock():
    """A fixed clock starting at 2024-01-15 10:00 UTC."""
    return FakeClock(datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(clock):
    """Store seeded with two users: a@x.com (id 1) and b@x.com (id 2)."""
    return UserStore(
        [
            User(id=1, name="A", email="a@x.com", created_at=clock()),
            User(id=2, name="B", email="b@x.com", created_at=clock()),
        ],
        clock=clock,
    )


@pytest.fixture
def test_settings():
    """Settings for the test environment, independent of the process env."""
    return Settings(ENVIRONMENT="test", STATIC_DIR="does-not-exist")


@pytest.fixture
def client(store, test_settings):
    """HTTP client bound to a fresh app serving the two-user store."""
    app = create_app(store=store, settings=test_settings)
    with TestClient(app) as test_client:
        yield test_client
