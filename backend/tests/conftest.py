"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from types import SimpleNamespace
from typing import Any, Optional
from unittest.mock import MagicMock

from container import reset_container
from shared.config import Settings, get_settings
from modules.users.service import InMemoryUserRecordStore


def make_user_record(
    uid: str = "test-user-123",
    display_name: Optional[str] = "Test User",
    photo_url: Optional[str] = "https://example.com/avatar.png",
    email: Optional[str] = "test@example.com",
    custom_claims: Optional[dict[str, Any]] = None,
) -> SimpleNamespace:
    """
    Create an object shaped like firebase_admin.auth.UserRecord.

    Args:
        uid: External identity id
        display_name: Display name
        photo_url: Photo URL
        email: Email address
        custom_claims: Custom claims stored on the platform

    Returns:
        Object exposing the UserRecord attributes the services read
    """
    return SimpleNamespace(
        uid=uid,
        display_name=display_name,
        photo_url=photo_url,
        email=email,
        custom_claims=custom_claims,
    )


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Isolate tests from the process environment and cached singletons."""
    monkeypatch.delenv("SERVICE_ACCOUNT_KEY", raising=False)
    get_settings.cache_clear()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_container()


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only (no .env file)."""
    return Settings(_env_file=None)


@pytest.fixture
def firebase_app() -> MagicMock:
    """Stand-in for an initialized firebase_admin.App."""
    app = MagicMock()
    app.name = "identity-bridge-test"
    return app


@pytest.fixture
def user_store(settings: Settings) -> InMemoryUserRecordStore:
    """Fresh in-memory user record store."""
    return InMemoryUserRecordStore(settings)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def correlation_id() -> str:
    """Provide a consistent correlation ID."""
    return "corr-abc-123"
