"""Shared pytest fixtures for the user API tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from user_result_api.app.core.config import Settings
from user_result_api.app.main import create_app
from user_result_api.app.services.user_service import UserService
from user_result_api.app.services.user_store import InMemoryUserStore


@pytest.fixture
def test_settings() -> Settings:
    """Settings with an empty store and no artificial latency."""
    return Settings(seed_users=False, store_latency_ms=0, log_level="WARNING", debug=False)


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def service(store: InMemoryUserStore) -> UserService:
    return UserService(store)


@pytest.fixture
def client(test_settings: Settings, store: InMemoryUserStore) -> TestClient:
    """HTTP client against a fresh app backed by the ``store`` fixture."""
    app = create_app(test_settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
