"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from user_registry.config import Settings, get_settings
from user_registry.main import app
from user_registry.services.registry import UserRegistry, get_registry


@pytest.fixture
def registry():
    """Create a fresh, empty registry for each test."""
    return UserRegistry()


@pytest.fixture
def settings():
    """Default settings, isolated from the environment's .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def client(registry, settings):
    """Create a test client wired to the per-test registry and settings."""
    app.dependency_overrides[get_registry] = lambda: registry
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def alice(client):
    """Create a user through the API and return the response body."""
    response = client.post("/users", json={"name": "Alice", "email": "a@x.com"})
    assert response.status_code == 201
    return response.json()
