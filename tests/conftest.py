# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a fresh app/store per test
# - Provides a DirectoryAPI wired to the app in-process (no network)
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.main import create_app
from client.api import DirectoryAPI
from core.services.user_store import UserStore

BASE_URL = "http://testserver"


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def store():
    """A freshly seeded user store."""
    return UserStore()


@pytest.fixture
def api_app(store):
    """An application instance backed by the `store` fixture."""
    return create_app(store=store)


@pytest.fixture
def test_client(api_app):
    """Synchronous HTTP client for the application."""
    return TestClient(api_app)


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def directory_api(api_app):
    """DirectoryAPI talking to the application through ASGITransport."""
    api = DirectoryAPI(BASE_URL, transport=httpx.ASGITransport(app=api_app))
    yield api
    await api.aclose()


@pytest.fixture
def sample_user_dicts():
    """The seeded users as the API returns them."""
    return [
        {"id": 1, "name": "John Doe", "email": "john@example.com"},
        {"id": 2, "name": "Jane Smith", "email": "jane@example.com"},
        {"id": 3, "name": "Bob Johnson", "email": "bob@example.com"},
    ]
