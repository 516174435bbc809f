"""
Pytest Configuration and Fixtures

Shared fixtures: a fresh store, an application bound to it and a
``TestClient`` talking to that application.
"""

from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from discover_api.app.main import create_app
from discover_api.app.services.discovery_store import DiscoveryStore


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def store() -> DiscoveryStore:
    """Create a fresh, empty DiscoveryStore."""
    return DiscoveryStore()


# ============================================================================
# Application Fixtures
# ============================================================================

@pytest.fixture
def app(store: DiscoveryStore) -> FastAPI:
    """Application serving ``store`` with the heartbeat disabled."""
    return create_app(store=store, heartbeat_interval=0)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """TestClient with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
