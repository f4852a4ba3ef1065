"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from rolekeeper.interfaces.api.app import create_app


@pytest.fixture
def app(catalog, uow_factory):
    """Falcon ASGI app over the seeded in-memory store."""
    return create_app(catalog, uow_factory, cors_origins=["http://localhost:5173"])


@pytest.fixture
def client(app):
    """Falcon ASGI test client acting as 'alice'."""
    return TestClient(app, headers={"X-Actor": "alice"})


@pytest.fixture
def review_client(catalog, uow_factory):
    """Client for an app started in review mode."""
    return TestClient(create_app(catalog, uow_factory, review_mode=True))
