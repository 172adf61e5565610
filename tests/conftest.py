"""Shared fixtures: an in-memory store and a test client bound to it."""

import pytest
from fastapi.testclient import TestClient

from event_management_api.app.core.db import DocumentStore
from event_management_api.app.main import create_app


@pytest.fixture
def store():
    store = DocumentStore.connect(":memory:")
    yield store
    store.close()


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))


@pytest.fixture
def sample_event():
    return {"name": "Conf", "date": "2025-01-01", "venue": "Hall A"}


@pytest.fixture
def missing_id():
    """A well-formed identity that no record uses."""
    return "0123456789abcdef01234567"
