"""Root conftest - shared test configuration."""

import os

import pytest

# Keep tests independent of any local .env
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def client():
    """TestClient bound to the full application, error handlers included."""
    from fastapi.testclient import TestClient

    from main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def valid_payload() -> dict:
    return {"name": "A", "someValue": 2, "evenNumber": 4}
