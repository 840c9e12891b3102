"""Fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from clinical_narrative.api.app import create_app


@pytest.fixture
def client():
    """Test client with the lifespan run, so the stores are attached."""
    with TestClient(create_app()) as test_client:
        yield test_client
