"""Tests for API key authentication."""

import pytest
from fastapi.testclient import TestClient

from clinical_narrative.api.app import create_app
from clinical_narrative.config import get_settings


@pytest.fixture
def secured_client(monkeypatch):
    monkeypatch.setenv("API_KEY", "secret")
    get_settings.cache_clear()
    with TestClient(create_app()) as test_client:
        yield test_client


class TestAPIKeyMiddleware:
    def test_health_is_public(self, secured_client):
        assert secured_client.get("/health").status_code == 200

    def test_readiness_is_public(self, secured_client):
        response = secured_client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_missing_key_rejected(self, secured_client):
        response = secured_client.get("/api/v1/vocabulary")

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    def test_wrong_key_rejected(self, secured_client):
        response = secured_client.get("/api/v1/vocabulary", headers={"X-API-Key": "nope"})
        assert response.status_code == 401

    def test_header_key_accepted(self, secured_client):
        response = secured_client.get("/api/v1/vocabulary", headers={"X-API-Key": "secret"})
        assert response.status_code == 200

    def test_bearer_key_accepted(self, secured_client):
        response = secured_client.get("/api/v1/vocabulary", headers={"Authorization": "Bearer secret"})
        assert response.status_code == 200

    def test_no_key_configured_is_open(self, client):
        assert client.get("/api/v1/vocabulary").status_code == 200
