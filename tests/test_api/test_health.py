"""Tests for health endpoints."""


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["service"] == "clinical-narrative-builder"

    def test_readiness_check(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["pools"] == {"goals": 25, "impairments": 56, "cueing_purposes": 70}

    def test_timing_header(self, client):
        response = client.get("/health")
        assert "X-Process-Time" in response.headers
