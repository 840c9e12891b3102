"""Tests for suggestion and relevance endpoints."""

from clinical_narrative.observability import ObservabilityLogger


class TestSuggestionEndpoint:
    def test_suggested(self, client):
        response = client.post(
            "/api/v1/suggestions/goals",
            json={"category": "UB dressing training", "activities": ["donning/doffing pullover shirt"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == "suggested"
        assert data["total"] == 25
        assert len(data["options"]) <= 12
        assert "motor:coordination" in data["activity_tags"]
        scores = [o["score"] for o in data["options"]]
        assert scores == sorted(scores, reverse=True)

    def test_fallback(self, client):
        response = client.post("/api/v1/suggestions/impairments", json={})

        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == "fallback"
        assert len(data["options"]) == 20

    def test_search(self, client):
        response = client.post("/api/v1/suggestions/goals", json={"query": "fall"})

        assert response.json()["mode"] == "search"
        assert all("fall" in o["item"]["value"].lower() for o in response.json()["options"])

    def test_threshold_override(self, client):
        response = client.post(
            "/api/v1/suggestions/goals",
            json={
                "category": "UB dressing training",
                "activities": ["donning/doffing pullover shirt"],
                "threshold": 100,
            },
        )

        assert response.json()["mode"] == "fallback"

    def test_unknown_pool(self, client):
        response = client.post("/api/v1/suggestions/plans", json={})
        assert response.status_code == 404

    def test_logs_suggestion_event(self, client):
        client.post("/api/v1/suggestions/cueing_purposes", json={"query": "for"})

        events = ObservabilityLogger._instance.get_recent_events("suggestions")
        assert events[-1]["pool"] == "cueing_purposes"
        assert events[-1]["mode"] == "search"
        assert events[-1]["query"] == "for"


class TestRelevanceEndpoint:
    def test_filter(self, client):
        response = client.post(
            "/api/v1/relevance",
            json={
                "reference_tags": ["motor:coordination", "task:balance"],
                "candidates": [
                    {"value": "B", "tags": ["occupation:mobility", "task:balance", "body-part:LE"]},
                    {"value": "A", "tags": ["motor:coordination", "task:balance", "occupation:mobility"]},
                ],
            },
        )

        assert response.status_code == 200
        assert response.json() == [
            {"item": {"value": "A", "tags": ["motor:coordination", "task:balance", "occupation:mobility"]}, "score": 3}
        ]

    def test_empty_reference(self, client):
        response = client.post(
            "/api/v1/relevance",
            json={"reference_tags": [], "candidates": [{"value": "A", "tags": ["motor:coordination"]}]},
        )

        assert response.json() == []

    def test_threshold(self, client):
        response = client.post(
            "/api/v1/relevance",
            json={
                "reference_tags": ["motor:grasp"],
                "candidates": [{"value": "A", "tags": ["motor:grasp"]}],
                "threshold": 0,
            },
        )

        assert response.json()[0]["score"] == 2
