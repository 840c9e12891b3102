"""Tests for narrative, session, compliance and phrase endpoints."""

from clinical_narrative.observability import ObservabilityLogger

SESSION = {
    "session_id": "session_1700000000000",
    "session_date": "2024-03-04",
    "total_duration": 45,
    "interventions": [
        {
            "cpt_code": "97110",
            "category": "BUE strengthening exercises",
            "activities": ["shoulder flexion"],
            "parameters": "2x10 reps",
            "assistance_level": "Supervision/SBA",
            "patient_response": "tolerated activity well",
        }
    ],
    "plan": ["Continue current POC"],
}


class TestNarrativeEndpoint:
    def test_generate(self, client):
        response = client.post("/api/v1/narrative", json=SESSION)

        assert response.status_code == 200
        assert response.json()["narrative"] == (
            "Patient completed bue strengthening exercises shoulder flexion."
            " 2x10 reps."
            " SBA required."
            " Patient tolerated activity well."
            " Plan: Continue current POC."
        )

    def test_empty_session(self, client):
        response = client.post("/api/v1/narrative", json={})

        assert response.json()["narrative"] == "Add interventions to generate narrative..."

    def test_invalid_pain_level(self, client):
        body = {"interventions": [{"cpt_code": "97110", "category": "x", "pain_level": 12}]}

        assert client.post("/api/v1/narrative", json=body).status_code == 422

    def test_logs_narrative_event(self, client):
        client.post("/api/v1/narrative", json=SESSION)

        events = ObservabilityLogger._instance.get_recent_events("narratives")
        assert events[-1]["event_type"] == "narrative_success"
        assert events[-1]["cpt_codes"] == ["97110"]


class TestSessionEndpoints:
    def test_crud(self, client):
        assert client.get("/api/v1/sessions").json() == []

        saved = client.post("/api/v1/sessions", json=SESSION)
        assert saved.status_code == 200
        assert saved.json()["session_id"] == "session_1700000000000"

        listed = client.get("/api/v1/sessions").json()
        assert [s["session_id"] for s in listed] == ["session_1700000000000"]

        loaded = client.get("/api/v1/sessions/session_1700000000000")
        assert loaded.status_code == 200
        assert loaded.json()["interventions"][0]["cpt_code"] == "97110"

        deleted = client.delete("/api/v1/sessions/session_1700000000000")
        assert deleted.json() == {"status": "deleted", "session_id": "session_1700000000000"}
        assert client.get("/api/v1/sessions/session_1700000000000").status_code == 404

    def test_missing_session(self, client):
        assert client.get("/api/v1/sessions/session_0").status_code == 404
        assert client.delete("/api/v1/sessions/session_0").status_code == 404

    def test_path_like_session_id_rejected(self, client, tmp_path):
        body = {**SESSION, "session_id": "../../escaped"}

        assert client.post("/api/v1/sessions", json=body).status_code == 422
        assert not (tmp_path / "escaped.json").exists()
        assert not (tmp_path.parent / "escaped.json").exists()

    def test_corrupt_session_file(self, client, tmp_path):
        (tmp_path / "sessions" / "session_9.json").write_text("{not json")

        response = client.get("/api/v1/sessions/session_9")

        assert response.status_code == 404
        assert response.json()["detail"] == "Saved session is unreadable"

    def test_export(self, client):
        client.post("/api/v1/sessions", json=SESSION)

        response = client.get("/api/v1/sessions/export")

        assert response.status_code == 200
        assert response.json()[0]["session_id"] == "session_1700000000000"

    def test_saved_to_configured_directory(self, client, tmp_path):
        client.post("/api/v1/sessions", json=SESSION)

        assert (tmp_path / "sessions" / "session_1700000000000.json").exists()

    def test_logs_session_events(self, client):
        client.post("/api/v1/sessions", json=SESSION)
        client.delete("/api/v1/sessions/session_1700000000000")

        events = ObservabilityLogger._instance.get_recent_events("sessions")
        assert [e["event_type"] for e in events] == ["session_saved", "session_deleted"]


class TestComplianceEndpoints:
    def test_items(self, client):
        items = client.get("/api/v1/compliance/items").json()
        assert [i["id"] for i in items] == ["skilled", "improvement", "functional", "reasonable"]

    def test_checklist(self, client):
        response = client.post("/api/v1/compliance/checklist", json={"checked": ["skilled", "functional"]})

        data = response.json()
        assert data["complete"] is False
        assert [i["id"] for i in data["missing"]] == ["improvement", "reasonable"]


class TestPhraseEndpoints:
    def test_favorites_and_recent(self, client):
        data = client.get("/api/v1/phrases").json()

        assert len(data["favorites"]) == 8
        assert data["favorites"][0] == {"text": "Patient verbalized understanding of techniques", "color": "blue"}
        assert data["recent"] == []

    def test_record(self, client):
        client.post("/api/v1/phrases/recent", json={"phrase": "a"})
        response = client.post("/api/v1/phrases/recent", json={"phrase": "b"})

        assert response.json() == {"recent": ["b", "a"]}
        assert client.get("/api/v1/phrases").json()["recent"] == ["b", "a"]

    def test_empty_phrase_rejected(self, client):
        assert client.post("/api/v1/phrases/recent", json={"phrase": ""}).status_code == 422
