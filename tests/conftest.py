"""Pytest configuration and fixtures."""

import pytest

from clinical_narrative.config import get_settings
from clinical_narrative.narrative import Intervention, Session
from clinical_narrative.observability import ObservabilityLogger
from clinical_narrative.tagging import TaggedItem


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point every file the app writes at a temporary directory."""
    monkeypatch.setenv("SESSIONS_DIR", str(tmp_path / "sessions"))
    monkeypatch.setenv("PHRASES_FILE", str(tmp_path / "recent_phrases.json"))
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("API_KEY", raising=False)
    get_settings.cache_clear()

    ObservabilityLogger._instance = ObservabilityLogger(log_dir=tmp_path / "logs")

    yield

    ObservabilityLogger._instance = None
    get_settings.cache_clear()


@pytest.fixture
def fine_motor_candidates():
    """Candidates scored against fine-motor reference tags."""
    return [
        TaggedItem(value="Context only", tags=("occupation:ADL", "task:dressing", "body-part:UE")),
        TaggedItem(value="Single skill", tags=("motor:fine-motor", "occupation:ADL")),
        TaggedItem(value="Two skills", tags=("motor:fine-motor", "motor:coordination")),
        TaggedItem(value="Unrelated", tags=("cognitive:memory", "task:bathing")),
    ]


@pytest.fixture
def sample_intervention():
    """A fully documented balance intervention."""
    return Intervention(
        id="int_1_test",
        cpt_code="97530",
        category="Dynamic sitting balance tasks",
        activities=["reaching outside BOS", "weight shifting"],
        parameters="x3 trials",
        goal="to improve balance for ADLs",
        assistance_level="Contact Guard Assist",
        cueing_types=["verbal", "tactile"],
        cueing_location="at trunk",
        cueing_purpose="for postural alignment",
        impairment="decreased trunk control",
        patient_response="verbalized understanding",
    )


@pytest.fixture
def sample_session(sample_intervention):
    """A session with one intervention and a plan."""
    from datetime import date

    return Session(
        session_id="session_1700000000000",
        session_date=date(2024, 3, 4),
        total_duration=45,
        interventions=[sample_intervention],
        plan=["Continue current POC"],
    )
