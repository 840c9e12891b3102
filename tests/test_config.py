"""Tests for settings."""

from pathlib import Path

from clinical_narrative.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("SESSIONS_DIR", "PHRASES_FILE", "LOG_DIR"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.relevance_threshold == 3
        assert settings.max_suggestions == 12
        assert settings.fallback_limit == 20
        assert settings.recent_phrase_limit == 6
        assert settings.sessions_dir == Path("./data/sessions")
        assert not settings.has_api_key

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("RELEVANCE_THRESHOLD", "5")
        monkeypatch.setenv("API_KEY", "secret")

        settings = Settings(_env_file=None)

        assert settings.relevance_threshold == 5
        assert settings.has_api_key

    def test_cached(self):
        assert get_settings() is get_settings()
