"""Configuration management for the Clinical Narrative Builder."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Relevance filtering
    relevance_threshold: int = Field(
        default=3,
        description="Minimum relevance score for a suggestion (tuned for context=1, skill=2)",
    )
    max_suggestions: int = Field(
        default=12,
        ge=1,
        description="Suggestions shown before the user has to search",
    )
    fallback_limit: int = Field(
        default=20,
        ge=1,
        description="Options shown when nothing is relevant enough to suggest",
    )

    # Local storage
    sessions_dir: Path = Field(
        default=Path("./data/sessions"),
        description="Directory for saved session JSON files",
    )
    phrases_file: Path = Field(
        default=Path("./data/recent_phrases.json"),
        description="File holding the recently used quick phrases",
    )
    recent_phrase_limit: int = Field(default=6, ge=1)

    # Observability
    log_dir: Path = Field(
        default=Path("./data/logs"),
        description="Directory for structured JSONL event logs",
    )
    observability_enabled: bool = Field(default=True)

    # API Settings
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8080)
    api_key: str = Field(
        default="",
        description="API key for authenticating requests",
    )

    # CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    @property
    def has_api_key(self) -> bool:
        """Check if API key authentication is configured."""
        return bool(self.api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
