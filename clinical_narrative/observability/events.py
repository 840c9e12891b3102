"""Structured observability events for suggestions, narratives and sessions."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class EventType(str, Enum):
    """Types of observability events."""

    SUGGESTIONS = "suggestions"
    NARRATIVE_START = "narrative_start"
    NARRATIVE_SUCCESS = "narrative_success"
    NARRATIVE_ERROR = "narrative_error"
    SESSION_SAVED = "session_saved"
    SESSION_DELETED = "session_deleted"


class ObservabilityEvent(BaseModel):
    """Base class for all observability events."""

    event_type: EventType
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    session_id: Optional[str] = None
    request_id: Optional[str] = None
    duration_ms: Optional[float] = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class SuggestionEvent(ObservabilityEvent):
    """Event for an option picker being filled."""

    event_type: EventType = EventType.SUGGESTIONS
    pool: str
    category: Optional[str] = None
    activity_count: int = 0
    tag_count: int = 0
    threshold: int = 3

    # Results
    mode: str = "fallback"  # search, suggested, fallback
    pool_size: int = 0
    suggested_count: int = 0
    shown_count: int = 0
    top_score: Optional[int] = None
    query: Optional[str] = None


class NarrativeEvent(ObservabilityEvent):
    """Event for narrative generation."""

    intervention_count: int = 0
    plan_count: int = 0
    cpt_codes: list[str] = Field(default_factory=list)
    narrative_length: Optional[int] = None

    # Error fields
    error_type: Optional[str] = None
    error_message: Optional[str] = None


class SessionEvent(ObservabilityEvent):
    """Event for session persistence."""

    intervention_count: int = 0
    session_date: Optional[str] = None
