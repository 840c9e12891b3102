"""Observability module for suggestion and narrative telemetry."""

from clinical_narrative.observability.events import (
    EventType,
    NarrativeEvent,
    ObservabilityEvent,
    SessionEvent,
    SuggestionEvent,
)
from clinical_narrative.observability.logger import ObservabilityLogger, get_observability_logger

__all__ = [
    "EventType",
    "NarrativeEvent",
    "ObservabilityEvent",
    "ObservabilityLogger",
    "SessionEvent",
    "SuggestionEvent",
    "get_observability_logger",
]
