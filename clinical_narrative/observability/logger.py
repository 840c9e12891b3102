"""Observability logger for structured telemetry."""

import json
import logging
import time
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Optional

from clinical_narrative.observability.events import (
    EventType,
    NarrativeEvent,
    ObservabilityEvent,
    SessionEvent,
    SuggestionEvent,
)

logger = logging.getLogger(__name__)


class ObservabilityLogger:
    """Central logger for suggestion, narrative and session events.

    Writes structured events to JSON Lines files for later analysis.
    Supports callbacks for real-time monitoring.
    """

    _instance: Optional["ObservabilityLogger"] = None

    def __init__(
        self,
        log_dir: Optional[Path] = None,
        enabled: bool = True,
        max_content_length: int = 100,
    ):
        """Initialize observability logger.

        Args:
            log_dir: Directory for log files (default: data/logs)
            enabled: Whether logging is enabled
            max_content_length: Max length for logged free text (search queries)
        """
        self.enabled = enabled
        self.max_content_length = max_content_length

        if log_dir is None:
            log_dir = Path("data/logs")
        self.log_dir = log_dir
        self.log_dir.mkdir(parents=True, exist_ok=True)

        # Separate files for different event types
        self._log_files: dict[str, Path] = {
            "suggestions": self.log_dir / "suggestions.jsonl",
            "narratives": self.log_dir / "narratives.jsonl",
            "sessions": self.log_dir / "sessions.jsonl",
        }

        self._callbacks: list[Callable[[ObservabilityEvent], None]] = []

    @classmethod
    def get_instance(cls) -> "ObservabilityLogger":
        """Get or create singleton instance from settings."""
        if cls._instance is None:
            from clinical_narrative.config import get_settings

            settings = get_settings()
            cls._instance = cls(
                log_dir=settings.log_dir,
                enabled=settings.observability_enabled,
            )
        return cls._instance

    def generate_request_id(self) -> str:
        """Generate a unique request ID."""
        return str(uuid.uuid4())[:8]

    def add_callback(self, callback: Callable[[ObservabilityEvent], None]) -> None:
        """Add callback for real-time event monitoring."""
        self._callbacks.append(callback)

    def _write_event(self, event: ObservabilityEvent, log_type: str) -> None:
        """Write event to appropriate log file."""
        if not self.enabled:
            return

        try:
            log_file = self._log_files.get(log_type)
            if log_file:
                with open(log_file, "a") as f:
                    f.write(event.model_dump_json() + "\n")

            for callback in self._callbacks:
                try:
                    callback(event)
                except Exception as e:
                    logger.warning(f"Observability callback failed: {e}")

        except OSError as e:
            logger.warning(f"Failed to write observability event: {e}")

    def _truncate(self, content: str) -> str:
        if len(content) <= self.max_content_length:
            return content
        return content[: self.max_content_length] + "..."

    # Suggestion Logging

    def log_suggestions(
        self,
        pool: str,
        mode: str,
        pool_size: int,
        suggested_count: int,
        shown_count: int,
        threshold: int,
        category: Optional[str] = None,
        activity_count: int = 0,
        tag_count: int = 0,
        top_score: Optional[int] = None,
        query: Optional[str] = None,
        duration_ms: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> None:
        """Log an option picker fill."""
        event = SuggestionEvent(
            pool=pool,
            category=category,
            activity_count=activity_count,
            tag_count=tag_count,
            threshold=threshold,
            mode=mode,
            pool_size=pool_size,
            suggested_count=suggested_count,
            shown_count=shown_count,
            top_score=top_score,
            query=self._truncate(query) if query else None,
            duration_ms=duration_ms,
            request_id=request_id,
        )
        self._write_event(event, "suggestions")

    # Narrative Logging

    @contextmanager
    def narrative_run(
        self,
        session_id: Optional[str],
        intervention_count: int,
        plan_count: int = 0,
        cpt_codes: Optional[list[str]] = None,
        request_id: Optional[str] = None,
    ):
        """Context manager for logging narrative generation.

        Usage:
            with obs.narrative_run(session.session_id, len(session.interventions)) as event:
                narrative = generate_narrative(session)
                event.narrative_length = len(narrative)
        """
        start_time = time.time()
        request_id = request_id or self.generate_request_id()

        event = NarrativeEvent(
            event_type=EventType.NARRATIVE_START,
            session_id=session_id,
            intervention_count=intervention_count,
            plan_count=plan_count,
            cpt_codes=cpt_codes or [],
            request_id=request_id,
        )

        try:
            yield event
            event.event_type = EventType.NARRATIVE_SUCCESS

        except Exception as e:
            event.event_type = EventType.NARRATIVE_ERROR
            event.error_type = type(e).__name__
            event.error_message = str(e)[:200]
            raise

        finally:
            event.duration_ms = (time.time() - start_time) * 1000
            self._write_event(event, "narratives")

    # Session Logging

    def log_session(
        self,
        event_type: EventType,
        session_id: str,
        intervention_count: int = 0,
        session_date: Optional[str] = None,
    ) -> None:
        """Log a session save or delete."""
        event = SessionEvent(
            event_type=event_type,
            session_id=session_id,
            intervention_count=intervention_count,
            session_date=session_date,
        )
        self._write_event(event, "sessions")

    # Utility methods

    def get_recent_events(
        self,
        log_type: str,
        limit: int = 100,
    ) -> list[dict[str, Any]]:
        """Read recent events from a log file."""
        log_file = self._log_files.get(log_type)
        if not log_file or not log_file.exists():
            return []

        events = []
        with open(log_file) as f:
            for line in f:
                try:
                    events.append(json.loads(line))
                except json.JSONDecodeError:
                    continue

        return events[-limit:]

    def get_stats(self, log_type: str) -> dict[str, Any]:
        """Get basic statistics for a log type."""
        events = self.get_recent_events(log_type, limit=1000)
        if not events:
            return {"total": 0}

        total = len(events)
        errors = sum(1 for e in events if "error" in e.get("event_type", ""))
        durations = [e["duration_ms"] for e in events if e.get("duration_ms") is not None]
        avg_duration = sum(durations) / len(durations) if durations else 0.0

        return {
            "total": total,
            "errors": errors,
            "error_rate": errors / total,
            "avg_duration_ms": avg_duration,
        }


def get_observability_logger() -> ObservabilityLogger:
    """Get the global observability logger instance."""
    return ObservabilityLogger.get_instance()
