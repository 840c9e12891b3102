"""File-backed session store.

One JSON file per session under the sessions directory, with an in-memory
cache in front of the disk.
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from pydantic import ValidationError

from clinical_narrative.exceptions import (
    CorruptSessionError,
    InvalidSessionIdError,
    SessionNotFoundError,
)
from clinical_narrative.narrative.models import SESSION_ID_PATTERN, Session

logger = logging.getLogger(__name__)

_SESSION_ID_RE = re.compile(SESSION_ID_PATTERN)


class SessionStore:
    """Saves, loads and lists sessions as JSON files."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self._cache: dict[str, Session] = {}

    def _session_file(self, session_id: str) -> Path:
        """Path of a session's file, always directly inside the store directory.

        Raises:
            InvalidSessionIdError: If the id is not a plain file stem.
        """
        if not _SESSION_ID_RE.fullmatch(session_id):
            raise InvalidSessionIdError(session_id)
        return self.directory / f"{session_id}.json"

    def save(self, session: Session) -> Session:
        """Persist a session, replacing any saved version with the same id.

        The cache is only updated once the file is written.
        """
        fp = self._session_file(session.session_id)
        with open(fp, "w") as f:
            f.write(session.model_dump_json(indent=2))
        self._cache[session.session_id] = session
        logger.info("Saved session %s (%d interventions)", session.session_id, len(session.interventions))
        return session

    def exists(self, session_id: str) -> bool:
        if session_id in self._cache:
            return True
        try:
            return self._session_file(session_id).exists()
        except InvalidSessionIdError:
            return False

    def load(self, session_id: str) -> Session:
        """Load a session from cache or disk.

        Raises:
            SessionNotFoundError: If no session with this id was saved.
            CorruptSessionError: If the saved file cannot be read.
        """
        if session_id in self._cache:
            return self._cache[session_id]

        if not self.exists(session_id):
            raise SessionNotFoundError(session_id)

        fp = self._session_file(session_id)
        try:
            session = Session.model_validate_json(fp.read_text())
        except (ValidationError, OSError) as e:
            logger.warning("Unreadable session file %s: %s", fp.name, e)
            raise CorruptSessionError(session_id) from e

        self._cache[session_id] = session
        return session

    def list(self) -> list[Session]:
        """All saved sessions, oldest session date first."""
        for fp in self.directory.glob("*.json"):
            sid = fp.stem
            if sid in self._cache:
                continue
            try:
                self._cache[sid] = Session.model_validate_json(fp.read_text())
            except (ValidationError, OSError) as e:
                logger.warning("Skipping unreadable session file %s: %s", fp.name, e)
                continue

        return sorted(self._cache.values(), key=lambda s: (s.session_date, s.session_id))

    def delete(self, session_id: str) -> None:
        """Remove a session from cache and disk.

        Raises:
            SessionNotFoundError: If no session with this id was saved.
        """
        if not self.exists(session_id):
            raise SessionNotFoundError(session_id)

        self._cache.pop(session_id, None)
        fp = self._session_file(session_id)
        if fp.exists():
            fp.unlink()
        logger.info("Deleted session %s", session_id)

    def export(self) -> str:
        """All sessions as a single JSON array."""
        return json.dumps([s.model_dump(mode="json") for s in self.list()], indent=2)
