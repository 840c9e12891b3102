"""Quick phrases: fixed favorites plus a persisted most-recently-used list."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NamedTuple

logger = logging.getLogger(__name__)


class FavoritePhrase(NamedTuple):
    text: str
    color: str


FAVORITE_PHRASES: tuple[FavoritePhrase, ...] = (
    FavoritePhrase("Patient verbalized understanding of techniques", "blue"),
    FavoritePhrase("Good progress noted with carryover", "green"),
    FavoritePhrase("Required decreased cueing by end of session", "green"),
    FavoritePhrase("Patient fatigued easily", "yellow"),
    FavoritePhrase("No LOB noted during activity", "green"),
    FavoritePhrase("Demonstrated improved control", "green"),
    FavoritePhrase("Patient tolerated activity well", "blue"),
    FavoritePhrase("Continue current POC", "purple"),
)


class PhraseStore:
    """Recently used phrases, newest first, capped at ``limit``."""

    def __init__(self, path: Path, limit: int = 6):
        self.path = Path(path)
        self.limit = limit
        self._recent: list[str] = self._load()

    def _load(self) -> list[str]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable phrase file %s: %s", self.path, e)
            return []
        if not isinstance(data, list):
            logger.warning("Ignoring phrase file %s: expected a JSON list", self.path)
            return []
        return [str(p) for p in data][: self.limit]

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._recent, f, indent=2)

    def recent(self) -> list[str]:
        return list(self._recent)

    def record(self, phrase: str) -> list[str]:
        """Move ``phrase`` to the front of the recent list and persist it."""
        phrase = phrase.strip()
        if not phrase:
            return self.recent()

        self._recent = [phrase, *(p for p in self._recent if p != phrase)][: self.limit]
        self._save()
        return self.recent()

    def clear(self) -> None:
        self._recent = []
        self._save()
