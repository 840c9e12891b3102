"""Local file storage for sessions and quick phrases."""

from clinical_narrative.storage.phrase_store import FAVORITE_PHRASES, FavoritePhrase, PhraseStore
from clinical_narrative.storage.session_store import SessionStore

__all__ = ["FAVORITE_PHRASES", "FavoritePhrase", "PhraseStore", "SessionStore"]
