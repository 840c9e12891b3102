"""FastAPI dependencies for the stores kept in application state."""

from fastapi import Request

from clinical_narrative.storage import PhraseStore, SessionStore


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_phrase_store(request: Request) -> PhraseStore:
    return request.app.state.phrase_store
