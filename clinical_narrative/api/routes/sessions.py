"""Saved session endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Response

from clinical_narrative.api.dependencies import get_session_store
from clinical_narrative.exceptions import CorruptSessionError, SessionNotFoundError
from clinical_narrative.narrative import Session
from clinical_narrative.observability import EventType, get_observability_logger
from clinical_narrative.storage import SessionStore

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=list[Session])
async def list_sessions(store: SessionStore = Depends(get_session_store)):
    """List all saved sessions, oldest first."""
    return store.list()


@router.get("/export")
async def export_sessions(store: SessionStore = Depends(get_session_store)):
    """Download every saved session as one JSON array."""
    return Response(
        content=store.export(),
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="sessions.json"'},
    )


@router.post("", response_model=Session)
async def save_session(session: Session, store: SessionStore = Depends(get_session_store)):
    """Save a session, replacing any earlier version with the same id."""
    saved = store.save(session)
    get_observability_logger().log_session(
        EventType.SESSION_SAVED,
        saved.session_id,
        intervention_count=len(saved.interventions),
        session_date=saved.session_date.isoformat(),
    )
    return saved


@router.get("/{session_id}", response_model=Session)
async def get_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    """Load a saved session."""
    try:
        return store.load(session_id)
    except CorruptSessionError:
        raise HTTPException(status_code=404, detail="Saved session is unreadable")
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")


@router.delete("/{session_id}")
async def delete_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    """Delete a saved session."""
    try:
        store.delete(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")

    get_observability_logger().log_session(EventType.SESSION_DELETED, session_id)
    return {"status": "deleted", "session_id": session_id}
