"""Health check endpoints."""

from fastapi import APIRouter, Request

from clinical_narrative import __version__
from clinical_narrative.vocabulary import POOLS, TAGGED_ACTIVITIES

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """Basic health check."""
    return {
        "status": "healthy",
        "service": "clinical-narrative-builder",
        "version": __version__,
    }


@router.get("/health/ready")
async def readiness_check(request: Request) -> dict:
    """Readiness check - stores are attached and the vocabulary is loaded."""
    errors = []

    if getattr(request.app.state, "session_store", None) is None:
        errors.append("Session store not initialized")
    if getattr(request.app.state, "phrase_store", None) is None:
        errors.append("Phrase store not initialized")

    if errors:
        return {"status": "not_ready", "errors": errors}

    return {
        "status": "ready",
        "pools": {name: len(pool) for name, pool in POOLS.items()},
        "activity_categories": len(TAGGED_ACTIVITIES),
    }
