"""FastAPI application for the Clinical Narrative Builder."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from clinical_narrative import __version__
from clinical_narrative.api.middleware import APIKeyMiddleware, RequestLoggingMiddleware
from clinical_narrative.api.routes import (
    compliance,
    health,
    narrative,
    phrases,
    sessions,
    suggestions,
    vocabulary,
)
from clinical_narrative.config import get_settings
from clinical_narrative.storage import PhraseStore, SessionStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info("Starting Clinical Narrative Builder API")

    settings = get_settings()

    # Store in app state
    app.state.session_store = SessionStore(settings.sessions_dir)
    app.state.phrase_store = PhraseStore(settings.phrases_file, limit=settings.recent_phrase_limit)

    logger.info("Sessions stored in %s", settings.sessions_dir)

    yield

    # Shutdown
    logger.info("Shutting down Clinical Narrative Builder API")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Clinical Narrative Builder API",
        description="Context-aware intervention builder and daily-note narratives for OT/PT",
        version=__version__,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    app.add_middleware(RequestLoggingMiddleware)

    if settings.has_api_key:
        app.add_middleware(APIKeyMiddleware, api_key=settings.api_key)

    # Include routers
    app.include_router(health.router, tags=["health"])
    app.include_router(vocabulary.router, prefix="/api/v1", tags=["vocabulary"])
    app.include_router(suggestions.router, prefix="/api/v1", tags=["suggestions"])
    app.include_router(narrative.router, prefix="/api/v1", tags=["narrative"])
    app.include_router(sessions.router, prefix="/api/v1", tags=["sessions"])
    app.include_router(compliance.router, prefix="/api/v1", tags=["compliance"])
    app.include_router(phrases.router, prefix="/api/v1", tags=["phrases"])

    # Exception handlers
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc) if settings.log_level == "DEBUG" else None,
            },
        )

    return app
