"""HTTP API for the Clinical Narrative Builder."""

from clinical_narrative.api.app import create_app

__all__ = ["create_app"]
