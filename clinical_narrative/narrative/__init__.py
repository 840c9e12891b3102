"""Narrative module: interventions, session operations, narrative text."""

from clinical_narrative.narrative.builder import (
    EMPTY_NARRATIVE,
    OPENER_PATTERNS,
    build_intervention_narrative,
    generate_narrative,
)
from clinical_narrative.narrative.models import (
    Intervention,
    SESSION_ID_PATTERN,
    Session,
    new_intervention_id,
    new_session_id,
)
from clinical_narrative.narrative.session import (
    add_intervention,
    clear_session,
    delete_intervention,
    duplicate_intervention,
    reorder_interventions,
    set_narrative,
    toggle_plan_item,
    update_intervention,
    update_session_info,
)

__all__ = [
    "EMPTY_NARRATIVE",
    "Intervention",
    "OPENER_PATTERNS",
    "SESSION_ID_PATTERN",
    "Session",
    "add_intervention",
    "build_intervention_narrative",
    "clear_session",
    "delete_intervention",
    "duplicate_intervention",
    "generate_narrative",
    "new_intervention_id",
    "new_session_id",
    "reorder_interventions",
    "set_narrative",
    "toggle_plan_item",
    "update_intervention",
    "update_session_info",
]
