"""Session state operations.

Every operation takes a session and returns a new one; the input is never
mutated. Operations on an unknown intervention id return the session as is.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from clinical_narrative.narrative.models import Intervention, Session, new_intervention_id


def add_intervention(session: Session, intervention: Intervention) -> Session:
    return session.model_copy(update={"interventions": [*session.interventions, intervention]})


def update_intervention(session: Session, intervention: Intervention) -> Session:
    """Replace the intervention that has the same id."""
    interventions = [
        intervention if existing.id == intervention.id else existing
        for existing in session.interventions
    ]
    return session.model_copy(update={"interventions": interventions})


def delete_intervention(session: Session, intervention_id: str) -> Session:
    interventions = [i for i in session.interventions if i.id != intervention_id]
    return session.model_copy(update={"interventions": interventions})


def duplicate_intervention(session: Session, intervention_id: str) -> Session:
    """Append a copy of an intervention under a fresh id."""
    original = next((i for i in session.interventions if i.id == intervention_id), None)
    if original is None:
        return session

    duplicated = original.model_copy(update={"id": new_intervention_id()}, deep=True)
    return add_intervention(session, duplicated)


def reorder_interventions(session: Session, start_index: int, end_index: int) -> Session:
    """Move the intervention at ``start_index`` to ``end_index``."""
    if not 0 <= start_index < len(session.interventions):
        return session

    interventions = list(session.interventions)
    moved = interventions.pop(start_index)
    end_index = max(0, min(end_index, len(interventions)))
    interventions.insert(end_index, moved)
    return session.model_copy(update={"interventions": interventions})


def toggle_plan_item(session: Session, value: str) -> Session:
    """Add a plan item, or remove it when already present."""
    if value in session.plan:
        plan = [p for p in session.plan if p != value]
    else:
        plan = [*session.plan, value]
    return session.model_copy(update={"plan": plan})


def update_session_info(
    session: Session,
    session_date: Optional[date] = None,
    total_duration: Optional[int] = None,
) -> Session:
    update: dict = {}
    if session_date is not None:
        update["session_date"] = session_date
    if total_duration is not None:
        if total_duration < 0:
            raise ValueError("total_duration must be >= 0")
        update["total_duration"] = total_duration
    return session.model_copy(update=update)


def set_narrative(session: Session, narrative: str) -> Session:
    return session.model_copy(update={"narrative": narrative})


def clear_session() -> Session:
    """Start over with a fresh, empty session."""
    return Session()
