"""Narrative generation endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from clinical_narrative.narrative import Session, generate_narrative
from clinical_narrative.observability import get_observability_logger

router = APIRouter(tags=["narrative"])


class NarrativeResponse(BaseModel):
    narrative: str


@router.post("/narrative", response_model=NarrativeResponse)
async def build_narrative(session: Session):
    """Compose the daily-note narrative for a session."""
    obs = get_observability_logger()

    with obs.narrative_run(
        session.session_id,
        len(session.interventions),
        plan_count=len(session.plan),
        cpt_codes=sorted({i.cpt_code for i in session.interventions}),
    ) as event:
        narrative = generate_narrative(session)
        event.narrative_length = len(narrative)

    return NarrativeResponse(narrative=narrative)
