"""Medical-necessity checklist endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from clinical_narrative.compliance import NECESSITY_ITEMS, ChecklistResult, NecessityItem, evaluate_checklist

router = APIRouter(prefix="/compliance", tags=["compliance"])


class ChecklistRequest(BaseModel):
    checked: list[str] = Field(default_factory=list)


@router.get("/items", response_model=list[NecessityItem])
async def list_items():
    """The medical-necessity requirements, in display order."""
    return list(NECESSITY_ITEMS)


@router.post("/checklist", response_model=ChecklistResult)
async def check(request: ChecklistRequest):
    """Report which requirements are still unconfirmed."""
    return evaluate_checklist(request.checked)
