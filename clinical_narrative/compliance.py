"""Medicare Part B medical-necessity checklist.

The therapist confirms each item before a narrative is finalized.
"""
from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, Field


class NecessityItem(BaseModel):
    """A single medical-necessity requirement."""

    id: str
    label: str
    description: str


class ChecklistResult(BaseModel):
    """Outcome of checking the confirmed items against the requirements."""

    complete: bool
    checked: list[str] = Field(default_factory=list)
    missing: list[NecessityItem] = Field(default_factory=list)


NECESSITY_ITEMS: tuple[NecessityItem, ...] = (
    NecessityItem(
        id="skilled",
        label="Skilled therapy services required",
        description="Intervention requires expertise of licensed OT/OTA",
    ),
    NecessityItem(
        id="improvement",
        label="Potential for improvement documented",
        description="Patient shows capacity to benefit from skilled intervention",
    ),
    NecessityItem(
        id="functional",
        label="Functional goals established",
        description="Treatment targets meaningful occupational performance",
    ),
    NecessityItem(
        id="reasonable",
        label="Treatment duration is reasonable",
        description="Timeframe appropriate for condition and goals",
    ),
)


def evaluate_checklist(checked_ids: Iterable[str]) -> ChecklistResult:
    """Check confirmed item ids; unknown ids are ignored."""
    confirmed = set(checked_ids)
    checked = [item.id for item in NECESSITY_ITEMS if item.id in confirmed]
    missing = [item for item in NECESSITY_ITEMS if item.id not in confirmed]
    return ChecklistResult(complete=not missing, checked=checked, missing=missing)
