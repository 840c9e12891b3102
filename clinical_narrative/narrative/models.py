"""Intervention and session models."""
from __future__ import annotations

import random
import string
import time
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

_ID_ALPHABET = string.digits + string.ascii_lowercase

# Session ids double as file names in the session store
SESSION_ID_PATTERN = r"^[A-Za-z0-9_-]+$"


def _epoch_ms() -> int:
    return int(time.time() * 1000)


def new_intervention_id() -> str:
    """Unique id like ``int_1718000000000_k3j9x0a2b``."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"int_{_epoch_ms()}_{suffix}"


def new_session_id() -> str:
    """Session id like ``session_1718000000000``."""
    return f"session_{_epoch_ms()}"


class Intervention(BaseModel):
    """One documented intervention: what was done, how, and how it went."""

    id: str = Field(default_factory=new_intervention_id)
    cpt_code: str = Field(min_length=1)
    category: str = Field(min_length=1)
    activities: list[str] = Field(default_factory=list)
    parameters: str = ""
    goal: str = ""
    assistance_level: str = ""
    cueing_types: list[str] = Field(default_factory=list)
    cueing_purpose: str = ""
    cueing_location: str = ""
    impairment: str = ""
    patient_response: str = ""

    # Clinical reasoning
    progression: str = ""
    progression_rationale: str = ""
    compensation: str = ""
    clinical_observation: str = ""
    modification: str = ""
    pain_level: Optional[int] = Field(default=None, ge=1, le=10, description="1-10 scale")


class Session(BaseModel):
    """A treatment session: interventions, plan and the generated narrative."""

    session_id: str = Field(default_factory=new_session_id, pattern=SESSION_ID_PATTERN)
    session_date: date = Field(default_factory=date.today)
    total_duration: int = Field(default=45, ge=0, description="Minutes")
    interventions: list[Intervention] = Field(default_factory=list)
    plan: list[str] = Field(default_factory=list)
    narrative: str = ""
