"""CPT codes available when building an intervention.

Each intervention starts from one of these timed codes; the code selects the
list of categories offered (see ``CATEGORIES_BY_CPT``).
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from clinical_narrative.vocabulary.clinical_data import CATEGORIES_BY_CPT


class CPTCode(BaseModel):
    """A single CPT billing code with metadata."""

    code: str
    description: str
    category: str = "timed"  # timed | untimed | eval
    default_minutes: int = 15


# ── CPT Code Reference Table ─────────────────────────────────────────────────

CPT_CODES: dict[str, CPTCode] = {
    "97530": CPTCode(code="97530", description="Therapeutic Activities"),
    "97535": CPTCode(code="97535", description="Self-Care/Home Mgmt"),
    "97110": CPTCode(code="97110", description="Therapeutic Exercise"),
    "97112": CPTCode(code="97112", description="Neuromuscular Re-ed"),
}


def get_cpt_code(code: str) -> Optional[CPTCode]:
    """Look up a CPT code, or None when it is not offered."""
    return CPT_CODES.get(code)


def categories_for(code: str) -> tuple[str, ...]:
    """Intervention categories offered under a CPT code."""
    return CATEGORIES_BY_CPT.get(code, ())


def cpt_for_category(category: str) -> Optional[str]:
    """Find the CPT code whose category list contains ``category``."""
    for code, categories in CATEGORIES_BY_CPT.items():
        if category in categories:
            return code
    return None
