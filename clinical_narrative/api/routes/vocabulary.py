"""Vocabulary endpoints: the static data that feeds the builder form."""

from fastapi import APIRouter, HTTPException

from clinical_narrative.exceptions import UnknownPoolError
from clinical_narrative.tagging import TaggedItem
from clinical_narrative.vocabulary import (
    ACTIVITY_MODIFICATIONS,
    ASSISTANCE_LEVELS,
    CATEGORIES_BY_CPT,
    CLINICAL_OBSERVATIONS,
    COMPENSATION_PATTERNS,
    CPT_CODES,
    CUEING_LOCATIONS,
    CUEING_TYPES,
    PARAMETERS,
    PATIENT_RESPONSES,
    PLAN_OPTIONS,
    POOLS,
    PROGRESSION_OPTIONS,
    PROGRESSION_RATIONALE,
    ClassicData,
    adapt_data_for_classic_ui,
    all_categories,
    get_activities,
    get_pool,
)

router = APIRouter(prefix="/vocabulary", tags=["vocabulary"])


@router.get("")
async def get_vocabulary() -> dict:
    """Overview of the pools plus the untagged option lists."""
    return {
        "pools": {name: len(pool) for name, pool in POOLS.items()},
        "categories": all_categories(),
        "cpt_codes": [code.model_dump() for code in CPT_CODES.values()],
        "categories_by_cpt": {code: list(cats) for code, cats in CATEGORIES_BY_CPT.items()},
        "options": {
            "parameters": list(PARAMETERS),
            "assistance_levels": [level._asdict() for level in ASSISTANCE_LEVELS],
            "cueing_types": list(CUEING_TYPES),
            "cueing_locations": list(CUEING_LOCATIONS),
            "patient_responses": list(PATIENT_RESPONSES),
            "plan_options": list(PLAN_OPTIONS),
            "progression_options": list(PROGRESSION_OPTIONS),
            "progression_rationale": list(PROGRESSION_RATIONALE),
            "compensation_patterns": list(COMPENSATION_PATTERNS),
            "clinical_observations": list(CLINICAL_OBSERVATIONS),
            "activity_modifications": list(ACTIVITY_MODIFICATIONS),
        },
    }


@router.get("/activities/{category}", response_model=list[TaggedItem])
async def list_activities(category: str):
    """Activities offered for an intervention category."""
    activities = get_activities(category)
    if not activities:
        raise HTTPException(status_code=404, detail=f"Unknown category: {category}")
    return list(activities)


@router.get("/classic", response_model=ClassicData)
async def classic_vocabulary():
    """Every pool with positional ids, for the classic builder."""
    return adapt_data_for_classic_ui()


@router.get("/{pool}", response_model=list[TaggedItem])
async def list_pool(pool: str):
    """All items of a filterable pool, in display order."""
    try:
        return list(get_pool(pool))
    except UnknownPoolError as e:
        raise HTTPException(status_code=404, detail=str(e))
