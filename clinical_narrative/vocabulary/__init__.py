"""Vocabulary module: static clinical phrase pools, loaded once at import."""

from clinical_narrative.vocabulary.activities import TAGGED_ACTIVITIES
from clinical_narrative.vocabulary.adapter import (
    ClassicData,
    ClassicOption,
    adapt_data_for_classic_ui,
)
from clinical_narrative.vocabulary.clinical_data import (
    ACTIVITY_MODIFICATIONS,
    ACTIVITY_OPTIONS,
    ASSISTANCE_LEVELS,
    CATEGORIES_BY_CPT,
    CLINICAL_OBSERVATIONS,
    COMPENSATION_PATTERNS,
    CUEING_LOCATIONS,
    CUEING_TYPES,
    PARAMETERS,
    PATIENT_RESPONSES,
    PLAN_OPTIONS,
    PROGRESSION_OPTIONS,
    PROGRESSION_RATIONALE,
    AssistanceLevel,
    assistance_abbrev,
)
from clinical_narrative.vocabulary.cpt import CPT_CODES, CPTCode, categories_for, get_cpt_code
from clinical_narrative.vocabulary.cueing_purposes import TAGGED_CUEING_PURPOSES
from clinical_narrative.vocabulary.goals import TAGGED_GOALS
from clinical_narrative.vocabulary.impairments import TAGGED_IMPAIRMENTS
from clinical_narrative.vocabulary.pools import (
    POOLS,
    all_categories,
    find_unknown_tags,
    find_unregistered_namespaces,
    get_activities,
    get_pool,
)

__all__ = [
    "ACTIVITY_MODIFICATIONS",
    "ACTIVITY_OPTIONS",
    "ASSISTANCE_LEVELS",
    "AssistanceLevel",
    "CATEGORIES_BY_CPT",
    "CLINICAL_OBSERVATIONS",
    "COMPENSATION_PATTERNS",
    "CPTCode",
    "CPT_CODES",
    "CUEING_LOCATIONS",
    "CUEING_TYPES",
    "ClassicData",
    "ClassicOption",
    "PARAMETERS",
    "PATIENT_RESPONSES",
    "PLAN_OPTIONS",
    "POOLS",
    "PROGRESSION_OPTIONS",
    "PROGRESSION_RATIONALE",
    "TAGGED_ACTIVITIES",
    "TAGGED_CUEING_PURPOSES",
    "TAGGED_GOALS",
    "TAGGED_IMPAIRMENTS",
    "adapt_data_for_classic_ui",
    "all_categories",
    "assistance_abbrev",
    "categories_for",
    "find_unknown_tags",
    "find_unregistered_namespaces",
    "get_activities",
    "get_cpt_code",
    "get_pool",
]
