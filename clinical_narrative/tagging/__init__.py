"""Tagging module: tag registry and contextual relevance filtering."""

from clinical_narrative.tagging.models import RelevanceMatch, TaggedItem
from clinical_narrative.tagging.relevance import (
    DEFAULT_THRESHOLD,
    calculate_relevance_score,
    filter_by_relevance,
    has_skill_match,
)
from clinical_narrative.tagging.tags import (
    TAG_LIBRARY,
    TAG_WEIGHTS,
    all_known_tags,
    is_context,
    is_skill,
    namespace_of,
    value_of,
    weight_of,
)

__all__ = [
    "DEFAULT_THRESHOLD",
    "RelevanceMatch",
    "TAG_LIBRARY",
    "TAG_WEIGHTS",
    "TaggedItem",
    "all_known_tags",
    "calculate_relevance_score",
    "filter_by_relevance",
    "has_skill_match",
    "is_context",
    "is_skill",
    "namespace_of",
    "value_of",
    "weight_of",
]
