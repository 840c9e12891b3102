"""Option suggestions for the intervention builder.

Glue between the builder and the relevance core: derives the reference tags
from the selected activities and decides what an option picker shows.

  search      the user typed a query; every option containing it
  suggested   relevant options exist; the top ``max_suggestions``
  fallback    nothing relevant (or no activities yet); the first
              ``fallback_limit`` options in pool order
"""
from __future__ import annotations

import logging
import time
from typing import Iterable, Literal, Optional, Sequence

from pydantic import BaseModel, Field

from clinical_narrative.config import get_settings
from clinical_narrative.tagging import (
    RelevanceMatch,
    TaggedItem,
    calculate_relevance_score,
    filter_by_relevance,
)
from clinical_narrative.vocabulary.activities import TAGGED_ACTIVITIES

logger = logging.getLogger(__name__)


class ScoredOption(BaseModel):
    """An option as displayed, with its raw relevance score."""

    item: TaggedItem
    score: int = 0


class SuggestionSet(BaseModel):
    """What an option picker should display."""

    mode: Literal["search", "suggested", "fallback"]
    options: list[ScoredOption] = Field(default_factory=list)
    suggested_count: int = 0
    has_more: bool = False
    total: int = 0
    activity_tags: list[str] = Field(default_factory=list)


def derive_activity_tags(category: str, activities: Iterable[str]) -> list[str]:
    """Union of the tags of the selected activities, de-duplicated.

    Tags keep first-seen order. Activities that are not tagged under
    ``category`` contribute nothing.
    """
    selected = set(activities)
    if not category or not selected:
        return []

    tags: list[str] = []
    seen: set[str] = set()
    for activity in TAGGED_ACTIVITIES.get(category, ()):
        if activity.value not in selected:
            continue
        for tag in activity.tags:
            if tag not in seen:
                seen.add(tag)
                tags.append(tag)
    return tags


def _score_all(pool: Sequence[TaggedItem], activity_tags: Sequence[str]) -> list[ScoredOption]:
    reference = frozenset(activity_tags)
    return [
        ScoredOption(
            item=item,
            score=calculate_relevance_score(reference, item.tags) if reference else 0,
        )
        for item in pool
    ]


def _as_scored(match: RelevanceMatch) -> ScoredOption:
    return ScoredOption(item=match.item, score=match.score)


def suggest_options(
    pool: Sequence[TaggedItem],
    activity_tags: Sequence[str],
    query: str = "",
    threshold: Optional[int] = None,
    max_suggestions: Optional[int] = None,
    fallback_limit: Optional[int] = None,
) -> SuggestionSet:
    """Choose the options to display for a pool.

    Args:
        pool: Option pool in display order.
        activity_tags: Reference tags derived from the selected activities.
        query: Free-text search; case-insensitive substring match on values.
        threshold: Relevance threshold (default from settings).
        max_suggestions: Cap on suggestions shown (default from settings).
        fallback_limit: Cap on unfiltered options shown (default from settings).

    Returns:
        SuggestionSet with the display mode and options.
    """
    settings = get_settings()
    if threshold is None:
        threshold = settings.relevance_threshold
    if max_suggestions is None:
        max_suggestions = settings.max_suggestions
    if fallback_limit is None:
        fallback_limit = settings.fallback_limit

    start_time = time.time()

    suggested = filter_by_relevance(activity_tags, pool, threshold) if activity_tags else []
    # Whitespace alone does not start a search, but the query is matched as typed
    needle = query.lower()

    if query.strip():
        options = [
            option
            for option in _score_all(pool, activity_tags)
            if needle in option.item.value.lower()
        ]
        result = SuggestionSet(mode="search", options=options)
    elif suggested:
        result = SuggestionSet(
            mode="suggested",
            options=[_as_scored(m) for m in suggested[:max_suggestions]],
            has_more=len(suggested) > max_suggestions,
        )
    else:
        result = SuggestionSet(mode="fallback", options=_score_all(pool, activity_tags)[:fallback_limit])

    result.suggested_count = len(suggested)
    result.total = len(pool)
    result.activity_tags = list(activity_tags)

    logger.debug(
        "Suggestions: mode=%s shown=%d suggested=%d pool=%d duration=%.2fms",
        result.mode,
        len(result.options),
        result.suggested_count,
        result.total,
        (time.time() - start_time) * 1000,
    )
    return result
