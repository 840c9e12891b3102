"""Suggestion endpoints backed by the contextual relevance filter."""

import time
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from clinical_narrative.config import get_settings
from clinical_narrative.exceptions import UnknownPoolError
from clinical_narrative.observability import get_observability_logger
from clinical_narrative.suggestions import SuggestionSet, derive_activity_tags, suggest_options
from clinical_narrative.tagging import RelevanceMatch, TaggedItem, filter_by_relevance
from clinical_narrative.vocabulary import get_pool

router = APIRouter(tags=["suggestions"])


class SuggestionRequest(BaseModel):
    """Current builder selection for one option picker."""

    category: str = ""
    activities: list[str] = Field(default_factory=list)
    query: str = ""
    threshold: Optional[int] = None


class RelevanceRequest(BaseModel):
    """Direct call into the relevance filter."""

    reference_tags: list[str] = Field(default_factory=list)
    candidates: list[TaggedItem] = Field(default_factory=list)
    threshold: Optional[int] = None


@router.post("/suggestions/{pool}", response_model=SuggestionSet)
async def suggest(pool: str, request: SuggestionRequest):
    """Options to show for ``pool`` given the selected activities."""
    try:
        items = get_pool(pool)
    except UnknownPoolError as e:
        raise HTTPException(status_code=404, detail=str(e))

    threshold = request.threshold
    if threshold is None:
        threshold = get_settings().relevance_threshold

    start_time = time.time()
    activity_tags = derive_activity_tags(request.category, request.activities)
    result = suggest_options(items, activity_tags, query=request.query, threshold=threshold)

    get_observability_logger().log_suggestions(
        pool=pool,
        mode=result.mode,
        pool_size=result.total,
        suggested_count=result.suggested_count,
        shown_count=len(result.options),
        threshold=threshold,
        category=request.category or None,
        activity_count=len(request.activities),
        tag_count=len(activity_tags),
        top_score=max((o.score for o in result.options), default=None),
        query=request.query or None,
        duration_ms=(time.time() - start_time) * 1000,
    )

    return result


@router.post("/relevance", response_model=list[RelevanceMatch])
async def relevance(request: RelevanceRequest):
    """Rank arbitrary candidates against a reference tag set."""
    threshold = request.threshold
    if threshold is None:
        threshold = get_settings().relevance_threshold
    return filter_by_relevance(request.reference_tags, request.candidates, threshold)
