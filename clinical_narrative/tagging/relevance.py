"""Contextual relevance scoring and filtering.

Ranks option pools (goals, impairments, cueing purposes) against the tags of
the activities the therapist selected:

  score = sum of namespace weights over matching candidate tags
  gate  = at least one matching tag is a skill tag

A candidate is suggested when ``score >= threshold`` and the gate passes.
The gate keeps out options that only share broad context tags, e.g. three
occupation/task matches score 3 but say nothing specific about the activity.

Everything here is a pure function of its arguments.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from clinical_narrative.tagging.models import RelevanceMatch, TaggedItem
from clinical_narrative.tagging.tags import is_skill, namespace_of, weight_of

DEFAULT_THRESHOLD = 3


def calculate_relevance_score(
    reference_tags: Iterable[str],
    candidate_tags: Sequence[str],
) -> int:
    """Sum the weights of candidate tags found in the reference set.

    Candidate tags are not de-duplicated: a tag listed twice on the
    candidate counts twice when it matches.
    """
    reference = frozenset(reference_tags)
    score = 0
    for tag in candidate_tags:
        if tag in reference:
            score += weight_of(namespace_of(tag))
    return score


def has_skill_match(
    reference_tags: Iterable[str],
    candidate_tags: Sequence[str],
) -> bool:
    """Check whether at least one matching tag is a skill tag."""
    reference = frozenset(reference_tags)
    return any(tag in reference and is_skill(tag) for tag in candidate_tags)


def filter_by_relevance(
    reference_tags: Iterable[str],
    candidates: Sequence[TaggedItem],
    threshold: int = DEFAULT_THRESHOLD,
) -> list[RelevanceMatch]:
    """Filter and rank candidates by relevance to the reference tags.

    Args:
        reference_tags: Tags of the selected activities. Treated as a set.
        candidates: Option pool in its curated display order.
        threshold: Minimum score for a candidate to be kept.

    Returns:
        Matches sorted by score, highest first. Equal scores keep the pool
        order. Empty when nothing qualifies.
    """
    reference = frozenset(reference_tags)
    if not reference:
        # Nothing can match; skip the pass over the pool
        return []

    matches: list[RelevanceMatch] = []
    for item in candidates:
        score = calculate_relevance_score(reference, item.tags)
        if score >= threshold and has_skill_match(reference, item.tags):
            matches.append(RelevanceMatch(item=item, score=score))

    # sorted() is stable, so ties stay in pool order
    return sorted(matches, key=lambda match: -match.score)
