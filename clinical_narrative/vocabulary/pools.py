"""Lookup helpers over the static vocabulary pools."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from clinical_narrative.exceptions import UnknownPoolError
from clinical_narrative.tagging.models import TaggedItem
from clinical_narrative.tagging.tags import TAG_WEIGHTS, all_known_tags, namespace_of
from clinical_narrative.vocabulary.activities import TAGGED_ACTIVITIES
from clinical_narrative.vocabulary.clinical_data import ACTIVITY_OPTIONS
from clinical_narrative.vocabulary.cueing_purposes import TAGGED_CUEING_PURPOSES
from clinical_narrative.vocabulary.goals import TAGGED_GOALS
from clinical_narrative.vocabulary.impairments import TAGGED_IMPAIRMENTS

# Pools that the relevance filter ranks for the builder
POOLS: Mapping[str, tuple[TaggedItem, ...]] = MappingProxyType(
    {
        "goals": TAGGED_GOALS,
        "impairments": TAGGED_IMPAIRMENTS,
        "cueing_purposes": TAGGED_CUEING_PURPOSES,
    }
)


def get_pool(name: str) -> tuple[TaggedItem, ...]:
    """Return a filterable option pool by name.

    Raises:
        UnknownPoolError: If ``name`` is not one of ``POOLS``.
    """
    try:
        return POOLS[name]
    except KeyError:
        raise UnknownPoolError(name) from None


def get_activities(category: str) -> tuple[TaggedItem, ...]:
    """Activities offered for a category.

    Tagged activities when the category has them, otherwise the plain
    activity options wrapped as untagged items. Unknown categories give an
    empty tuple.
    """
    tagged = TAGGED_ACTIVITIES.get(category)
    if tagged is not None:
        return tagged
    return tuple(TaggedItem(value=option) for option in ACTIVITY_OPTIONS.get(category, ()))


def all_categories() -> list[str]:
    """Every category that has activities, tagged categories first."""
    categories = list(TAGGED_ACTIVITIES)
    categories.extend(c for c in ACTIVITY_OPTIONS if c not in TAGGED_ACTIVITIES)
    return categories


def _iter_tagged_items():
    for activities in TAGGED_ACTIVITIES.values():
        yield from activities
    for pool in POOLS.values():
        yield from pool


def find_unknown_tags() -> dict[str, list[str]]:
    """Tags used by the vocabulary that are missing from the tag library.

    Returns:
        Mapping of unknown tag → values of the items that use it.
    """
    known = all_known_tags()
    unknown: dict[str, list[str]] = {}
    for item in _iter_tagged_items():
        for tag in item.tags:
            if tag not in known:
                unknown.setdefault(tag, []).append(item.value)
    return unknown


def find_unregistered_namespaces() -> set[str]:
    """Namespaces used by the vocabulary that have no registered weight."""
    return {
        namespace_of(tag)
        for item in _iter_tagged_items()
        for tag in item.tags
        if namespace_of(tag) not in TAG_WEIGHTS
    }
