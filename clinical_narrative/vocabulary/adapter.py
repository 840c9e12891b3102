"""Adapter from the tagged pools to the flat option lists of the classic UI.

The classic builder wants every option with a stable id and a display label.
Ids are positional: ``<category>-<i>`` for activities, ``goal-<i>``,
``impairment-<i>`` and ``cueing-<i>`` for the flat pools.
"""
from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, Field

from clinical_narrative.tagging.models import TaggedItem
from clinical_narrative.vocabulary.activities import TAGGED_ACTIVITIES
from clinical_narrative.vocabulary.cueing_purposes import TAGGED_CUEING_PURPOSES
from clinical_narrative.vocabulary.goals import TAGGED_GOALS
from clinical_narrative.vocabulary.impairments import TAGGED_IMPAIRMENTS


class ClassicOption(TaggedItem):
    """Tagged item with a stable id and a display label."""

    id: str
    label: str


class ClassicData(BaseModel):
    """All vocabulary pools in classic-UI shape."""

    activities: dict[str, list[ClassicOption]] = Field(default_factory=dict)
    goals: list[ClassicOption] = Field(default_factory=list)
    impairments: list[ClassicOption] = Field(default_factory=list)
    cueing_purposes: list[ClassicOption] = Field(default_factory=list)


def to_classic_options(prefix: str, items: Sequence[TaggedItem]) -> list[ClassicOption]:
    """Wrap items as classic options with ids ``<prefix>-<index>``."""
    return [
        ClassicOption(id=f"{prefix}-{index}", label=item.value, value=item.value, tags=item.tags)
        for index, item in enumerate(items)
    ]


def adapt_data_for_classic_ui() -> ClassicData:
    """Transform every vocabulary pool for the classic builder."""
    return ClassicData(
        activities={
            category: to_classic_options(category, activities)
            for category, activities in TAGGED_ACTIVITIES.items()
        },
        goals=to_classic_options("goal", TAGGED_GOALS),
        impairments=to_classic_options("impairment", TAGGED_IMPAIRMENTS),
        cueing_purposes=to_classic_options("cueing", TAGGED_CUEING_PURPOSES),
    )
