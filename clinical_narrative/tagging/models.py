"""Tagged vocabulary items and relevance results."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TaggedItem(BaseModel):
    """A clinical phrase (goal, impairment, cueing purpose, activity) with tags."""

    model_config = ConfigDict(frozen=True)

    value: str
    tags: tuple[str, ...] = Field(default_factory=tuple)


class RelevanceMatch(BaseModel):
    """A candidate that passed the relevance filter, with its score."""

    model_config = ConfigDict(frozen=True)

    item: TaggedItem
    score: int = Field(ge=0)
