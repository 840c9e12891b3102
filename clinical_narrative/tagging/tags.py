"""Clinical tag model and namespace registry.

Tags are ``namespace:value`` strings attached to activities, goals,
impairments and cueing purposes. Namespaces fall into two classes:

  Context (weight 1): occupation, task, body-part
  Skill   (weight 2): motor, cognitive, perceptual, ROM, strength, sensory

Unregistered namespaces score like context tags but are never skill tags.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

TAG_SEPARATOR = ":"

CONTEXT_WEIGHT = 1
SKILL_WEIGHT = 2
DEFAULT_WEIGHT = CONTEXT_WEIGHT

CONTEXT_NAMESPACES: frozenset[str] = frozenset({"occupation", "task", "body-part"})
SKILL_NAMESPACES: frozenset[str] = frozenset(
    {"motor", "cognitive", "perceptual", "ROM", "strength", "sensory"}
)

TAG_WEIGHTS: Mapping[str, int] = MappingProxyType(
    {
        **{ns: CONTEXT_WEIGHT for ns in CONTEXT_NAMESPACES},
        **{ns: SKILL_WEIGHT for ns in SKILL_NAMESPACES},
    }
)


# ── Tag Library ──────────────────────────────────────────────────────────────
# Curated vocabulary of known tags, grouped by namespace.

TAG_LIBRARY: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "OCCUPATION": (
            "occupation:ADL",
            "occupation:BADL",
            "occupation:IADL",
            "occupation:mobility",
            "occupation:exercise",
            "occupation:functional-activity",
        ),
        "TASK": (
            "task:dressing",
            "task:bathing",
            "task:grooming",
            "task:feeding",
            "task:toileting",
            "task:transfer",
            "task:sit-to-stand",
            "task:bed-mobility",
            "task:wheelchair-mobility",
            "task:balance",
            "task:strengthening",
            "task:stretching",
            "task:endurance",
            "task:coordination",
        ),
        "BODY_PART": (
            "body-part:UE",
            "body-part:LE",
            "body-part:bilateral",
            "body-part:unilateral",
            "body-part:shoulder",
            "body-part:elbow",
            "body-part:wrist",
            "body-part:hand",
            "body-part:fingers",
            "body-part:hip",
            "body-part:knee",
            "body-part:ankle",
            "body-part:foot",
            "body-part:trunk",
            "body-part:core",
            "body-part:pelvis",
            "body-part:spine",
        ),
        "MOTOR": (
            "motor:coordination",
            "motor:motor-planning",
            "motor:praxis",
            "motor:gross-motor",
            "motor:fine-motor",
            "motor:bilateral-integration",
            "motor:in-hand-manipulation",
            "motor:grasp",
            "motor:pinch",
            "motor:release",
            "motor:weight-bearing",
            "motor:weight-shifting",
            "motor:postural-control",
            "motor:righting-reactions",
            "motor:protective-reactions",
        ),
        "COGNITIVE": (
            "cognitive:sequencing",
            "cognitive:attention",
            "cognitive:memory",
            "cognitive:problem-solving",
            "cognitive:initiation",
            "cognitive:task-completion",
            "cognitive:working-memory",
            "cognitive:executive-function",
            "cognitive:safety-awareness",
            "cognitive:judgment",
        ),
        "PERCEPTUAL": (
            "perceptual:body-scheme",
            "perceptual:spatial-awareness",
            "perceptual:visual-motor",
            "perceptual:proprioception",
            "perceptual:vestibular",
            "perceptual:depth-perception",
            "perceptual:figure-ground",
            "perceptual:neglect",
        ),
        "ROM": (
            "ROM:shoulder",
            "ROM:elbow",
            "ROM:wrist",
            "ROM:hip",
            "ROM:knee",
            "ROM:ankle",
            "ROM:trunk",
            "ROM:cervical",
            "ROM:lumbar",
            "ROM:flexibility",
        ),
        "STRENGTH": (
            "strength:UE",
            "strength:LE",
            "strength:grip",
            "strength:pinch",
            "strength:core",
            "strength:shoulder",
            "strength:hip",
            "strength:knee",
            "strength:ankle",
            "strength:endurance",
            "strength:power",
            "strength:muscle-activation",
        ),
        "SENSORY": (
            "sensory:tactile",
            "sensory:proprioception",
            "sensory:vestibular",
            "sensory:visual",
            "sensory:auditory",
            "sensory:pain",
            "sensory:temperature",
        ),
    }
)


def namespace_of(tag: str) -> str:
    """Return the namespace of a tag.

    Example: ``"motor:coordination"`` → ``"motor"``. A tag without a
    separator is its own namespace.
    """
    return tag.partition(TAG_SEPARATOR)[0]


def value_of(tag: str) -> str:
    """Return the value of a tag, or the tag itself when it has no separator.

    Example: ``"motor:coordination"`` → ``"coordination"``.
    """
    namespace, sep, value = tag.partition(TAG_SEPARATOR)
    if not sep:
        return tag
    return value


def weight_of(namespace: str) -> int:
    """Scoring weight for a namespace (unknown namespaces get the default)."""
    return TAG_WEIGHTS.get(namespace, DEFAULT_WEIGHT)


def is_context(tag: str) -> bool:
    """Check if a tag belongs to a context namespace (weight 1)."""
    return namespace_of(tag) in CONTEXT_NAMESPACES


def is_skill(tag: str) -> bool:
    """Check if a tag belongs to a skill namespace (weight 2)."""
    return namespace_of(tag) in SKILL_NAMESPACES


def all_known_tags() -> frozenset[str]:
    """Every tag in the library, flattened."""
    return frozenset(tag for group in TAG_LIBRARY.values() for tag in group)
