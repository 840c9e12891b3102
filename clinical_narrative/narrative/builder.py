"""Narrative generation from documented interventions.

Each intervention becomes a few short sentences in daily-note style:

  main clause     "Patient completed dynamic sitting balance tasks including
                   A and B, <observation> in order to <goal>."
  parameters      "X3 trials."
  assistance      "CGA and min verbal cues at trunk for sequencing, 2/2 <impairment>."
  progression     "<progression> <rationale> with patient complaining of 4/10 pain."
  response        "Patient verbalized understanding."

Interventions are joined into one paragraph, followed by the plan.
"""
from __future__ import annotations

from typing import Sequence

from clinical_narrative.narrative.models import Intervention, Session
from clinical_narrative.vocabulary.clinical_data import INDEPENDENT, assistance_abbrev

EMPTY_NARRATIVE = "Add interventions to generate narrative..."

# Openers rotate so consecutive interventions do not all read the same
OPENER_PATTERNS: tuple[str, ...] = (
    "Patient completed",
    "Patient performed",
    "Patient instructed in",
    "Therapist facilitated patient",
    "Patient engaged in",
)
_FACILITATED = "Therapist facilitated patient"


def _join_activities(activities: Sequence[str]) -> str:
    if not activities:
        return ""
    if len(activities) == 1:
        return f" {activities[0]}"
    if len(activities) == 2:
        return f" including {activities[0]} and {activities[1]}"
    return f" including {', '.join(activities[:-1])}, and {activities[-1]}"


def _goal_clause(goal: str) -> str:
    purpose = goal[3:] if goal.startswith("to ") else goal
    return f" in order to {purpose}"


def _main_clause(intervention: Intervention, index: int) -> str:
    opener = OPENER_PATTERNS[index % len(OPENER_PATTERNS)]
    category = intervention.category.lower()

    if opener == _FACILITATED:
        clause = f"{opener}'s engagement in {category}"
    else:
        clause = f"{opener} {category}"

    clause += _join_activities(intervention.activities)
    if intervention.clinical_observation:
        clause += f", {intervention.clinical_observation}"
    if intervention.goal:
        clause += _goal_clause(intervention.goal)
    return clause + "."


def _parameter_sentence(parameters: str) -> str:
    if not parameters:
        return ""
    return f" {parameters[0].upper()}{parameters[1:]}."


def _cueing_detail(intervention: Intervention) -> str:
    detail = "/".join(intervention.cueing_types)
    if intervention.cueing_location:
        detail += f" {intervention.cueing_location}"
    if intervention.cueing_purpose:
        detail += f" {intervention.cueing_purpose}"
    return detail


def _assistance_sentence(intervention: Intervention) -> str:
    abbrev = assistance_abbrev(intervention.assistance_level)
    sentence = ""

    if abbrev and intervention.assistance_level != INDEPENDENT:
        if intervention.cueing_types:
            sentence = f" {abbrev} and {_cueing_detail(intervention)}"
        else:
            sentence = f" {abbrev} required"
    elif intervention.cueing_types:
        sentence = f" {_cueing_detail(intervention)}"

    if intervention.compensation:
        sentence += f" {intervention.compensation}"
    if intervention.impairment:
        sentence += f", 2/2 {intervention.impairment}"

    return sentence + "." if sentence else ""


def _progression_sentence(intervention: Intervention) -> str:
    pain = intervention.pain_level

    if intervention.progression:
        sentence = f" {intervention.progression}"
        if intervention.progression_rationale:
            sentence += f" {intervention.progression_rationale}"
        if pain:
            # Pain either adds to the stated rationale or is the rationale
            joiner = "with" if intervention.progression_rationale else "due to"
            sentence += f" {joiner} patient complaining of {pain}/10 pain"
        return sentence + "."

    if pain:
        return f" Patient reported {pain}/10 pain during activity."
    return ""


def _response_sentence(response: str) -> str:
    return f" Patient {response}." if response else ""


def build_intervention_narrative(intervention: Intervention, index: int) -> str:
    """Render one intervention; ``index`` picks the opener."""
    return (
        _main_clause(intervention, index)
        + _parameter_sentence(intervention.parameters)
        + _assistance_sentence(intervention)
        + _progression_sentence(intervention)
        + _response_sentence(intervention.patient_response)
    )


def generate_narrative(session: Session) -> str:
    """Render the whole session as one flowing paragraph plus the plan."""
    if not session.interventions:
        return EMPTY_NARRATIVE

    output = " ".join(
        build_intervention_narrative(intervention, index)
        for index, intervention in enumerate(session.interventions)
    )

    if session.plan:
        output += f" Plan: {'; '.join(session.plan)}."

    return output
