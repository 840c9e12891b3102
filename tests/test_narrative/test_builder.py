"""Tests for narrative generation."""

import pytest

from clinical_narrative.narrative import (
    EMPTY_NARRATIVE,
    OPENER_PATTERNS,
    Intervention,
    Session,
    build_intervention_narrative,
    generate_narrative,
)


def make_intervention(**kwargs) -> Intervention:
    data = {"cpt_code": "97530", "category": "Balance retraining"}
    data.update(kwargs)
    return Intervention(**data)


class TestMainClause:
    """Tests for the opening sentence."""

    def test_full_intervention(self, sample_intervention):
        text = build_intervention_narrative(sample_intervention, 0)

        assert text == (
            "Patient completed dynamic sitting balance tasks including reaching outside BOS"
            " and weight shifting in order to improve balance for ADLs."
            " X3 trials."
            " CGA and verbal/tactile at trunk for postural alignment, 2/2 decreased trunk control."
            " Patient verbalized understanding."
        )

    @pytest.mark.parametrize(
        "index,start",
        [
            (0, "Patient completed balance retraining."),
            (1, "Patient performed balance retraining."),
            (2, "Patient instructed in balance retraining."),
            (3, "Therapist facilitated patient's engagement in balance retraining."),
            (4, "Patient engaged in balance retraining."),
            (5, "Patient completed balance retraining."),
        ],
    )
    def test_openers_cycle(self, index, start):
        assert build_intervention_narrative(make_intervention(), index) == start

    def test_opener_count(self):
        assert len(OPENER_PATTERNS) == 5

    def test_one_activity(self):
        text = build_intervention_narrative(make_intervention(activities=["single leg stance"]), 0)
        assert text == "Patient completed balance retraining single leg stance."

    def test_three_activities_use_serial_comma(self):
        text = build_intervention_narrative(make_intervention(activities=["a", "b", "c"]), 0)
        assert text == "Patient completed balance retraining including a, b, and c."

    def test_observation_and_goal(self):
        text = build_intervention_narrative(
            make_intervention(clinical_observation="with good trunk control", goal="to decrease fall risk"),
            0,
        )
        assert text == "Patient completed balance retraining, with good trunk control in order to decrease fall risk."

    def test_goal_without_leading_to(self):
        text = build_intervention_narrative(make_intervention(goal="improve safety"), 0)
        assert text.endswith("in order to improve safety.")


class TestAssistance:
    """Tests for the assistance and cueing sentence."""

    def test_level_without_cueing(self):
        text = build_intervention_narrative(make_intervention(assistance_level="Minimal Assistance"), 0)
        assert text.endswith(" Min A required.")

    def test_independent_omits_level(self):
        text = build_intervention_narrative(
            make_intervention(assistance_level="Independent", cueing_types=["verbal"], cueing_purpose="for pacing"),
            0,
        )
        assert text.endswith(" verbal for pacing.")
        assert " I and" not in text

    def test_independent_without_cueing_adds_nothing(self):
        text = build_intervention_narrative(make_intervention(assistance_level="Independent"), 0)
        assert text == "Patient completed balance retraining."

    def test_unknown_level_omits_level(self):
        text = build_intervention_narrative(
            make_intervention(assistance_level="Some help", cueing_types=["visual"]), 0
        )
        assert text.endswith(" visual.")

    def test_compensation_and_impairment(self):
        text = build_intervention_narrative(
            make_intervention(
                assistance_level="Moderate Assistance",
                compensation="with trunk lean to L",
                impairment="impaired balance",
            ),
            0,
        )
        assert text.endswith(" Mod A required with trunk lean to L, 2/2 impaired balance.")


class TestProgression:
    """Tests for the clinical reasoning sentence."""

    def test_progression_with_rationale_and_pain(self):
        text = build_intervention_narrative(
            make_intervention(
                progression="Decreased reps",
                progression_rationale="to maintain form",
                pain_level=4,
            ),
            0,
        )
        assert text.endswith(" Decreased reps to maintain form with patient complaining of 4/10 pain.")

    def test_pain_as_rationale(self):
        text = build_intervention_narrative(make_intervention(progression="Rest break provided", pain_level=6), 0)
        assert text.endswith(" Rest break provided due to patient complaining of 6/10 pain.")

    def test_progression_only(self):
        text = build_intervention_narrative(make_intervention(progression="Increased resistance"), 0)
        assert text.endswith(" Increased resistance.")

    def test_pain_only(self):
        text = build_intervention_narrative(make_intervention(pain_level=2), 0)
        assert text.endswith(" Patient reported 2/10 pain during activity.")


class TestGenerateNarrative:
    """Tests for whole-session narratives."""

    def test_empty_session(self):
        assert generate_narrative(Session()) == EMPTY_NARRATIVE

    def test_empty_session_ignores_plan(self):
        assert generate_narrative(Session(plan=["Continue current POC"])) == EMPTY_NARRATIVE

    def test_session_with_plan(self, sample_session):
        text = generate_narrative(sample_session)

        assert text.startswith("Patient completed dynamic sitting balance tasks")
        assert text.endswith(" Patient verbalized understanding. Plan: Continue current POC.")

    def test_interventions_joined_with_rotating_openers(self):
        session = Session(
            interventions=[make_intervention(), make_intervention(category="Core stabilization exercises")],
            plan=["Continue current POC", "Progress HEP"],
        )

        assert generate_narrative(session) == (
            "Patient completed balance retraining."
            " Patient performed core stabilization exercises."
            " Plan: Continue current POC; Progress HEP."
        )
