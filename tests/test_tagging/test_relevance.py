"""Tests for relevance scoring, the skill gate and the filter."""

import pytest
from pydantic import ValidationError

from clinical_narrative.tagging import (
    DEFAULT_THRESHOLD,
    RelevanceMatch,
    TaggedItem,
    calculate_relevance_score,
    filter_by_relevance,
    has_skill_match,
)

REFERENCE = {"motor:coordination", "task:balance"}


class TestScore:
    """Tests for calculate_relevance_score."""

    def test_weighted_sum(self):
        tags = ["motor:coordination", "task:balance", "occupation:mobility"]
        assert calculate_relevance_score(REFERENCE, tags) == 3

    def test_disjoint_scores_zero(self):
        assert calculate_relevance_score(REFERENCE, ["cognitive:memory", "body-part:LE"]) == 0

    def test_empty_inputs(self):
        assert calculate_relevance_score(set(), ["motor:coordination"]) == 0
        assert calculate_relevance_score(REFERENCE, []) == 0

    def test_exact_case_sensitive_match(self):
        assert calculate_relevance_score(REFERENCE, ["Motor:coordination", "task:Balance"]) == 0

    def test_reference_order_and_duplicates_do_not_matter(self):
        tags = ["motor:coordination", "task:balance"]
        assert (
            calculate_relevance_score(["task:balance", "motor:coordination"], tags)
            == calculate_relevance_score(["motor:coordination", "task:balance", "task:balance"], tags)
            == 3
        )

    def test_candidate_duplicates_count_each_time(self):
        # A repeated candidate tag is scored once per occurrence
        assert calculate_relevance_score(REFERENCE, ["motor:coordination", "motor:coordination"]) == 4

    def test_unknown_namespace_match_scores_one(self):
        assert calculate_relevance_score({"equipment:walker"}, ["equipment:walker"]) == 1


class TestSkillGate:
    """Tests for has_skill_match."""

    def test_skill_match_passes(self):
        assert has_skill_match(REFERENCE, ["motor:coordination"])

    def test_context_only_overlap_fails(self):
        reference = {"occupation:ADL", "task:dressing", "body-part:UE"}
        assert calculate_relevance_score(reference, list(reference)) == 3
        assert not has_skill_match(reference, list(reference))

    def test_unmatched_skill_tag_does_not_count(self):
        assert not has_skill_match(REFERENCE, ["task:balance", "motor:grasp"])

    def test_unknown_namespace_never_satisfies_gate(self):
        assert not has_skill_match({"equipment:walker"}, ["equipment:walker"])

    def test_empty_inputs(self):
        assert not has_skill_match(set(), ["motor:coordination"])
        assert not has_skill_match(REFERENCE, [])


class TestFilterScenarios:
    """The reference scenarios for filter_by_relevance."""

    def test_motor_and_task_match_is_included(self):
        candidate = TaggedItem(value="A", tags=("motor:coordination", "task:balance", "occupation:mobility"))

        result = filter_by_relevance(REFERENCE, [candidate], threshold=3)

        assert result == [RelevanceMatch(item=candidate, score=3)]

    @pytest.mark.parametrize("threshold", [-5, 0, 1, 3])
    def test_context_only_match_is_excluded_at_any_threshold(self, threshold):
        candidate = TaggedItem(value="B", tags=("occupation:mobility", "task:balance", "body-part:LE"))

        assert calculate_relevance_score(REFERENCE, candidate.tags) == 1
        assert filter_by_relevance(REFERENCE, [candidate], threshold=threshold) == []

    @pytest.mark.parametrize("threshold", [1, 3, 10])
    def test_empty_reference_returns_nothing(self, threshold, fine_motor_candidates):
        assert filter_by_relevance(set(), fine_motor_candidates, threshold=threshold) == []

    def test_ties_keep_pool_order(self):
        reference = {"motor:grasp", "strength:grip"}
        first = TaggedItem(value="first", tags=("motor:grasp", "strength:grip"))
        second = TaggedItem(value="second", tags=("strength:grip", "motor:grasp"))

        result = filter_by_relevance(reference, [first, second])

        assert [m.score for m in result] == [4, 4]
        assert [m.item.value for m in result] == ["first", "second"]


class TestFilter:
    """General properties of filter_by_relevance."""

    def test_default_threshold(self):
        assert DEFAULT_THRESHOLD == 3

    def test_ranks_by_score(self, fine_motor_candidates):
        reference = {"motor:fine-motor", "motor:coordination", "occupation:ADL", "task:dressing", "body-part:UE"}

        result = filter_by_relevance(reference, fine_motor_candidates)

        assert [(m.item.value, m.score) for m in result] == [("Two skills", 4), ("Single skill", 3)]

    def test_output_respects_threshold_and_gate(self, fine_motor_candidates):
        reference = {"motor:fine-motor", "occupation:ADL", "task:dressing", "body-part:UE", "cognitive:memory"}

        for threshold in range(0, 6):
            result = filter_by_relevance(reference, fine_motor_candidates, threshold)
            scores = [m.score for m in result]
            assert scores == sorted(scores, reverse=True)
            for match in result:
                assert match.score >= threshold
                assert has_skill_match(reference, match.item.tags)

    def test_zero_threshold_lets_gate_decide(self):
        reference = {"motor:grasp"}
        candidates = [
            TaggedItem(value="grasp", tags=("motor:grasp",)),
            TaggedItem(value="context", tags=("task:feeding",)),
        ]

        result = filter_by_relevance(reference, candidates, threshold=0)

        assert [(m.item.value, m.score) for m in result] == [("grasp", 2)]

    def test_empty_pool(self):
        assert filter_by_relevance(REFERENCE, []) == []

    def test_duplicate_candidate_tags_can_lift_over_threshold(self):
        single = TaggedItem(value="single", tags=("motor:coordination",))
        doubled = TaggedItem(value="doubled", tags=("motor:coordination", "motor:coordination"))

        result = filter_by_relevance(REFERENCE, [single, doubled], threshold=3)

        assert [(m.item.value, m.score) for m in result] == [("doubled", 4)]

    def test_accepts_any_iterable_reference(self, fine_motor_candidates):
        as_set = filter_by_relevance({"motor:fine-motor", "occupation:ADL"}, fine_motor_candidates)
        as_list = filter_by_relevance(["occupation:ADL", "motor:fine-motor", "occupation:ADL"], fine_motor_candidates)
        as_generator = filter_by_relevance(
            (t for t in ["motor:fine-motor", "occupation:ADL"]), fine_motor_candidates
        )

        assert as_set == as_list == as_generator

    def test_idempotent(self, fine_motor_candidates):
        reference = {"motor:fine-motor", "motor:coordination"}

        first = filter_by_relevance(reference, fine_motor_candidates)
        second = filter_by_relevance(reference, [m.item for m in first])

        assert first == second

    def test_inputs_are_not_mutated(self, fine_motor_candidates):
        reference = ["motor:fine-motor", "occupation:ADL"]
        pool = list(fine_motor_candidates)

        filter_by_relevance(reference, pool)

        assert reference == ["motor:fine-motor", "occupation:ADL"]
        assert pool == fine_motor_candidates


class TestModels:
    """Tests for the tagged item models."""

    def test_tagged_item_is_frozen(self):
        item = TaggedItem(value="x", tags=("motor:grasp",))
        with pytest.raises(ValidationError):
            item.value = "y"

    def test_tags_coerced_to_tuple(self):
        item = TaggedItem(value="x", tags=["motor:grasp", "motor:grasp"])
        assert item.tags == ("motor:grasp", "motor:grasp")

    def test_match_score_non_negative(self):
        with pytest.raises(ValidationError):
            RelevanceMatch(item=TaggedItem(value="x"), score=-1)
