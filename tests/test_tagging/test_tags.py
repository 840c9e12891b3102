"""Tests for the tag registry."""

import pytest

from clinical_narrative.tagging import (
    TAG_LIBRARY,
    TAG_WEIGHTS,
    all_known_tags,
    is_context,
    is_skill,
    namespace_of,
    value_of,
    weight_of,
)


class TestTagParsing:
    """Tests for namespace and value extraction."""

    def test_namespace_and_value(self):
        assert namespace_of("motor:coordination") == "motor"
        assert value_of("motor:coordination") == "coordination"

    def test_splits_on_first_separator_only(self):
        assert namespace_of("task:a:b") == "task"
        assert value_of("task:a:b") == "a:b"

    def test_tag_without_separator(self):
        assert namespace_of("balance") == "balance"
        assert value_of("balance") == "balance"

    def test_empty_value(self):
        assert namespace_of("motor:") == "motor"
        assert value_of("motor:") == ""

    def test_hyphenated_namespace(self):
        assert namespace_of("body-part:UE") == "body-part"


class TestWeights:
    """Tests for namespace weights and classes."""

    @pytest.mark.parametrize("namespace", ["motor", "cognitive", "perceptual", "ROM", "strength", "sensory"])
    def test_skill_namespaces_weigh_two(self, namespace):
        assert weight_of(namespace) == 2

    @pytest.mark.parametrize("namespace", ["occupation", "task", "body-part"])
    def test_context_namespaces_weigh_one(self, namespace):
        assert weight_of(namespace) == 1

    def test_unknown_namespace_gets_context_weight(self):
        assert weight_of("equipment") == 1
        assert weight_of("") == 1

    def test_namespaces_are_case_sensitive(self):
        assert weight_of("rom") == 1
        assert not is_skill("rom:shoulder")

    def test_classes(self):
        assert is_skill("ROM:shoulder")
        assert not is_context("ROM:shoulder")
        assert is_context("body-part:hand")
        assert not is_skill("body-part:hand")

    def test_unknown_namespace_is_neither(self):
        assert not is_skill("equipment:walker")
        assert not is_context("equipment:walker")

    def test_weight_registry_covers_nine_namespaces(self):
        assert len(TAG_WEIGHTS) == 9


class TestTagLibrary:
    """Tests for the curated tag library."""

    def test_groups(self):
        assert list(TAG_LIBRARY) == [
            "OCCUPATION",
            "TASK",
            "BODY_PART",
            "MOTOR",
            "COGNITIVE",
            "PERCEPTUAL",
            "ROM",
            "STRENGTH",
            "SENSORY",
        ]

    def test_each_group_uses_one_registered_namespace(self):
        for group, tags in TAG_LIBRARY.items():
            namespaces = {namespace_of(tag) for tag in tags}
            assert len(namespaces) == 1, group
            assert namespaces <= set(TAG_WEIGHTS)

    def test_all_known_tags(self):
        known = all_known_tags()
        assert "motor:coordination" in known
        assert "sensory:pain" in known
        assert len(known) == sum(len(tags) for tags in TAG_LIBRARY.values())

    def test_library_is_read_only(self):
        with pytest.raises(TypeError):
            TAG_LIBRARY["EXTRA"] = ("extra:tag",)
