"""
Test suite for the prompt builder.

Covers context ordering, key humanization, guidance selection,
determinism and category validation.

System role: Verification of prompt construction
"""

import pytest

from talkthrough.core.exceptions import InvalidCategoryError
from talkthrough.core.prompting.prompt_builder import (
    BASE_PROMPT,
    PromptBuilder,
    build_context,
    build_prompt,
    humanize_key,
)
from talkthrough.core.prompting.relationship_profiles import get_guidance
from talkthrough.models.relationship import RelationshipCategory


class TestHumanizeKey:
    """Test suite for humanize_key."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("workingRelationship", "Working Relationship"),
            ("frequency", "Frequency"),
            ("howOftenWeTalk", "How Often We Talk"),
            ("Context", "Context"),
        ],
    )
    def test_humanize_key_should_split_camel_case_and_capitalize(self, key: str, expected: str) -> None:
        assert humanize_key(key) == expected


class TestBuildContext:
    """Test suite for build_context ordering rules."""

    def test_build_context_should_emit_category_line_first(self) -> None:
        context = build_context("casual", {"frequency": "Weekly"})

        assert context.splitlines()[0] == "- Relationship Type: casual"

    def test_build_context_should_emit_known_fields_in_fixed_order(self) -> None:
        # Arrange: deliberately scrambled insertion order
        answers = {
            "specificContext": "We argue about chores",
            "conflictType": "Communication",
            "closeness": 7,
            "duration": "1-3 years",
            "backgroundContext": "Different upbringings",
        }

        # Act
        lines = build_context("personal", answers).splitlines()

        # Assert
        assert lines == [
            "- Relationship Type: personal",
            "- Background Context: Different upbringings",
            "- Duration: 1-3 years",
            "- Closeness Level: 7/10",
            "- Main Issue: Communication",
            "- Situation: We argue about chores",
        ]

    def test_build_context_should_append_extra_keys_in_mapping_order(self) -> None:
        answers = {"zebraFact": "b", "duration": "5+ years", "alphaFact": "a"}

        lines = build_context("personal", answers).splitlines()

        assert lines[1] == "- Duration: 5+ years"
        assert lines[2:] == ["- Zebra Fact: b", "- Alpha Fact: a"]

    def test_build_context_should_skip_falsy_values(self) -> None:
        answers = {"duration": "", "closeness": 0, "specificContext": None, "extraNote": ""}

        context = build_context("personal", answers)

        assert context == "- Relationship Type: personal"


class TestBuildPrompt:
    """Test suite for build_prompt."""

    def test_build_prompt_should_include_duration_and_closeness(self, sample_answers: dict) -> None:
        prompt = build_prompt("personal", sample_answers)

        assert "Duration: 1-3 years" in prompt
        assert "Closeness Level: 7/10" in prompt
        assert "Main Issue: Communication" in prompt

    def test_build_prompt_should_start_with_base_prompt(self, sample_answers: dict) -> None:
        assert build_prompt("personal", sample_answers).startswith(BASE_PROMPT)

    @pytest.mark.parametrize("category", ["personal", "professional", "casual"])
    def test_build_prompt_should_include_category_guidance(self, category: str) -> None:
        prompt = build_prompt(category, {})

        assert get_guidance(category) in prompt
        assert f"- Relationship Type: {category}" in prompt

    def test_build_prompt_should_accept_enum_category(self) -> None:
        assert build_prompt(RelationshipCategory.CASUAL, {}) == build_prompt("casual", {})

    def test_build_prompt_should_be_deterministic(self, sample_answers: dict) -> None:
        first = build_prompt("professional", dict(sample_answers))
        second = build_prompt("professional", dict(sample_answers))

        assert first == second

    @pytest.mark.parametrize("category", ["romantic", "", None, "Personal", 3])
    def test_build_prompt_should_reject_unknown_category(self, category) -> None:
        with pytest.raises(InvalidCategoryError) as exc_info:
            build_prompt(category, {})

        assert exc_info.value.valid_categories == ["personal", "professional", "casual"]

    def test_prompt_builder_build_should_delegate_to_build_prompt(self, sample_answers: dict) -> None:
        assert PromptBuilder().build("personal", sample_answers) == build_prompt("personal", sample_answers)
