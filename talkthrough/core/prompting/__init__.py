"""Relationship profiles and prompt construction."""

from talkthrough.core.prompting.prompt_builder import PromptBuilder, build_prompt
from talkthrough.core.prompting.relationship_profiles import (
    RELATIONSHIP_PROFILES,
    RelationshipProfile,
    get_guidance,
    get_profile,
    get_questions,
    is_valid_category,
    list_categories,
    parse_category,
)

__all__ = [
    "PromptBuilder",
    "build_prompt",
    "RELATIONSHIP_PROFILES",
    "RelationshipProfile",
    "get_guidance",
    "get_profile",
    "get_questions",
    "is_valid_category",
    "list_categories",
    "parse_category",
]
