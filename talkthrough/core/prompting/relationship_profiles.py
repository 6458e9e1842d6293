"""
Relationship profile table.

Static guidance text and ordered survey questions for each relationship
category. The optional background-context question is shared by every profile.

Dependencies: talkthrough.models.relationship, talkthrough.core.exceptions
System role: Category metadata and guidance lookup
"""

from dataclasses import dataclass
from typing import Any

from talkthrough.core.exceptions import InvalidCategoryError
from talkthrough.models.relationship import (
    QuestionKind,
    RelationshipCategory,
    SurveyQuestion,
)

BACKGROUND_CONTEXT_QUESTION = SurveyQuestion(
    id="backgroundContext",
    question="Any relevant background about you or them? (optional)",
    type=QuestionKind.TEXTAREA,
    placeholder="e.g., different backgrounds, communication styles, family expectations, etc.",
    required=False,
)


@dataclass(frozen=True)
class RelationshipProfile:
    """Guidance and questionnaire for one relationship category."""

    category: RelationshipCategory
    description: str
    guidance: str
    questions: tuple[SurveyQuestion, ...]

    def __post_init__(self) -> None:
        ids = [question.id for question in self.questions]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate question ids in {self.category.value} profile")


PERSONAL_PROFILE = RelationshipProfile(
    category=RelationshipCategory.PERSONAL,
    description="Family, friends, and romantic partners",
    guidance="""Personal Relationship Guidance:
- Focus on emotional connection, trust, and long-term relationship health
- Consider the depth of the relationship (family bonds, romantic intimacy, friendship history)
- Balance honesty with maintaining the personal connection
- Address both parties' emotional needs and feelings
- Suggest approaches that strengthen rather than damage the personal bond""",
    questions=(
        SurveyQuestion(
            id="relationshipType",
            question="What type of personal relationship is this?",
            type=QuestionKind.SELECT,
            options=["Romantic partner", "Family member", "Close friend", "Friend"],
        ),
        SurveyQuestion(
            id="duration",
            question="How long have you known each other?",
            type=QuestionKind.SELECT,
            options=["Less than 6 months", "6-12 months", "1-3 years", "3-5 years", "5+ years"],
        ),
        SurveyQuestion(
            id="closeness",
            question="How close are you? (1-10)",
            type=QuestionKind.RANGE,
            min=1,
            max=10,
        ),
        SurveyQuestion(
            id="conflictType",
            question="What's the main challenge?",
            type=QuestionKind.SELECT,
            options=[
                "Communication",
                "Trust issues",
                "Boundaries",
                "Values/expectations",
                "Time/attention",
                "Life changes",
                "Other",
            ],
        ),
        SurveyQuestion(
            id="specificContext",
            question="Describe the specific situation you need help with",
            type=QuestionKind.TEXTAREA,
            placeholder="e.g., We've been having issues with...",
        ),
        BACKGROUND_CONTEXT_QUESTION,
    ),
)

PROFESSIONAL_PROFILE = RelationshipProfile(
    category=RelationshipCategory.PROFESSIONAL,
    description="Workplace relationships with bosses, colleagues, and clients",
    guidance="""Professional Relationship Guidance:
- Emphasize professionalism, boundaries, and career implications
- Consider workplace dynamics, hierarchy, and business objectives
- Focus on clear, respectful communication that maintains working relationships
- Address both personal and business concerns appropriately
- Suggest diplomatic approaches that protect professional reputation""",
    questions=(
        SurveyQuestion(
            id="workingRelationship",
            question="What's your working relationship?",
            type=QuestionKind.SELECT,
            options=[
                "They are my boss",
                "We are peers/colleagues",
                "They report to me",
                "Client/Customer",
                "Vendor/Supplier",
                "Other",
            ],
        ),
        SurveyQuestion(
            id="duration",
            question="How long have you worked together?",
            type=QuestionKind.SELECT,
            options=["Less than 1 month", "1-6 months", "6-12 months", "1-2 years", "2+ years"],
        ),
        SurveyQuestion(
            id="conflictType",
            question="What's the issue?",
            type=QuestionKind.SELECT,
            options=[
                "Communication style",
                "Work performance",
                "Deadlines/expectations",
                "Team dynamics",
                "Authority/hierarchy",
                "Other",
            ],
        ),
        SurveyQuestion(
            id="specificContext",
            question="Describe the workplace context",
            type=QuestionKind.TEXTAREA,
            placeholder="e.g., During meetings they...",
        ),
        BACKGROUND_CONTEXT_QUESTION,
    ),
)

CASUAL_PROFILE = RelationshipProfile(
    category=RelationshipCategory.CASUAL,
    description="Acquaintances, neighbors, and activity buddies",
    guidance="""Casual Relationship Guidance:
- Keep interactions appropriate for the relationship level
- Focus on polite, respectful communication without overstepping
- Consider social norms and expectations in casual settings
- Address issues while maintaining comfortable social interactions
- Suggest light, friendly approaches that don't create awkwardness""",
    questions=(
        SurveyQuestion(
            id="context",
            question="How do you know this person?",
            type=QuestionKind.SELECT,
            options=[
                "Neighbor",
                "Gym/activity buddy",
                "Classmate",
                "Social acquaintance",
                "Online community",
                "Through mutual friends",
                "Other",
            ],
        ),
        SurveyQuestion(
            id="frequency",
            question="How often do you interact?",
            type=QuestionKind.SELECT,
            options=["Daily", "Weekly", "Monthly", "Occasionally", "Rarely"],
        ),
        SurveyQuestion(
            id="conflictType",
            question="What's the issue?",
            type=QuestionKind.SELECT,
            options=[
                "Awkward interaction",
                "Social expectations",
                "Communication barrier",
                "Boundary confusion",
                "Annoying behavior",
                "Other",
            ],
        ),
        SurveyQuestion(
            id="specificContext",
            question="Describe the situation",
            type=QuestionKind.TEXTAREA,
            placeholder="e.g., When I see them at the gym...",
        ),
        BACKGROUND_CONTEXT_QUESTION,
    ),
)

RELATIONSHIP_PROFILES: dict[RelationshipCategory, RelationshipProfile] = {
    profile.category: profile
    for profile in (PERSONAL_PROFILE, PROFESSIONAL_PROFILE, CASUAL_PROFILE)
}


def list_categories() -> list[str]:
    """Return the supported category values in declaration order."""
    return [category.value for category in RelationshipCategory]


def is_valid_category(value: Any) -> bool:
    """Check whether a value names a supported category."""
    return isinstance(value, str) and value in list_categories()


def parse_category(value: Any) -> RelationshipCategory:
    """
    Convert a raw value into a RelationshipCategory.

    Args:
        value: Caller-supplied category (string or enum member)

    Returns:
        RelationshipCategory: Matching category

    Raises:
        InvalidCategoryError: If value is missing or unrecognized
    """
    if isinstance(value, RelationshipCategory):
        return value
    if not is_valid_category(value):
        raise InvalidCategoryError(value, list_categories())
    return RelationshipCategory(value)


def get_profile(category: Any) -> RelationshipProfile:
    """Look up a profile, raising InvalidCategoryError for unknown categories."""
    return RELATIONSHIP_PROFILES[parse_category(category)]


def get_questions(category: Any) -> list[SurveyQuestion]:
    """Ordered survey questions for a category."""
    return list(get_profile(category).questions)


def get_guidance(category: Any) -> str:
    """
    Guidance block for a category.

    Unrecognized categories fall back to the personal guidance.
    """
    if is_valid_category(category) or isinstance(category, RelationshipCategory):
        return RELATIONSHIP_PROFILES[RelationshipCategory(category)].guidance
    return PERSONAL_PROFILE.guidance
