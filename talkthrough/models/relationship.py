"""
Relationship domain models and schemas.

Closed set of relationship categories, survey question descriptors and
survey validation results.

Dependencies: pydantic
System role: Relationship metadata contracts
"""

from enum import Enum

from pydantic import Field

from talkthrough.models.common import CamelModel

# Scalar values accepted in a survey-answer mapping
SurveyValue = str | int | float | bool | None
SurveyAnswers = dict[str, SurveyValue]


class RelationshipCategory(str, Enum):
    """Conversational context governing prompt guidance and survey questions."""

    PERSONAL = "personal"
    PROFESSIONAL = "professional"
    CASUAL = "casual"


class QuestionKind(str, Enum):
    """Input widget kind for a survey question."""

    SELECT = "select"
    RANGE = "range"
    TEXTAREA = "textarea"


class SurveyQuestion(CamelModel):
    """Single survey question descriptor."""

    id: str
    question: str
    type: QuestionKind
    options: list[str] | None = None
    min: int | None = None
    max: int | None = None
    placeholder: str | None = None
    required: bool = True


class OrderedSurveyQuestion(SurveyQuestion):
    """Survey question with its 1-based position in the questionnaire."""

    order: int


class RelationshipTypeInfo(CamelModel):
    """Category with a human-readable description."""

    type: RelationshipCategory
    description: str


class RelationshipTypesResponse(CamelModel):
    """Response schema for the category listing."""

    relationship_types: list[RelationshipTypeInfo]
    total: int


class SurveyQuestionsResponse(CamelModel):
    """Response schema for a category questionnaire."""

    relationship_type: RelationshipCategory
    questions: list[OrderedSurveyQuestion]


class SurveyValidationRequest(CamelModel):
    """Request schema for validating survey answers."""

    relationship_type: str | None = None
    survey_answers: SurveyAnswers | None = None


class SurveyValidationResult(CamelModel):
    """Outcome of checking survey answers against a questionnaire."""

    is_valid: bool
    missing_fields: list[str] = Field(default_factory=list)
    invalid_fields: list[str] = Field(default_factory=list)
    relationship_type: RelationshipCategory
    message: str
