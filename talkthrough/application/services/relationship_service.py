"""
Relationship metadata service.

Lists categories, serves ordered survey questionnaires and checks survey
answers against them.

Dependencies: talkthrough.core.prompting
System role: Category and questionnaire use cases
"""

from typing import Any

from talkthrough.core.exceptions import ValidationError
from talkthrough.core.prompting.relationship_profiles import (
    RELATIONSHIP_PROFILES,
    get_profile,
    parse_category,
)
from talkthrough.models.relationship import (
    OrderedSurveyQuestion,
    RelationshipTypeInfo,
    SurveyQuestionsResponse,
    SurveyValidationResult,
)


class RelationshipService:
    """Relationship category and survey operations."""

    def list_types(self) -> list[RelationshipTypeInfo]:
        """All categories with descriptions, in declaration order."""
        return [
            RelationshipTypeInfo(type=profile.category, description=profile.description)
            for profile in RELATIONSHIP_PROFILES.values()
        ]

    def get_survey(self, category: Any) -> SurveyQuestionsResponse:
        """
        Ordered questionnaire for a category.

        Raises:
            InvalidCategoryError: If category is unknown
        """
        profile = get_profile(category)
        questions = [
            OrderedSurveyQuestion(**question.model_dump(), order=index)
            for index, question in enumerate(profile.questions, start=1)
        ]
        return SurveyQuestionsResponse(relationship_type=profile.category, questions=questions)

    def validate_answers(self, category: Any, answers: Any) -> SurveyValidationResult:
        """
        Check survey answers against the category's questionnaire.

        Required questions without a truthy answer are reported as missing;
        blank string values are reported as invalid.

        Args:
            category: Relationship category
            answers: Survey answer mapping

        Returns:
            SurveyValidationResult: Validation outcome

        Raises:
            InvalidCategoryError: If category is unknown
            ValidationError: If answers is not a mapping
        """
        relationship_type = parse_category(category)
        if not isinstance(answers, dict):
            raise ValidationError("Survey answers must be an object", field="surveyAnswers")

        profile = RELATIONSHIP_PROFILES[relationship_type]
        missing_fields = [
            question.id
            for question in profile.questions
            if question.required and not answers.get(question.id)
        ]
        invalid_fields = [
            f"{key}: cannot be empty"
            for key, value in answers.items()
            if isinstance(value, str) and not value.strip()
        ]

        is_valid = not missing_fields and not invalid_fields
        return SurveyValidationResult(
            is_valid=is_valid,
            missing_fields=missing_fields,
            invalid_fields=invalid_fields,
            relationship_type=relationship_type,
            message="Survey answers are valid" if is_valid else "Survey answers have validation errors",
        )
