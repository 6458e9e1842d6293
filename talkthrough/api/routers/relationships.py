"""
Relationship metadata API endpoints.

Routes:
- GET /relationships/types - List relationship categories
- GET /relationships/survey/{relationship_type} - Ordered survey questions
- POST /relationships/validate - Validate survey answers

Dependencies: talkthrough.application.services.relationship_service
System role: Category and questionnaire HTTP API
"""

from fastapi import APIRouter, Depends

from talkthrough.api.deps import get_relationship_service
from talkthrough.api.routers.error_handling import handle_conversation_errors
from talkthrough.application.services.relationship_service import RelationshipService
from talkthrough.models.relationship import (
    RelationshipTypesResponse,
    SurveyQuestionsResponse,
    SurveyValidationRequest,
    SurveyValidationResult,
)

router = APIRouter(prefix="/relationships", tags=["relationships"])


@router.get("/types", response_model=RelationshipTypesResponse)
@handle_conversation_errors
async def list_relationship_types(
    relationship_service: RelationshipService = Depends(get_relationship_service),
) -> RelationshipTypesResponse:
    """List all relationship categories with descriptions."""
    types = relationship_service.list_types()
    return RelationshipTypesResponse(relationship_types=types, total=len(types))


@router.get("/survey/{relationship_type}", response_model=SurveyQuestionsResponse)
@handle_conversation_errors
async def get_survey_questions(
    relationship_type: str,
    relationship_service: RelationshipService = Depends(get_relationship_service),
) -> SurveyQuestionsResponse:
    """
    Get the ordered questionnaire for a relationship category.

    Raises:
        HTTPException(400): Unknown relationship type
    """
    return relationship_service.get_survey(relationship_type)


@router.post("/validate", response_model=SurveyValidationResult)
@handle_conversation_errors
async def validate_survey_answers(
    request: SurveyValidationRequest,
    relationship_service: RelationshipService = Depends(get_relationship_service),
) -> SurveyValidationResult:
    """
    Validate survey answers for a relationship category.

    Raises:
        HTTPException(400): Unknown relationship type or malformed answers
    """
    return relationship_service.validate_answers(
        request.relationship_type,
        request.survey_answers,
    )
