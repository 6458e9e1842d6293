"""Chat API endpoints.

Routes:
- POST /chat/new - Start a conversation from relationship type and survey answers
- POST /chat/{session_id}/message - Send a message and get the assistant reply
- GET /chat/{session_id}/messages - Ordered conversation history
- GET /chat/{session_id} - Session details without messages
- DELETE /chat/{session_id} - End a conversation

Dependencies: talkthrough.application.services.conversation_service
System role: Conversation HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from talkthrough.api.deps import get_conversation_service
from talkthrough.api.routers.error_handling import handle_conversation_errors
from talkthrough.application.services.conversation_service import ConversationService
from talkthrough.models.chat import (
    ChatHistoryResponse,
    ChatMessageRequest,
    ChatMessageResponse,
    DeleteChatResponse,
    NewChatRequest,
    NewChatResponse,
)
from talkthrough.models.session import SessionSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("/new", response_model=NewChatResponse)
@handle_conversation_errors
async def new_chat(
    request: NewChatRequest,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> NewChatResponse:
    """Start a conversation and return the opening assistant message.

    Raises:
        HTTPException(400): Missing or invalid relationship type or survey answers
    """
    started = await conversation_service.start_conversation(
        request.relationship_type,
        request.survey_answers,
    )
    response = started.response
    return NewChatResponse(
        session_id=started.session_id,
        initial_message=response.reply,
        suggested_replies=response.suggestions,
        relationship_type=started.relationship_type,
        degraded=response.degraded,
        timestamp=response.produced_at,
    )


@router.post("/{session_id}/message", response_model=ChatMessageResponse)
@handle_conversation_errors
async def send_message(
    session_id: str,
    request: ChatMessageRequest,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> ChatMessageResponse:
    """Send a user message and return the assistant reply.

    Raises:
        HTTPException(400): Empty message
        HTTPException(404): Session not found
    """
    response = await conversation_service.send_turn(session_id, request.message)
    return ChatMessageResponse(
        ai_response=response.reply,
        suggested_replies=response.suggestions,
        degraded=response.degraded,
        timestamp=response.produced_at,
        session_id=session_id,
    )


@router.get("/{session_id}/messages", response_model=ChatHistoryResponse)
@handle_conversation_errors
async def get_messages(
    session_id: str,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> ChatHistoryResponse:
    """Get all messages of a session in order.

    Raises:
        HTTPException(404): Session not found
    """
    session = conversation_service.get_history(session_id)
    return ChatHistoryResponse(
        session_id=session_id,
        messages=session.messages,
        total_messages=len(session.messages),
        relationship_type=session.relationship_type,
    )


@router.get("/{session_id}", response_model=SessionSummary)
@handle_conversation_errors
async def get_session(
    session_id: str,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> SessionSummary:
    """Get session details without message bodies."""
    return conversation_service.get_conversation(session_id)


@router.delete("/{session_id}", response_model=DeleteChatResponse)
@handle_conversation_errors
async def delete_session(
    session_id: str,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> DeleteChatResponse:
    """End a conversation and delete its session.

    Raises:
        HTTPException(404): Session not found
    """
    conversation_service.end_conversation(session_id)
    return DeleteChatResponse(message="Session deleted successfully", session_id=session_id)
