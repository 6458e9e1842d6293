"""
Chat domain models and schemas.

Request/response schemas for conversation operations.

Dependencies: pydantic
System role: Chat API contracts
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from talkthrough.models.advice import NormalizedResponse
from talkthrough.models.common import CamelModel
from talkthrough.models.relationship import RelationshipCategory
from talkthrough.models.session import Message


class ConversationStart(CamelModel):
    """Result of starting a conversation."""

    session_id: str
    relationship_type: RelationshipCategory
    response: NormalizedResponse


class NewChatRequest(CamelModel):
    """Request schema for starting a conversation.

    Shape checks happen in the service so that bad input maps to 400.
    """

    relationship_type: str | None = None
    survey_answers: Any = None


class NewChatResponse(CamelModel):
    """Response schema for a started conversation."""

    session_id: str
    initial_message: str
    suggested_replies: list[str]
    relationship_type: RelationshipCategory
    degraded: bool
    timestamp: datetime


class ChatMessageRequest(CamelModel):
    """Request schema for chat messages."""

    message: str | None = Field(default=None, description="User message")


class ChatMessageResponse(CamelModel):
    """Response schema for a processed turn."""

    ai_response: str
    suggested_replies: list[str]
    degraded: bool
    timestamp: datetime
    session_id: str


class ChatHistoryResponse(CamelModel):
    """Response schema for chat history."""

    session_id: str
    messages: list[Message]
    total_messages: int = Field(description="Total number of messages")
    relationship_type: RelationshipCategory


class DeleteChatResponse(CamelModel):
    """Response schema for an ended conversation."""

    message: str
    session_id: str
