"""
Session domain models and schemas.

Conversation sessions, their ordered messages, and store statistics.

Dependencies: pydantic
System role: Session state contracts
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from talkthrough.models.common import CamelModel
from talkthrough.models.relationship import RelationshipCategory, SurveyAnswers


class MessageRole(str, Enum):
    """Author of a conversation message."""

    USER = "user"
    ASSISTANT = "assistant"


class NewMessage(CamelModel):
    """Message content before the store assigns its identity."""

    role: MessageRole
    content: str
    suggested_replies: list[str] | None = Field(
        default=None,
        max_length=3,
        description="Follow-up suggestions, assistant messages only",
    )
    degraded: bool = False


class Message(NewMessage):
    """Stored message, ordered within its session by id."""

    id: int = Field(description="Session-scoped, strictly increasing identifier")
    timestamp: datetime


class Session(CamelModel):
    """
    Conversation session owned by the session store.

    The prompt is fixed at creation and messages only ever grow.
    """

    id: str
    created_at: datetime
    last_activity: datetime
    relationship_type: RelationshipCategory
    survey_answers: SurveyAnswers
    prompt_template: str
    messages: list[Message] = Field(default_factory=list)


class SessionSummary(CamelModel):
    """Session metadata without message bodies."""

    id: str
    created_at: datetime
    last_activity: datetime
    relationship_type: RelationshipCategory
    survey_answers: SurveyAnswers
    prompt_template: str
    message_count: int


class SessionStats(CamelModel):
    """Aggregate store statistics."""

    session_count: int
    total_messages: int
    mean_messages_per_session: float
