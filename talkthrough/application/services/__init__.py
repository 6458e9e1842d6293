"""Service orchestrators."""

from .conversation_service import ConversationService
from .relationship_service import RelationshipService
from .session_sweeper import SessionSweeper

__all__ = [
    "ConversationService",
    "RelationshipService",
    "SessionSweeper",
]
