"""
Conversation service for relationship-advice chats.

Orchestrates the conversation flow: prompt construction at session start,
per-turn backend calls, and persistence of both sides of each exchange.
Turns against the same session are serialized; different sessions run
concurrently.

Dependencies: talkthrough.core.prompting, talkthrough.core.advice,
    talkthrough.boundary.session_store
System role: Conversation orchestration layer
"""

import asyncio
import logging
import uuid
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

from talkthrough.boundary.session_store.memory_store import InMemorySessionStore
from talkthrough.core.advice.backend_adapter import BackendAdapter
from talkthrough.core.exceptions import SessionNotFoundError, ValidationError
from talkthrough.core.prompting.prompt_builder import PromptBuilder
from talkthrough.core.prompting.relationship_profiles import parse_category
from talkthrough.models.advice import NormalizedResponse
from talkthrough.models.chat import ConversationStart
from talkthrough.models.session import (
    Message,
    MessageRole,
    NewMessage,
    Session,
    SessionSummary,
)
from talkthrough.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

OPENING_MESSAGE = (
    "Hello, I'm here to help you navigate this conversation. "
    "What would you like to discuss?"
)

_SCALAR_TYPES = (str, int, float, bool, type(None))


def new_session_id() -> str:
    """Random, caller-unguessable session identifier."""
    return str(uuid.uuid4())


def validate_survey_answers(answers: Any) -> dict[str, Any]:
    """
    Check the survey-answer shape: a mapping of string keys to scalar values.

    Raises:
        ValidationError: If answers is missing or malformed
    """
    if answers is None:
        raise ValidationError("Missing required field: surveyAnswers", field="surveyAnswers")
    if not isinstance(answers, dict):
        raise ValidationError("Survey answers must be an object", field="surveyAnswers")

    for key, value in answers.items():
        if not isinstance(key, str):
            raise ValidationError("Survey answer keys must be strings", field="surveyAnswers")
        if not isinstance(value, _SCALAR_TYPES):
            raise ValidationError(
                f"Survey answer '{key}' must be a text or number value",
                field=key,
            )
    return dict(answers)


@dataclass
class _TurnLock:
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    holders: int = 0


class ConversationService:
    """
    Conversation orchestrator.

    The only component that sequences prompt building, the backend adapter
    and the session store.
    """

    def __init__(
        self,
        store: InMemorySessionStore,
        adapter: BackendAdapter,
        prompt_builder: PromptBuilder | None = None,
        id_factory: Callable[[], str] = new_session_id,
    ) -> None:
        """
        Initialize conversation service.

        Args:
            store: Session store shared across requests
            adapter: Backend adapter for generation calls
            prompt_builder: Prompt builder (defaults to PromptBuilder())
            id_factory: Session id generator
        """
        self.store = store
        self.adapter = adapter
        self.prompt_builder = prompt_builder or PromptBuilder()
        self._id_factory = id_factory
        self._turn_locks: dict[str, _TurnLock] = {}

    @asynccontextmanager
    async def _serialized(self, session_id: str) -> AsyncIterator[None]:
        """Hold the per-session turn lock; drop it once nobody is waiting."""
        entry = self._turn_locks.setdefault(session_id, _TurnLock())
        entry.holders += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.holders -= 1
            if entry.holders == 0:
                self._turn_locks.pop(session_id, None)

    async def start_conversation(self, category: Any, answers: Any) -> ConversationStart:
        """
        Start a conversation and produce the opening assistant reply.

        Flow:
        1. Validate category and survey answers
        2. Build the session prompt
        3. Create the session
        4. Send the opening message through the backend adapter
        5. Store the assistant reply

        Args:
            category: Relationship category
            answers: Survey answer mapping

        Returns:
            ConversationStart: Session id, category and first response

        Raises:
            ValidationError: If category or answers are missing or malformed
            InvalidCategoryError: If category is not supported
        """
        if category is None or category == "":
            raise ValidationError("Missing required field: relationshipType", field="relationshipType")
        relationship_type = parse_category(category)
        survey_answers = validate_survey_answers(answers)

        prompt = self.prompt_builder.build(relationship_type, survey_answers)
        session_id = self._id_factory()
        self.store.create(session_id, relationship_type, survey_answers, prompt)
        logger.info(
            f"{__name__}:start_conversation - session_id={session_id} "
            f"relationship_type={relationship_type.value} prompt_len={len(prompt)}"
        )

        async with self._serialized(session_id):
            response = await self.adapter.converse(OPENING_MESSAGE, prompt)
            self._store_reply(session_id, response)

        return ConversationStart(
            session_id=session_id,
            relationship_type=relationship_type,
            response=response,
        )

    async def send_turn(self, session_id: str, text: Any) -> NormalizedResponse:
        """
        Process one user turn.

        Flow:
        1. Validate text and session
        2. Store user message
        3. Generate the reply (degraded on backend failure)
        4. Store assistant message

        Args:
            session_id: Session identifier
            text: User utterance

        Returns:
            NormalizedResponse: Reply with suggestions

        Raises:
            ValidationError: If text is empty or not a string
            SessionNotFoundError: If the session does not exist
        """
        if not isinstance(text, str) or not text.strip():
            raise ValidationError(
                "Message is required and must be a non-empty string",
                field="message",
            )
        user_text = text.strip()

        if not self.store.exists(session_id):
            raise SessionNotFoundError(session_id)

        async with self._serialized(session_id):
            session = self.store.get(session_id)
            if session is None:
                raise SessionNotFoundError(session_id)

            logger.info(
                f"{__name__}:send_turn - session_id={session_id} "
                f"message={safe_log_value(user_text, max_length=80)}"
            )
            stored = self.store.append_message(
                session_id,
                NewMessage(role=MessageRole.USER, content=user_text),
            )
            if stored is None:
                raise SessionNotFoundError(session_id)

            response = await self.adapter.converse(user_text, session.prompt_template)
            self._store_reply(session_id, response)

        return response

    def _store_reply(self, session_id: str, response: NormalizedResponse) -> None:
        if response.degraded:
            logger.warning(
                f"{__name__}:_store_reply - Degraded response for session_id={session_id}"
            )
        stored = self.store.append_message(
            session_id,
            NewMessage(
                role=MessageRole.ASSISTANT,
                content=response.reply,
                suggested_replies=response.suggestions,
                degraded=response.degraded,
            ),
        )
        if stored is None:
            # Ended while the backend call was in flight
            raise SessionNotFoundError(session_id)

    def list_turns(self, session_id: str) -> list[Message]:
        """
        Ordered messages of a session.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        if not self.store.exists(session_id):
            raise SessionNotFoundError(session_id)
        return self.store.list_messages(session_id)

    def get_history(self, session_id: str) -> Session:
        """
        Session with its ordered messages, read as one snapshot.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        session = self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def get_conversation(self, session_id: str) -> SessionSummary:
        """
        Session metadata without message bodies.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        session = self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return SessionSummary(
            **session.model_dump(exclude={"messages"}),
            message_count=len(session.messages),
        )

    def end_conversation(self, session_id: str) -> None:
        """
        Delete a session.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        if not self.store.delete(session_id):
            raise SessionNotFoundError(session_id)
        logger.info(f"{__name__}:end_conversation - session_id={session_id}")
