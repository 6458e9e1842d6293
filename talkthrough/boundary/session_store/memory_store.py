"""
In-memory session store.

Keyed mapping from session id to conversation state. Owns message ordering,
activity timestamps and idle expiry. Every operation runs under one lock, so
a concurrent reader sees a session either fully present or fully gone, and
read-modify-write sequences never interleave. Callers receive copies; the
store keeps the only live reference to each session.

Missing sessions are signalled with None/False return values rather than
exceptions; the conversation service decides how to surface them.

Dependencies: talkthrough.models.session, talkthrough.core.exceptions
System role: Session persistence boundary (process lifetime only)
"""

import logging
import threading
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

from talkthrough.core.exceptions import DuplicateSessionError
from talkthrough.models.relationship import RelationshipCategory
from talkthrough.models.session import Message, NewMessage, Session, SessionStats

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


class InMemorySessionStore:
    """Thread-safe, process-local session store."""

    def __init__(self, clock: Clock = utc_now) -> None:
        """
        Initialize an empty store.

        Args:
            clock: Time source, injectable for tests
        """
        self._clock = clock
        self._sessions: dict[str, Session] = {}
        self._lock = threading.RLock()

    def _touch(self, session: Session) -> datetime:
        # last_activity never moves backwards
        now = max(self._clock(), session.last_activity)
        session.last_activity = now
        return now

    def create(
        self,
        session_id: str,
        relationship_type: RelationshipCategory,
        survey_answers: Mapping[str, Any],
        prompt_template: str,
    ) -> Session:
        """
        Create a session with an empty message history.

        Args:
            session_id: Unique session identifier
            relationship_type: Relationship category
            survey_answers: Validated survey answers
            prompt_template: Prompt built for this session, fixed from now on

        Returns:
            Session: Copy of the created session

        Raises:
            DuplicateSessionError: If session_id already exists
        """
        with self._lock:
            if session_id in self._sessions:
                raise DuplicateSessionError(session_id)

            now = self._clock()
            session = Session(
                id=session_id,
                created_at=now,
                last_activity=now,
                relationship_type=relationship_type,
                survey_answers=dict(survey_answers),
                prompt_template=prompt_template,
            )
            self._sessions[session_id] = session
            logger.info(
                f"{__name__}:create - session_id={session_id} "
                f"relationship_type={relationship_type.value}"
            )
            return session.model_copy(deep=True)

    def get(self, session_id: str) -> Session | None:
        """Return a copy of the session, or None if it does not exist."""
        with self._lock:
            session = self._sessions.get(session_id)
            return session.model_copy(deep=True) if session else None

    def exists(self, session_id: str) -> bool:
        """Check whether a session is present."""
        with self._lock:
            return session_id in self._sessions

    def append_message(self, session_id: str, message: NewMessage) -> Message | None:
        """
        Append a message and refresh the session's activity timestamp.

        This is the only operation that adds to a message history. Ids are
        assigned here and are strictly increasing within the session.

        Args:
            session_id: Target session
            message: Message content and role

        Returns:
            Message | None: Stored message copy, or None if the session is absent
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None

            now = self._touch(session)
            last = session.messages[-1] if session.messages else None
            stored = Message(
                **message.model_dump(),
                id=last.id + 1 if last else 1,
                timestamp=max(now, last.timestamp) if last else now,
            )
            session.messages.append(stored)
            return stored.model_copy(deep=True)

    def list_messages(self, session_id: str) -> list[Message]:
        """Messages in append order; empty if the session is absent."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return []
            return [message.model_copy(deep=True) for message in session.messages]

    def update(
        self,
        session_id: str,
        *,
        relationship_type: RelationshipCategory | None = None,
        survey_answers: Mapping[str, Any] | None = None,
    ) -> bool:
        """
        Update a session's category and/or survey answers.

        The prompt and the message history cannot be changed here.

        Returns:
            bool: True if updated, False if the session is absent
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False

            if relationship_type is not None:
                session.relationship_type = relationship_type
            if survey_answers is not None:
                session.survey_answers = dict(survey_answers)
            self._touch(session)
            return True

    def delete(self, session_id: str) -> bool:
        """Remove a session. Returns whether it was present."""
        with self._lock:
            deleted = self._sessions.pop(session_id, None) is not None
        if deleted:
            logger.info(f"{__name__}:delete - session_id={session_id}")
        return deleted

    def sweep_expired(self, max_idle: timedelta) -> int:
        """
        Remove every session idle for longer than max_idle.

        A session is removed when its last activity is strictly older than
        now - max_idle.

        Returns:
            int: Number of sessions removed
        """
        with self._lock:
            cutoff = self._clock() - max_idle
            expired = [
                session_id
                for session_id, session in self._sessions.items()
                if session.last_activity < cutoff
            ]
            for session_id in expired:
                del self._sessions[session_id]

        if expired:
            logger.info(f"{__name__}:sweep_expired - removed={len(expired)} cutoff={cutoff.isoformat()}")
        return len(expired)

    def stats(self) -> SessionStats:
        """Session count, total messages and mean messages per session."""
        with self._lock:
            session_count = len(self._sessions)
            total_messages = sum(len(s.messages) for s in self._sessions.values())

        mean = total_messages / session_count if session_count else 0.0
        return SessionStats(
            session_count=session_count,
            total_messages=total_messages,
            mean_messages_per_session=round(mean, 2),
        )

    def clear(self) -> None:
        """Drop all sessions (used at shutdown)."""
        with self._lock:
            count = len(self._sessions)
            self._sessions.clear()
        logger.info(f"{__name__}:clear - removed={count}")
