"""
Dependency injection container.

Factory functions for FastAPI dependencies. The session store and backend
clients are created once per process by ServiceCache and released at shutdown.

Dependencies: talkthrough.configs, talkthrough.application, talkthrough.boundary
System role: DI container for service injection
"""

from datetime import timedelta

from talkthrough.application.services import (
    ConversationService,
    RelationshipService,
    SessionSweeper,
)
from talkthrough.boundary.llm.gemini_generator import GeminiTextGenerator
from talkthrough.boundary.session_store.memory_store import InMemorySessionStore
from talkthrough.configs import Settings, get_settings
from talkthrough.core.advice.backend_adapter import BackendAdapter, TextGenerator


class ServiceCache:
    """Container for process-wide service instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._session_store: InMemorySessionStore | None = None
        self._text_generator: TextGenerator | None = None
        self._backend_adapter: BackendAdapter | None = None
        self._conversation_service: ConversationService | None = None
        self._relationship_service: RelationshipService | None = None
        self._sweeper: SessionSweeper | None = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def session_store(self) -> InMemorySessionStore:
        """Get cached session store."""
        if self._session_store is None:
            self._session_store = InMemorySessionStore()
        return self._session_store

    @property
    def text_generator(self) -> TextGenerator:
        """Get cached Gemini text generator."""
        if self._text_generator is None:
            gemini = self.settings.gemini
            self._text_generator = GeminiTextGenerator(
                api_key=gemini.api_key,
                model_id=gemini.model,
                temperature=gemini.temperature,
            )
        return self._text_generator

    @property
    def backend_adapter(self) -> BackendAdapter:
        """Get cached backend adapter."""
        if self._backend_adapter is None:
            self._backend_adapter = BackendAdapter(
                generator=self.text_generator,
                timeout_seconds=self.settings.gemini.request_timeout_seconds,
            )
        return self._backend_adapter

    @property
    def conversation_service(self) -> ConversationService:
        """Get cached conversation service (holds per-session turn locks)."""
        if self._conversation_service is None:
            self._conversation_service = ConversationService(
                store=self.session_store,
                adapter=self.backend_adapter,
            )
        return self._conversation_service

    @property
    def relationship_service(self) -> RelationshipService:
        """Get cached relationship service."""
        if self._relationship_service is None:
            self._relationship_service = RelationshipService()
        return self._relationship_service

    @property
    def sweeper(self) -> SessionSweeper:
        """Get cached session sweeper."""
        if self._sweeper is None:
            session = self.settings.session
            self._sweeper = SessionSweeper(
                store=self.session_store,
                max_idle=timedelta(hours=session.max_idle_hours),
                interval_seconds=session.sweep_interval_seconds,
            )
        return self._sweeper

    def clear(self) -> None:
        """Release all cached instances, dropping stored sessions."""
        if self._session_store is not None:
            self._session_store.clear()
        self._session_store = None
        self._text_generator = None
        self._backend_adapter = None
        self._conversation_service = None
        self._relationship_service = None
        self._sweeper = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_session_store() -> InMemorySessionStore:
    """Get the process-wide session store."""
    return get_service_cache().session_store


def get_backend_adapter() -> BackendAdapter:
    """Get the backend adapter."""
    return get_service_cache().backend_adapter


def get_conversation_service() -> ConversationService:
    """
    Get conversation service instance.

    Returns:
        ConversationService: Service bound to the shared store and adapter
    """
    return get_service_cache().conversation_service


def get_relationship_service() -> RelationshipService:
    """Get relationship metadata service."""
    return get_service_cache().relationship_service
