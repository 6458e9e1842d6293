"""
Shared test fixtures and configuration for entire test suite.

Provides: controllable clock, session store, stub text generators,
backend adapter and conversation service wired for tests
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from talkthrough.application.services.conversation_service import ConversationService
from talkthrough.boundary.session_store.memory_store import InMemorySessionStore
from talkthrough.core.advice.backend_adapter import BackendAdapter

STRUCTURED_RAW = (
    "INSIGHT: You feel unheard.\n"
    "SUGGESTIONS:\n"
    "1. Tell them\n"
    "2. Write it down\n"
    "3. Take a breath"
)


class FakeClock:
    """Manually advanced clock for time-dependent store behavior."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    """Provide a controllable clock."""
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> InMemorySessionStore:
    """Provide an isolated session store driven by the fake clock."""
    return InMemorySessionStore(clock=clock)


@pytest.fixture
def sample_answers() -> dict:
    """Provide personal-category survey answers."""
    return {"duration": "1-3 years", "closeness": 7, "conflictType": "Communication"}


@pytest.fixture
def mock_generator() -> AsyncMock:
    """Provide a text generator returning a well-formed structured reply."""
    generator = AsyncMock()
    generator.generate = AsyncMock(return_value=STRUCTURED_RAW)
    return generator


@pytest.fixture
def failing_generator() -> AsyncMock:
    """Provide a text generator whose calls always fail."""
    generator = AsyncMock()
    generator.generate = AsyncMock(side_effect=ConnectionError("backend unreachable"))
    return generator


@pytest.fixture
def adapter(mock_generator: AsyncMock) -> BackendAdapter:
    """Provide a backend adapter over the structured generator."""
    return BackendAdapter(generator=mock_generator, timeout_seconds=1.0)


@pytest.fixture
def conversation_service(store: InMemorySessionStore, adapter: BackendAdapter) -> ConversationService:
    """Provide a conversation service with isolated dependencies."""
    return ConversationService(store=store, adapter=adapter)


@pytest.fixture
def structured_raw() -> str:
    """Provide raw backend text with INSIGHT and SUGGESTIONS sections."""
    return STRUCTURED_RAW
