"""
Health check API endpoints.

Routes: GET /health, GET /health/backend, GET /health/sessions

Dependencies: talkthrough.core.advice, talkthrough.boundary.session_store
System role: Health check HTTP API
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from talkthrough import __version__
from talkthrough.api.deps import get_backend_adapter, get_session_store
from talkthrough.boundary.session_store.memory_store import InMemorySessionStore
from talkthrough.core.advice.backend_adapter import BackendAdapter
from talkthrough.models.common import CamelModel
from talkthrough.models.session import SessionStats


class HealthResponse(CamelModel):
    """Health check response model."""

    status: str
    timestamp: datetime
    version: str = __version__


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic liveness check."""
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))


@router.get("/backend", response_model=HealthResponse)
async def health_check_backend(
    adapter: BackendAdapter = Depends(get_backend_adapter),
) -> HealthResponse:
    """Generation backend check; reports "unavailable" instead of failing."""
    healthy = await adapter.health_check()
    return HealthResponse(
        status="ok" if healthy else "unavailable",
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/sessions", response_model=SessionStats)
async def health_check_sessions(
    store: InMemorySessionStore = Depends(get_session_store),
) -> SessionStats:
    """Session store statistics."""
    return store.stats()
