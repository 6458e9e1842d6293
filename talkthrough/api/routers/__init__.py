"""API routers."""

from .chat import router as chat_router
from .health import router as health_router
from .relationships import router as relationships_router

__all__ = [
    "chat_router",
    "health_router",
    "relationships_router",
]
