"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, talkthrough.api, talkthrough.observability, talkthrough.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from talkthrough import __version__
from talkthrough.api import api_router
from talkthrough.api.deps import get_service_cache
from talkthrough.configs import get_settings
from talkthrough.observability.logger import configure_logging
from talkthrough.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Creates the session store and services at startup, runs the expiry
    sweeper while the app is up, and tears everything down on shutdown.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    cache = get_service_cache()
    _ = cache.session_store
    _ = cache.conversation_service
    if settings.session.sweep_enabled:
        cache.sweeper.start()
    logger.info(
        "Application startup complete",
        extra={"model": settings.gemini.model, "api_key_set": bool(settings.gemini.api_key)},
    )

    yield

    # Shutdown
    await cache.sweeper.stop()
    cache.clear()
    logger.info("Application shutdown: service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="TalkThrough API",
        description="Relationship advice conversations backed by a generative model",
        version=__version__,
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "talkthrough.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.debug,
    )
