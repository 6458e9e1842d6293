"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from talkthrough.configs.api import ApiSettings
from talkthrough.configs.base import BaseSettings
from talkthrough.configs.gemini import GeminiSettings
from talkthrough.configs.session import SessionSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    api: ApiSettings = Field(default_factory=ApiSettings)
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    session: SessionSettings = Field(default_factory=SessionSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from talkthrough.configs import get_settings
        settings = get_settings()
    """
    return Settings()
