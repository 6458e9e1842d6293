"""
Session store settings.

Idle expiry window and background sweep schedule.

Dependencies: pydantic_settings
System role: Session lifecycle configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SessionSettings(BaseSettings):
    """Configuration for in-memory conversation sessions."""

    model_config = SettingsConfigDict(
        env_prefix="SESSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    max_idle_hours: float = Field(
        default=24.0,
        gt=0,
        description="Sessions idle longer than this are removed by the sweeper",
    )
    sweep_interval_seconds: float = Field(
        default=3600.0,
        gt=0,
        description="Delay between background expiry sweeps",
    )
    sweep_enabled: bool = Field(
        default=True,
        description="Run the periodic expiry sweep in the background",
    )
