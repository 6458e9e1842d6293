"""Tests for environment-driven settings."""

import pytest

from talkthrough.configs.api import ApiSettings
from talkthrough.configs.gemini import GeminiSettings
from talkthrough.configs.session import SessionSettings


def test_gemini_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)

    settings = GeminiSettings(_env_file=None)

    assert settings.api_key is None
    assert settings.model == "gemini-2.0-flash"
    assert settings.temperature == 0.7
    assert settings.request_timeout_seconds == 30.0


def test_gemini_settings_should_read_google_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "google-key")

    assert GeminiSettings(_env_file=None).api_key == "google-key"


def test_session_settings_should_read_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SESSION_MAX_IDLE_HOURS", "1.5")
    monkeypatch.setenv("SESSION_SWEEP_ENABLED", "false")

    settings = SessionSettings(_env_file=None)

    assert settings.max_idle_hours == 1.5
    assert settings.sweep_enabled is False


def test_api_settings_default_port() -> None:
    assert ApiSettings(_env_file=None).port == 3001
