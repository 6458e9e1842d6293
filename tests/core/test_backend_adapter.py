"""
Test suite for BackendAdapter.

Covers prompt composition, normalization of successful calls, and the
degraded fallback for every failure mode. Uses AsyncMock text generators.

System role: Verification of the backend failure-absorption boundary
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from talkthrough.core.advice.backend_adapter import (
    DEGRADED_REPLY,
    DEGRADED_SUGGESTIONS,
    HEALTH_CHECK_PROMPT,
    BackendAdapter,
    GenerationResult,
    compose_turn_prompt,
)
from talkthrough.models.advice import ReplySource, SuggestionSource


def test_compose_turn_prompt_should_append_labelled_user_message() -> None:
    assert compose_turn_prompt("PROMPT", "I'm upset") == 'PROMPT\n\nUser\'s current message: "I\'m upset"'


class TestGenerationResult:
    """Test suite for GenerationResult variants."""

    def test_success_should_be_ok(self) -> None:
        result = GenerationResult.success("text")

        assert result.ok
        assert result.text == "text"

    def test_failure_should_not_be_ok(self) -> None:
        result = GenerationResult.failure("timeout")

        assert not result.ok
        assert result.error == "timeout"


class TestBackendAdapterConverse:
    """Test suite for BackendAdapter.converse."""

    @pytest.mark.asyncio
    async def test_converse_should_call_generator_once_with_composed_prompt(
        self, adapter: BackendAdapter, mock_generator: AsyncMock
    ) -> None:
        # Act
        await adapter.converse("I'm upset", "SESSION PROMPT")

        # Assert
        mock_generator.generate.assert_awaited_once_with(
            compose_turn_prompt("SESSION PROMPT", "I'm upset")
        )

    @pytest.mark.asyncio
    async def test_converse_should_return_normalized_response(self, adapter: BackendAdapter) -> None:
        response = await adapter.converse("I'm upset", "SESSION PROMPT")

        assert response.reply == "You feel unheard."
        assert response.suggestions == ["Tell them", "Write it down", "Take a breath"]
        assert response.degraded is False

    @pytest.mark.asyncio
    async def test_converse_should_not_mark_parse_fallback_as_degraded(self) -> None:
        generator = AsyncMock()
        generator.generate = AsyncMock(return_value="Unstructured advice.")
        adapter = BackendAdapter(generator=generator)

        response = await adapter.converse("hi", "PROMPT")

        assert response.degraded is False
        assert response.suggestion_source is SuggestionSource.DEFAULT

    @pytest.mark.asyncio
    async def test_converse_should_degrade_when_generator_raises(self, failing_generator: AsyncMock) -> None:
        # Arrange
        adapter = BackendAdapter(generator=failing_generator)

        # Act
        response = await adapter.converse("hi", "PROMPT")

        # Assert
        assert response.degraded is True
        assert response.reply == DEGRADED_REPLY
        assert response.suggestions == list(DEGRADED_SUGGESTIONS)
        assert len(response.suggestions) == 3
        assert response.reply_source is ReplySource.FAILURE

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", ["", "   \n", None, 42])
    async def test_converse_should_degrade_on_empty_or_malformed_output(self, raw) -> None:
        generator = AsyncMock()
        generator.generate = AsyncMock(return_value=raw)
        adapter = BackendAdapter(generator=generator)

        response = await adapter.converse("hi", "PROMPT")

        assert response.degraded is True
        assert response.reply == DEGRADED_REPLY

    @pytest.mark.asyncio
    async def test_converse_should_degrade_on_timeout(self) -> None:
        # Arrange
        async def slow_generate(prompt: str) -> str:
            await asyncio.sleep(5)
            return "too late"

        generator = AsyncMock()
        generator.generate = slow_generate
        adapter = BackendAdapter(generator=generator, timeout_seconds=0.01)

        # Act
        response = await adapter.converse("hi", "PROMPT")

        # Assert
        assert response.degraded is True


class TestBackendAdapterHealthCheck:
    """Test suite for BackendAdapter.health_check."""

    @pytest.mark.asyncio
    async def test_health_check_should_return_true_on_success(
        self, adapter: BackendAdapter, mock_generator: AsyncMock
    ) -> None:
        assert await adapter.health_check() is True
        mock_generator.generate.assert_awaited_once_with(HEALTH_CHECK_PROMPT)

    @pytest.mark.asyncio
    async def test_health_check_should_return_false_on_failure(self, failing_generator: AsyncMock) -> None:
        adapter = BackendAdapter(generator=failing_generator)

        assert await adapter.health_check() is False
