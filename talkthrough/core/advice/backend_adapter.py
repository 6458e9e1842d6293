"""
Backend adapter for advice generation.

Issues exactly one generation call per turn against an injected text
generator, bounds it with a timeout, and normalizes the result. Any backend
failure becomes a degraded response: this is the only place in the turn path
where errors are absorbed.

Dependencies: talkthrough.core.advice.response_normalizer
System role: Failure-absorbing boundary around the generative text backend
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from talkthrough.core.advice.response_normalizer import normalize
from talkthrough.models.advice import NormalizedResponse, ReplySource, SuggestionSource

logger = logging.getLogger(__name__)

USER_MESSAGE_LABEL = "User's current message:"
HEALTH_CHECK_PROMPT = "Hello, this is a test message."

DEGRADED_REPLY = (
    "I'm having trouble processing your request right now. "
    "Please try again in a moment."
)

DEGRADED_SUGGESTIONS: tuple[str, ...] = (
    "Could you rephrase that?",
    "I'm not sure I understand. Can you explain more?",
    "Let's try a different approach to this conversation.",
)


@runtime_checkable
class TextGenerator(Protocol):
    """Text-generation capability: one prompt in, free text out. May fail."""

    async def generate(self, prompt: str) -> str:
        ...


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a single generation call."""

    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> "GenerationResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: str) -> "GenerationResult":
        return cls(error=error)


def compose_turn_prompt(prompt_text: str, user_text: str) -> str:
    """Append the current user utterance to the session prompt."""
    return f'{prompt_text}\n\n{USER_MESSAGE_LABEL} "{user_text}"'


def degraded_response(produced_at: datetime | None = None) -> NormalizedResponse:
    """Fixed safe response used when the backend call fails."""
    return NormalizedResponse(
        reply=DEGRADED_REPLY,
        suggestions=list(DEGRADED_SUGGESTIONS),
        degraded=True,
        produced_at=produced_at or datetime.now(timezone.utc),
        reply_source=ReplySource.FAILURE,
        suggestion_source=SuggestionSource.FAILURE,
    )


class BackendAdapter:
    """
    Adapter between conversation turns and the text generator.

    The generator is stateless from this adapter's point of view; all
    conversational context travels in the prompt.
    """

    def __init__(self, generator: TextGenerator, timeout_seconds: float = 30.0) -> None:
        """
        Initialize backend adapter.

        Args:
            generator: Text-generation capability
            timeout_seconds: Bounded wait before a call is treated as failed
        """
        self.generator = generator
        self.timeout_seconds = timeout_seconds

    async def generate(self, prompt: str) -> GenerationResult:
        """
        Run one generation call and classify its outcome.

        Args:
            prompt: Complete prompt text

        Returns:
            GenerationResult: Success with non-empty text, or failure with a reason
        """
        try:
            text = await asyncio.wait_for(
                self.generator.generate(prompt),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"{__name__}:generate - Timed out after {self.timeout_seconds}s"
            )
            return GenerationResult.failure("timeout")
        except Exception as e:
            logger.warning(
                f"{__name__}:generate - Backend call failed: {type(e).__name__}: {e}"
            )
            return GenerationResult.failure(type(e).__name__)

        if not isinstance(text, str) or not text.strip():
            logger.warning(f"{__name__}:generate - Empty or malformed backend response")
            return GenerationResult.failure("empty_response")

        return GenerationResult.success(text)

    async def converse(self, user_text: str, prompt_text: str) -> NormalizedResponse:
        """
        Produce the assistant response for one user utterance.

        Never raises for backend problems; a failed call yields the degraded
        response with degraded=True.

        Args:
            user_text: Current user utterance
            prompt_text: Session prompt built at conversation start

        Returns:
            NormalizedResponse: Normalized or degraded response
        """
        result = await self.generate(compose_turn_prompt(prompt_text, user_text))
        if not result.ok:
            return degraded_response()

        response = normalize(result.text)
        logger.info(
            f"{__name__}:converse - reply_len={len(response.reply)} "
            f"suggestions={len(response.suggestions)} "
            f"suggestion_source={response.suggestion_source.value}"
        )
        return response

    async def health_check(self) -> bool:
        """Issue a trivial generation call and report whether it succeeded."""
        result = await self.generate(HEALTH_CHECK_PROMPT)
        if not result.ok:
            logger.error(f"{__name__}:health_check - Backend unavailable: {result.error}")
        return result.ok
