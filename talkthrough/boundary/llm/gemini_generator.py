"""
Gemini text generator.

Implements the text-generation capability on top of LangChain's Google
Generative AI chat model. The model client is created on first use so a
missing API key surfaces as a failed call rather than a startup error.

Dependencies: langchain_google_genai, langchain_core
System role: Generative text backend client
"""

import logging

from langchain_core.messages import BaseMessage, HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

logger = logging.getLogger(__name__)


def message_text(message: BaseMessage) -> str:
    """Flatten model output content, which may be a string or a list of parts."""
    content = message.content
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content)


class GeminiTextGenerator:
    """Single-prompt text generation with a Gemini chat model."""

    def __init__(
        self,
        api_key: str | None = None,
        model_id: str = "gemini-2.0-flash",
        temperature: float = 0.7,
    ) -> None:
        """
        Initialize Gemini generator.

        Args:
            api_key: Google API key (falls back to GOOGLE_API_KEY in the environment)
            model_id: Gemini model identifier
            temperature: Sampling temperature
        """
        self._api_key = api_key
        self._model_id = model_id
        self._temperature = temperature
        self._model: ChatGoogleGenerativeAI | None = None

    @property
    def model(self) -> ChatGoogleGenerativeAI:
        """Lazily constructed chat model."""
        if self._model is None:
            logger.info(f"{__name__}:model - Creating Gemini client (model={self._model_id})")
            # One request per call; the adapter owns timeouts and fallback
            kwargs = {
                "model": self._model_id,
                "temperature": self._temperature,
                "max_retries": 0,
            }
            if self._api_key:
                kwargs["google_api_key"] = self._api_key
            self._model = ChatGoogleGenerativeAI(**kwargs)
        return self._model

    async def generate(self, prompt: str) -> str:
        """
        Generate text for one prompt.

        Args:
            prompt: Full prompt text

        Returns:
            str: Raw model output

        Raises:
            Exception: Any client or transport error, left to the caller
        """
        logger.debug(f"{__name__}:generate - prompt_len={len(prompt)}")
        result = await self.model.ainvoke([HumanMessage(content=prompt)])
        text = message_text(result)
        logger.debug(f"{__name__}:generate - response_len={len(text)}")
        return text
