"""Generative text backend clients."""

from talkthrough.boundary.llm.gemini_generator import GeminiTextGenerator

__all__ = ["GeminiTextGenerator"]
