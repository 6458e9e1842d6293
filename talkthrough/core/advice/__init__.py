"""Backend adapter and response normalization for advice turns."""

from talkthrough.core.advice.backend_adapter import (
    BackendAdapter,
    GenerationResult,
    TextGenerator,
)
from talkthrough.core.advice.response_normalizer import normalize

__all__ = ["BackendAdapter", "GenerationResult", "TextGenerator", "normalize"]
