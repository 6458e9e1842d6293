"""
Advice response schemas.

Typed result of normalizing free-form backend text, including which rung of
the fallback ladder produced each part.

Dependencies: pydantic
System role: Normalized assistant reply contract
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from talkthrough.models.common import CamelModel

MAX_SUGGESTIONS = 3


class ReplySource(str, Enum):
    """Where the reply text came from."""

    INSIGHT = "insight"
    RAW = "raw"
    DEFAULT = "default"
    FAILURE = "failure"


class SuggestionSource(str, Enum):
    """Which extraction rung produced the suggestions."""

    ORDINAL = "ordinal"
    QUOTED = "quoted"
    DEFAULT = "default"
    FAILURE = "failure"


class NormalizedResponse(CamelModel):
    """
    Assistant reply plus suggested next utterances.

    Attributes:
        reply: Non-empty reply text
        suggestions: 1 to 3 non-empty suggestions, never empty
        degraded: True when the backend call failed and a safe fallback was used
        produced_at: When the response was produced
        reply_source: Extraction path for the reply
        suggestion_source: Extraction path for the suggestions
    """

    reply: str = Field(min_length=1)
    suggestions: list[str] = Field(min_length=1, max_length=MAX_SUGGESTIONS)
    degraded: bool = False
    produced_at: datetime
    reply_source: ReplySource
    suggestion_source: SuggestionSource
