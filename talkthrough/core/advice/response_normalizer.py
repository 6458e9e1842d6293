"""
Response normalizer for free-form model output.

Converts raw backend text into a NormalizedResponse through a fallback ladder:
labelled INSIGHT/SUGGESTIONS sections, ordinal suggestion lines, quoted
phrases anywhere in the text, and finally fixed defaults. Each rung is a
separate function that returns an empty result instead of raising.

Dependencies: talkthrough.models.advice
System role: Parsing boundary between the text backend and the conversation
"""

import logging
import re
from datetime import datetime, timezone

from talkthrough.models.advice import (
    MAX_SUGGESTIONS,
    NormalizedResponse,
    ReplySource,
    SuggestionSource,
)

logger = logging.getLogger(__name__)

DEFAULT_REPLY = (
    "I understand your situation. Let me help you think through this conversation."
)

DEFAULT_SUGGESTIONS: tuple[str, ...] = (
    "That's a good point. How do you feel about that?",
    "I understand. What would you like to do next?",
    "That makes sense. Can you tell me more about that?",
)

# Quoted phrases need at least this many hits before they count as suggestions
MIN_QUOTED_SUGGESTIONS = 2

# Markers may be wrapped in markdown bold, e.g. "**INSIGHT:**"
INSIGHT_MARKER = re.compile(r"\**\s*INSIGHT\s*:\s*\**")
SUGGESTIONS_MARKER = re.compile(r"\**\s*SUGGEST(?:IONS|ED REPLIES)\s*:\s*\**")
# Ordinal text must sit on the same line as its number
ORDINAL_LINE = re.compile(r"^[ \t]*\d+\.[ \t]*(\S.*?)[ \t]*$", re.MULTILINE)
QUOTED_PHRASE = re.compile(r"[\"“]([^\"“”]+)[\"”]")


def extract_reply(raw_text: str) -> tuple[str, ReplySource]:
    """
    Extract the reply text.

    The reply is the text after the INSIGHT marker up to the SUGGESTIONS
    marker (or end of text); without an INSIGHT marker it is the whole text.

    Returns:
        tuple[str, ReplySource]: Stripped reply (possibly empty) and its source
    """
    insight = INSIGHT_MARKER.search(raw_text)
    if insight is None:
        return raw_text.strip(), ReplySource.RAW

    remainder = raw_text[insight.end():]
    suggestions = SUGGESTIONS_MARKER.search(remainder)
    if suggestions is not None:
        remainder = remainder[: suggestions.start()]
    return remainder.strip(), ReplySource.INSIGHT


def extract_ordinal_suggestions(raw_text: str) -> list[str]:
    """Numbered lines ("1. text") in the SUGGESTIONS section, prefixes stripped."""
    marker = SUGGESTIONS_MARKER.search(raw_text)
    if marker is None:
        return []
    section = raw_text[marker.end():]
    return [match.strip() for match in ORDINAL_LINE.findall(section) if match.strip()]


def extract_quoted_suggestions(raw_text: str) -> list[str]:
    """Quoted phrases anywhere in the text, if there are at least two of them."""
    quoted = [match.strip() for match in QUOTED_PHRASE.findall(raw_text) if match.strip()]
    if len(quoted) < MIN_QUOTED_SUGGESTIONS:
        return []
    return quoted[:MAX_SUGGESTIONS]


def extract_suggestions(raw_text: str) -> tuple[list[str], SuggestionSource]:
    """Walk the suggestion ladder and return the first non-empty rung."""
    ordinal = extract_ordinal_suggestions(raw_text)
    if ordinal:
        return ordinal[:MAX_SUGGESTIONS], SuggestionSource.ORDINAL

    quoted = extract_quoted_suggestions(raw_text)
    if quoted:
        return quoted, SuggestionSource.QUOTED

    return list(DEFAULT_SUGGESTIONS), SuggestionSource.DEFAULT


def normalize(raw_text: str | None, produced_at: datetime | None = None) -> NormalizedResponse:
    """
    Normalize raw model output into a reply and up to three suggestions.

    Never raises: anything unusable resolves to the fixed defaults.

    Args:
        raw_text: Raw text returned by the generation backend
        produced_at: Timestamp to stamp on the result (defaults to now, UTC)

    Returns:
        NormalizedResponse: Non-degraded response with non-empty suggestions
    """
    text = raw_text if isinstance(raw_text, str) else ""

    reply, reply_source = extract_reply(text)
    if not reply:
        reply, reply_source = DEFAULT_REPLY, ReplySource.DEFAULT

    suggestions, suggestion_source = extract_suggestions(text)

    if suggestion_source is not SuggestionSource.ORDINAL:
        logger.debug(
            f"{__name__}:normalize - fallback used reply_source={reply_source.value} "
            f"suggestion_source={suggestion_source.value} raw_len={len(text)}"
        )

    return NormalizedResponse(
        reply=reply,
        suggestions=suggestions,
        degraded=False,
        produced_at=produced_at or datetime.now(timezone.utc),
        reply_source=reply_source,
        suggestion_source=suggestion_source,
    )
