"""
Relationship advice prompt builder.

Turns a relationship category and survey answers into the single instruction
string stored with a session. Output is deterministic: no randomness and no
timestamps, so identical inputs always produce an identical prompt.

Dependencies: talkthrough.core.prompting.relationship_profiles
System role: Prompt template for the advice conversation
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from talkthrough.core.prompting.relationship_profiles import get_guidance, parse_category

logger = logging.getLogger(__name__)

BASE_PROMPT = """You are an elite relationship therapist with years of experience helping people transform their relationships. Your goal is to guide users toward genuine self-awareness and practical breakthroughs.

CONVERSATION APPROACH:
- Build on each response naturally - never repeat the same validation phrases
- Use varied, authentic language to show understanding ("I can see how that would...", "That must feel...", "It makes sense that...")
- Ask insightful questions that help users discover patterns and deeper truths about themselves
- Offer meaningful observations that connect their behavior to underlying needs or fears

CONVERSATION STAGES:
1. EXPLORATION: Help them see patterns in their relationship dynamics through thoughtful questions
2. INSIGHT: Guide them to understand their role and their partner's perspective
3. ACTION: When they show readiness, provide specific, practical steps they can take

RESPONSE STYLE:
- 3-5 sentences that feel substantial and thoughtful
- Vary your language - avoid repetitive phrases
- Balance empathy with gentle challenges that promote growth
- Reference their specific situation, don't give generic advice

RESPONSE FORMAT:
INSIGHT: <your reply to the user>
SUGGESTIONS:
1. <something the user could say next>
2. <something the user could say next>
3. <something the user could say next>

You're not just validating - you're helping them grow and see their relationships more clearly."""

CLOSING_INSTRUCTION = (
    "Remember to tailor your advice specifically to this relationship type "
    "and the user's specific situation."
)

# (answer key, label, value template) in emission order
KNOWN_CONTEXT_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("backgroundContext", "Background Context", "{}"),
    ("duration", "Duration", "{}"),
    ("closeness", "Closeness Level", "{}/10"),
    ("conflictType", "Main Issue", "{}"),
    ("specificContext", "Situation", "{}"),
)

_CAMEL_BOUNDARY = re.compile(r"([A-Z])")


def humanize_key(key: str) -> str:
    """
    Format a survey answer key for display.

    Splits camel-case boundaries and capitalizes the first letter,
    e.g. "workingRelationship" -> "Working Relationship".
    """
    spaced = _CAMEL_BOUNDARY.sub(r" \1", key).strip()
    return spaced[:1].upper() + spaced[1:]


def build_context(category: str, answers: Mapping[str, Any]) -> str:
    """
    Build the user context block.

    Order: category line, known fields in fixed order, then remaining keys in
    mapping order. Falsy values are skipped.
    """
    lines = [f"- Relationship Type: {category}"]

    for key, label, template in KNOWN_CONTEXT_FIELDS:
        value = answers.get(key)
        if value:
            lines.append(f"- {label}: {template.format(value)}")

    known_keys = {key for key, _, _ in KNOWN_CONTEXT_FIELDS}
    for key, value in answers.items():
        if key in known_keys or not value:
            continue
        lines.append(f"- {humanize_key(key)}: {value}")

    return "\n".join(lines)


def build_prompt(category: Any, answers: Mapping[str, Any]) -> str:
    """
    Generate a personalized prompt from relationship type and survey data.

    Args:
        category: Relationship category (personal, professional, casual)
        answers: Survey answer mapping; unknown keys are included verbatim

    Returns:
        str: Complete instruction prompt

    Raises:
        InvalidCategoryError: If category is not one of the supported values
    """
    category_value = parse_category(category).value
    context = build_context(category_value, answers)
    guidance = get_guidance(category_value)

    prompt = f"""{BASE_PROMPT}

User Context:
{context}

{guidance}

{CLOSING_INSTRUCTION}"""

    logger.debug(
        f"{__name__}:build_prompt - category={category_value} "
        f"answer_keys={len(answers)} prompt_len={len(prompt)}"
    )
    return prompt


class PromptBuilder:
    """Injectable wrapper around build_prompt."""

    def build(self, category: Any, answers: Mapping[str, Any]) -> str:
        """Build the instruction prompt for a session."""
        return build_prompt(category, answers)
