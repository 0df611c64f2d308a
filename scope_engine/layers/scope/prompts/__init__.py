"""Scope generation prompts."""

from .scope_prompts import (
    BULLET,
    BASE_RULES_PROMPT,
    GENERAL_INSTRUCTIONS_HEADER,
    GUIDANCE_HEADER,
    NUMERIC_REMINDER_PROMPT,
    PREVIOUS_PROPOSALS_HEADER,
    PREVIOUS_PROPOSALS_FOOTER,
    PROJECT_CONTEXT_HEADER,
    TRANSCRIPT_HEADER,
    REFERENCE_EXAMPLES_HEADER,
    SECTION_DIVIDER,
    SCOPE_ITEM_SCHEMA,
    GENERATE_OUTPUT_PROMPT,
    JSON_ONLY_INSTRUCTION,
    REFINE_PROMPT,
)

__all__ = [
    "BULLET",
    "BASE_RULES_PROMPT",
    "GENERAL_INSTRUCTIONS_HEADER",
    "GUIDANCE_HEADER",
    "NUMERIC_REMINDER_PROMPT",
    "PREVIOUS_PROPOSALS_HEADER",
    "PREVIOUS_PROPOSALS_FOOTER",
    "PROJECT_CONTEXT_HEADER",
    "TRANSCRIPT_HEADER",
    "REFERENCE_EXAMPLES_HEADER",
    "SECTION_DIVIDER",
    "SCOPE_ITEM_SCHEMA",
    "GENERATE_OUTPUT_PROMPT",
    "JSON_ONLY_INSTRUCTION",
    "REFINE_PROMPT",
]
