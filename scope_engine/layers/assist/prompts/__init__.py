"""Proposal assistance prompts."""

from .assist_prompts import (
    METADATA_SYSTEM_PROMPT,
    METADATA_USER_PROMPT,
    COPILOT_SYSTEM_PROMPT,
    COPILOT_USER_PROMPT,
    COPILOT_USER_PROMPT_NO_CONTENT,
    CONVERT_DOCUMENT_SYSTEM_PROMPT,
    CONVERT_HTML_USER_PROMPT,
    CONVERT_TEXT_USER_PROMPT,
)

__all__ = [
    "METADATA_SYSTEM_PROMPT",
    "METADATA_USER_PROMPT",
    "COPILOT_SYSTEM_PROMPT",
    "COPILOT_USER_PROMPT",
    "COPILOT_USER_PROMPT_NO_CONTENT",
    "CONVERT_DOCUMENT_SYSTEM_PROMPT",
    "CONVERT_HTML_USER_PROMPT",
    "CONVERT_TEXT_USER_PROMPT",
]
