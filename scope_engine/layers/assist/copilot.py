"""Proposal writing copilot - free-form HTML prose on request."""

import logging
from typing import Optional

from scope_engine.exceptions import ClaudeClientError, GenerationError, InputValidationError
from scope_engine.models import CopilotContext

from ..base_generator import BaseGenerator
from .prompts import (
    COPILOT_SYSTEM_PROMPT,
    COPILOT_USER_PROMPT,
    COPILOT_USER_PROMPT_NO_CONTENT,
)

logger = logging.getLogger(__name__)


class CopilotWriter(BaseGenerator):
    """Writes or rewrites proposal content as editor-ready HTML."""

    _generator_name = "CopilotWriter"

    async def respond(
        self,
        prompt: str,
        current_content: str = "",
        context: Optional[CopilotContext] = None,
    ) -> str:
        """
        Generate proposal content for a user request.

        Args:
            prompt: What the user wants written or changed
            current_content: Current editor content, if any
            context: Proposal title, company and template type

        Returns:
            Raw HTML text from the model

        Raises:
            InputValidationError: blank prompt
            GenerationError: completion service failure
        """
        if not prompt or not prompt.strip():
            raise InputValidationError("Prompt is required")

        context = context or CopilotContext()
        system_prompt = COPILOT_SYSTEM_PROMPT.format(
            title=context.title or "Not yet set",
            company_name=context.company_name or "Not yet set",
            template_type=context.template_type or "project",
        )
        if current_content:
            user_prompt = COPILOT_USER_PROMPT.format(current_content=current_content, prompt=prompt)
        else:
            user_prompt = COPILOT_USER_PROMPT_NO_CONTENT.format(prompt=prompt)

        try:
            async with self._operation("respond"):
                return await self._call_claude(
                    system_prompt,
                    user_prompt,
                    max_tokens=self.settings.copilot_max_tokens,
                    temperature=self.settings.copilot_temperature,
                    section_name="respond",
                )
        except ClaudeClientError as e:
            raise GenerationError(
                "Failed to generate AI response. Please try again.",
                details={"error_code": e.error_code},
            ) from e
