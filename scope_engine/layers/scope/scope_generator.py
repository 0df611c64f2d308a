"""Scope generator - turns a client conversation into scope items and refines them."""

import logging
from typing import Optional

from scope_engine.config import Settings
from scope_engine.exceptions import InputValidationError
from scope_engine.models import GenerateScopeRequest, GuidanceSetting, ScopeItem
from scope_engine.services import ClaudeClient

from ..base_generator import BaseGenerator
from .normalizer import (
    GENERATE_FAILURE_MESSAGE,
    REFINE_FAILURE_MESSAGE,
    ScopeNormalizer,
)
from .prompt_builder import ScopePromptBuilder

logger = logging.getLogger(__name__)


class ScopeGenerator(BaseGenerator):
    """
    Scope of work generation and refinement.

    Both operations run the same sequential pipeline with exactly one
    completion call:

        assemble prompts → Claude → normalize → enforce mandatory items

    Any failure ends the call with a single exception; no partial list is
    returned and the caller's existing list is never modified.
    """

    _generator_name = "ScopeGenerator"

    def __init__(
        self,
        claude_client: Optional[ClaudeClient] = None,
        settings: Optional[Settings] = None,
    ):
        super().__init__(claude_client, settings)
        self.normalizer = ScopeNormalizer(
            pm_hours=self.settings.default_pm_hours,
            testing_hours=self.settings.default_testing_hours,
        )

    async def generate(self, request: GenerateScopeRequest) -> list[ScopeItem]:
        """
        Generate a fresh scope from a chat transcript.

        An empty transcript is accepted (the API layer rejects it first) and
        simply yields a scope generated from nothing.

        Args:
            request: Transcript plus optional knowledge base, guidance,
                     general instructions, company name, previous proposals
                     and project context

        Returns:
            Normalized scope list with Project Management and Testing items

        Raises:
            ClaudeClientError: completion service failure
            ScopeParseError: response could not be parsed
        """
        async with self._operation("generate"):
            if not request.chat_transcript.strip():
                logger.warning(f"[{self._generator_name}] generating from an empty transcript")

            builder = ScopePromptBuilder(request.company_name)
            system_prompt, user_prompt = builder.build_generate_prompts(request)

            raw_text = await self._call_claude(
                system_prompt,
                user_prompt,
                max_tokens=self.settings.scope_max_tokens,
                temperature=self.settings.scope_temperature,
                section_name="generate",
            )
            items = self.normalizer.normalize(raw_text, GENERATE_FAILURE_MESSAGE)

            logger.info(
                f"[{self._generator_name}] generated {len(items)} items "
                f"({sum(item.hours for item in items)}h, "
                f"{len(request.knowledge_base)} reference docs, "
                f"{len(request.guidance_settings)} guidance settings)"
            )
            return items

    async def refine(
        self,
        existing_items: list[ScopeItem],
        refinement_instructions: str,
        guidance_settings: list[GuidanceSetting],
        company_name: Optional[str] = None,
    ) -> list[ScopeItem]:
        """
        Apply a natural-language change instruction to an existing scope.

        The generator is asked for the complete revised list; the result
        replaces the caller's list wholesale.

        Args:
            existing_items: Current scope list (serialized into the prompt)
            refinement_instructions: Change request, must not be blank
            guidance_settings: Same guidance used for the original generation
            company_name: Company used to template example phrasing

        Returns:
            New normalized scope list

        Raises:
            InputValidationError: blank instruction (no call is made)
            ClaudeClientError: completion service failure
            ScopeParseError: response could not be parsed
        """
        if not refinement_instructions or not refinement_instructions.strip():
            raise InputValidationError("Refinement instructions are required")

        async with self._operation("refine"):
            builder = ScopePromptBuilder(company_name)
            system_prompt, user_prompt = builder.build_refine_prompts(
                existing_items,
                refinement_instructions,
                guidance_settings,
            )

            raw_text = await self._call_claude(
                system_prompt,
                user_prompt,
                max_tokens=self.settings.scope_max_tokens,
                temperature=self.settings.scope_temperature,
                section_name="refine",
            )
            items = self.normalizer.normalize(raw_text, REFINE_FAILURE_MESSAGE)

            logger.info(
                f"[{self._generator_name}] refined {len(existing_items)} → {len(items)} items"
            )
            return items
