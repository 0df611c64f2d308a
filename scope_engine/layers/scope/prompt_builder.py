"""Prompt assembly for scope generation and refinement.

The system and user prompts are built from ordered, optional sections.
Each section is a pure function of its inputs and returns "" when it has
nothing to contribute, so identical inputs always yield identical prompts.

System prompt order:
┌────┬──────────────────────────┬──────────────────────────────────────┐
│ #  │ Section                  │ Emitted when                         │
├────┼──────────────────────────┼──────────────────────────────────────┤
│ 1  │ Base rules               │ always                               │
│ 2  │ General instructions     │ instructions non-empty               │
│ 3  │ Guidance settings        │ at least one setting                 │
│ 4  │ Numeric reminder         │ section 2 or 3 was emitted           │
└────┴──────────────────────────┴──────────────────────────────────────┘

User prompt order (generate):
previous proposals → project context → transcript → reference examples →
output format.
"""

import json
from typing import Optional

from scope_engine.models import (
    GenerateScopeRequest,
    GuidanceSetting,
    KnowledgeBaseDocument,
    PreviousProposal,
    ProjectContext,
    ScopeItem,
)

from .prompts import (
    BULLET,
    BASE_RULES_PROMPT,
    GENERAL_INSTRUCTIONS_HEADER,
    GUIDANCE_HEADER,
    NUMERIC_REMINDER_PROMPT,
    PREVIOUS_PROPOSALS_HEADER,
    PREVIOUS_PROPOSALS_FOOTER,
    PROJECT_CONTEXT_HEADER,
    TRANSCRIPT_HEADER,
    SECTION_DIVIDER,
    SCOPE_ITEM_SCHEMA,
    GENERATE_OUTPUT_PROMPT,
    JSON_ONLY_INSTRUCTION,
    REFINE_PROMPT,
)
from .reference_context import build_reference_context


# ===================================================================
# System prompt sections
# ===================================================================

def base_rules_section(company_name: Optional[str] = None) -> str:
    """Grounding, numeric, formatting and mandatory-category rules."""
    company = (company_name or "").strip()
    return BASE_RULES_PROMPT.format(
        company=company or "the company",
        example_company=company or "Acme Corp",
        story_company=company or "[Company]",
        bullet=BULLET,
    ).strip()


def general_instructions_section(general_instructions: Optional[str]) -> str:
    if not general_instructions or not general_instructions.strip():
        return ""
    return f"{GENERAL_INSTRUCTIONS_HEADER}\n{general_instructions.strip()}"


def guidance_section(guidance_settings: list[GuidanceSetting]) -> str:
    """Guidance blocks in ascending order; equal orders keep input order."""
    if not guidance_settings:
        return ""
    blocks = [GUIDANCE_HEADER]
    for setting in sorted(guidance_settings, key=lambda s: s.order):
        blocks.append(f"{setting.name}:\n{setting.content}")
    return "\n\n".join(blocks)


def numeric_reminder_section(has_injected_text: bool) -> str:
    # Must follow the injected text directly.
    return NUMERIC_REMINDER_PROMPT if has_injected_text else ""


# ===================================================================
# User prompt sections
# ===================================================================

def previous_proposals_section(previous_proposals: list[PreviousProposal]) -> str:
    if not previous_proposals:
        return ""
    lines = [PREVIOUS_PROPOSALS_HEADER]
    for index, prev in enumerate(previous_proposals, 1):
        lines.append("")
        lines.append(f"Proposal {index}:")
        lines.append(f"Title: {prev.title}")
        lines.append(f"Company: {prev.company_name}")
        lines.append(f"Previous Scope:\n{prev.html_content}")
        lines.append(SECTION_DIVIDER)
    lines.append("")
    lines.append(PREVIOUS_PROPOSALS_FOOTER)
    return "\n".join(lines)


def project_context_section(project_context: Optional[ProjectContext]) -> str:
    if project_context is None or project_context.is_empty():
        return ""
    lines = [PROJECT_CONTEXT_HEADER]
    if project_context.project_name:
        lines.append(f"Project Name: {project_context.project_name}")
    if project_context.account_name:
        lines.append(f"Client: {project_context.account_name}")
    if project_context.existing_requirements:
        lines.append(f"Existing Requirements: {project_context.existing_requirements}")
    return "\n".join(lines)


def transcript_section(chat_transcript: str) -> str:
    return f"{TRANSCRIPT_HEADER}\n{chat_transcript or ''}"


def reference_examples_section(knowledge_base: list[KnowledgeBaseDocument]) -> str:
    return build_reference_context(knowledge_base).strip()


def output_format_section(has_previous_proposals: bool = False) -> str:
    previous_note = " and previous proposal context" if has_previous_proposals else ""
    return "\n\n".join([
        GENERATE_OUTPUT_PROMPT.format(previous_note=previous_note),
        SCOPE_ITEM_SCHEMA,
        JSON_ONLY_INSTRUCTION,
    ])


def serialize_scope_items(items: list[ScopeItem]) -> str:
    """Scope list as indented camelCase JSON, exactly as the generator returns it."""
    return json.dumps(
        [item.model_dump(by_alias=True) for item in items],
        indent=2,
        ensure_ascii=False,
    )


def _join_sections(sections: list[str]) -> str:
    return "\n\n".join(section for section in sections if section)


class ScopePromptBuilder:
    """
    Builds (system_prompt, user_prompt) pairs.

    The builder holds no state besides the company name used to template
    example phrasing, so one instance can serve any number of calls.
    """

    def __init__(self, company_name: Optional[str] = None):
        self.company_name = company_name

    def build_system_prompt(
        self,
        guidance_settings: list[GuidanceSetting],
        general_instructions: Optional[str] = None,
    ) -> str:
        instructions = general_instructions_section(general_instructions)
        guidance = guidance_section(guidance_settings)
        return _join_sections([
            base_rules_section(self.company_name),
            instructions,
            guidance,
            numeric_reminder_section(bool(instructions or guidance)),
        ])

    def build_generate_prompts(self, request: GenerateScopeRequest) -> tuple[str, str]:
        """System and user prompt for a fresh generation."""
        system_prompt = self.build_system_prompt(
            request.guidance_settings,
            request.general_instructions,
        )
        user_prompt = _join_sections([
            previous_proposals_section(request.previous_proposals),
            project_context_section(request.project_context),
            transcript_section(request.chat_transcript),
            reference_examples_section(request.knowledge_base),
            output_format_section(bool(request.previous_proposals)),
        ])
        return system_prompt, user_prompt

    def build_refine_prompts(
        self,
        existing_items: list[ScopeItem],
        refinement_instructions: str,
        guidance_settings: list[GuidanceSetting],
    ) -> tuple[str, str]:
        """System and user prompt for refining an existing list."""
        system_prompt = self.build_system_prompt(guidance_settings)
        user_prompt = REFINE_PROMPT.format(
            existing_scope=serialize_scope_items(existing_items),
            instructions=refinement_instructions.strip(),
            bullet=BULLET,
        )
        return system_prompt, user_prompt
