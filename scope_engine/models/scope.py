"""Scope of work models: scope items and the inputs used to generate them."""

from typing import Optional
from pydantic import Field

from .common import CamelModel


class ScopeItem(CamelModel):
    """
    Billable unit of work.

    Lists returned by the generator always satisfy:
    - hours is a positive multiple of 5
    - at least one Project Management item and one Testing/QA item
    - order gives a total order (ties broken by list position)
    """
    story_id: str = Field(..., description="Short identifier, unique within a list")
    hours: int = Field(5, description="Estimated hours (multiple of 5, minimum 5)")
    workstream: str = Field("General", description="Category label without client names")
    customer_story: str = Field("", description="'<Company> wants/needs to ...' statement")
    recommended_approach: str = Field("", description="Bullet lines prefixed with '• '")
    assumptions: str = Field("", description="Bullet lines prefixed with '• '")
    order: int = Field(0, description="Display/processing sequence")


class GuidanceSetting(CamelModel):
    """Organization-specific guidance injected verbatim into the system prompt."""
    name: str
    content: str
    order: int = 0


class KnowledgeBaseDocument(CamelModel):
    """Prior successful scope document used as a reference example."""
    title: str
    company_name: str = ""
    project_type: Optional[str] = None
    extracted_text: Optional[str] = None
    html_content: Optional[str] = None

    @property
    def body(self) -> str:
        """Extracted text when available, otherwise the rendered markup."""
        return self.extracted_text or self.html_content or ""


class PreviousProposal(CamelModel):
    """Excerpt of an earlier proposal for follow-up (phase 2) scopes."""
    title: str
    company_name: str = ""
    html_content: str = ""


class ProjectContext(CamelModel):
    """Project the scope belongs to. Every field is optional."""
    project_name: Optional[str] = None
    account_name: Optional[str] = None
    existing_requirements: Optional[str] = None

    def is_empty(self) -> bool:
        return not (self.project_name or self.account_name or self.existing_requirements)


class GenerateScopeRequest(CamelModel):
    """Inputs for a fresh scope generation."""
    chat_transcript: str = ""
    knowledge_base: list[KnowledgeBaseDocument] = Field(default_factory=list)
    guidance_settings: list[GuidanceSetting] = Field(default_factory=list)
    general_instructions: Optional[str] = None
    company_name: Optional[str] = None
    previous_proposals: list[PreviousProposal] = Field(default_factory=list)
    project_context: Optional[ProjectContext] = None


class RefineScopeRequest(CamelModel):
    """Inputs for refining an existing scope."""
    scope_items: list[ScopeItem] = Field(default_factory=list)
    refinement_instructions: str = ""
    guidance_settings: list[GuidanceSetting] = Field(default_factory=list)
    company_name: Optional[str] = None


class ScopeItemsResponse(CamelModel):
    """Generated or refined scope list."""
    scope_items: list[ScopeItem]


class ExportScopeRequest(CamelModel):
    """Scope list to render as a document."""
    scope_items: list[ScopeItem] = Field(default_factory=list)
    title: str = "Scope of Work"


def sort_scope_items(items: list[ScopeItem]) -> list[ScopeItem]:
    """Sort by order; ties keep their list position (sorted() is stable)."""
    return sorted(items, key=lambda item: item.order)


def total_hours(items: list[ScopeItem]) -> int:
    return sum(item.hours for item in items)
