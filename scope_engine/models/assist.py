"""Proposal assistance models (metadata extraction, copilot, document text)."""

from typing import Optional
from pydantic import Field

from .common import CamelModel


class ExtractedProposalMetadata(CamelModel):
    """Proposal header fields extracted from a client conversation."""
    title: Optional[str] = Field(None, description="Descriptive project title")
    company_name: Optional[str] = Field(None, description="Client company name")
    contact_name: Optional[str] = Field(None, description="Primary contact person")
    contact_email: Optional[str] = Field(None, description="Contact email address")
    engagement_timeline: Optional[str] = Field(None, description="Mentioned timeline or target dates")


class ExtractMetadataRequest(CamelModel):
    chat_transcript: str = ""


class CopilotContext(CamelModel):
    """Proposal the copilot is helping to write."""
    title: Optional[str] = None
    company_name: Optional[str] = None
    template_type: Optional[str] = None


class CopilotRequest(CamelModel):
    prompt: str = ""
    current_content: str = ""
    context: CopilotContext = Field(default_factory=CopilotContext)


class CopilotResponse(CamelModel):
    content: str


class ExtractedDocument(CamelModel):
    """Plain text extracted from an uploaded reference document."""
    filename: str
    text: str
    page_count: int = Field(1, description="Pages read (1 for non-paginated formats)")
    char_count: int = 0


class ConvertDocumentRequest(CamelModel):
    """Ingested document to restructure as a proposal."""
    content: str = ""
    is_html: bool = Field(False, description="Content is already HTML rather than plain text")


class ConvertedProposal(CamelModel):
    """Editor-ready proposal HTML plus metadata found in the document."""
    html_content: str = ""
    metadata: ExtractedProposalMetadata = Field(default_factory=ExtractedProposalMetadata)
