"""Data models for the scope engine."""

from .common import CamelModel
from .scope import (
    ScopeItem,
    GuidanceSetting,
    KnowledgeBaseDocument,
    PreviousProposal,
    ProjectContext,
    GenerateScopeRequest,
    RefineScopeRequest,
    ScopeItemsResponse,
    ExportScopeRequest,
    sort_scope_items,
    total_hours,
)
from .assist import (
    ExtractedProposalMetadata,
    ExtractMetadataRequest,
    CopilotContext,
    CopilotRequest,
    CopilotResponse,
    ExtractedDocument,
    ConvertDocumentRequest,
    ConvertedProposal,
)
from .error import ErrorResponse

__all__ = [
    "CamelModel",
    # Scope models
    "ScopeItem",
    "GuidanceSetting",
    "KnowledgeBaseDocument",
    "PreviousProposal",
    "ProjectContext",
    "GenerateScopeRequest",
    "RefineScopeRequest",
    "ScopeItemsResponse",
    "ExportScopeRequest",
    "sort_scope_items",
    "total_hours",
    # Assistance models
    "ExtractedProposalMetadata",
    "ExtractMetadataRequest",
    "CopilotContext",
    "CopilotRequest",
    "CopilotResponse",
    "ExtractedDocument",
    "ConvertDocumentRequest",
    "ConvertedProposal",
    # Errors
    "ErrorResponse",
]
