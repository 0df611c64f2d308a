"""Proposal assistance: metadata extraction, writing copilot, document conversion."""

from .metadata_extractor import MetadataExtractor
from .copilot import CopilotWriter
from .document_converter import DocumentProposalConverter

__all__ = ["MetadataExtractor", "CopilotWriter", "DocumentProposalConverter"]
