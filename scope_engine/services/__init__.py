"""Services for the scope engine."""

from .claude_client import ClaudeClient, CompletionResult, get_claude_client
from .document_text import extract_document_text

__all__ = [
    "ClaudeClient",
    "CompletionResult",
    "get_claude_client",
    "extract_document_text",
]
