"""
Custom exception hierarchy for the scope engine.
Each failure kind carries a structured error code and message.
"""

from typing import Optional, Any


class ScopeEngineError(Exception):
    """Base exception for the scope engine."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


class InputValidationError(ScopeEngineError):
    """Caller supplied invalid input (400 response)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INPUT_001", details=details)


class ClaudeClientError(ScopeEngineError):
    """Completion service transport failure."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_CLAUDE_001", details=details)


class ScopeParseError(ScopeEngineError):
    """Generated scope could not be parsed into scope items."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_PARSE_001", details=details)


class GenerationError(ScopeEngineError):
    """Proposal assistance generation failure."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_GEN_001", details=details)


class DocumentParseError(ScopeEngineError):
    """Reference document text extraction failure."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_DOC_001", details=details)
