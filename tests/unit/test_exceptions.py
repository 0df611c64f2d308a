"""Unit tests for custom exception classes.

Tests the exception hierarchy, default error codes, message handling,
details propagation and the HTTP status each failure maps to.
"""

import pytest

from scope_engine.exceptions import (
    ScopeEngineError,
    InputValidationError,
    ClaudeClientError,
    ScopeParseError,
    GenerationError,
    DocumentParseError,
)
from scope_engine.main import status_code_for


class TestScopeEngineError:
    def test_base_error_attributes(self):
        err = ScopeEngineError("Something failed", error_code="ERR_TEST", details={"key": "value"})
        assert err.message == "Something failed"
        assert err.error_code == "ERR_TEST"
        assert err.details == {"key": "value"}
        assert str(err) == "Something failed"

    def test_base_error_defaults(self):
        err = ScopeEngineError("Minimal error")
        assert err.error_code == "ERR_UNKNOWN"
        assert err.details is None

    def test_is_exception_subclass(self):
        assert isinstance(ScopeEngineError("test"), Exception)


class TestSubclassErrorCodes:
    """Each subclass must carry its own default error_code."""

    @pytest.mark.parametrize(
        "exc_type, code",
        [
            (InputValidationError, "ERR_INPUT_001"),
            (ClaudeClientError, "ERR_CLAUDE_001"),
            (ScopeParseError, "ERR_PARSE_001"),
            (GenerationError, "ERR_GEN_001"),
            (DocumentParseError, "ERR_DOC_001"),
        ],
    )
    def test_error_code(self, exc_type, code):
        err = exc_type("failed", details={"reason": "x"})
        assert err.error_code == code
        assert err.message == "failed"
        assert err.details == {"reason": "x"}
        assert isinstance(err, ScopeEngineError)

    def test_catchable_as_base(self):
        with pytest.raises(ScopeEngineError):
            raise ScopeParseError("bad response")


class TestStatusCodes:
    @pytest.mark.parametrize(
        "err, status_code",
        [
            (InputValidationError("x"), 400),
            (DocumentParseError("x"), 422),
            (ClaudeClientError("x"), 502),
            (ScopeParseError("x"), 502),
            (GenerationError("x"), 500),
            (ScopeEngineError("x"), 500),
        ],
    )
    def test_mapping(self, err, status_code):
        assert status_code_for(err) == status_code
