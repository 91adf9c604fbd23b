"""Tests for the diagnostic data model and the error code catalogue."""

import dataclasses

import pytest

from jsdiag.engine import ContextKind, ContextMatch
from jsdiag.utils.diagnostics import (
    ERROR_DESCRIPTIONS,
    Diagnostic,
    DiagnosticSeverity,
    ErrorCode,
    ErrorInfo,
    explain_code,
)
from jsdiag.utils.errors import JsDiagError, ParsePanicError, SourceLocation


class TestErrorCodes:
    """Test suite for the error code catalogue."""

    def test_every_code_is_described(self) -> None:
        codes = [value for name, value in vars(ErrorCode).items() if name.startswith("E")]

        assert len(codes) == 21
        assert set(codes) == set(ERROR_DESCRIPTIONS)

    def test_explain_code(self) -> None:
        assert explain_code("E0004") == "reserved word used as an identifier"
        assert explain_code(" e0011 ") == "'class' attribute in JSX"
        assert explain_code("E9999") is None


class TestDiagnostic:
    """Test suite for Diagnostic."""

    def test_is_immutable(self) -> None:
        diagnostic = Diagnostic(DiagnosticSeverity.ERROR, "E0001", "Unexpected token", "a.js")

        with pytest.raises(dataclasses.FrozenInstanceError):
            diagnostic.line = 5

    def test_location_and_simple_message(self) -> None:
        diagnostic = Diagnostic(
            DiagnosticSeverity.ERROR, "E0001", "Unexpected token", "a.js", line=2, column=4
        )

        assert diagnostic.location == "a.js:2:4"
        assert diagnostic.to_simple_message() == "[E0001] Unexpected token"
        assert diagnostic.is_error

    def test_to_dict(self) -> None:
        diagnostic = Diagnostic(
            DiagnosticSeverity.WARNING,
            None,
            "odd",
            "a.js",
            context=ContextMatch(ContextKind.CLASS_COMPONENT, "Store"),
        )
        data = diagnostic.to_dict()

        assert data["severity"] == "warning"
        assert data["context"] == {"kind": "class", "name": "Store"}
        assert data["end_line"] is None
        assert not diagnostic.is_error
        assert diagnostic.to_simple_message() == "odd"

    def test_fallback_info(self) -> None:
        info = ErrorInfo.fallback("Weird error")

        assert info.code == ErrorCode.E0000
        assert info.message == "Weird error"


class TestErrors:
    """Test suite for the jsdiag exception hierarchy."""

    def test_error_with_location_and_line(self) -> None:
        error = JsDiagError("bad", SourceLocation(1, 3, 2, "a.js"), "let = 1")

        assert str(error).startswith("[a.js:1:3] bad")
        assert str(error).endswith("      ^")

    def test_panic_without_messages(self) -> None:
        error = ParsePanicError("a.js")

        assert error.message == "failed to parse a.js"
        assert error.errors == []
        assert isinstance(error, JsDiagError)
