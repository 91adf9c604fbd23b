"""
Diagnostic data model for jsdiag.

This module holds the stable error-code catalogue shared with downstream
tooling, the ``ErrorInfo`` record produced by the error analyzers and the
immutable ``Diagnostic`` handed back to callers.

Example rendering of a Diagnostic (see ``jsdiag.engine.rendering``):
    error[E0004]: Unexpected reserved word
      --> reserved.ts:1:7
        |
      1 | const class = 5;
        |       ^ Reserved word used as an identifier
        |
        = help: 'class' is reserved by JavaScript and cannot be used as a variable name
        = suggestion: Pick another name, for example `myClass` or `class_value`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from jsdiag.engine.context import ContextMatch


# =============================================================================
# Error Codes Catalog
# =============================================================================


class ErrorCode:
    """
    Centralized catalog of error codes for jsdiag diagnostics.

    The codes are a wire contract: downstream tooling branches on them.
    Error codes are organized by family:
    - E000x: General syntax errors
    - E001x: JSX errors
    - E002x: TypeScript errors
    - E003x: ES module errors
    - E004x: Statement context errors
    """

    # General syntax: E000x
    E0000 = "E0000"  # unclassified syntax error
    E0001 = "E0001"  # unexpected token
    E0002 = "E0002"  # unclosed bracket
    E0003 = "E0003"  # unterminated literal
    E0004 = "E0004"  # reserved word as identifier

    # JSX: E001x
    E0010 = "E0010"  # invalid JSX syntax / style attribute
    E0011 = "E0011"  # 'class' attribute
    E0012 = "E0012"  # lowercase event handler
    E0013 = "E0013"  # 'for' attribute

    # TypeScript: E002x
    E0020 = "E0020"  # invalid type annotation
    E0021 = "E0021"  # missing parameter type
    E0022 = "E0022"  # empty or invalid generic
    E0023 = "E0023"  # readonly property assignment

    # ES modules: E003x
    E0030 = "E0030"  # import/export outside a module
    E0031 = "E0031"  # invalid default export
    E0032 = "E0032"  # named imports without braces
    E0033 = "E0033"  # invalid import attributes

    # Statement context: E004x
    E0040 = "E0040"  # return outside function
    E0041 = "E0041"  # await outside async function
    E0042 = "E0042"  # yield outside generator
    E0043 = "E0043"  # break/continue outside loop


# Error code descriptions for documentation
ERROR_DESCRIPTIONS: dict[str, str] = {
    ErrorCode.E0000: "syntax error",
    ErrorCode.E0001: "unexpected token",
    ErrorCode.E0002: "unclosed bracket",
    ErrorCode.E0003: "unterminated literal",
    ErrorCode.E0004: "reserved word used as an identifier",
    ErrorCode.E0010: "invalid JSX syntax",
    ErrorCode.E0011: "'class' attribute in JSX",
    ErrorCode.E0012: "lowercase event handler in JSX",
    ErrorCode.E0013: "'for' attribute in JSX",
    ErrorCode.E0020: "invalid type annotation",
    ErrorCode.E0021: "missing parameter type",
    ErrorCode.E0022: "empty or invalid generic",
    ErrorCode.E0023: "assignment to a readonly property",
    ErrorCode.E0030: "import/export outside an ES module",
    ErrorCode.E0031: "invalid default export",
    ErrorCode.E0032: "named imports without braces",
    ErrorCode.E0033: "invalid import attributes",
    ErrorCode.E0040: "'return' outside of function",
    ErrorCode.E0041: "'await' outside of async function",
    ErrorCode.E0042: "'yield' outside of generator",
    ErrorCode.E0043: "'break' or 'continue' outside of loop",
}


def explain_code(code: str) -> Optional[str]:
    """Return the one-line description of an error code, if it is known."""
    return ERROR_DESCRIPTIONS.get(code.strip().upper())


# =============================================================================
# Diagnostic Types
# =============================================================================


class DiagnosticSeverity(Enum):
    """Severity level of a diagnostic message."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"

    @property
    def label(self) -> str:
        """Get the label for this severity."""
        return self.value


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    """
    Classification of one raw parser error, produced by an error analyzer.

    Attributes:
        code: Stable error code (e.g., "E0004")
        message: Short description of what went wrong
        help: Explanation of the rule that was broken
        suggestion: Concrete, human-readable fix
    """

    code: str
    message: str
    help: str
    suggestion: str

    @classmethod
    def fallback(cls, message: str) -> "ErrorInfo":
        """Create the generic classification used when no analyzer applies."""
        return cls(
            code=ErrorCode.E0000,
            message=message,
            help="Check the syntax around this line",
            suggestion="See the JavaScript/TypeScript documentation for this construct",
        )


@dataclass(frozen=True)
class Diagnostic:
    """
    A fully enriched, displayable description of one source error.

    Diagnostics are immutable: the builder assembles every field, including
    the rendered ``formatted`` text, before handing one out.

    Attributes:
        severity: The severity level (ERROR, WARNING, INFO, HINT)
        code: Error code like "E0001"
        message: The raw message reported by the parser front-end
        filename: File the error belongs to
        line: 1-indexed line number
        column: 1-indexed column number
        end_line: Reserved for multi-line spans, currently never populated
        end_column: Reserved for multi-line spans, currently never populated
        snippet: The offending source line
        label: Short annotation displayed next to the caret
        help: Explanation of the rule that was broken
        suggestion: Concrete fix suggestion
        context: Nearest enclosing component or hook, if any
        formatted: Rendered, human-readable report
    """

    severity: DiagnosticSeverity
    code: Optional[str]
    message: str
    filename: str
    line: int = 1
    column: int = 1
    end_line: Optional[int] = None
    end_column: Optional[int] = None
    snippet: Optional[str] = None
    label: Optional[str] = None
    help: Optional[str] = None
    suggestion: Optional[str] = None
    context: Optional[ContextMatch] = None
    formatted: str = field(default="", compare=False)

    @property
    def location(self) -> str:
        """The ``filename:line:column`` triple used in reports."""
        return f"{self.filename}:{self.line}:{self.column}"

    @property
    def is_error(self) -> bool:
        return self.severity == DiagnosticSeverity.ERROR

    def to_simple_message(self) -> str:
        """Get a simple one-line error message for compatibility."""
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable mapping."""
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "filename": self.filename,
            "line": self.line,
            "column": self.column,
            "end_line": self.end_line,
            "end_column": self.end_column,
            "snippet": self.snippet,
            "label": self.label,
            "help": self.help,
            "suggestion": self.suggestion,
            "context": (
                {"kind": self.context.kind.value, "name": self.context.name}
                if self.context
                else None
            ),
            "formatted": self.formatted,
        }


# =============================================================================
# Module Exports
# =============================================================================

__all__ = [
    # Error codes
    "ErrorCode",
    "ERROR_DESCRIPTIONS",
    "explain_code",
    # Core types
    "DiagnosticSeverity",
    "ErrorInfo",
    "Diagnostic",
]
