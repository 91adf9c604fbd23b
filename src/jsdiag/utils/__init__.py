"""
jsdiag Utilities Package.

Common utilities for error handling, source locations, and diagnostics.
"""

from jsdiag.utils.diagnostics import (
    ERROR_DESCRIPTIONS,
    Diagnostic,
    DiagnosticSeverity,
    ErrorCode,
    ErrorInfo,
    explain_code,
)
from jsdiag.utils.errors import (
    JsDiagError,
    ParsePanicError,
    RegistryFrozenError,
    ReportFormatError,
    SourceLocation,
)
from jsdiag.utils.source import line_at, location_at, offset_to_line_col, split_lines

__all__ = [
    # Errors
    "JsDiagError",
    "ParsePanicError",
    "RegistryFrozenError",
    "ReportFormatError",
    "SourceLocation",
    # Error codes
    "ErrorCode",
    "ERROR_DESCRIPTIONS",
    "explain_code",
    # Core diagnostic types
    "DiagnosticSeverity",
    "ErrorInfo",
    "Diagnostic",
    # Source helpers
    "offset_to_line_col",
    "location_at",
    "line_at",
    "split_lines",
]
