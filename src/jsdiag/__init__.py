"""
jsdiag - Actionable diagnostics for JavaScript/TypeScript parser errors.

jsdiag takes the terse syntax errors reported by a parser front-end and turns
them into diagnostics with a stable error code, the offending source line,
a help text, a concrete suggestion and, where it applies, the enclosing
React component or hook.
"""

from jsdiag.analyzers import AnalyzerRegistry, ErrorAnalyzer, analyze_error
from jsdiag.engine import (
    DiagnosticBuilder,
    RawParseError,
    enrich_errors,
    format_diagnostic,
    parse_with_diagnostics,
)
from jsdiag.utils.diagnostics import Diagnostic, ErrorCode, ErrorInfo

__version__ = "0.1.0"
__all__ = [
    "analyze_error",
    "enrich_errors",
    "parse_with_diagnostics",
    "format_diagnostic",
    "AnalyzerRegistry",
    "ErrorAnalyzer",
    "DiagnosticBuilder",
    "RawParseError",
    "Diagnostic",
    "ErrorCode",
    "ErrorInfo",
]
