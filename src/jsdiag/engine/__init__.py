"""
jsdiag Enrichment Engine.

This package turns raw parser errors into diagnostics:
- DiagnosticBuilder: merges position, snippet and classification
- ContextDetector: finds the enclosing component or hook of an error
- DiagnosticRenderer: formats diagnostics for the terminal
"""

from jsdiag.engine.builder import (
    DiagnosticBuilder,
    EnrichmentConfig,
    Frontend,
    FrontendOutput,
    ParseOptions,
    ParseResult,
    RawParseError,
    SourceType,
    StaticFrontend,
    enrich_errors,
    enrich_output,
    parse_with_diagnostics,
)
from jsdiag.engine.context import ContextDetector, ContextKind, ContextMatch, detect_context
from jsdiag.engine.rendering import DiagnosticRenderer, format_diagnostic, should_use_color

__all__ = [
    # Builder
    "DiagnosticBuilder",
    "EnrichmentConfig",
    "RawParseError",
    "ParseResult",
    "enrich_errors",
    "enrich_output",
    "parse_with_diagnostics",
    # Front-end seam
    "Frontend",
    "FrontendOutput",
    "StaticFrontend",
    "ParseOptions",
    "SourceType",
    # Context
    "ContextDetector",
    "ContextKind",
    "ContextMatch",
    "detect_context",
    # Rendering
    "DiagnosticRenderer",
    "format_diagnostic",
    "should_use_color",
]
