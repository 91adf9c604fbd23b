"""
Language Server Protocol diagnostics for jsdiag.

This module converts enriched diagnostics and front-end failures into
LSP-compatible diagnostic messages for display in editors.
"""

from collections.abc import Iterable
from typing import Optional

from lsprotocol import types

from jsdiag.engine.builder import (
    EnrichmentConfig,
    Frontend,
    ParseOptions,
    parse_with_diagnostics,
)
from jsdiag.utils.diagnostics import Diagnostic, DiagnosticSeverity
from jsdiag.utils.errors import ParsePanicError

LSP_SOURCE = "jsdiag"

SEVERITY_MAP: dict[DiagnosticSeverity, types.DiagnosticSeverity] = {
    DiagnosticSeverity.ERROR: types.DiagnosticSeverity.Error,
    DiagnosticSeverity.WARNING: types.DiagnosticSeverity.Warning,
    DiagnosticSeverity.INFO: types.DiagnosticSeverity.Information,
    DiagnosticSeverity.HINT: types.DiagnosticSeverity.Hint,
}

TOKEN_DELIMITERS = "()[]{},:;=<>"


def _token_end(snippet: Optional[str], character: int) -> int:
    """Find the 0-indexed end of the token starting at ``character``."""
    if not snippet or character >= len(snippet):
        return character + 1

    rest_of_line = snippet[character:]
    for i, c in enumerate(rest_of_line):
        if c.isspace() or c in TOKEN_DELIMITERS:
            return character + max(1, i)
    return character + len(rest_of_line)


def to_lsp_diagnostic(diagnostic: Diagnostic) -> types.Diagnostic:
    """
    Convert a jsdiag diagnostic to an LSP diagnostic.

    Positions become 0-indexed; help and suggestion are folded into the
    message since LSP has no dedicated fields for them.

    Args:
        diagnostic: The enriched diagnostic

    Returns:
        The LSP diagnostic
    """
    line = max(0, diagnostic.line - 1)
    character = max(0, diagnostic.column - 1)

    message_parts = [diagnostic.message]
    if diagnostic.label:
        message_parts.append(diagnostic.label)
    if diagnostic.context is not None:
        message_parts.append(f"note: in {diagnostic.context}")
    if diagnostic.help:
        message_parts.append(f"help: {diagnostic.help}")
    if diagnostic.suggestion:
        message_parts.append(f"suggestion: {diagnostic.suggestion}")

    return types.Diagnostic(
        range=types.Range(
            start=types.Position(line=line, character=character),
            end=types.Position(line=line, character=_token_end(diagnostic.snippet, character)),
        ),
        message="\n".join(message_parts),
        severity=SEVERITY_MAP.get(diagnostic.severity, types.DiagnosticSeverity.Error),
        code=diagnostic.code,
        source=LSP_SOURCE,
    )


def to_lsp_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[types.Diagnostic]:
    """Convert many diagnostics, keeping their order."""
    return [to_lsp_diagnostic(diagnostic) for diagnostic in diagnostics]


def panic_to_lsp_diagnostic(error: ParsePanicError) -> types.Diagnostic:
    """Report a panicked parse as a single error at the top of the document."""
    return types.Diagnostic(
        range=types.Range(
            start=types.Position(line=0, character=0),
            end=types.Position(line=0, character=1),
        ),
        message=error.message,
        severity=types.DiagnosticSeverity.Error,
        source=LSP_SOURCE,
    )


class DiagnosticProvider:
    """
    Generates LSP diagnostics for one document.

    The provider runs the given parser front-end, enriches its errors and
    converts them for the editor. A panicked parse yields one diagnostic.
    """

    def __init__(
        self,
        frontend: Frontend,
        source: str,
        uri: str,
        options: Optional[ParseOptions] = None,
    ) -> None:
        """
        Initialize the diagnostic provider.

        Args:
            frontend: The parser front-end
            source: The document text
            uri: The document URI, also used to infer the source type
            options: Front-end options
        """
        self.frontend = frontend
        self.source = source
        self.uri = uri
        self.options = options

    def get_diagnostics(self) -> list[types.Diagnostic]:
        """
        Get all diagnostics for the document.

        Returns:
            List of LSP diagnostic objects
        """
        try:
            result = parse_with_diagnostics(
                self.frontend,
                self.uri,
                self.source,
                self.options,
                config=EnrichmentConfig(use_color=False),
            )
        except ParsePanicError as e:
            return [panic_to_lsp_diagnostic(e)]

        return to_lsp_diagnostics(result.diagnostics)


def get_diagnostics_for_document(
    frontend: Frontend, source: str, uri: str
) -> list[types.Diagnostic]:
    """Convenience function to get diagnostics for a document."""
    return DiagnosticProvider(frontend, source, uri).get_diagnostics()
