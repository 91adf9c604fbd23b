"""
jsdiag Language Server Protocol support.

Converts enriched diagnostics into ``lsprotocol`` diagnostics so editors and
language servers can publish them.
"""

from jsdiag.lsp.diagnostics import (
    DiagnosticProvider,
    get_diagnostics_for_document,
    panic_to_lsp_diagnostic,
    to_lsp_diagnostic,
    to_lsp_diagnostics,
)

__all__ = [
    "DiagnosticProvider",
    "get_diagnostics_for_document",
    "panic_to_lsp_diagnostic",
    "to_lsp_diagnostic",
    "to_lsp_diagnostics",
]
