"""
Terminal rendering of diagnostics.

Rendering is a pure projection of a Diagnostic to text; it never changes the
diagnostic. ANSI styling is cosmetic and can be switched off.

Example output:
    error[E0002]: Expected `}` but found `EOF`
      --> config.ts:3:12
        |
      3 |   value: 42
        |            ^ Missing closing brace '}'
        |
        = help: There are 0 opening '{' but only 0 closing '}' in this block
        = suggestion: Add '}' to close the block. Tip: ...
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from typing import Optional

from jsdiag.utils.diagnostics import Diagnostic, DiagnosticSeverity

# ANSI escape codes, kept apart from the diagnostic data
SEVERITY_COLORS: dict[DiagnosticSeverity, str] = {
    DiagnosticSeverity.ERROR: "\033[91m",  # Red
    DiagnosticSeverity.WARNING: "\033[93m",  # Yellow
    DiagnosticSeverity.INFO: "\033[96m",  # Cyan
    DiagnosticSeverity.HINT: "\033[92m",  # Green
}

STYLES: dict[str, str] = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "gutter": "\033[94m",  # Blue
    "help": "\033[92m",  # Green
}


def should_use_color(stream=None) -> bool:
    """Colors are used only on a TTY and when NO_COLOR is unset."""
    stream = stream if stream is not None else sys.stdout
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class DiagnosticRenderer:
    """
    Formats diagnostics as multi-section, Rust-like reports.

    Usage:
        renderer = DiagnosticRenderer(use_color=False)
        print(renderer.render(diagnostic))
    """

    def __init__(self, use_color: bool = True) -> None:
        self.use_color = use_color

    def _style(self, name: str) -> str:
        return STYLES[name] if self.use_color else ""

    def _severity_color(self, severity: DiagnosticSeverity) -> str:
        return SEVERITY_COLORS.get(severity, "") if self.use_color else ""

    def render(self, diagnostic: Diagnostic) -> str:
        """
        Render a diagnostic as a formatted string.

        Args:
            diagnostic: The diagnostic to render

        Returns:
            A multi-line string; ANSI codes are included only when use_color is set
        """
        lines: list[str] = []

        reset = self._style("reset")
        bold = self._style("bold")
        blue = self._style("gutter")
        green = self._style("help")
        color = self._severity_color(diagnostic.severity)

        # Header line: error[E0001]: Unexpected token
        code = f"[{diagnostic.code}]" if diagnostic.code else ""
        lines.append(
            f"{color}{bold}{diagnostic.severity.label}{code}{reset}: "
            f"{bold}{diagnostic.message}{reset}"
        )

        # Location line: --> app.ts:1:11
        lines.append(f"  {blue}-->{reset} {diagnostic.location}")

        # Source line with a caret under the column
        if diagnostic.snippet is not None:
            lines.append(f"    {blue}|{reset}")
            lines.append(f"{blue}{diagnostic.line:3} |{reset} {diagnostic.snippet}")

            padding = " " * max(diagnostic.column - 1, 0)
            caret_line = f"    {blue}|{reset} {padding}{color}^{reset}"
            if diagnostic.label:
                caret_line += f" {color}{diagnostic.label}{reset}"
            lines.append(caret_line)

            lines.append(f"    {blue}|{reset}")

        if diagnostic.context is not None:
            lines.append(f"    {blue}={reset} {bold}note:{reset} in {diagnostic.context}")

        if diagnostic.help:
            lines.append(f"    {blue}={reset} {green}help:{reset} {diagnostic.help}")

        if diagnostic.suggestion:
            lines.append(f"    {blue}={reset} {green}suggestion:{reset} {diagnostic.suggestion}")

        return "\n".join(lines)

    def render_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics separated by blank lines."""
        return "\n\n".join(self.render(diagnostic) for diagnostic in diagnostics)


def format_diagnostic(diagnostic: Diagnostic, use_color: Optional[bool] = None) -> str:
    """
    Render a single diagnostic.

    When ``use_color`` is None the terminal policy of ``should_use_color``
    decides.
    """
    if use_color is None:
        use_color = should_use_color()
    return DiagnosticRenderer(use_color=use_color).render(diagnostic)
