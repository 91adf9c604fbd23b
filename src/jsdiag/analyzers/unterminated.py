"""
Analyzer for unterminated string and template literals.
"""

from jsdiag.analyzers.base import ErrorAnalyzer
from jsdiag.utils.diagnostics import ErrorCode, ErrorInfo


class UnterminatedAnalyzer(ErrorAnalyzer):
    """Handles "Unterminated ..." errors."""

    name = "unterminated"
    priority = 85

    def can_analyze(self, message: str, snippet: str) -> bool:
        return "unterminated" in message.lower()

    def analyze(self, message: str, snippet: str, column: int) -> ErrorInfo:
        msg_lower = message.lower()

        if "string" in msg_lower:
            return self._analyze_string(snippet)
        if "template" in msg_lower:
            return self._analyze_template()
        return self._analyze_generic(message)

    def _analyze_string(self, snippet: str) -> ErrorInfo:
        # Single quotes only win when the line has no double quote at all
        quote = "'" if "'" in snippet and '"' not in snippet else '"'

        return ErrorInfo(
            ErrorCode.E0003,
            "Unterminated string literal",
            f"A string must be closed with the same quote ({quote}) it was opened with",
            f"Add {quote} at the end of the string to close it",
        )

    def _analyze_template(self) -> ErrorInfo:
        return ErrorInfo(
            ErrorCode.E0003,
            "Unterminated template literal",
            "A template literal (`) must be closed with a backtick (`)",
            "Add ` at the end of the template literal",
        )

    def _analyze_generic(self, message: str) -> ErrorInfo:
        return ErrorInfo(
            ErrorCode.E0003,
            message,
            "A piece of syntax is not closed properly",
            "Check the quotes, backticks and other delimiters",
        )
