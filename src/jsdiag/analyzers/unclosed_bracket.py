"""
Analyzer for missing closing brackets.
"""

from jsdiag.analyzers.base import ErrorAnalyzer
from jsdiag.utils.diagnostics import ErrorCode, ErrorInfo

# (display name, opener, closer), checked in this order against the message
BRACKETS: tuple[tuple[str, str, str], ...] = (
    ("brace", "{", "}"),
    ("bracket", "[", "]"),
    ("parenthesis", "(", ")"),
)


class UnclosedBracketAnalyzer(ErrorAnalyzer):
    """Handles ``Expected `}``` style errors by counting brackets in the line."""

    name = "unclosed-bracket"
    priority = 90

    def can_analyze(self, message: str, snippet: str) -> bool:
        msg_lower = message.lower()
        return any(f"expected `{close}`" in msg_lower for _, _, close in BRACKETS)

    def analyze(self, message: str, snippet: str, column: int) -> ErrorInfo:
        bracket_name, open_char, close_char = self.detect_bracket_type(message)

        open_count = snippet.count(open_char)
        close_count = snippet.count(close_char)

        return ErrorInfo(
            ErrorCode.E0002,
            f"Missing closing {bracket_name} '{close_char}'",
            f"There are {open_count} opening '{open_char}' but only {close_count} "
            f"closing '{close_char}' in this block",
            f"Add '{close_char}' to close the block. Tip: an editor with bracket "
            f"pair colorization makes this easy to spot",
        )

    @staticmethod
    def detect_bracket_type(message: str) -> tuple[str, str, str]:
        """Pick the bracket family from the closer named in the message."""
        for bracket in BRACKETS[:-1]:
            if bracket[2] in message:
                return bracket
        return BRACKETS[-1]
