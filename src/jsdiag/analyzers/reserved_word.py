"""
Analyzer for reserved words used as identifiers.
"""

from typing import Optional

from jsdiag.analyzers.base import ErrorAnalyzer
from jsdiag.utils.diagnostics import ErrorCode, ErrorInfo

# Scanned in order; the first word found after a declaration keyword wins
RESERVED_WORDS: tuple[str, ...] = (
    "class", "const", "let", "var", "function", "return", "if", "else",
    "for", "while", "do", "switch", "case", "break", "continue",
    "new", "this", "super", "extends", "static", "public", "private",
    "protected", "import", "export", "default", "async", "await",
    "try", "catch", "finally", "throw", "typeof", "instanceof",
    "yield", "enum", "interface", "implements", "package",
)  # fmt: skip

DECLARATION_KEYWORDS: tuple[str, ...] = ("const", "let", "var")


class ReservedWordAnalyzer(ErrorAnalyzer):
    """Handles errors about reserved words and keywords."""

    name = "reserved-word"
    priority = 80

    def can_analyze(self, message: str, snippet: str) -> bool:
        msg_lower = message.lower()
        return "reserved" in msg_lower or "keyword" in msg_lower

    def analyze(self, message: str, snippet: str, column: int) -> ErrorInfo:
        found_word = self.find_reserved_word(snippet)

        return ErrorInfo(
            ErrorCode.E0004,
            "Reserved word used as an identifier",
            f"'{found_word or '(reserved word)'}' is reserved by JavaScript "
            f"and cannot be used as a variable name",
            self.generate_suggestion(found_word),
        )

    @staticmethod
    def find_reserved_word(snippet: str) -> Optional[str]:
        """Find a reserved word declared as a variable in the snippet."""
        for word in RESERVED_WORDS:
            if any(f"{keyword} {word} " in snippet for keyword in DECLARATION_KEYWORDS):
                return word
        return None

    @staticmethod
    def generate_suggestion(word: Optional[str]) -> str:
        if word is None:
            return "Choose another name for your variable"
        capitalized = word[:1].upper() + word[1:]
        return f"Pick another name, for example `my{capitalized}` or `{word}_value`"
