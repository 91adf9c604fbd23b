"""
Analyzer for unexpected tokens and missing expressions.
"""

from jsdiag.analyzers.base import ErrorAnalyzer
from jsdiag.utils.diagnostics import ErrorCode, ErrorInfo


class UnexpectedTokenAnalyzer(ErrorAnalyzer):
    """
    Handles "Unexpected token" and "Expected expression" errors.

    Checks, in order:
    - a doubled assignment operator (``= =`` or ``= = =``)
    - an assignment with nothing on its right-hand side
    - a JSX ``style=`` attribute left without a value
    """

    name = "unexpected-token"
    priority = 100

    def can_analyze(self, message: str, snippet: str) -> bool:
        msg_lower = message.lower()
        return "unexpected token" in msg_lower or "expected expression" in msg_lower

    def analyze(self, message: str, snippet: str, column: int) -> ErrorInfo:
        col = max(column - 1, 0)
        line = snippet.split("\n", 1)[0]

        if "= =" in line or "= = =" in line:
            fixed = line.replace("= = =", "===").replace("= =", "==")
            return ErrorInfo(
                ErrorCode.E0001,
                "Invalid double operator",
                "Two consecutive '=' operators are not valid. Did you mean '==' or '==='?",
                f"Replace '= =' with '==' for a comparison, or drop one '=' for an "
                f"assignment: `{fixed}`",
            )

        if line.strip().endswith("=") or (0 < col < len(line) and line[col] == "="):
            return ErrorInfo(
                ErrorCode.E0001,
                "Missing expression after assignment operator",
                "The '=' operator needs a value on its right-hand side",
                "Add a value after '=': `const x = 5` or `const x = getValue()`",
            )

        if "style=" in snippet and ">" in snippet:
            return ErrorInfo(
                ErrorCode.E0010,
                "Incomplete JSX attribute",
                "A JSX attribute needs a value. Styles are passed as a JavaScript object",
                "For example: `style={{ color: 'red' }}` or `style={styles.container}`",
            )

        return ErrorInfo(
            ErrorCode.E0001,
            message,
            "An unexpected token was found. Check the operators, parentheses and commas",
            "Look for a missing or extra character near the error",
        )
