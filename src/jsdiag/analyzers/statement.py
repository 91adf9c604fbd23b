"""
Analyzer for statements used outside the construct they belong to.
"""

from jsdiag.analyzers.base import ErrorAnalyzer
from jsdiag.utils.diagnostics import ErrorCode, ErrorInfo


class StatementAnalyzer(ErrorAnalyzer):
    """
    Handles ``return``, ``await``, ``yield``, ``break`` and ``continue``
    appearing outside a function, async function, generator or loop.
    """

    name = "statement"
    priority = 40

    def can_analyze(self, message: str, snippet: str) -> bool:
        msg_lower = message.lower()
        return (
            ("return" in msg_lower and "type" not in msg_lower)
            or "await" in msg_lower
            or "yield" in msg_lower
            or "break" in msg_lower
            or "continue" in msg_lower
        )

    def analyze(self, message: str, snippet: str, column: int) -> ErrorInfo:
        msg_lower = message.lower()

        if "return" in msg_lower:
            return self._analyze_return(snippet)
        if "await" in msg_lower:
            return self._analyze_await(snippet)
        if "yield" in msg_lower:
            return self._analyze_yield()
        if "break" in msg_lower or "continue" in msg_lower:
            return self._analyze_loop_control(msg_lower)

        return ErrorInfo.fallback(message)

    def _analyze_return(self, snippet: str) -> ErrorInfo:
        if "<" in snippet and ">" in snippet:
            return ErrorInfo(
                ErrorCode.E0040,
                "'return' used outside of a function",
                "In React, JSX must be returned from inside a function or component",
                "Move the return into a component: `function Component() { return <View />; }`",
            )

        return ErrorInfo(
            ErrorCode.E0040,
            "'return' used outside of a function",
            "A 'return' statement can only appear inside a function body",
            "Move the code into a function: `function myFunc() { return value; }`",
        )

    def _analyze_await(self, snippet: str) -> ErrorInfo:
        if "function" in snippet and "async" not in snippet:
            return ErrorInfo(
                ErrorCode.E0041,
                "'await' used in a non-async function",
                "The 'await' operator can only be used inside a function marked 'async'",
                "Add 'async' before 'function': `async function myFunc() { await promise; }`",
            )

        return ErrorInfo(
            ErrorCode.E0041,
            "'await' used outside of an async function",
            "The 'await' operator can only be used inside a function marked 'async'",
            "Create an async function: `async function myFunc() { await promise; }` "
            "or use an IIFE: `(async () => { await promise; })()`",
        )

    def _analyze_yield(self) -> ErrorInfo:
        return ErrorInfo(
            ErrorCode.E0042,
            "'yield' used outside of a generator",
            "The 'yield' operator can only be used inside a generator function (function*)",
            "Create a generator: `function* myGenerator() { yield value; }`",
        )

    def _analyze_loop_control(self, msg_lower: str) -> ErrorInfo:
        keyword = "break" if "break" in msg_lower else "continue"

        return ErrorInfo(
            ErrorCode.E0043,
            f"'{keyword}' used outside of a loop",
            f"A '{keyword}' statement can only appear inside a loop (for, while, do-while)",
            f"Put '{keyword}' inside a loop: "
            f"`for (let i = 0; i < 10; i++) {{ if (cond) {keyword}; }}`",
        )
