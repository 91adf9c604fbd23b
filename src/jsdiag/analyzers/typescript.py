"""
Analyzer for TypeScript type syntax.
"""

from typing import Optional

from jsdiag.analyzers.base import ErrorAnalyzer
from jsdiag.utils.diagnostics import ErrorCode, ErrorInfo


class TypeScriptAnalyzer(ErrorAnalyzer):
    """Handles errors in type annotations, parameter types and generics."""

    name = "typescript"
    priority = 60

    def can_analyze(self, message: str, snippet: str) -> bool:
        return "type" in message.lower() or ": " in snippet

    def analyze(self, message: str, snippet: str, column: int) -> ErrorInfo:
        error = (
            self.check_empty_type_annotation(snippet)
            or self.check_missing_parameter_type(snippet)
            or self.check_invalid_generic(snippet)
            or self.check_readonly_assignment(message)
        )
        if error is not None:
            return error

        return ErrorInfo(
            ErrorCode.E0020,
            message,
            "TypeScript syntax error. Check the type annotations",
            "See https://www.typescriptlang.org/docs/handbook/2/everyday-types.html",
        )

    def check_empty_type_annotation(self, snippet: str) -> Optional[ErrorInfo]:
        if ": =" in snippet or ":=" in snippet or ": ;" in snippet:
            return ErrorInfo(
                ErrorCode.E0020,
                "Empty type annotation",
                "A type annotation (:) must be followed by a valid type",
                "Add the type: `const x: number = 5` or `const x: string = 'hello'`",
            )
        return None

    def check_missing_parameter_type(self, snippet: str) -> Optional[ErrorInfo]:
        if "(" in snippet and ":)" in snippet:
            return ErrorInfo(
                ErrorCode.E0021,
                "Missing parameter type",
                "A parameter followed by ':' must name its type",
                "For example: `function foo(param: string)`, or use `any` temporarily",
            )
        return None

    def check_invalid_generic(self, snippet: str) -> Optional[ErrorInfo]:
        if "<>" in snippet or "<," in snippet:
            return ErrorInfo(
                ErrorCode.E0022,
                "Empty or invalid generic",
                "Generics must contain at least one type: Array<T>",
                "Specify a type: `Array<string>` or `Promise<void>`",
            )
        return None

    def check_readonly_assignment(self, message: str) -> Optional[ErrorInfo]:
        if "readonly" in message.lower():
            return ErrorInfo(
                ErrorCode.E0023,
                "Assignment to a readonly property",
                "Properties marked 'readonly' cannot change after initialization",
                "Remove 'readonly' if the property must change, or create a new instance",
            )
        return None
