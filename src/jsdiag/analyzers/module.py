"""
Analyzer for ES module import/export syntax.
"""

from typing import Optional

from jsdiag.analyzers.base import ErrorAnalyzer
from jsdiag.utils.diagnostics import ErrorCode, ErrorInfo


class ModuleAnalyzer(ErrorAnalyzer):
    """Handles errors mentioning ``import`` or ``export``."""

    name = "module"
    priority = 50

    def can_analyze(self, message: str, snippet: str) -> bool:
        msg_lower = message.lower()
        return "import" in msg_lower or "export" in msg_lower

    def analyze(self, message: str, snippet: str, column: int) -> ErrorInfo:
        error = (
            self.check_default_export_syntax(snippet)
            or self.check_named_import_syntax(snippet)
            or self.check_import_attributes(message)
        )
        if error is not None:
            return error

        return ErrorInfo(
            ErrorCode.E0030,
            message,
            "import/export statements are only valid in ES modules",
            "Make sure the file is treated as a module (a .mjs extension or "
            '"type": "module" in package.json)',
        )

    def check_default_export_syntax(self, snippet: str) -> Optional[ErrorInfo]:
        if "export default =" in snippet:
            return ErrorInfo(
                ErrorCode.E0031,
                "Invalid default export syntax",
                "A default export does not take an '=' sign",
                "Use `export default value` or `export default function() {}`",
            )
        return None

    def check_named_import_syntax(self, snippet: str) -> Optional[ErrorInfo]:
        is_plain_import = (
            "import " in snippet
            and " from " in snippet
            and "{" not in snippet
            and "*" not in snippet
            and "import type" not in snippet
        )
        if is_plain_import and "," in snippet:
            return ErrorInfo(
                ErrorCode.E0032,
                "Invalid named import syntax",
                "Named imports must be wrapped in braces",
                "Use `import { name1, name2 } from 'module'`",
            )
        return None

    def check_import_attributes(self, message: str) -> Optional[ErrorInfo]:
        # "assert" also covers "assertion"
        if "assert" in message.lower():
            return ErrorInfo(
                ErrorCode.E0033,
                "Invalid import attributes",
                "Import attributes (formerly import assertions) follow a specific syntax",
                "Use `import data from './data.json' with { type: 'json' }`",
            )
        return None
