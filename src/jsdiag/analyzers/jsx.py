"""
Analyzer for JSX syntax mistakes.
"""

from typing import Optional

from jsdiag.analyzers.base import ErrorAnalyzer
from jsdiag.utils.diagnostics import ErrorCode, ErrorInfo

# Lowercase DOM event attributes and their JSX spelling
EVENT_HANDLERS: dict[str, str] = {
    "onclick": "onClick",
    "onchange": "onChange",
    "onsubmit": "onSubmit",
    "onfocus": "onFocus",
    "onblur": "onBlur",
    "onmouseover": "onMouseOver",
}


class JsxAnalyzer(ErrorAnalyzer):
    """
    Handles errors in JSX markup.

    The snippet is checked for HTML habits that JSX rejects, in order:
    string ``style`` attributes, ``class``, lowercase event handlers and
    ``for``. The first hit wins.
    """

    name = "jsx"
    priority = 70

    def can_analyze(self, message: str, snippet: str) -> bool:
        if "jsx" in message.lower():
            return True
        return "<" in snippet and ("/>" in snippet or "</" in snippet)

    def analyze(self, message: str, snippet: str, column: int) -> ErrorInfo:
        checks = (
            self.check_style_syntax,
            self.check_class_attribute,
            self.check_event_handlers,
            self.check_for_attribute,
        )
        for check in checks:
            error = check(snippet)
            if error is not None:
                return error

        return ErrorInfo(
            ErrorCode.E0010,
            message,
            "JSX syntax error. Check the tags, attributes and expressions",
            "JavaScript expressions must be wrapped in braces: `{expression}`",
        )

    def check_style_syntax(self, snippet: str) -> Optional[ErrorInfo]:
        if "style=" in snippet and "style={" not in snippet:
            return ErrorInfo(
                ErrorCode.E0010,
                "Invalid JSX style syntax",
                "In JSX and React Native, styles are passed as a JavaScript object",
                "Use `style={{ prop: value }}` or `style={styles.name}`",
            )
        return None

    def check_class_attribute(self, snippet: str) -> Optional[ErrorInfo]:
        if "class=" in snippet and "className=" not in snippet:
            return ErrorInfo(
                ErrorCode.E0011,
                "Invalid 'class' attribute in JSX",
                "JSX uses 'className' instead of 'class' for CSS classes",
                "Replace `class=` with `className=`",
            )
        return None

    def check_event_handlers(self, snippet: str) -> Optional[ErrorInfo]:
        lowered = snippet.lower()
        for handler, camel_case in EVENT_HANDLERS.items():
            if handler in lowered and camel_case not in snippet:
                return ErrorInfo(
                    ErrorCode.E0012,
                    "Lowercase event handler",
                    "JSX event handlers are written in camelCase",
                    f"Use `{camel_case}` instead of `{handler}`. "
                    f"In React Native, use `onPress`",
                )
        return None

    def check_for_attribute(self, snippet: str) -> Optional[ErrorInfo]:
        if "for=" in snippet and "htmlFor=" not in snippet:
            return ErrorInfo(
                ErrorCode.E0013,
                "Invalid 'for' attribute in JSX",
                "JSX uses 'htmlFor' instead of 'for' on labels",
                "Replace `for=` with `htmlFor=`",
            )
        return None
