"""
Detection of the component or hook surrounding an error.

This is a locality aid, not a scope resolver: starting at the error line it
scans upward and reports the nearest declaration that looks like a function
component, a class component or a custom hook.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from jsdiag.utils.source import split_lines

# Tried in order; the first pattern that matches a line wins
FUNCTION_COMPONENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?:export\s+)?(?:default\s+)?function\s+([A-Z][a-zA-Z0-9]*)"),
    re.compile(r"const\s+([A-Z][a-zA-Z0-9]*)\s*="),
    re.compile(r"export\s+const\s+([A-Z][a-zA-Z0-9]*)\s*="),
)
CLASS_COMPONENT_PATTERN = re.compile(r"class\s+([A-Z][a-zA-Z0-9]*)")
HOOK_PATTERN = re.compile(r"(?:const|function)\s+(use[A-Z][a-zA-Z0-9]*)")


class ContextKind(Enum):
    """Kind of construct enclosing an error."""

    COMPONENT = "component"
    CLASS_COMPONENT = "class"
    HOOK = "hook"

    @property
    def title(self) -> str:
        titles = {
            ContextKind.COMPONENT: "Component",
            ContextKind.CLASS_COMPONENT: "Class",
            ContextKind.HOOK: "Hook",
        }
        return titles[self]


@dataclass(frozen=True, slots=True)
class ContextMatch:
    """The nearest component or hook declaration found above an error."""

    kind: ContextKind
    name: str

    def __str__(self) -> str:
        return f"{self.kind.title}: {self.name}"


class ContextDetector:
    """
    Finds the nearest enclosing component, class component or hook.

    Example:
        detector = ContextDetector(source)
        match = detector.detect(12)
        if match:
            print(match)  # Component: UserProfile
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.lines = split_lines(source)

    def detect(self, line: int) -> Optional[ContextMatch]:
        """
        Scan upward from a line for a component or hook declaration.

        Args:
            line: 1-indexed line of the error; clamped into the source

        Returns:
            The nearest match, or None when no line above matches
        """
        if not self.lines:
            return None

        start = min(max(line - 1, 0), len(self.lines) - 1)
        for index in range(start, -1, -1):
            match = self.match_line(self.lines[index])
            if match is not None:
                return match
        return None

    @classmethod
    def match_line(cls, text: str) -> Optional[ContextMatch]:
        """Apply the component, class and hook checks to one line."""
        name = cls._extract_function_component(text)
        if name:
            return ContextMatch(ContextKind.COMPONENT, name)

        if "class " in text and "extends" in text:
            name = cls._extract_first(CLASS_COMPONENT_PATTERN, text)
            if name:
                return ContextMatch(ContextKind.CLASS_COMPONENT, name)

        if "const use" in text or "function use" in text:
            name = cls._extract_first(HOOK_PATTERN, text)
            if name:
                return ContextMatch(ContextKind.HOOK, name)

        return None

    @classmethod
    def _extract_function_component(cls, text: str) -> Optional[str]:
        for pattern in FUNCTION_COMPONENT_PATTERNS:
            name = cls._extract_first(pattern, text)
            if name:
                return name
        return None

    @staticmethod
    def _extract_first(pattern: re.Pattern[str], text: str) -> Optional[str]:
        match = pattern.search(text)
        return match.group(1) if match else None


def detect_context(source: str, line: int) -> Optional[ContextMatch]:
    """Convenience function to detect the context of a single line."""
    return ContextDetector(source).detect(line)
