"""
Priority-ordered registry of error analyzers.

The registry is the only long-lived state in the enrichment engine. It is
filled once, frozen, and then shared by every caller without locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from jsdiag.analyzers.base import ErrorAnalyzer
from jsdiag.analyzers.jsx import JsxAnalyzer
from jsdiag.analyzers.module import ModuleAnalyzer
from jsdiag.analyzers.reserved_word import ReservedWordAnalyzer
from jsdiag.analyzers.statement import StatementAnalyzer
from jsdiag.analyzers.typescript import TypeScriptAnalyzer
from jsdiag.analyzers.unclosed_bracket import UnclosedBracketAnalyzer
from jsdiag.analyzers.unexpected_token import UnexpectedTokenAnalyzer
from jsdiag.analyzers.unterminated import UnterminatedAnalyzer
from jsdiag.utils.diagnostics import ErrorInfo
from jsdiag.utils.errors import RegistryFrozenError

logger = logging.getLogger(__name__)


def default_analyzers() -> list[ErrorAnalyzer]:
    """Return the built-in analyzers in registration order."""
    return [
        UnexpectedTokenAnalyzer(),
        UnclosedBracketAnalyzer(),
        UnterminatedAnalyzer(),
        ReservedWordAnalyzer(),
        JsxAnalyzer(),
        TypeScriptAnalyzer(),
        ModuleAnalyzer(),
        StatementAnalyzer(),
    ]


class AnalyzerRegistry:
    """
    Holds analyzers sorted by descending priority.

    Analyzers with equal priority keep their registration order. Dispatch
    returns the classification of the first analyzer that claims an error,
    or a generic fallback, so ``analyze`` always produces an ErrorInfo.

    Usage:
        registry = AnalyzerRegistry.with_defaults()
        info = registry.analyze("Unexpected token", "const x = = 5;", 11)
        print(info.code)  # E0001
    """

    def __init__(self, analyzers: Optional[Iterable[ErrorAnalyzer]] = None) -> None:
        # (registration index, analyzer)
        self._entries: list[tuple[int, ErrorAnalyzer]] = []
        self._frozen = False
        for analyzer in analyzers or ():
            self.register(analyzer)

    @classmethod
    def with_defaults(cls) -> "AnalyzerRegistry":
        """Create a registry holding the eight built-in analyzers."""
        return cls(default_analyzers())

    @property
    def analyzers(self) -> tuple[ErrorAnalyzer, ...]:
        """The analyzers in dispatch order."""
        return tuple(analyzer for _, analyzer in self._entries)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, analyzer: ErrorAnalyzer) -> None:
        """
        Add an analyzer and restore dispatch order.

        Raises:
            RegistryFrozenError: If the registry has been frozen
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"cannot register {type(analyzer).__name__}: the registry is read-only"
            )
        self._entries.append((len(self._entries), analyzer))
        self._entries.sort(key=lambda entry: (-entry[1].priority, entry[0]))

    def freeze(self) -> "AnalyzerRegistry":
        """Make the registry read-only and return it."""
        self._frozen = True
        return self

    def find_analyzer(self, message: str, snippet: str) -> Optional[ErrorAnalyzer]:
        """Return the first analyzer claiming the error, if any."""
        for _, analyzer in self._entries:
            if analyzer.can_analyze(message, snippet):
                return analyzer
        return None

    def analyze(self, message: str, snippet: str, column: int) -> ErrorInfo:
        """
        Classify a raw parser error.

        Args:
            message: The raw error message from the front-end
            snippet: The source line the error points at
            column: 1-indexed column of the error

        Returns:
            The claiming analyzer's ErrorInfo, or the fallback (E0000)
        """
        analyzer = self.find_analyzer(message, snippet)
        if analyzer is None:
            logger.debug("No analyzer claimed %r, using fallback", message)
            return ErrorInfo.fallback(message)

        logger.debug("Analyzer %s claimed %r", analyzer.name, message)
        return analyzer.analyze(message, snippet, column)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self.analyzers)


# Built once at import time and never mutated afterwards
DEFAULT_REGISTRY = AnalyzerRegistry.with_defaults().freeze()


def get_default_registry() -> AnalyzerRegistry:
    """Get the shared, read-only registry of built-in analyzers."""
    return DEFAULT_REGISTRY


def analyze_error(message: str, snippet: str = "", column: int = 1) -> ErrorInfo:
    """Classify a raw parser error with the default registry."""
    return DEFAULT_REGISTRY.analyze(message, snippet, column)
