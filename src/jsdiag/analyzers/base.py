"""
Base class for parser error analyzers.
"""

from abc import ABC, abstractmethod

from jsdiag.utils.diagnostics import ErrorInfo


class ErrorAnalyzer(ABC):
    """
    A stateless classifier owning one family of parser errors.

    Analyzers are consulted in descending ``priority`` order; the first one
    whose ``can_analyze`` returns True classifies the error. Both methods
    must be total: they never raise, whatever text they are given.
    """

    #: Short identifier used in logs
    name: str = "analyzer"

    #: Dispatch priority, higher values are consulted first
    priority: int = 50

    @abstractmethod
    def can_analyze(self, message: str, snippet: str) -> bool:
        """Return True if this analyzer claims the error."""
        pass

    @abstractmethod
    def analyze(self, message: str, snippet: str, column: int) -> ErrorInfo:
        """Classify a claimed error."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(priority={self.priority})"
