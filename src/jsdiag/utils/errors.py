"""
Error types and source location tracking for jsdiag.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Attributes:
        line: 1-indexed line number
        column: 1-indexed column number
        offset: 0-indexed character offset from start of source
        filename: Optional filename for error reporting
    """

    line: int
    column: int
    offset: int = 0
    filename: Optional[str] = None

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


class JsDiagError(Exception):
    """Base exception for all jsdiag errors."""

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        self.message = message
        self.location = location
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []

        if self.location:
            parts.append(f"[{self.location}]")

        parts.append(self.message)

        if self.source_line and self.location:
            parts.append(f"\n    {self.source_line}")
            # Add caret pointing to the error column
            padding = " " * (4 + self.location.column - 1)
            parts.append(f"\n{padding}^")

        return " ".join(parts) if not self.source_line else parts[0] + " " + "".join(parts[1:])


class ParsePanicError(JsDiagError):
    """
    Raised when the parser front-end could not produce a usable tree.

    A panicked parse is reported as one aggregate failure: the raw error
    messages are joined into a single message and none of them is enriched.
    """

    def __init__(self, filename: str, errors: Optional[list[str]] = None) -> None:
        self.filename = filename
        self.errors = list(errors or [])
        message = "\n".join(self.errors) if self.errors else f"failed to parse {filename}"
        super().__init__(message, SourceLocation(1, 1, 0, filename))


class RegistryFrozenError(JsDiagError):
    """Raised when an analyzer is registered on a read-only registry."""

    pass


class ReportFormatError(JsDiagError):
    """Raised when a front-end error report cannot be decoded."""

    pass
