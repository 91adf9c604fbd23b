"""
Assembly of diagnostics from raw parser errors.

The parser front-end is an external collaborator: it hands over a list of
raw errors (a message plus an optional character offset) and a ``panicked``
flag. For every raw error the builder maps the offset to a position, pulls
the offending line, asks the analyzer registry for a classification and
merges the lot into an immutable Diagnostic.
"""

from __future__ import annotations

import dataclasses
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from jsdiag.analyzers.registry import AnalyzerRegistry, get_default_registry
from jsdiag.engine.context import ContextDetector
from jsdiag.engine.rendering import DiagnosticRenderer
from jsdiag.utils.diagnostics import Diagnostic, DiagnosticSeverity, ErrorInfo
from jsdiag.utils.errors import ParsePanicError, ReportFormatError
from jsdiag.utils.source import line_at, offset_to_line_col

logger = logging.getLogger(__name__)


# =============================================================================
# Front-end Types
# =============================================================================


class SourceType(Enum):
    """How the front-end should read a source file."""

    SCRIPT = "script"
    MODULE = "module"
    JSX = "jsx"
    TSX = "tsx"
    TYPESCRIPT = "typescript"

    @classmethod
    def from_path(cls, filename: str) -> "SourceType":
        """Infer the source type from a file extension."""
        extensions = {
            ".mjs": cls.MODULE,
            ".js": cls.MODULE,
            ".cjs": cls.SCRIPT,
            ".jsx": cls.JSX,
            ".ts": cls.TYPESCRIPT,
            ".mts": cls.TYPESCRIPT,
            ".cts": cls.TYPESCRIPT,
            ".tsx": cls.TSX,
        }
        return extensions.get(Path(filename).suffix.lower(), cls.MODULE)


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """
    Options forwarded to the front-end.

    Attributes:
        source_type: Explicit source type; inferred from the filename when None
        preserve_parens: Whether the front-end keeps parenthesized expressions
    """

    source_type: Optional[SourceType] = None
    preserve_parens: Optional[bool] = None

    def resolve_source_type(self, filename: str) -> SourceType:
        return self.source_type or SourceType.from_path(filename)


@dataclass(frozen=True, slots=True)
class RawParseError:
    """
    A syntax error exactly as the front-end reports it.

    Attributes:
        message: Natural-language error message
        label_offset: 0-indexed character offset of the error, if labelled
    """

    message: str
    label_offset: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> "RawParseError":
        """
        Decode ``{"message": ..., "offset": ...}`` (``label_offset`` is accepted too).

        Raises:
            ReportFormatError: If the entry is malformed
        """
        if isinstance(data, str):
            return cls(data)
        if not isinstance(data, Mapping):
            raise ReportFormatError(f"error entry must be an object or a string, got {data!r}")

        message = data.get("message")
        if not isinstance(message, str):
            raise ReportFormatError(f"error entry has no string 'message': {data!r}")

        offset = data.get("offset", data.get("label_offset"))
        if offset is not None and (
            isinstance(offset, bool) or not isinstance(offset, int) or offset < 0
        ):
            raise ReportFormatError(f"error offset must be a non-negative integer, got {offset!r}")

        return cls(message, offset)


@dataclass(slots=True)
class FrontendOutput:
    """
    Everything a front-end returns for one parse call.

    Attributes:
        program: Serialized program, opaque to the enrichment engine
        errors: Raw syntax errors in report order
        panicked: True when no usable tree could be built at all
    """

    program: str = ""
    errors: list[RawParseError] = field(default_factory=list)
    panicked: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FrontendOutput":
        """
        Decode a front-end report mapping.

        Raises:
            ReportFormatError: If the report is malformed
        """
        errors = data.get("errors", [])
        if not isinstance(errors, list):
            raise ReportFormatError("'errors' must be a list")

        program = data.get("program", "")
        if not isinstance(program, str):
            raise ReportFormatError("'program' must be a string")

        return cls(
            program=program,
            errors=[RawParseError.from_dict(entry) for entry in errors],
            panicked=bool(data.get("panicked", False)),
        )


class Frontend(ABC):
    """
    A JavaScript/TypeScript parser front-end.

    Implement this to plug a real parser into ``parse_with_diagnostics``.
    """

    @abstractmethod
    def parse(
        self, source_text: str, source_type: SourceType, options: ParseOptions
    ) -> FrontendOutput:
        """Parse source text and report raw errors."""
        pass


class StaticFrontend(Frontend):
    """Replays an already computed front-end output, whatever the input."""

    def __init__(self, output: FrontendOutput) -> None:
        self.output = output

    def parse(
        self, source_text: str, source_type: SourceType, options: ParseOptions
    ) -> FrontendOutput:
        return self.output


# =============================================================================
# Enrichment
# =============================================================================


@dataclass(slots=True)
class EnrichmentConfig:
    """
    Configuration of the diagnostic builder.

    Attributes:
        detect_context: Attach the enclosing component or hook to diagnostics
        use_color: Style the ``formatted`` text with ANSI codes
    """

    detect_context: bool = True
    use_color: bool = False


@dataclass(slots=True)
class ParseResult:
    """
    Result of a parse call with enriched diagnostics.

    Attributes:
        program: Serialized program from the front-end
        errors: Raw error messages in report order
        diagnostics: One diagnostic per raw error, in the same order
    """

    program: str
    errors: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def has_errors(self) -> bool:
        return any(d.is_error for d in self.diagnostics)

    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.is_error)

    def to_dict(self) -> dict[str, Any]:
        return {
            "program": self.program,
            "errors": list(self.errors),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


class DiagnosticBuilder:
    """
    Builds diagnostics for the raw errors of one source file.

    Usage:
        builder = DiagnosticBuilder("app.ts", source)
        for raw in raw_errors:
            print(builder.build(raw).formatted)
    """

    def __init__(
        self,
        filename: str,
        source_text: str,
        registry: Optional[AnalyzerRegistry] = None,
        config: Optional[EnrichmentConfig] = None,
    ) -> None:
        """
        Initialize the builder.

        Args:
            filename: File name shown in diagnostics
            source_text: The full source the offsets refer to
            registry: Analyzer registry; the shared default one when None
            config: Enrichment configuration
        """
        self.filename = filename
        self.source_text = source_text
        self.registry = registry if registry is not None else get_default_registry()
        self.config = config or EnrichmentConfig()
        self.renderer = DiagnosticRenderer(use_color=self.config.use_color)
        self._context_detector: Optional[ContextDetector] = None

    @property
    def context_detector(self) -> ContextDetector:
        if self._context_detector is None:
            self._context_detector = ContextDetector(self.source_text)
        return self._context_detector

    def build(self, error: RawParseError) -> Diagnostic:
        """Enrich one raw error into a Diagnostic."""
        line, column = offset_to_line_col(self.source_text, error.label_offset)
        snippet = line_at(self.source_text, line)
        info = self._classify(error.message, snippet or "", column)
        context = self.context_detector.detect(line) if self.config.detect_context else None

        diagnostic = Diagnostic(
            severity=DiagnosticSeverity.ERROR,
            code=info.code,
            message=error.message,
            filename=self.filename,
            line=line,
            column=column,
            snippet=snippet,
            label=info.message if info.message != error.message else None,
            help=info.help,
            suggestion=info.suggestion,
            context=context,
        )
        logger.debug("%s at %s:%d:%d", info.code, self.filename, line, column)

        return dataclasses.replace(diagnostic, formatted=self.renderer.render(diagnostic))

    def build_all(self, errors: Iterable[RawParseError]) -> list[Diagnostic]:
        """Enrich every raw error; none is ever dropped."""
        return [self.build(error) for error in errors]

    def _classify(self, message: str, snippet: str, column: int) -> ErrorInfo:
        try:
            return self.registry.analyze(message, snippet, column)
        except Exception:
            # A misbehaving custom analyzer must not hide the error
            logger.exception("Analyzer failed on %r, using fallback", message)
            return ErrorInfo.fallback(message)


def enrich_errors(
    filename: str,
    source_text: str,
    errors: Iterable[RawParseError],
    registry: Optional[AnalyzerRegistry] = None,
    config: Optional[EnrichmentConfig] = None,
) -> list[Diagnostic]:
    """
    Convenience function to enrich a list of raw errors.

    Args:
        filename: File name shown in diagnostics
        source_text: The full source the offsets refer to
        errors: Raw errors from the front-end
        registry: Analyzer registry; the shared default one when None
        config: Enrichment configuration

    Returns:
        One Diagnostic per raw error, in order
    """
    return DiagnosticBuilder(filename, source_text, registry, config).build_all(errors)


def enrich_output(
    filename: str,
    source_text: str,
    output: FrontendOutput,
    registry: Optional[AnalyzerRegistry] = None,
    config: Optional[EnrichmentConfig] = None,
) -> ParseResult:
    """
    Turn a front-end output into a ParseResult.

    Raises:
        ParsePanicError: If the front-end panicked; its errors are not enriched
    """
    messages = [error.message for error in output.errors]
    if output.panicked:
        logger.warning("Parser front-end panicked on %s (%d error(s))", filename, len(messages))
        raise ParsePanicError(filename, messages)

    diagnostics = enrich_errors(filename, source_text, output.errors, registry, config)
    return ParseResult(program=output.program, errors=messages, diagnostics=diagnostics)


def parse_with_diagnostics(
    frontend: Frontend,
    filename: str,
    source_text: str,
    options: Optional[ParseOptions] = None,
    registry: Optional[AnalyzerRegistry] = None,
    config: Optional[EnrichmentConfig] = None,
) -> ParseResult:
    """
    Parse a file with a front-end and enrich its errors.

    Args:
        frontend: The parser front-end to run
        filename: File name, also used to infer the source type
        source_text: The source to parse
        options: Front-end options; an explicit source type wins over the extension
        registry: Analyzer registry; the shared default one when None
        config: Enrichment configuration

    Returns:
        The ParseResult with one diagnostic per raw error

    Raises:
        ParsePanicError: If the front-end could not build a tree
    """
    options = options or ParseOptions()
    source_type = options.resolve_source_type(filename)
    output = frontend.parse(source_text, source_type, options)
    return enrich_output(filename, source_text, output, registry, config)
