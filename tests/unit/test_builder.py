"""Tests for diagnostic assembly and the front-end seam."""

import pytest

from jsdiag.analyzers import AnalyzerRegistry, ErrorAnalyzer
from jsdiag.engine import (
    EnrichmentConfig,
    Frontend,
    FrontendOutput,
    ParseOptions,
    RawParseError,
    SourceType,
    enrich_errors,
    parse_with_diagnostics,
)
from jsdiag.utils.diagnostics import DiagnosticSeverity, ErrorCode
from jsdiag.utils.errors import ParsePanicError, ReportFormatError


class Exploding(ErrorAnalyzer):
    """An analyzer that claims everything and then fails."""

    name = "exploding"
    priority = 1000

    def can_analyze(self, message: str, snippet: str) -> bool:
        return True

    def analyze(self, message: str, snippet: str, column: int):
        raise RuntimeError("boom")


class RecordingFrontend(Frontend):
    """Remembers the source type it was asked to parse with."""

    def __init__(self) -> None:
        self.source_types: list[SourceType] = []

    def parse(self, source_text, source_type, options) -> FrontendOutput:
        self.source_types.append(source_type)
        return FrontendOutput(program="{}")


class TestDiagnosticBuilder:
    """Test suite for DiagnosticBuilder."""

    def test_double_operator_in_component(self, enrich, component_source: str) -> None:
        offset = component_source.index("= =") + 2
        diagnostic = enrich(component_source, "Unexpected token", offset)

        assert diagnostic.code == ErrorCode.E0001
        assert diagnostic.severity == DiagnosticSeverity.ERROR
        assert diagnostic.line == 3
        assert diagnostic.column == 13
        assert diagnostic.snippet == "  const x = = 5;"
        assert diagnostic.message == "Unexpected token"
        assert diagnostic.label == "Invalid double operator"
        assert str(diagnostic.context) == "Component: MyComponent"

    def test_formatted_is_populated(self, enrich) -> None:
        diagnostic = enrich("const class = 5;", "Unexpected reserved word", 6, filename="r.ts")

        assert diagnostic.formatted.startswith("error[E0004]: Unexpected reserved word")
        assert "r.ts:1:7" in diagnostic.formatted
        assert "myClass" in diagnostic.formatted
        assert "\033[" not in diagnostic.formatted

    def test_label_omitted_when_echoing_message(self, enrich) -> None:
        diagnostic = enrich("foo(a b)", "Unexpected token", 6)
        assert diagnostic.label is None

    def test_missing_offset_points_at_start(self, enrich) -> None:
        diagnostic = enrich("let a = 1;\nlet b = 2;", "Something odd")

        assert (diagnostic.line, diagnostic.column) == (1, 1)
        assert diagnostic.snippet == "let a = 1;"
        assert diagnostic.code == ErrorCode.E0000

    def test_empty_source(self, enrich) -> None:
        diagnostic = enrich("", "Unexpected token", 0)

        assert diagnostic.snippet is None
        assert diagnostic.code == ErrorCode.E0001
        assert diagnostic.context is None

    def test_context_can_be_disabled(self, enrich, component_source: str) -> None:
        diagnostic = enrich(component_source, "Unexpected token", 60, detect_context=False)
        assert diagnostic.context is None

    def test_span_end_is_not_populated(self, enrich) -> None:
        diagnostic = enrich("let x = ;", "Unexpected token", 8)
        assert diagnostic.end_line is None
        assert diagnostic.end_column is None

    def test_failing_analyzer_falls_back(self, builder_factory) -> None:
        registry = AnalyzerRegistry([Exploding()])
        builder = builder_factory("let x = ;", registry=registry)

        diagnostic = builder.build(RawParseError("Unexpected token", 8))

        assert diagnostic.code == ErrorCode.E0000
        assert diagnostic.message == "Unexpected token"

    def test_build_all_keeps_every_error_in_order(self, builder_factory) -> None:
        builder = builder_factory("a\nb\nc")
        errors = [RawParseError("third", 4), RawParseError("first", 0), RawParseError("second", 2)]

        diagnostics = builder.build_all(errors)

        assert [d.message for d in diagnostics] == ["third", "first", "second"]
        assert [d.line for d in diagnostics] == [3, 1, 2]

    def test_enrich_errors(self) -> None:
        diagnostics = enrich_errors(
            "app.jsx",
            '<div class="box"></div>',
            [RawParseError("Unexpected token", 5)],
        )

        assert len(diagnostics) == 1
        assert diagnostics[0].code == ErrorCode.E0001


class TestRawParseError:
    """Test suite for decoding raw errors from reports."""

    def test_from_string(self) -> None:
        assert RawParseError.from_dict("oops") == RawParseError("oops", None)

    def test_from_mapping(self) -> None:
        assert RawParseError.from_dict({"message": "oops", "offset": 3}).label_offset == 3
        assert RawParseError.from_dict({"message": "oops", "label_offset": 4}).label_offset == 4

    @pytest.mark.parametrize(
        "entry",
        [
            42,
            {"offset": 1},
            {"message": "x", "offset": -1},
            {"message": "x", "offset": "3"},
            {"message": "x", "offset": True},
        ],
    )
    def test_malformed_entries(self, entry) -> None:
        with pytest.raises(ReportFormatError):
            RawParseError.from_dict(entry)

    def test_frontend_output_from_dict(self) -> None:
        output = FrontendOutput.from_dict(
            {"errors": ["a", {"message": "b", "offset": 1}], "panicked": True}
        )

        assert [e.message for e in output.errors] == ["a", "b"]
        assert output.panicked
        assert output.program == ""

    def test_frontend_output_rejects_non_list(self) -> None:
        with pytest.raises(ReportFormatError):
            FrontendOutput.from_dict({"errors": "a"})


class TestParseWithDiagnostics:
    """Test suite for parse_with_diagnostics."""

    def test_success(self, frontend_factory) -> None:
        frontend = frontend_factory(("Unexpected token", 10), ("Unterminated string", 21))
        source = "const x = = 5;\nlet s = 'abc"

        result = parse_with_diagnostics(frontend, "app.js", source)

        assert result.errors == ["Unexpected token", "Unterminated string"]
        assert [d.code for d in result.diagnostics] == [ErrorCode.E0001, ErrorCode.E0003]
        assert result.has_errors()
        assert result.error_count() == 2

    def test_no_errors(self, frontend_factory) -> None:
        result = parse_with_diagnostics(frontend_factory(), "app.js", "let a = 1;")

        assert result.diagnostics == []
        assert not result.has_errors()
        assert result.to_dict() == {"program": "", "errors": [], "diagnostics": []}

    def test_panic_raises(self, frontend_factory) -> None:
        frontend = frontend_factory(("Unexpected EOF", 0), ("Expected `}`", 3), panicked=True)

        with pytest.raises(ParsePanicError) as excinfo:
            parse_with_diagnostics(frontend, "broken.ts", "{{{")

        assert excinfo.value.message == "Unexpected EOF\nExpected `}`"
        assert excinfo.value.errors == ["Unexpected EOF", "Expected `}`"]
        assert excinfo.value.filename == "broken.ts"

    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("a.js", SourceType.MODULE),
            ("a.mjs", SourceType.MODULE),
            ("a.cjs", SourceType.SCRIPT),
            ("a.jsx", SourceType.JSX),
            ("a.ts", SourceType.TYPESCRIPT),
            ("a.mts", SourceType.TYPESCRIPT),
            ("a.TSX", SourceType.TSX),
            ("README", SourceType.MODULE),
        ],
    )
    def test_source_type_from_filename(self, filename: str, expected: SourceType) -> None:
        frontend = RecordingFrontend()
        parse_with_diagnostics(frontend, filename, "")
        assert frontend.source_types == [expected]

    def test_explicit_source_type_wins(self) -> None:
        frontend = RecordingFrontend()
        options = ParseOptions(source_type=SourceType.SCRIPT)

        result = parse_with_diagnostics(frontend, "a.tsx", "", options)

        assert frontend.source_types == [SourceType.SCRIPT]
        assert result.program == "{}"

    def test_colored_formatting(self, frontend_factory) -> None:
        result = parse_with_diagnostics(
            frontend_factory(("Unexpected token", 0)),
            "a.js",
            "=",
            config=EnrichmentConfig(use_color=True),
        )
        assert "\033[91m" in result.diagnostics[0].formatted
