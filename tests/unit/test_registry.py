"""Tests for the analyzer registry and its dispatch order."""

import pytest

from jsdiag.analyzers import (
    DEFAULT_REGISTRY,
    AnalyzerRegistry,
    ErrorAnalyzer,
    analyze_error,
    get_default_registry,
)
from jsdiag.utils.diagnostics import ErrorCode, ErrorInfo
from jsdiag.utils.errors import RegistryFrozenError


class ClaimAll(ErrorAnalyzer):
    """Claims every error and tags it with its own name."""

    def __init__(self, name: str, priority: int) -> None:
        self.name = name
        self.priority = priority

    def can_analyze(self, message: str, snippet: str) -> bool:
        return True

    def analyze(self, message: str, snippet: str, column: int) -> ErrorInfo:
        return ErrorInfo("E9999", self.name, "", "")


class TestAnalyzerRegistry:
    """Test suite for AnalyzerRegistry."""

    def test_defaults_sorted_by_priority(self, registry) -> None:
        priorities = [analyzer.priority for analyzer in registry]

        assert len(registry) == 8
        assert priorities == [100, 90, 85, 80, 70, 60, 50, 40]

    def test_higher_priority_wins(self) -> None:
        """Test that 'unexpected token' beats 'type' in the same message."""
        info = analyze_error("Unexpected token, type annotation expected", "", 1)
        assert info.code == ErrorCode.E0001

    def test_equal_priority_keeps_registration_order(self) -> None:
        registry = AnalyzerRegistry([ClaimAll("first", 10), ClaimAll("second", 10)])
        assert registry.analyze("x", "", 1).message == "first"

    def test_register_reorders(self) -> None:
        registry = AnalyzerRegistry([ClaimAll("low", 1)])
        registry.register(ClaimAll("high", 200))

        assert [a.name for a in registry.analyzers] == ["high", "low"]
        assert registry.analyze("x", "", 1).message == "high"

    def test_custom_analyzer_overrides_builtin(self, registry) -> None:
        registry.register(ClaimAll("custom", 1000))
        assert registry.analyze("Unexpected token", "", 1).code == "E9999"

    def test_fallback_when_nothing_claims(self) -> None:
        info = analyze_error("Something completely different", "", 1)

        assert info.code == ErrorCode.E0000
        assert info.message == "Something completely different"
        assert info.help
        assert info.suggestion

    def test_empty_registry_falls_back(self) -> None:
        info = AnalyzerRegistry().analyze("Unexpected token", "", 1)
        assert info.code == ErrorCode.E0000

    @pytest.mark.parametrize(
        "message,snippet,column",
        [
            ("", "", 1),
            ("", "", 0),
            ("Unexpected token", "", -5),
            ("Expected `}`", "", 1),
            ("Unterminated string", "", 1),
            ("Unexpected reserved word", "", 1),
            ("JSX", "", 1),
            ("Type expected", "", 1),
            ("import", "", 1),
            ("Illegal return", "", 1),
            ("\x00￿", "<é/>", 10_000),
        ],
    )
    def test_always_returns_info(self, message: str, snippet: str, column: int) -> None:
        info = analyze_error(message, snippet, column)

        assert isinstance(info, ErrorInfo)
        assert info.code in {
            getattr(ErrorCode, name) for name in dir(ErrorCode) if name.startswith("E")
        }

    def test_find_analyzer(self, registry) -> None:
        assert registry.find_analyzer("Unterminated string", "").name == "unterminated"
        assert registry.find_analyzer("nothing", "") is None


class TestDefaultRegistry:
    """Test suite for the shared default registry."""

    def test_default_is_frozen(self) -> None:
        assert get_default_registry() is DEFAULT_REGISTRY
        assert DEFAULT_REGISTRY.frozen

    def test_register_on_frozen_registry_raises(self) -> None:
        with pytest.raises(RegistryFrozenError):
            DEFAULT_REGISTRY.register(ClaimAll("late", 1))

        assert len(DEFAULT_REGISTRY) == 8

    def test_freeze_returns_registry(self, registry) -> None:
        assert not registry.frozen
        assert registry.freeze() is registry
        assert registry.frozen
