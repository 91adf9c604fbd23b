"""Tests for component and hook context detection."""

import pytest

from jsdiag.engine import ContextDetector, ContextKind, ContextMatch, detect_context


class TestContextDetector:
    """Test suite for ContextDetector."""

    def test_function_component(self, component_source: str) -> None:
        match = ContextDetector(component_source).detect(3)

        assert match == ContextMatch(ContextKind.COMPONENT, "MyComponent")
        assert str(match) == "Component: MyComponent"

    def test_exported_default_component(self) -> None:
        source = "export default function MyComponent() {\n  const x = 5;\n  return <div />;\n}\n"

        assert detect_context(source, 3) == ContextMatch(ContextKind.COMPONENT, "MyComponent")

    def test_declaration_line_itself(self, component_source: str) -> None:
        assert detect_context(component_source, 2).name == "MyComponent"

    def test_nothing_above(self, component_source: str) -> None:
        assert detect_context(component_source, 1) is None

    def test_hook(self, hook_source: str) -> None:
        match = detect_context(hook_source, 2)

        assert match.kind == ContextKind.HOOK
        assert str(match) == "Hook: useCounter"

    def test_class_component(self, hook_source: str) -> None:
        match = detect_context(hook_source, 8)

        assert match.kind == ContextKind.CLASS_COMPONENT
        assert str(match) == "Class: Counter"

    def test_nearest_declaration_wins(self, hook_source: str) -> None:
        assert detect_context(hook_source, 5).name == "useCounter"
        assert detect_context(hook_source, 6).name == "Counter"

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("export default function App() {", "App"),
            ("const Header = () => <h1 />;", "Header"),
            ("export const Footer = memo(() => null);", "Footer"),
        ],
    )
    def test_function_component_forms(self, line: str, expected: str) -> None:
        match = ContextDetector.match_line(line)

        assert match.kind == ContextKind.COMPONENT
        assert match.name == expected

    def test_lowercase_function_is_ignored(self) -> None:
        assert ContextDetector.match_line("function helper() {") is None

    def test_hook_function(self) -> None:
        assert ContextDetector.match_line("function useTheme() {") == ContextMatch(
            ContextKind.HOOK, "useTheme"
        )

    def test_class_without_extends_is_ignored(self) -> None:
        assert ContextDetector.match_line("class Store {") is None

    def test_line_past_end_is_clamped(self, component_source: str) -> None:
        assert detect_context(component_source, 500).name == "MyComponent"

    def test_empty_source(self) -> None:
        assert detect_context("", 1) is None
