"""
Pytest configuration and shared fixtures for jsdiag tests.
"""

import pytest

from jsdiag.analyzers import AnalyzerRegistry
from jsdiag.engine import (
    DiagnosticBuilder,
    EnrichmentConfig,
    FrontendOutput,
    RawParseError,
    StaticFrontend,
)
from jsdiag.utils.diagnostics import Diagnostic


@pytest.fixture
def registry() -> AnalyzerRegistry:
    """A fresh, mutable registry holding the built-in analyzers."""
    return AnalyzerRegistry.with_defaults()


@pytest.fixture
def builder_factory():
    """Factory fixture for creating diagnostic builders."""

    def _create_builder(
        source: str,
        filename: str = "test.tsx",
        detect_context: bool = True,
        registry: AnalyzerRegistry = None,
    ) -> DiagnosticBuilder:
        config = EnrichmentConfig(detect_context=detect_context, use_color=False)
        return DiagnosticBuilder(filename, source, registry=registry, config=config)

    return _create_builder


@pytest.fixture
def enrich(builder_factory):
    """Fixture to enrich one error message pointing at a source offset."""

    def _enrich(source: str, message: str, offset: int = None, **kwargs) -> Diagnostic:
        builder = builder_factory(source, **kwargs)
        return builder.build(RawParseError(message, offset))

    return _enrich


@pytest.fixture
def frontend_factory():
    """Factory fixture for front-ends replaying a fixed set of errors."""

    def _create_frontend(*errors: tuple, panicked: bool = False) -> StaticFrontend:
        raw = [RawParseError(message, offset) for message, offset in errors]
        return StaticFrontend(FrontendOutput(program="", errors=raw, panicked=panicked))

    return _create_frontend


@pytest.fixture
def component_source() -> str:
    """A small React component with a syntax error on line 3."""
    return """import React from 'react';
function MyComponent() {
  const x = = 5;
  return <div>{x}</div>;
}
"""


@pytest.fixture
def hook_source() -> str:
    """A custom hook followed by a class component."""
    return """const useCounter = () => {
  const [count, setCount] = useState(0);
  return count;
};

class Counter extends React.Component {
  render() {
    return null;
  }
}
"""
