"""
jsdiag Error Analyzers.

Each analyzer owns one family of parser errors:
- UnexpectedTokenAnalyzer: unexpected tokens and missing expressions (E0001, E0010)
- UnclosedBracketAnalyzer: missing closing brackets (E0002)
- UnterminatedAnalyzer: unterminated strings and templates (E0003)
- ReservedWordAnalyzer: reserved words used as identifiers (E0004)
- JsxAnalyzer: HTML habits that JSX rejects (E0010-E0013)
- TypeScriptAnalyzer: type annotations and generics (E0020-E0023)
- ModuleAnalyzer: import/export syntax (E0030-E0033)
- StatementAnalyzer: statements outside their construct (E0040-E0043)
"""

from jsdiag.analyzers.base import ErrorAnalyzer
from jsdiag.analyzers.jsx import JsxAnalyzer
from jsdiag.analyzers.module import ModuleAnalyzer
from jsdiag.analyzers.registry import (
    DEFAULT_REGISTRY,
    AnalyzerRegistry,
    analyze_error,
    default_analyzers,
    get_default_registry,
)
from jsdiag.analyzers.reserved_word import ReservedWordAnalyzer
from jsdiag.analyzers.statement import StatementAnalyzer
from jsdiag.analyzers.typescript import TypeScriptAnalyzer
from jsdiag.analyzers.unclosed_bracket import UnclosedBracketAnalyzer
from jsdiag.analyzers.unexpected_token import UnexpectedTokenAnalyzer
from jsdiag.analyzers.unterminated import UnterminatedAnalyzer

__all__ = [
    "ErrorAnalyzer",
    "AnalyzerRegistry",
    "DEFAULT_REGISTRY",
    "default_analyzers",
    "get_default_registry",
    "analyze_error",
    "UnexpectedTokenAnalyzer",
    "UnclosedBracketAnalyzer",
    "UnterminatedAnalyzer",
    "ReservedWordAnalyzer",
    "JsxAnalyzer",
    "TypeScriptAnalyzer",
    "ModuleAnalyzer",
    "StatementAnalyzer",
]
