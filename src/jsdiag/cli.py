"""
jsdiag Command-Line Interface.

Provides commands to enrich parser error reports and inspect the
classification rules.

Usage:
    jsdiag report errors.json              # Enrich a front-end error report
    jsdiag report errors.json -f json      # ... as JSON
    jsdiag analyze "Unexpected token" --snippet "const x = = 5;" --column 11
    jsdiag context src/App.tsx 42          # Enclosing component or hook
    jsdiag explain E0004                   # Describe an error code
    jsdiag codes                           # List all error codes

A report is a JSON object produced by a parser front-end:
    {
        "filename": "App.tsx",
        "source": "...",                   # or "source_path": "App.tsx"
        "errors": [{"message": "Unexpected token", "offset": 42}],
        "panicked": false
    }
"""

import argparse
import dataclasses
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

from lsprotocol.converters import get_converter

from jsdiag import __version__
from jsdiag.analyzers import get_default_registry
from jsdiag.engine import (
    ContextDetector,
    DiagnosticRenderer,
    EnrichmentConfig,
    FrontendOutput,
    StaticFrontend,
    parse_with_diagnostics,
)
from jsdiag.lsp import to_lsp_diagnostics
from jsdiag.utils.diagnostics import ERROR_DESCRIPTIONS, explain_code
from jsdiag.utils.errors import JsDiagError, ParsePanicError, ReportFormatError

logger = logging.getLogger("jsdiag")


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"

    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.GREEN = ""
        cls.YELLOW = ""
        cls.CYAN = ""
        cls.GRAY = ""
        cls.BOLD = ""
        cls.RESET = ""

    @classmethod
    def enabled(cls) -> bool:
        return bool(cls.RESET)


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    # Disable colors if not a TTY or if NO_COLOR is set
    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


# Initialize on module load
_init_colors()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="jsdiag",
        description="jsdiag - actionable diagnostics for JavaScript/TypeScript parser errors",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Report command
    report_parser = subparsers.add_parser(
        "report",
        aliases=["r"],
        help="Enrich a parser front-end error report",
    )
    report_parser.add_argument(
        "input",
        type=Path,
        help="JSON report produced by a parser front-end",
    )
    report_parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json", "lsp"],
        default="text",
        help="Output format (default: text)",
    )
    report_parser.add_argument(
        "--no-context",
        action="store_true",
        help="Do not look up the enclosing component or hook",
    )

    # Analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        aliases=["a"],
        help="Classify a single parser error message",
    )
    analyze_parser.add_argument("message", help="Raw parser error message")
    analyze_parser.add_argument(
        "-s",
        "--snippet",
        default="",
        help="Source line the error points at",
    )
    analyze_parser.add_argument(
        "-c",
        "--column",
        type=int,
        default=1,
        help="1-indexed column of the error (default: 1)",
    )
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # Context command
    context_parser = subparsers.add_parser(
        "context",
        help="Show the component or hook enclosing a line",
    )
    context_parser.add_argument("input", type=Path, help="Source file")
    context_parser.add_argument("line", type=int, help="1-indexed line number")

    # Explain command
    explain_parser = subparsers.add_parser(
        "explain",
        help="Describe an error code",
    )
    explain_parser.add_argument("code", help="Error code, e.g. E0004")

    # Codes command
    subparsers.add_parser(
        "codes",
        help="List all error codes",
    )

    return parser


# =============================================================================
# Report Loading
# =============================================================================


def load_report(path: Path) -> tuple[str, str, FrontendOutput]:
    """
    Load a front-end error report.

    Args:
        path: Path of the JSON report

    Returns:
        Tuple of (filename, source text, front-end output)

    Raises:
        ReportFormatError: If the report cannot be read or decoded
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ReportFormatError(f"cannot read report {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ReportFormatError(f"report {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ReportFormatError(f"report {path} must contain a JSON object")

    source = data.get("source")
    source_path = data.get("source_path")
    if source is None and source_path is not None:
        resolved = path.parent / source_path
        try:
            source = resolved.read_text(encoding="utf-8")
        except OSError as e:
            raise ReportFormatError(f"cannot read source {resolved}: {e}") from e
    if not isinstance(source, str):
        raise ReportFormatError("report needs a string 'source' or a 'source_path'")

    filename = data.get("filename") or source_path or path.stem
    return str(filename), source, FrontendOutput.from_dict(data)


# =============================================================================
# Command Handlers
# =============================================================================


def cmd_report(args: argparse.Namespace) -> int:
    """Handle the report command - enrich every error of a report."""
    filename, source, output = load_report(args.input)
    config = EnrichmentConfig(
        detect_context=not args.no_context,
        use_color=Colors.enabled() and args.format == "text",
    )

    try:
        result = parse_with_diagnostics(StaticFrontend(output), filename, source, config=config)
    except ParsePanicError as e:
        if args.format == "text":
            print(
                f"{Colors.RED}{Colors.BOLD}error:{Colors.RESET} "
                f"could not parse {e.filename}",
                file=sys.stderr,
            )
            for message in e.errors:
                print(f"  {message}", file=sys.stderr)
        else:
            print(json.dumps({"panicked": True, "filename": e.filename, "errors": e.errors}, indent=2))
        return 1

    if args.format == "json":
        print(json.dumps(result.to_dict(), indent=2))
    elif args.format == "lsp":
        converter = get_converter()
        print(json.dumps(converter.unstructure(to_lsp_diagnostics(result.diagnostics)), indent=2))
    else:
        renderer = DiagnosticRenderer(use_color=config.use_color)
        if result.diagnostics:
            print(renderer.render_all(result.diagnostics))
            print()
            print(
                f"{Colors.RED}{Colors.BOLD}{result.error_count()} error(s){Colors.RESET} "
                f"in {filename}"
            )
        else:
            print(f"{Colors.GREEN}No errors{Colors.RESET} in {filename}")

    return 1 if result.has_errors() else 0


def cmd_analyze(args: argparse.Namespace) -> int:
    """Handle the analyze command - classify one error message."""
    info = get_default_registry().analyze(args.message, args.snippet, args.column)

    if args.json:
        print(json.dumps(dataclasses.asdict(info), indent=2))
        return 0

    description = ERROR_DESCRIPTIONS.get(info.code, "")
    print(f"{Colors.BOLD}{info.code}{Colors.RESET} {Colors.GRAY}{description}{Colors.RESET}")
    print(f"  {Colors.CYAN}message:{Colors.RESET}    {info.message}")
    print(f"  {Colors.CYAN}help:{Colors.RESET}       {info.help}")
    print(f"  {Colors.CYAN}suggestion:{Colors.RESET} {info.suggestion}")
    return 0


def cmd_context(args: argparse.Namespace) -> int:
    """Handle the context command - find the enclosing component or hook."""
    try:
        source = args.input.read_text(encoding="utf-8")
    except OSError as e:
        raise JsDiagError(f"cannot read {args.input}: {e}") from e

    match = ContextDetector(source).detect(args.line)
    if match is None:
        print(f"{Colors.YELLOW}No enclosing component or hook{Colors.RESET}")
        return 0

    print(f"{Colors.GREEN}{match}{Colors.RESET}")
    return 0


def cmd_explain(args: argparse.Namespace) -> int:
    """Handle the explain command - describe an error code."""
    description = explain_code(args.code)
    if description is None:
        print(f"{Colors.RED}Error:{Colors.RESET} unknown error code '{args.code}'", file=sys.stderr)
        return 1

    print(f"{Colors.BOLD}{args.code.strip().upper()}{Colors.RESET}: {description}")
    return 0


def cmd_codes(args: argparse.Namespace) -> int:
    """Handle the codes command - list the error code catalogue."""
    print(f"\n{Colors.BOLD}jsdiag error codes{Colors.RESET}")
    print("=" * 48)
    for code, description in ERROR_DESCRIPTIONS.items():
        print(f"  {Colors.CYAN}{code}{Colors.RESET}  {description}")
    print()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.no_color:
        Colors.disable()

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers: dict[str, Any] = {
        "report": cmd_report,
        "r": cmd_report,
        "analyze": cmd_analyze,
        "a": cmd_analyze,
        "context": cmd_context,
        "explain": cmd_explain,
        "codes": cmd_codes,
    }

    handler = command_handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except JsDiagError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"{Colors.RED}Error:{Colors.RESET} {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
