"""
Source text helpers: offset to position mapping and line lookup.

Front-ends report errors as 0-indexed character offsets into the full source
text; diagnostics speak in 1-indexed lines and columns.
"""

from typing import Optional

from jsdiag.utils.errors import SourceLocation


def offset_to_line_col(source: str, offset: Optional[int]) -> tuple[int, int]:
    """
    Convert a character offset into a 1-indexed (line, column) pair.

    Each newline advances the line and resets the column; every other
    character advances the column. Offsets past the end of the source map to
    the position just after the last character, and a missing offset maps to
    the start of the source.

    Note:
        The walk is linear in ``offset``, so enriching many errors in a very
        large file costs O(errors * offset).

    Args:
        source: The full source text
        offset: 0-indexed character offset, or None when the error has no label

    Returns:
        A (line, column) tuple
    """
    line = 1
    column = 1
    if offset is None:
        return line, column

    for index, char in enumerate(source):
        if index >= offset:
            break
        if char == "\n":
            line += 1
            column = 1
        else:
            column += 1

    return line, column


def location_at(source: str, offset: Optional[int], filename: Optional[str] = None) -> SourceLocation:
    """Build a SourceLocation for an offset."""
    line, column = offset_to_line_col(source, offset)
    return SourceLocation(line, column, offset or 0, filename)


def split_lines(source: str) -> list[str]:
    """
    Split source text into lines the way the front-end counts them.

    Only a line feed ends a line (a trailing carriage return is dropped), and
    a final line feed does not open an extra empty line.
    """
    if not source:
        return []
    lines = source.split("\n")
    if source.endswith("\n"):
        lines.pop()
    return [text[:-1] if text.endswith("\r") else text for text in lines]


def line_at(source: str, line: int) -> Optional[str]:
    """
    Get the text of a source line.

    Args:
        source: The full source text
        line: 1-indexed line number; values below 1 clamp to the first line

    Returns:
        The line without its terminator, or None when the line does not exist
    """
    index = max(line - 1, 0)
    lines = split_lines(source)
    if index >= len(lines):
        return None
    return lines[index]
