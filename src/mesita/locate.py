"""Table region detection.

Scans outward from a document line to find the contiguous block of
table-like lines around it. A line is table-like when its first
non-whitespace character is ``|``; both dialects share that test.

Usage:
    >>> from mesita.document import TextDocument
    >>> doc = TextDocument("intro\\n| a |\\n| b |\\noutro")
    >>> locate_table(doc, 2)
    Span(start=Position(line=1, character=0), end=Position(line=2, character=5))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mesita.cells import VERTICAL
from mesita.location import Position, Span

if TYPE_CHECKING:
    from mesita.dialects.protocol import LineReader


def is_table_line(text: str) -> bool:
    """Check if the first non-whitespace character is ``|``."""
    return text.lstrip().startswith(VERTICAL)


def locate_table(reader: LineReader, line: int) -> Span | None:
    """Find the table surrounding line.

    Args:
        reader: Document to scan
        line: Line to start from (0-indexed)

    Returns:
        Span from character 0 of the first table line to the end of the
        last table line, or None when line is not part of a table.
    """

    def table_like(index: int) -> bool:
        return 0 <= index < reader.line_count and is_table_line(reader.line_at(index))

    if not table_like(line):
        return None

    first = line
    while table_like(first - 1):
        first -= 1

    last = line
    while table_like(last + 1):
        last += 1

    return Span(Position(first, 0), Position(last, len(reader.line_at(last))))


__all__ = [
    "is_table_line",
    "locate_table",
]
