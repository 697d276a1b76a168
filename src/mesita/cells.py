"""Cell boundary scanning shared by parsers, the navigator, and commands.

Both dialects delimit cells with ``|``. Markdown lets a cell hold a literal
pipe written as ``\\|``; that pipe belongs to the cell text, is never a
boundary, and is kept verbatim so that re-rendering reproduces the source.
Org-mode has no such escape (a literal bar is ``\\vert``), so Org scanning
passes ``escapes=False`` and every ``|`` is a boundary.
"""

from __future__ import annotations

VERTICAL = "|"
HORIZONTAL = "-"
ESCAPE = "\\"


def marker_positions(line: str, *, escapes: bool = True) -> list[int]:
    """Offsets of every cell boundary ``|`` in line.

    Args:
        line: Line text
        escapes: Treat ``\\|`` as cell text rather than a boundary
    """
    if not escapes:
        return [i for i, char in enumerate(line) if char == VERTICAL]

    positions: list[int] = []
    i = 0
    n = len(line)
    while i < n:
        char = line[i]
        if char == ESCAPE and i + 1 < n and line[i + 1] == VERTICAL:
            i += 2
            continue
        if char == VERTICAL:
            positions.append(i)
        i += 1
    return positions


def split_cells(text: str, *, escapes: bool = True) -> list[str]:
    """Split text on boundary pipes and strip each part.

    Example:
        >>> split_cells(" a | b \\\\| c ")
        ['a', 'b \\\\| c']
        >>> split_cells(" a | b \\\\| c ", escapes=False)
        ['a', 'b \\\\', 'c']
    """
    cells: list[str] = []
    start = 0
    for pos in marker_positions(text, escapes=escapes):
        cells.append(text[start:pos].strip())
        start = pos + 1
    cells.append(text[start:].strip())
    return cells


def split_row(line: str, *, escapes: bool = True) -> list[str]:
    """Cell values of a stripped data line that starts with ``|``.

    A line ending with ``|`` is a complete row: both outer markers are
    dropped. A line without the closing marker is still being typed, so
    everything after the first marker is split and the row comes out one
    trailing cell short of a complete row.

    Examples:
        >>> split_row("| a | b |")
        ['a', 'b']
        >>> split_row("|x|y")
        ['x', 'y']
        >>> split_row("| abc")
        ['abc']
    """
    body = line[1:]
    if ends_with_marker(line, escapes=escapes):
        body = body[:-1]
    return split_cells(body, escapes=escapes)


def ends_with_marker(line: str, *, escapes: bool = True) -> bool:
    """Check for a closing boundary ``|`` (the opening one doesn't count)."""
    markers = marker_positions(line, escapes=escapes)
    return len(line) > 1 and bool(markers) and markers[-1] == len(line) - 1


def leading_indent(line: str) -> str:
    """Whitespace prefix of line."""
    return line[: len(line) - len(line.lstrip())]


__all__ = [
    "ESCAPE",
    "HORIZONTAL",
    "VERTICAL",
    "ends_with_marker",
    "leading_indent",
    "marker_positions",
    "split_cells",
    "split_row",
]
