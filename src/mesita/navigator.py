"""Cell navigation over a table snapshot.

The navigator turns a Table (plus, when available, the live text of its
lines) into an ordered chain of jump positions: one per data cell and one
placeholder per separator row, in row-major order. Cursor queries resolve
the jump position under the cursor and walk the chain.

Jump positions live in a flat list and refer to their neighbours by index:

    [row0/col0] <-> [row0/col1] <-> [separator] <-> [row2/col0] <-> ...

Cell extents come from the line text when possible (content between two
``|`` markers, minus the padding spaces). When the line is unavailable or
has fewer markers than the table has columns, as happens while a row is
being typed, the missing extents are estimated from column widths.

The navigator is a snapshot: rebuild it after every edit.

Thread Safety:
Navigators are immutable after construction and safe to share.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mesita.cells import leading_indent, marker_positions
from mesita.location import Position, Span

if TYPE_CHECKING:
    from mesita.dialects.protocol import LineReader
    from mesita.table import ColumnDef, Table


@dataclass(frozen=True, slots=True)
class JumpPosition:
    """An addressable cursor range.

    Attributes:
        span: Cell content range (ends inclusive)
        is_separator: Placeholder for a separator row, never a destination
        row: Table row index
        col: Column index (-1 for separators)
        prev: Index of the previous jump position, None at the start
        next: Index of the next jump position, None at the end

    """

    span: Span
    is_separator: bool
    row: int
    col: int
    prev: int | None
    next: int | None

    @property
    def start(self) -> Position:
        return self.span.start


class TableNavigator:
    """Answers cell-to-cell movement queries for one table snapshot.

    Usage:
        >>> table = get_dialect("markdown").parser.parse("| a | b |\\n| c | d |")
        >>> nav = TableNavigator(table)
        >>> nav.next_cell(Position(0, 2))
        Position(line=0, character=6)
        >>> nav.is_last_cell(Position(1, 6))
        True

    Positions are absolute document coordinates: row ``i`` of the table is
    line ``table.start_line + i``. Pass ``escapes=False`` for dialects where
    every ``|`` is a cell boundary (Org).

    """

    __slots__ = ("_positions", "escapes", "reader", "table")

    def __init__(
        self, table: Table, reader: LineReader | None = None, *, escapes: bool = True
    ) -> None:
        self.table = table
        self.reader = reader
        self.escapes = escapes
        self._positions: tuple[JumpPosition, ...] = self._build_jump_positions()

    @property
    def jump_positions(self) -> Sequence[JumpPosition]:
        return self._positions

    # =========================================================================
    # Queries
    # =========================================================================

    def next_cell(self, position: Position) -> Position | None:
        """Start of the cell after position, skipping separators."""
        return self._jump(position, forward=True)

    def previous_cell(self, position: Position) -> Position | None:
        """Start of the cell before position, skipping separators."""
        return self._jump(position, forward=False)

    def next_row(self, position: Position) -> Position | None:
        """Start of the cell directly below position."""
        index = self._find(position.translate(lines=1))
        if index is None:
            return None
        return self._positions[index].start

    def is_last_cell(self, position: Position) -> bool:
        """Whether position is in the final data cell of the table."""
        index = self._find(position)
        if index is None or self._positions[index].is_separator:
            return False
        return self._step(index, forward=True) is None

    def is_on_separator_row(self, position: Position) -> bool:
        index = self._find(position)
        return index is not None and self._positions[index].is_separator

    def cell_at(self, position: Position) -> tuple[int, int] | None:
        """(row, column) of the data cell under position, if any."""
        index = self._find(position)
        if index is None:
            return None
        jmp = self._positions[index]
        if jmp.is_separator:
            return None
        return jmp.row, jmp.col

    # =========================================================================
    # Chain walking
    # =========================================================================

    def _find(self, position: Position) -> int | None:
        for index, jmp in enumerate(self._positions):
            if jmp.span.contains(position):
                return index
        return None

    def _step(self, index: int, *, forward: bool) -> int | None:
        """Neighbour of index in one direction, skipping separators."""
        jmp = self._positions[index]
        target = jmp.next if forward else jmp.prev
        while target is not None and self._positions[target].is_separator:
            jmp = self._positions[target]
            target = jmp.next if forward else jmp.prev
        return target

    def _jump(self, position: Position, *, forward: bool) -> Position | None:
        index = self._find(position)
        if index is not None:
            target = self._step(index, forward=forward)
            if target is None:
                return None
            return self._positions[target].start
        return self._nearest_on_line(position)

    def _nearest_on_line(self, position: Position) -> Position | None:
        """Best data cell on the cursor's line when the cursor is between cells.

        At column 0 that is the first cell; otherwise the first cell to the
        right of the cursor, or the first cell of the line.
        """
        same_line = [
            jmp
            for jmp in self._positions
            if not jmp.is_separator and jmp.start.line == position.line
        ]
        if not same_line:
            return None
        if position.character == 0:
            return same_line[0].start
        for jmp in same_line:
            if jmp.start.character > position.character:
                return jmp.start
        return same_line[0].start

    # =========================================================================
    # Construction
    # =========================================================================

    def _build_jump_positions(self) -> tuple[JumpPosition, ...]:
        entries: list[tuple[Span, bool, int, int]] = []

        for row_index, row in enumerate(self.table.rows):
            line = self.table.start_line + row_index

            if row.is_separator:
                span = Span(Position(line, 0), Position(line, 1))
                entries.append((span, True, row_index, -1))
                continue

            for col_index, (start, end) in enumerate(self._cell_extents(line)):
                span = Span(Position(line, start), Position(line, end))
                entries.append((span, False, row_index, col_index))

        last = len(entries) - 1
        return tuple(
            JumpPosition(
                span=span,
                is_separator=is_separator,
                row=row,
                col=col,
                prev=index - 1 if index > 0 else None,
                next=index + 1 if index < last else None,
            )
            for index, (span, is_separator, row, col) in enumerate(entries)
        )

    def _cell_extents(self, line: int) -> list[tuple[int, int]]:
        """(start, end) character offsets of every cell on a data line."""
        text = self._line_text(line)
        if text is None:
            return _estimated_extents(self.table.cols, 0)

        scanned = _scanned_extents(text, escapes=self.escapes)
        if len(scanned) >= len(self.table.cols):
            return scanned

        estimated = _estimated_extents(self.table.cols, len(leading_indent(text)))
        return scanned + estimated[len(scanned) :]

    def _line_text(self, line: int) -> str | None:
        if self.reader is None or not 0 <= line < self.reader.line_count:
            return None
        return self.reader.line_at(line)


def _scanned_extents(text: str, *, escapes: bool) -> list[tuple[int, int]]:
    """Cell extents between the ``|`` markers of a rendered line.

    Content starts two characters after a marker (marker + padding space)
    and ends one character before the next marker. A line with a single
    marker is a row being typed: its one cell runs to the end of the line.
    """
    markers = marker_positions(text, escapes=escapes)
    length = len(text)

    if len(markers) == 1:
        start = min(markers[0] + 2, length)
        return [(start, max(start, length))]

    extents: list[tuple[int, int]] = []
    for left, right in zip(markers, markers[1:]):
        start = min(left + 2, length)
        extents.append((start, max(start, right - 1)))
    return extents


def _estimated_extents(cols: Sequence[ColumnDef], indent: int) -> list[tuple[int, int]]:
    """Cell extents of a line as the stringifier would render it."""
    extents: list[tuple[int, int]] = []
    after_marker = indent + 1
    for col in cols:
        start = after_marker + 1
        extents.append((start, start + col.width))
        # content, padding space, marker
        after_marker = start + col.width + 2
    return extents


__all__ = [
    "JumpPosition",
    "TableNavigator",
]
