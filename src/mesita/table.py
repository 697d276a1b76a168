"""In-memory table model shared by both dialects.

A Table is a grid of string cells plus per-row and per-column metadata:

    rows:  [RowDef(DATA), RowDef(SEPARATOR), RowDef(DATA)]
    cols:  [ColumnDef(LEFT, 3), ColumnDef(RIGHT, 5)]
    cells: [["a", "b"], [], ["1", "12345"]]

Separator rows hold no cells of their own. Every data row holds exactly one
cell per column; ragged input is padded with empty strings on insert.

Column widths track the widest data cell (by display width) and never drop
below 3 while a separator row exists, since ``---`` is the shortest rule a
separator can render.

Widths are maintained two ways:
- incrementally by ``add_row`` and ``set_at`` (single-cell edits)
- by a full rescan in ``recalculate_column_widths`` (after structural changes)

Both paths converge on the same widths.

Thread Safety:
Tables are mutable and not synchronized. Each editing command builds a
fresh Table from text, mutates it, and discards it after rendering.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from mesita.errors import TableIndexError
from mesita.width import display_width

# Shortest separator rule: "---"
MIN_SEPARATOR_WIDTH = 3


class RowKind(Enum):
    """Kind of table row."""

    DATA = auto()  # | a | b |
    SEPARATOR = auto()  # |---|---| or |---+---|


class Alignment(Enum):
    """Column alignment tag (Markdown only encodes it in the separator)."""

    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


@dataclass(slots=True)
class RowDef:
    """Row metadata."""

    kind: RowKind

    @property
    def is_separator(self) -> bool:
        return self.kind is RowKind.SEPARATOR


@dataclass(slots=True)
class ColumnDef:
    """Column metadata.

    Attributes:
        alignment: Alignment tag for the column
        width: Display width of the widest data cell (>= 3 with separators)

    """

    alignment: Alignment = Alignment.LEFT
    width: int = 0


class Table:
    """Row/column model of a text table.

    Usage:
        >>> table = Table()
        >>> table.add_row(RowKind.DATA, ["name", "qty"])
        >>> table.add_row(RowKind.SEPARATOR, [])
        >>> table.add_row(RowKind.DATA, ["apple"])
        >>> table.get_at(2, 1)
        ''
        >>> [col.width for col in table.cols]
        [5, 3]

    Attributes:
        start_line: Document line of row 0. Set by the caller after parsing;
            only used to translate rows to document lines during navigation.
        rows: Row metadata, index = row position
        cols: Column metadata, index = column position

    """

    __slots__ = ("_cells", "cols", "rows", "start_line")

    def __init__(self) -> None:
        self.start_line = 0
        self.rows: list[RowDef] = []
        self.cols: list[ColumnDef] = []
        self._cells: list[list[str]] = []

    def __repr__(self) -> str:
        return (
            f"Table(rows={len(self.rows)}, cols={len(self.cols)}, "
            f"start_line={self.start_line})"
        )

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def has_separator(self) -> bool:
        """Whether any row is a separator."""
        return any(row.is_separator for row in self.rows)

    @property
    def data_row_count(self) -> int:
        return sum(1 for row in self.rows if not row.is_separator)

    def row_values(self, row: int) -> tuple[str, ...]:
        """Cell values of a row (empty for separator rows)."""
        self._check_row(row)
        return tuple(self._cells[row])

    def column_values(self, col: int) -> list[str]:
        """Cell values of a column across data rows, top to bottom."""
        self._check_col(col)
        return [cells[col] for row, cells in zip(self.rows, self._cells) if not row.is_separator]

    def get_at(self, row: int, col: int) -> str:
        """Get the value of a data cell."""
        self._check_cell(row, col)
        return self._cells[row][col]

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_row(self, kind: RowKind, values: Sequence[str]) -> None:
        """Append a row.

        Grows the column list when values is longer than the table is wide,
        and pads the shorter side (existing rows or the new row) with empty
        strings so every data row stays rectangular.

        Args:
            kind: Row kind; separator rows store no cells
            values: Cell values (ignored for separator rows beyond sizing)
        """
        row_values = list(values)

        # Incomplete rows with nothing typed yet still need one column
        if not row_values and not self.cols:
            row_values = [""]

        for _ in range(len(row_values) - len(self.cols)):
            self.cols.append(ColumnDef())

        if kind is RowKind.SEPARATOR:
            self.rows.append(RowDef(kind))
            self._cells.append([])
            self._pad_data_rows(len(self.cols))
            self.ensure_separator_minimum()
            return

        width = max(len(self.cols), len(row_values))
        self._pad_data_rows(width)
        row_values.extend("" for _ in range(width - len(row_values)))

        for col, value in zip(self.cols, row_values):
            col.width = max(col.width, display_width(value))

        self.rows.append(RowDef(kind))
        self._cells.append(row_values)

    def add_column(self, alignment: Alignment = Alignment.LEFT) -> None:
        """Append an empty, zero-width column."""
        self.cols.append(ColumnDef(alignment=alignment))
        for row, cells in zip(self.rows, self._cells):
            if not row.is_separator:
                cells.append("")

    def set_at(self, row: int, col: int, value: str) -> None:
        """Set a data cell and update its column width incrementally.

        A wider value widens the column. If the replaced value was the
        column's widest and the new one is narrower, the column is
        rescanned to find the new maximum.
        """
        self._check_cell(row, col)
        column = self.cols[col]
        old_width = display_width(self._cells[row][col])
        new_width = display_width(value)

        self._cells[row][col] = value

        if new_width > column.width:
            column.width = new_width
        elif old_width == column.width and new_width < old_width:
            column.width = self._scan_column_width(col)

    def set_alignment(self, col: int, alignment: Alignment) -> None:
        self._check_col(col)
        self.cols[col].alignment = alignment

    def swap_columns(self, a: int, b: int) -> None:
        """Exchange two columns (metadata and every data cell)."""
        self._check_col(a)
        self._check_col(b)
        self.cols[a], self.cols[b] = self.cols[b], self.cols[a]
        for row, cells in zip(self.rows, self._cells):
            if not row.is_separator:
                cells[a], cells[b] = cells[b], cells[a]
        self.recalculate_column_widths()

    def swap_rows(self, a: int, b: int) -> None:
        """Exchange two rows, kind included."""
        self._check_row(a)
        self._check_row(b)
        self.rows[a], self.rows[b] = self.rows[b], self.rows[a]
        self._cells[a], self._cells[b] = self._cells[b], self._cells[a]
        self.recalculate_column_widths()

    def remove_row(self, row: int) -> None:
        self._check_row(row)
        del self.rows[row]
        del self._cells[row]
        self.recalculate_column_widths()

    def remove_column(self, col: int) -> None:
        self._check_col(col)
        del self.cols[col]
        for row, cells in zip(self.rows, self._cells):
            if not row.is_separator:
                del cells[col]
        self.recalculate_column_widths()

    # =========================================================================
    # Width bookkeeping
    # =========================================================================

    def recalculate_column_widths(self) -> None:
        """Recompute every column width from scratch.

        Call after anything that makes incremental tracking unsafe: row
        reordering, column swaps, bulk loads.
        """
        for col in self.cols:
            col.width = 0

        for row, cells in zip(self.rows, self._cells):
            if row.is_separator:
                continue
            for col, value in zip(self.cols, cells):
                col.width = max(col.width, display_width(value))

        self.ensure_separator_minimum()

    def ensure_separator_minimum(self) -> None:
        """Raise every column to the separator minimum if a separator exists."""
        if self.has_separator:
            for col in self.cols:
                col.width = max(col.width, MIN_SEPARATOR_WIDTH)

    def _scan_column_width(self, col: int) -> int:
        widest = max((display_width(value) for value in self.column_values(col)), default=0)
        if self.has_separator:
            return max(widest, MIN_SEPARATOR_WIDTH)
        return widest

    def _pad_data_rows(self, width: int) -> None:
        for row, cells in zip(self.rows, self._cells):
            if not row.is_separator and len(cells) < width:
                cells.extend("" for _ in range(width - len(cells)))

    # =========================================================================
    # Bounds checks
    # =========================================================================

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self.rows):
            raise TableIndexError("row", row, len(self.rows))

    def _check_col(self, col: int) -> None:
        if not 0 <= col < len(self.cols):
            raise TableIndexError("column", col, len(self.cols))

    def _check_cell(self, row: int, col: int) -> None:
        self._check_row(row)
        self._check_col(col)
        if self.rows[row].is_separator:
            # Separator rows have no addressable cells
            raise TableIndexError("column", col, 0)


__all__ = [
    "MIN_SEPARATOR_WIDTH",
    "Alignment",
    "ColumnDef",
    "RowDef",
    "RowKind",
    "Table",
]
