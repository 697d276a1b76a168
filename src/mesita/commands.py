"""Table editing commands.

Each command is a pure function over document text: it takes the text and
a cursor, and returns the new text and cursor as an ``EditResult``. Hosts
apply the result to their buffer; nothing here touches an editor.

Every command follows the same cycle:
1. Locate the table around the cursor line
2. Parse it into a fresh Table (``start_line`` set to the first table line)
3. Mutate the Table
4. Re-render with the first line's indentation and splice it back
5. Rebuild a navigator on the new text to place the cursor

Commands return None when the cursor is not in a table ("nothing to do")
and raise ``CommandError`` when the user asked for something impossible,
such as moving the last row down.

Usage:
    >>> result = goto_next_cell("| a | b |\\n|-|-|\\n| 1 | 2 |", Position(0, 2))
    >>> result.text.splitlines()[0]
    '| a   | b   |'
    >>> result.cursor
    Position(line=0, character=8)

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from mesita.cells import VERTICAL, leading_indent, marker_positions
from mesita.config import get_table_config
from mesita.dialects import Dialect, get_dialect
from mesita.document import TextDocument
from mesita.errors import CommandError
from mesita.locate import is_table_line
from mesita.location import Position, Span
from mesita.navigator import TableNavigator
from mesita.table import RowKind, Table
from mesita.utils.logger import get_logger

logger = get_logger(__name__)

TABLE_SIZE_RE = re.compile(r"^(\d+)x(\d+)$")

NOT_IN_DATA_FIELD = "Not in table data field"


@dataclass(frozen=True, slots=True)
class EditResult:
    """Outcome of a command: the full new text and where the cursor goes."""

    text: str
    cursor: Position


@dataclass(slots=True)
class _TableContext:
    """A located and parsed table, ready to mutate and splice back."""

    document: TextDocument
    region: Span
    table: Table
    indent: str
    dialect: Dialect

    def render(self) -> TextDocument:
        """Replace the table region with the current Table rendering."""
        rendered = self.dialect.stringifier.stringify_with_indent(self.table, self.indent)
        return self.document.replace(self.region, rendered)

    def row_of(self, position: Position) -> int:
        return position.line - self.table.start_line

    def last_line(self) -> int:
        return self.table.start_line + len(self.table.rows) - 1

    def navigator(self, document: TextDocument) -> TableNavigator:
        return TableNavigator(self.table, document, escapes=self.dialect.escapes)

    def address(self, line_text: str, position: Position) -> tuple[int, int]:
        """(row, col) under position, scanning markers the dialect's way."""
        return row_col_from_position(
            self.table, line_text, position, escapes=self.dialect.escapes
        )

    def column_start(self, document: TextDocument, line: int, col: int) -> Position:
        """Cursor just inside column col of a rendered line."""
        character = _column_start(
            document.line_at(line), col, self.indent, escapes=self.dialect.escapes
        )
        return _clamp(document, Position(line, character))


def _load(text: str, cursor: Position, dialect: Dialect | None) -> _TableContext | None:
    dialect = dialect or get_dialect()
    document = TextDocument(text)
    if not 0 <= cursor.line < document.line_count:
        return None

    region = dialect.locator.locate(document, cursor.line)
    if region is None:
        logger.debug("No table at line %d", cursor.line)
        return None

    table = dialect.parser.parse(document.get_text(region))
    if table is None:
        return None
    table.start_line = region.start.line

    logger.debug(
        "Located %s table %s (%d rows, %d cols)",
        dialect.name,
        region,
        len(table.rows),
        len(table.cols),
    )
    return _TableContext(
        document=document,
        region=region,
        table=table,
        indent=leading_indent(document.line_at(region.start.line)),
        dialect=dialect,
    )


def _clamp(document: TextDocument, position: Position) -> Position:
    line = min(max(position.line, 0), document.line_count - 1)
    character = min(max(position.character, 0), len(document.line_at(line)))
    return Position(line, character)


def _column_start(line_text: str, col: int, indent: str, *, escapes: bool = True) -> int:
    """Character just after ``"| "`` of column col on a rendered line."""
    markers = marker_positions(line_text, escapes=escapes)
    if 0 <= col < len(markers):
        return markers[col] + 2
    return len(indent) + 2


def _empty_row(table: Table) -> list[str]:
    return [""] * len(table.cols)


# =============================================================================
# Cursor <-> cell mapping
# =============================================================================


def row_col_from_position(
    table: Table, line_text: str, position: Position, *, escapes: bool = True
) -> tuple[int, int]:
    """Map a cursor to a (row, column) cell address using marker positions.

    A cursor on a marker belongs to the column on its right; a cursor past
    the closing marker of a row belongs to the last column. Any other
    cursor on a table line falls back to column 0.

    Args:
        table: Parsed table (``start_line`` set)
        line_text: Current text of the cursor's line
        position: Cursor position
        escapes: Treat ``\\|`` as cell text (Markdown) rather than a boundary

    Returns:
        (row, col); row is -1 outside the table, col is -1 when the line
        holds no markers.
    """
    row = position.line - table.start_line
    if not 0 <= row < len(table.rows):
        return -1, -1

    markers = marker_positions(line_text, escapes=escapes)
    char = position.character
    col = -1

    for index, (left, right) in enumerate(zip(markers, markers[1:])):
        if left < char < right:
            col = index
            break

    if col == -1 and len(markers) >= 2 and char > markers[-1]:
        if not line_text[markers[-1] + 1 :].strip():
            col = len(markers) - 2

    if col == -1 and char in markers:
        col = min(markers.index(char), len(table.cols) - 1)

    if col >= len(table.cols):
        col = len(table.cols) - 1
    if col < 0 and markers:
        col = 0

    return row, col


def parse_table_size(value: str) -> tuple[int, int]:
    """Parse a ``ColumnsxRows`` size such as ``"5x2"``.

    Zero counts fall back to 1 column and 2 rows.

    Raises:
        CommandError: If value is not in ``CxR`` format.
    """
    match = TABLE_SIZE_RE.match(value.strip())
    if match is None:
        raise CommandError(
            "Provided value is invalid. Please provide the value in format "
            "Columns x Rows (e.g. 5x2)"
        )
    columns = int(match.group(1)) or 1
    rows = int(match.group(2)) or 2
    return columns, rows


# =============================================================================
# Creating and formatting
# =============================================================================


def create_table(
    text: str,
    cursor: Position,
    columns: int | None = None,
    rows: int | None = None,
    *,
    dialect: Dialect | None = None,
) -> EditResult:
    """Insert an empty table at the cursor.

    The table has a header row, a separator, and ``rows - 1`` body rows.
    It is indented like the text before the cursor and starts on a new
    line when non-blank text precedes the cursor.

    Args:
        text: Document text
        cursor: Insertion point
        columns: Column count (config default when None)
        rows: Data row count, header included (config default when None)
        dialect: Dialect to render with (configured mode when None)
    """
    config = get_table_config()
    dialect = dialect or get_dialect()
    columns = columns or config.default_columns
    rows = rows or config.default_rows

    table = Table()
    for index in range(rows + 1):
        kind = RowKind.SEPARATOR if index == 1 else RowKind.DATA
        table.add_row(kind, [""] * columns)

    document = TextDocument(text)
    cursor = _clamp(document, cursor)
    line_text = document.line_at(cursor.line)
    before = line_text[: cursor.character]
    after = line_text[cursor.character :]

    indent = leading_indent(before)
    needs_newline = bool(before.strip())

    rendered = dialect.stringifier.stringify_with_indent(table, indent)
    if needs_newline:
        rendered = "\n" + rendered
    else:
        # The indentation before the cursor is already in the document
        rendered = rendered[len(indent) :]
    if after.strip():
        rendered += "\n"

    first_line = cursor.line + (1 if needs_newline else 0)
    logger.debug("Creating %dx%d %s table at %s", columns, rows, dialect.name, cursor)
    return EditResult(
        text=document.insert(cursor, rendered).text,
        cursor=Position(first_line, len(indent) + 2),
    )


def format_table(
    text: str, cursor: Position, *, dialect: Dialect | None = None
) -> EditResult | None:
    """Realign the table under the cursor. The cursor stays put."""
    context = _load(text, cursor, dialect)
    if context is None:
        return None

    context.table.recalculate_column_widths()
    document = context.render()
    return EditResult(document.text, _clamp(document, cursor))


# =============================================================================
# Navigation
# =============================================================================


def _append_row_and_enter(context: _TableContext) -> EditResult:
    """Add an empty row at the bottom and put the cursor in its first cell."""
    context.table.add_row(RowKind.DATA, _empty_row(context.table))
    document = context.render()

    line = context.last_line()
    line_text = document.line_at(line)
    marker = line_text.find(VERTICAL)
    character = marker + 2 if marker >= 0 else len(context.indent) + 2

    logger.debug("Appended row %d", len(context.table.rows) - 1)
    return EditResult(document.text, Position(line, character))


def goto_next_cell(
    text: str, cursor: Position, *, dialect: Dialect | None = None
) -> EditResult | None:
    """Format the table and move to the next cell.

    From the last cell a new row is appended and the cursor moves into it.
    """
    document = TextDocument(text)
    if not 0 <= cursor.line < document.line_count:
        return None
    line_text = document.line_at(cursor.line)
    if not line_text.strip() or VERTICAL not in line_text:
        return None

    context = _load(text, cursor, dialect)
    if context is None:
        return None

    context.table.recalculate_column_widths()
    formatted = context.render()
    nav = context.navigator(formatted)

    if nav.is_last_cell(cursor):
        return _append_row_and_enter(context)

    target = nav.next_cell(cursor)
    if target is None:
        return EditResult(formatted.text, _clamp(formatted, cursor))

    if target.line == cursor.line and target.character <= cursor.character:
        # Cursor is past the last cell of its line: continue from that cell
        last_on_line = [
            jmp
            for jmp in nav.jump_positions
            if not jmp.is_separator and jmp.start.line == cursor.line
        ][-1]
        if nav.is_last_cell(last_on_line.start):
            return _append_row_and_enter(context)
        target = nav.next_cell(last_on_line.start)
        if target is None:
            return EditResult(formatted.text, _clamp(formatted, cursor))

    logger.debug("Next cell %s -> %s", cursor, target)
    return EditResult(formatted.text, target)


def goto_previous_cell(
    text: str, cursor: Position, *, dialect: Dialect | None = None
) -> EditResult | None:
    """Format the table and move to the previous cell, if there is one."""
    context = _load(text, cursor, dialect)
    if context is None:
        return None

    context.table.recalculate_column_widths()
    formatted = context.render()
    nav = context.navigator(formatted)

    target = nav.previous_cell(cursor) or _clamp(formatted, cursor)
    logger.debug("Previous cell %s -> %s", cursor, target)
    return EditResult(formatted.text, target)


def next_row(
    text: str, cursor: Position, *, dialect: Dialect | None = None
) -> EditResult | None:
    """Move to the same column on the next data row.

    On the last row a new row is appended first. On the first (header)
    row a new column is appended instead and the cursor moves into it.
    """
    context = _load(text, cursor, dialect)
    if context is None:
        return None
    table = context.table
    row = context.row_of(cursor)

    if row == 0:
        table.add_column()
        table.recalculate_column_widths()
        document = context.render()
        target = context.column_start(document, cursor.line, len(table.cols) - 1)
        logger.debug("Added column %d from header row", len(table.cols) - 1)
        return EditResult(document.text, target)

    if cursor.line == context.region.end.line:
        table.add_row(RowKind.DATA, _empty_row(table))

    table.recalculate_column_widths()
    document = context.render()

    _, col = context.address(context.document.line_at(cursor.line), cursor)

    target_row = row + 1
    while target_row < len(table.rows) and table.rows[target_row].is_separator:
        target_row += 1
    target_line = table.start_line + target_row

    if target_row < len(table.rows) and col >= 0:
        # Code point offsets from the rendered line, not display widths
        return EditResult(document.text, context.column_start(document, target_line, col))

    target = context.navigator(document).next_row(cursor)
    if target is None and target_row < len(table.rows):
        target = context.column_start(document, target_line, 0)
    return EditResult(document.text, target or _clamp(document, cursor))


# =============================================================================
# Moving rows and columns
# =============================================================================


def move_row_down(
    text: str, cursor: Position, *, dialect: Dialect | None = None
) -> EditResult | None:
    """Swap the row under the cursor with the row below."""
    return _move_row(text, cursor, 1, dialect)


def move_row_up(
    text: str, cursor: Position, *, dialect: Dialect | None = None
) -> EditResult | None:
    """Swap the row under the cursor with the row above."""
    return _move_row(text, cursor, -1, dialect)


def _move_row(
    text: str, cursor: Position, delta: int, dialect: Dialect | None
) -> EditResult | None:
    context = _load(text, cursor, dialect)
    if context is None:
        return None

    row = context.row_of(cursor)
    target = row + delta
    if not 0 <= target < len(context.table.rows):
        raise CommandError("Cannot move row further", line=cursor.line)

    context.table.swap_rows(row, target)
    document = context.render()
    return EditResult(document.text, _clamp(document, cursor.translate(lines=delta)))


def move_column_right(
    text: str, cursor: Position, *, dialect: Dialect | None = None
) -> EditResult | None:
    """Swap the column under the cursor with the column on its right."""
    return _move_column(text, cursor, 1, dialect)


def move_column_left(
    text: str, cursor: Position, *, dialect: Dialect | None = None
) -> EditResult | None:
    """Swap the column under the cursor with the column on its left."""
    return _move_column(text, cursor, -1, dialect)


def _move_column(
    text: str, cursor: Position, delta: int, dialect: Dialect | None
) -> EditResult | None:
    context = _load(text, cursor, dialect)
    if context is None:
        return None
    table = context.table

    row, col = context.address(context.document.line_at(cursor.line), cursor)
    if col < 0:
        raise CommandError(NOT_IN_DATA_FIELD, line=cursor.line)

    target = col + delta
    if target < 0:
        raise CommandError("Cannot move column further left", line=cursor.line)
    if target >= len(table.cols):
        raise CommandError("Cannot move column further right", line=cursor.line)

    table.swap_columns(col, target)
    document = context.render()

    line = table.start_line + row
    logger.debug("Moved column %d -> %d", col, target)
    return EditResult(document.text, context.column_start(document, line, target))


# =============================================================================
# Clearing and deleting
# =============================================================================


def clear_cell(
    text: str, cursor: Position, *, dialect: Dialect | None = None
) -> EditResult | None:
    """Blank the cell under the cursor, keeping its width.

    Only the cursor's line changes; the table is not re-parsed.
    """
    dialect = dialect or get_dialect()
    document = TextDocument(text)
    if not 0 <= cursor.line < document.line_count:
        return None
    line_text = document.line_at(cursor.line)
    if not is_table_line(line_text):
        return None

    if dialect.parser.is_separator_row(line_text):
        raise CommandError(NOT_IN_DATA_FIELD, line=cursor.line)

    markers = marker_positions(line_text, escapes=dialect.escapes)
    left = max((m for m in markers if m < cursor.character), default=-1)
    right = min((m for m in markers if m >= cursor.character), default=len(line_text))
    if left < 0 or left == right:
        raise CommandError(NOT_IN_DATA_FIELD, line=cursor.line)

    span = Span(cursor.with_character(left + 1), cursor.with_character(right))
    document = document.replace(span, " " * (right - left - 1))
    return EditResult(document.text, cursor.with_character(left + 2))


def delete_row(
    text: str, cursor: Position, *, dialect: Dialect | None = None
) -> EditResult | None:
    """Remove the row under the cursor. The cursor keeps its column."""
    context = _load(text, cursor, dialect)
    if context is None:
        return None
    table = context.table

    if len(table.rows) <= 1:
        raise CommandError("Cannot delete the only row", line=cursor.line)

    _, col = context.address(context.document.line_at(cursor.line), cursor)
    table.remove_row(context.row_of(cursor))
    document = context.render()

    line = min(cursor.line, context.last_line())
    return EditResult(document.text, context.column_start(document, line, max(col, 0)))


def delete_column(
    text: str, cursor: Position, *, dialect: Dialect | None = None
) -> EditResult | None:
    """Remove the column under the cursor."""
    context = _load(text, cursor, dialect)
    if context is None:
        return None
    table = context.table

    _, col = context.address(context.document.line_at(cursor.line), cursor)
    if col < 0:
        raise CommandError(NOT_IN_DATA_FIELD, line=cursor.line)
    if len(table.cols) <= 1:
        raise CommandError("Cannot delete the only column", line=cursor.line)

    table.remove_column(col)
    document = context.render()

    target = min(col, len(table.cols) - 1)
    return EditResult(document.text, context.column_start(document, cursor.line, target))


__all__ = [
    "TABLE_SIZE_RE",
    "EditResult",
    "clear_cell",
    "create_table",
    "delete_column",
    "delete_row",
    "format_table",
    "goto_next_cell",
    "goto_previous_cell",
    "move_column_left",
    "move_column_right",
    "move_row_down",
    "move_row_up",
    "next_row",
    "parse_table_size",
    "row_col_from_position",
]
