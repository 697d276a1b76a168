"""Org-mode table dialect.

Table structure:
| Header 1 | Header 2 |
|----------+----------|   <- separator row ('+' at inner intersections)
| Cell 1   | Cell 2   |

Org separators carry no alignment, so every column renders left-aligned.
There is no pipe escape: a literal bar in a cell is written ``\\vert``, and
every ``|`` on a row is a cell boundary.

Thread Safety:
Parser, stringifier and locator are stateless and thread-safe.

"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from mesita.cells import HORIZONTAL, VERTICAL, split_row
from mesita.dialects.render import indent_lines, render_table
from mesita.locate import locate_table
from mesita.table import ColumnDef, RowKind, Table

if TYPE_CHECKING:
    from mesita.dialects.protocol import LineReader
    from mesita.location import Span

INTERSECTION = "+"


class OrgParser:
    """Parser for Org-mode tables."""

    def parse(self, text: str) -> Table | None:
        """Parse table lines into a Table.

        Returns:
            Table, or None if text is empty.
        """
        if not text:
            return None

        table = Table()
        for line in (raw.strip() for raw in text.split("\n")):
            if not line.startswith(VERTICAL):
                continue
            if self.is_separator_row(line):
                table.add_row(RowKind.SEPARATOR, [])
            else:
                table.add_row(RowKind.DATA, split_row(line, escapes=False))

        table.recalculate_column_widths()
        return table

    def is_separator_row(self, text: str) -> bool:
        """Org rules start with ``|-``."""
        text = text.strip()
        return len(text) > 1 and text[1] == HORIZONTAL


class OrgStringifier:
    """Stringifier for Org-mode tables."""

    def stringify(self, table: Table) -> str:
        return render_table(table, _render_separator)

    def stringify_with_indent(self, table: Table, indent: str) -> str:
        return indent_lines(self.stringify(table), indent)


def _render_separator(cols: Sequence[ColumnDef]) -> str:
    """Render ``|-----+-----|``; the last column closes with ``|``."""
    parts = [VERTICAL]
    last = len(cols) - 1
    for index, col in enumerate(cols):
        ending = VERTICAL if index == last else INTERSECTION
        parts.append(HORIZONTAL * (col.width + 2) + ending)
    return "".join(parts)


class OrgLocator:
    """Locator for Org-mode tables."""

    def locate(self, reader: LineReader, line: int) -> Span | None:
        return locate_table(reader, line)


__all__ = [
    "INTERSECTION",
    "OrgLocator",
    "OrgParser",
    "OrgStringifier",
]
