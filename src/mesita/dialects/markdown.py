"""Markdown (GFM pipe table) dialect.

Table structure:
| Header 1 | Header 2 |   <- data row
|:---------|---------:|   <- separator row (alignment markers)
| Cell 1   | Cell 2   |   <- data row

Alignment:
| Left | Center | Right |
|:-----|:------:|------:|

Separator cells are read leniently: a trailing colon means right, colons on
both ends mean center, anything else left. Cells shorter than three
characters carry too little to classify and keep the default alignment.

Thread Safety:
Parser, stringifier and locator are stateless and thread-safe.

"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from mesita.cells import HORIZONTAL, VERTICAL, split_row
from mesita.dialects.render import indent_lines, render_table
from mesita.locate import locate_table
from mesita.table import Alignment, ColumnDef, RowKind, Table

if TYPE_CHECKING:
    from mesita.dialects.protocol import LineReader
    from mesita.location import Span

_WHITESPACE_RE = re.compile(r"\s+")


class MarkdownParser:
    """Parser for Markdown pipe tables."""

    def parse(self, text: str) -> Table | None:
        """Parse table lines into a Table.

        Lines not starting with ``|`` (after stripping) are ignored.

        Returns:
            Table, or None if text is empty.
        """
        if not text:
            return None

        table = Table()
        lines = (line.strip() for line in text.split("\n"))

        for line in lines:
            if not line.startswith(VERTICAL):
                continue

            cleaned = _WHITESPACE_RE.sub("", line)
            if self.is_separator_row(cleaned):
                table.add_row(RowKind.SEPARATOR, [])
                self._apply_alignments(table, cleaned)
                continue

            table.add_row(RowKind.DATA, split_row(line))

        # Widths tracked during the load are not trusted; rescan once
        table.recalculate_column_widths()
        return table

    def is_separator_row(self, text: str) -> bool:
        cleaned = _WHITESPACE_RE.sub("", text)
        return cleaned.startswith(("|-", "|:-"))

    def _apply_alignments(self, table: Table, cleaned: str) -> None:
        """Read alignment markers from a whitespace-free separator line."""
        body = cleaned[1:]
        if body.endswith(VERTICAL):
            body = body[:-1]

        for index, part in enumerate(body.split(VERTICAL)):
            if len(part) < 3:
                continue

            alignment = Alignment.LEFT
            if part.endswith(":"):
                alignment = Alignment.CENTER if part.startswith(":") else Alignment.RIGHT

            if index < len(table.cols):
                table.set_alignment(index, alignment)
            else:
                while len(table.cols) < index:
                    table.add_column()
                table.add_column(alignment)


class MarkdownStringifier:
    """Stringifier for Markdown pipe tables."""

    def stringify(self, table: Table) -> str:
        return render_table(table, _render_separator)

    def stringify_with_indent(self, table: Table, indent: str) -> str:
        return indent_lines(self.stringify(table), indent)


def _render_separator(cols: Sequence[ColumnDef]) -> str:
    """Render ``|:----|-----:|`` keeping each rule exactly one column wide."""
    parts = [VERTICAL]
    for col in cols:
        begin = " :" if col.alignment is Alignment.CENTER else " -"
        ending = "- " if col.alignment is Alignment.LEFT else ": "
        parts.append(begin + HORIZONTAL * (col.width - 2) + ending + VERTICAL)
    return "".join(parts)


class MarkdownLocator:
    """Locator for Markdown tables."""

    def locate(self, reader: LineReader, line: int) -> Span | None:
        return locate_table(reader, line)


__all__ = [
    "MarkdownLocator",
    "MarkdownParser",
    "MarkdownStringifier",
]
