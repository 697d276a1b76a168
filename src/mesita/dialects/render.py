"""Rendering helpers shared by the dialect stringifiers.

Data rows look the same in Markdown and Org; only separator rows differ.
Each row is built left to right starting from the opening ``|``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from mesita.cells import VERTICAL
from mesita.table import ColumnDef, Table
from mesita.width import pad

SeparatorRenderer = Callable[[Sequence[ColumnDef]], str]


def render_data_row(cols: Sequence[ColumnDef], values: Sequence[str]) -> str:
    """Render ``| v1 | v2 |`` with each value padded to its column width."""
    parts = [VERTICAL]
    for col, value in zip(cols, values):
        parts.append(f" {pad(value, col.width)} {VERTICAL}")
    return "".join(parts)


def render_table(table: Table, render_separator: SeparatorRenderer) -> str:
    """Render every row of table, one line per row.

    Raises column widths to the separator minimum first so that short
    columns still fit a ``---`` rule.
    """
    table.ensure_separator_minimum()

    lines: list[str] = []
    for index, row in enumerate(table.rows):
        if row.is_separator:
            lines.append(render_separator(table.cols))
        else:
            lines.append(render_data_row(table.cols, table.row_values(index)))
    return "\n".join(lines)


def indent_lines(text: str, indent: str) -> str:
    """Prefix every non-blank line with indent."""
    if not indent:
        return text
    return "\n".join(indent + line if line.strip() else line for line in text.split("\n"))


__all__ = [
    "SeparatorRenderer",
    "indent_lines",
    "render_data_row",
    "render_table",
]
