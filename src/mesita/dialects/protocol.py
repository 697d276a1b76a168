"""Capability protocols every table dialect provides.

A dialect is three independent objects: a parser, a stringifier, and a
locator. Callers hold them through a ``Dialect`` handle and never depend on
a concrete class.

Example:
    from mesita.dialects.protocol import TableStringifier

    def realign(stringifier: TableStringifier, table: Table) -> str:
        table.recalculate_column_widths()
        return stringifier.stringify(table)

"""

from typing import Protocol, runtime_checkable

from mesita.location import Span
from mesita.table import Table


@runtime_checkable
class LineReader(Protocol):
    """Read-only, line-addressed view of a document.

    ``TextDocument`` is the built-in implementation; editor integrations
    can adapt their own buffers.
    """

    @property
    def line_count(self) -> int: ...

    def line_at(self, index: int) -> str:
        """Text of line index, without the line terminator."""
        ...


@runtime_checkable
class TableParser(Protocol):
    """Converts a block of table lines into a Table."""

    def parse(self, text: str) -> Table | None:
        """Parse text into a Table.

        Returns:
            The parsed Table, or None when text is empty.

        """
        ...

    def is_separator_row(self, text: str) -> bool:
        """Check if a single line is a separator row."""
        ...


@runtime_checkable
class TableStringifier(Protocol):
    """Renders a Table back to aligned text."""

    def stringify(self, table: Table) -> str: ...

    def stringify_with_indent(self, table: Table, indent: str) -> str:
        """Render with indent prefixed to every non-blank line."""
        ...


@runtime_checkable
class TableLocator(Protocol):
    """Finds the extent of the table around a document line."""

    def locate(self, reader: LineReader, line: int) -> Span | None:
        """Span covering the whole table that contains line, or None."""
        ...
