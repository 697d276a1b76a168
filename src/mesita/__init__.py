"""
Mesita: Text Tables for Markdown and Org-mode

Parses pipe tables embedded in prose into a row/column model, realigns them
(double-width CJK text included), and maps cursor positions to cells so
editors can offer Tab-to-next-cell navigation. Zero runtime dependencies.

Quick Start:
    >>> from mesita import parse, stringify
    >>> table = parse("|name|qty|\\n|---|--:|\\n|apple|3|")
    >>> print(stringify(table))
    | name  | qty |
    | ----- | --: |
    | apple | 3   |

    >>> # Org-mode tables
    >>> print(realign("|a|b|\\n|-+-|\\n|1|2|", dialect="org"))
    | a   | b   |
    |-----+-----|
    | 1   | 2   |

Editing commands:
    >>> from mesita import Position, goto_next_cell
    >>> result = goto_next_cell(document_text, Position(line=4, character=2))
    >>> result.text, result.cursor
"""

from mesita.cells import leading_indent
from mesita.commands import (
    EditResult,
    clear_cell,
    create_table,
    delete_column,
    delete_row,
    format_table,
    goto_next_cell,
    goto_previous_cell,
    move_column_left,
    move_column_right,
    move_row_down,
    move_row_up,
    next_row,
    parse_table_size,
    row_col_from_position,
)
from mesita.config import (
    TableConfig,
    get_table_config,
    reset_table_config,
    set_table_config,
    table_config_context,
)
from mesita.dialects import Dialect, get_dialect
from mesita.document import TextDocument
from mesita.errors import CommandError, ConfigError, MesitaError, TableIndexError
from mesita.locate import locate_table
from mesita.location import Position, Span
from mesita.navigator import JumpPosition, TableNavigator
from mesita.table import Alignment, ColumnDef, RowDef, RowKind, Table
from mesita.width import display_width, pad

__version__ = "0.1.0"


def _resolve(dialect: Dialect | str | None) -> Dialect:
    if isinstance(dialect, Dialect):
        return dialect
    return get_dialect(dialect)


def parse(text: str, *, dialect: Dialect | str | None = None) -> Table | None:
    """Parse a block of table lines.

    Args:
        text: Table text (one table, lines starting with ``|``)
        dialect: Dialect handle or name (configured mode if None)

    Returns:
        Table, or None for empty text
    """
    return _resolve(dialect).parser.parse(text)


def stringify(table: Table, *, dialect: Dialect | str | None = None, indent: str = "") -> str:
    """Render a Table to aligned text.

    Args:
        table: Table to render
        dialect: Dialect handle or name (configured mode if None)
        indent: Prefix for every non-blank line
    """
    return _resolve(dialect).stringifier.stringify_with_indent(table, indent)


def realign(text: str, *, dialect: Dialect | str | None = None) -> str:
    """Parse and re-render a table block, keeping its first line's indentation.

    Empty text comes back unchanged.
    """
    handle = _resolve(dialect)
    table = handle.parser.parse(text)
    if table is None:
        return text
    indent = leading_indent(text.split("\n", 1)[0])
    return handle.stringifier.stringify_with_indent(table, indent)


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "realign",
    "stringify",
    # Model
    "Alignment",
    "ColumnDef",
    "RowDef",
    "RowKind",
    "Table",
    # Width
    "display_width",
    "pad",
    # Dialects
    "Dialect",
    "get_dialect",
    # Navigation
    "JumpPosition",
    "TableNavigator",
    "Position",
    "Span",
    "TextDocument",
    "locate_table",
    # Commands
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
    # Configuration (ContextVar-based)
    "TableConfig",
    "get_table_config",
    "set_table_config",
    "reset_table_config",
    "table_config_context",
    # Errors
    "CommandError",
    "ConfigError",
    "MesitaError",
    "TableIndexError",
]
