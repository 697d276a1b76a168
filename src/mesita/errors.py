"""Exception classes for Mesita.

Provides standardized exceptions for error handling throughout Mesita.

Parsers never raise on malformed text (they return ``None`` or an empty
table). Exceptions are reserved for contract violations, refused editing
commands, and bad configuration.
"""

from __future__ import annotations


class MesitaError(Exception):
    """Base exception for all Mesita errors.

    Subclass this for specific error categories.
    """

    pass


class TableIndexError(MesitaError, IndexError):
    """Row or column index outside the table.

    Indices handed to the Table are expected to come from the navigator
    or from code that already checked bounds, so this is a programming
    error rather than a recoverable condition.
    """

    def __init__(self, what: str, index: int, size: int) -> None:
        """Initialize index error.

        Args:
            what: Which axis was indexed ("row" or "column")
            index: The offending index
            size: Number of valid entries on that axis
        """
        self.what = what
        self.index = index
        self.size = size
        super().__init__(f"{what} index {index} out of range (size {size})")


class CommandError(MesitaError):
    """Editing command refused.

    Raised when a command cannot be applied at the cursor (moving a row
    past the table edge, clearing a separator row, ...). The message is
    meant to be shown to the user as-is.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        """Initialize command error.

        Args:
            message: User-facing description
            line: Document line the command was invoked on (0-indexed, optional)
        """
        self.message = message
        self.line = line
        super().__init__(message)


class ConfigError(MesitaError):
    """Invalid configuration value."""

    def __init__(self, key: str, message: str) -> None:
        """Initialize config error.

        Args:
            key: Name of the offending setting
            message: Description of the problem
        """
        self.key = key
        super().__init__(f"Config '{key}': {message}")
