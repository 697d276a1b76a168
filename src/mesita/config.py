"""ContextVar-based configuration for Mesita.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The host sets the config once (usually when its settings change); dialect
lookup and commands read it from the current context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from mesita.config import set_table_config, reset_table_config, TableConfig

    set_table_config(TableConfig(mode="org"))
    try:
        result = goto_next_cell(text, cursor)  # uses the Org dialect
    finally:
        reset_table_config()

    # Or use the context manager
    with table_config_context(TableConfig(mode="org")):
        result = goto_next_cell(text, cursor)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator

from mesita.errors import ConfigError

# Dialects shipped with Mesita
MODES: frozenset[str] = frozenset({"markdown", "org"})


@dataclass(frozen=True, slots=True)
class TableConfig:
    """Immutable table-editing configuration.

    Attributes:
        mode: Dialect used when a command is not given one explicitly
            ("markdown" or "org")
        default_columns: Column count for create_table without a size
        default_rows: Row count (header included) for create_table without a size

    """

    mode: str = "markdown"
    default_columns: int = 5
    default_rows: int = 2

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            available = ", ".join(sorted(MODES))
            raise ConfigError("mode", f"unknown mode {self.mode!r}. Available: {available}")
        if self.default_columns < 1:
            raise ConfigError("default_columns", "must be at least 1")
        if self.default_rows < 1:
            raise ConfigError("default_rows", "must be at least 1")

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "TableConfig":
        """Create TableConfig from dictionary.

        Useful when settings come from an editor's JSON/YAML configuration.
        Only includes keys that are valid TableConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                TableConfig attribute names.

        Returns:
            New TableConfig instance with values from dict.

        Raises:
            ConfigError: If a known key holds an invalid value.

        Example:
            >>> config = TableConfig.from_dict({"mode": "org", "show_status": True})
            >>> config.mode
            'org'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TableConfig = TableConfig()

_table_config: ContextVar[TableConfig] = ContextVar(
    "table_config",
    default=_DEFAULT_CONFIG,
)


def get_table_config() -> TableConfig:
    """Get current configuration (thread-local)."""
    return _table_config.get()


def set_table_config(config: TableConfig) -> None:
    """Set configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _table_config.set(config)


def reset_table_config() -> None:
    """Reset to the default configuration singleton."""
    _table_config.set(_DEFAULT_CONFIG)


@contextmanager
def table_config_context(config: TableConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: TableConfig to use within the context.

    Example:
        >>> with table_config_context(TableConfig(mode="org")):
        ...     get_table_config().mode
        'org'

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _table_config.get()
    _table_config.set(config)
    try:
        yield
    finally:
        _table_config.set(previous)


__all__ = [
    "MODES",
    "TableConfig",
    "get_table_config",
    "reset_table_config",
    "set_table_config",
    "table_config_context",
]
