"""Logging for Mesita.

Every module logs under the ``mesita.`` namespace (the editing commands log
as ``mesita.commands``). The library never installs handlers; a host that
wants to see which table region a command located turns on DEBUG::

    import logging

    logging.basicConfig()
    logging.getLogger("mesita.commands").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

# Root of the library's logger hierarchy
ROOT = "mesita"


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the ``mesita`` hierarchy.

    Module names (``mesita.commands``) are used as-is; bare names are
    placed under the root.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("navigator").name
        'mesita.navigator'
        >>> get_logger("mesita.dialects.org").name
        'mesita.dialects.org'
    """
    if name == ROOT or name.startswith(f"{ROOT}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT}.{name}")


__all__ = ["ROOT", "get_logger"]
