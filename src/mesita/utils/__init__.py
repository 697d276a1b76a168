"""Shared utilities for Mesita.

Modules:
- logger: get_logger for logging
"""

from mesita.utils.logger import get_logger

__all__ = [
    "get_logger",
]
