"""Table dialects for Mesita.

Dialects describe how a text table is written:
- markdown: GFM pipe tables with ``|:---:|`` alignment separators
- org: Org-mode tables with ``|---+---|`` separators

Usage:
    >>> from mesita.dialects import get_dialect
    >>>
    >>> markdown = get_dialect("markdown")
    >>> table = markdown.parser.parse("|a|b|\\n|-|-|\\n|1|2|")
    >>> print(markdown.stringifier.stringify(table))
    | a   | b   |
    | --- | --- |
    | 1   | 2   |
    >>>
    >>> # Without a name, the configured mode decides
    >>> dialect = get_dialect()

Dialect Architecture:
A dialect is a frozen handle over three capability objects (parser,
stringifier, locator) that satisfy the protocols in
``mesita.dialects.protocol``. Callers pick a handle once and pass it
around; there is no dialect base class.

Thread Safety:
All dialect components are stateless. Handles are immutable.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from mesita.config import get_table_config
from mesita.dialects.markdown import MarkdownLocator, MarkdownParser, MarkdownStringifier
from mesita.dialects.org import OrgLocator, OrgParser, OrgStringifier
from mesita.dialects.protocol import LineReader, TableLocator, TableParser, TableStringifier

__all__ = [
    "BUILTIN_DIALECTS",
    "Dialect",
    "LineReader",
    "MarkdownLocator",
    "MarkdownParser",
    "MarkdownStringifier",
    "OrgLocator",
    "OrgParser",
    "OrgStringifier",
    "TableLocator",
    "TableParser",
    "TableStringifier",
    "get_dialect",
    "register_dialect",
]


@dataclass(frozen=True, slots=True)
class Dialect:
    """Interchangeable handle over one dialect's capabilities.

    Attributes:
        name: Dialect identifier ("markdown", "org")
        parser: Text -> Table
        stringifier: Table -> text
        locator: Finds table extents in a document
        escapes: Whether ``\\|`` is cell text (Markdown) or a boundary (Org)

    """

    name: str
    parser: TableParser
    stringifier: TableStringifier
    locator: TableLocator
    escapes: bool = True


DialectFactory = Callable[[], Dialect]

# Registry of built-in dialects
BUILTIN_DIALECTS: dict[str, DialectFactory] = {}


def register_dialect(name: str) -> Callable[[DialectFactory], DialectFactory]:
    """Decorator to register a dialect factory.

    Args:
        name: Dialect name for lookup

    Returns:
        Decorator function that registers and returns the factory

    Usage:
        @register_dialect("markdown")
        def markdown() -> Dialect:
            ...

    """

    def decorator(factory: DialectFactory) -> DialectFactory:
        BUILTIN_DIALECTS[name] = factory
        return factory

    return decorator


def get_dialect(name: str | None = None) -> Dialect:
    """Get a dialect handle by name.

    Args:
        name: Dialect name; None uses the configured mode

    Returns:
        Dialect handle

    Raises:
        KeyError: If dialect name is not recognized

    """
    if name is None:
        name = get_table_config().mode
    if name not in BUILTIN_DIALECTS:
        available = ", ".join(sorted(BUILTIN_DIALECTS.keys()))
        raise KeyError(f"Unknown dialect: {name!r}. Available: {available}")
    return BUILTIN_DIALECTS[name]()


@register_dialect("markdown")
def _markdown() -> Dialect:
    return Dialect("markdown", MarkdownParser(), MarkdownStringifier(), MarkdownLocator())


@register_dialect("org")
def _org() -> Dialect:
    return Dialect("org", OrgParser(), OrgStringifier(), OrgLocator(), escapes=False)
