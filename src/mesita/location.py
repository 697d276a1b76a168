"""Cursor coordinates for navigation and editing commands.

Provides Position and Span dataclasses for addressing text by
(line, character). Used by the navigator, the locators, and commands to
exchange cursor positions with the host editor.

All coordinates are 0-indexed. ``character`` counts code points, the
same way Python indexes ``str``.

Thread Safety:
Position and Span are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A cursor position in a document.

    Ordered by line first, then character, so positions compare the way a
    cursor moves through text.

    Attributes:
        line: Line number (0-indexed)
        character: Offset within the line (0-indexed)

    Examples:
            >>> Position(2, 4) < Position(3, 0)
            True
            >>> Position(2, 4).translate(lines=1)
            Position(line=3, character=4)

    """

    line: int
    character: int

    def __str__(self) -> str:
        """Format as "line:character"."""
        return f"{self.line}:{self.character}"

    def translate(self, lines: int = 0, characters: int = 0) -> Position:
        """Return a new position shifted by the given deltas."""
        return Position(self.line + lines, self.character + characters)

    def with_character(self, character: int) -> Position:
        """Return a position on the same line at another character."""
        return Position(self.line, character)


@dataclass(frozen=True, slots=True)
class Span:
    """A range between two positions, both ends inclusive for containment.

    Attributes:
        start: First position of the span
        end: Last position of the span

    """

    start: Position
    end: Position

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    def contains(self, position: Position) -> bool:
        """Check whether position lies within the span (ends included)."""
        return self.start <= position <= self.end
