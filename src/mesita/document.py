"""In-memory line buffer for commands and tests.

TextDocument splits text on ``\\n`` and implements the ``LineReader``
protocol, so the navigator and the locators can read it like an editor
buffer. Replacing a span returns a new document; instances are never
mutated.

Thread Safety:
TextDocument is immutable after construction and safe to share.

"""

from __future__ import annotations

from mesita.location import Position, Span


class TextDocument:
    """Immutable text split into lines.

    Usage:
        >>> doc = TextDocument("a\\nb")
        >>> doc.line_count
        2
        >>> doc.line_at(1)
        'b'
        >>> doc.replace(Span(Position(0, 0), Position(0, 1)), "x").text
        'x\\nb'

    """

    __slots__ = ("_lines",)

    def __init__(self, text: str = "") -> None:
        self._lines: tuple[str, ...] = tuple(text.split("\n"))

    def __repr__(self) -> str:
        return f"TextDocument(lines={len(self._lines)})"

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> str:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"line {index} out of range (document has {len(self._lines)})")
        return self._lines[index]

    def offset_at(self, position: Position) -> int:
        """Absolute offset of position in text, clamped to its line."""
        offset = sum(len(line) + 1 for line in self._lines[: position.line])
        return offset + min(position.character, len(self._lines[position.line]))

    def get_text(self, span: Span) -> str:
        return self.text[self.offset_at(span.start) : self.offset_at(span.end)]

    def replace(self, span: Span, new_text: str) -> TextDocument:
        """Return a new document with span replaced by new_text."""
        text = self.text
        start = self.offset_at(span.start)
        end = self.offset_at(span.end)
        return TextDocument(text[:start] + new_text + text[end:])

    def insert(self, position: Position, new_text: str) -> TextDocument:
        return self.replace(Span(position, position), new_text)


__all__ = ["TextDocument"]
