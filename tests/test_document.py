"""Tests for TextDocument and the location types."""

import pytest

from mesita.dialects.protocol import LineReader
from mesita.document import TextDocument
from mesita.location import Position, Span


class TestPosition:
    """Position ordering and helpers."""

    def test_ordering(self) -> None:
        assert Position(0, 9) < Position(1, 0)
        assert Position(1, 2) < Position(1, 3)
        assert sorted([Position(2, 0), Position(0, 5), Position(0, 1)]) == [
            Position(0, 1),
            Position(0, 5),
            Position(2, 0),
        ]

    def test_translate(self) -> None:
        assert Position(1, 1).translate(lines=2, characters=-1) == Position(3, 0)

    def test_with_character(self) -> None:
        assert Position(4, 1).with_character(7) == Position(4, 7)

    def test_str(self) -> None:
        assert str(Position(3, 14)) == "3:14"
        assert str(Span(Position(0, 0), Position(1, 2))) == "0:0-1:2"

    def test_frozen(self) -> None:
        position = Position(0, 0)
        with pytest.raises(AttributeError):
            position.line = 1  # type: ignore[misc]


class TestSpan:
    """Span containment is inclusive at both ends."""

    def test_contains(self) -> None:
        span = Span(Position(0, 2), Position(0, 5))
        assert span.contains(Position(0, 2))
        assert span.contains(Position(0, 5))
        assert not span.contains(Position(0, 1))
        assert not span.contains(Position(0, 6))
        assert not span.contains(Position(1, 3))

    def test_multi_line(self) -> None:
        span = Span(Position(1, 4), Position(3, 0))
        assert span.contains(Position(2, 99))
        assert not span.contains(Position(3, 1))


class TestTextDocument:
    """TextDocument line access and immutable edits."""

    def test_lines(self) -> None:
        doc = TextDocument("a\nbb\n")
        assert doc.line_count == 3
        assert doc.line_at(1) == "bb"

    def test_empty(self) -> None:
        doc = TextDocument()
        assert doc.line_count == 1
        assert doc.line_at(0) == ""

    def test_line_out_of_range(self) -> None:
        with pytest.raises(IndexError):
            TextDocument("a").line_at(1)

    def test_offset_at_clamps(self) -> None:
        doc = TextDocument("ab\ncd")
        assert doc.offset_at(Position(1, 1)) == 4
        assert doc.offset_at(Position(0, 99)) == 2

    def test_get_text(self) -> None:
        doc = TextDocument("hello\nworld")
        assert doc.get_text(Span(Position(0, 3), Position(1, 2))) == "lo\nwo"

    def test_replace_returns_new_document(self) -> None:
        doc = TextDocument("one\ntwo\nthree")
        edited = doc.replace(Span(Position(1, 0), Position(1, 3)), "2\n2b")
        assert edited.text == "one\n2\n2b\nthree"
        assert doc.text == "one\ntwo\nthree"

    def test_insert(self) -> None:
        doc = TextDocument("ac").insert(Position(0, 1), "b")
        assert doc.text == "abc"

    def test_is_line_reader(self) -> None:
        assert isinstance(TextDocument("x"), LineReader)
