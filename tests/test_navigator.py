"""Tests for TableNavigator jump positions and movement."""

import pytest

from mesita.dialects import get_dialect
from mesita.document import TextDocument
from mesita.location import Position
from mesita.navigator import TableNavigator
from mesita.table import Table

FORMATTED = "| a   | b   |\n| --- | --- |\n| c   | d   |"


def _parse(text: str) -> Table:
    table = get_dialect("markdown").parser.parse(text)
    assert table is not None
    return table


def _navigator(text: str, start_line: int = 0) -> TableNavigator:
    """Navigator over text, reading live line content."""
    table = _parse(text)
    table.start_line = start_line
    prefix = "\n" * start_line
    return TableNavigator(table, TextDocument(prefix + text))


class TestJumpPositions:
    """Construction of the jump position chain."""

    def test_one_per_cell_plus_separators(self) -> None:
        nav = _navigator(FORMATTED)
        positions = nav.jump_positions
        assert len(positions) == 5
        assert [jmp.is_separator for jmp in positions] == [False, False, True, False, False]

    def test_chain_links(self) -> None:
        positions = _navigator(FORMATTED).jump_positions
        assert positions[0].prev is None
        assert positions[-1].next is None
        for index, jmp in enumerate(positions[1:], start=1):
            assert jmp.prev == index - 1
            assert positions[index - 1].next == index

    def test_separator_placeholder(self) -> None:
        separator = _navigator(FORMATTED).jump_positions[2]
        assert separator.start == Position(1, 0)
        assert separator.span.end == Position(1, 1)
        assert separator.col == -1

    def test_scanned_extents(self) -> None:
        positions = _navigator(FORMATTED).jump_positions
        assert positions[0].span.start == Position(0, 2)
        assert positions[0].span.end == Position(0, 5)
        assert positions[1].span.start == Position(0, 8)
        assert (positions[4].row, positions[4].col) == (2, 1)

    def test_estimated_extents_without_reader(self) -> None:
        nav = TableNavigator(_parse("| a | b |\n| c | d |"))
        starts = [jmp.start for jmp in nav.jump_positions]
        assert starts == [Position(0, 2), Position(0, 6), Position(1, 2), Position(1, 6)]

    def test_start_line_offsets_positions(self) -> None:
        nav = _navigator("| a | b |", start_line=5)
        assert [jmp.start for jmp in nav.jump_positions] == [Position(5, 2), Position(5, 6)]

    def test_incomplete_row_mixes_scan_and_estimate(self) -> None:
        nav = _navigator("| a | b |\n| c")
        second_row = [jmp.start for jmp in nav.jump_positions if jmp.row == 1]
        assert second_row == [Position(1, 2), Position(1, 6)]

    def test_row_being_typed_runs_to_line_end(self) -> None:
        nav = _navigator("| abc")
        assert nav.jump_positions[0].span.end == Position(0, 5)

    def test_live_text_beats_estimate_for_wide_chars(self) -> None:
        """Wide characters are one code point but two columns."""
        text = "| あ | b |"
        live = _navigator(text)
        estimated = TableNavigator(_parse(text))
        assert live.jump_positions[1].start == Position(0, 6)
        assert estimated.jump_positions[1].start == Position(0, 7)


class TestNextCell:
    """next_cell walks the chain forward, skipping separators."""

    def test_same_row(self) -> None:
        assert _navigator(FORMATTED).next_cell(Position(0, 2)) == Position(0, 8)

    def test_inside_cell(self) -> None:
        assert _navigator(FORMATTED).next_cell(Position(0, 4)) == Position(0, 8)

    def test_skips_separator(self) -> None:
        assert _navigator(FORMATTED).next_cell(Position(0, 8)) == Position(2, 2)

    def test_end_of_chain(self) -> None:
        assert _navigator(FORMATTED).next_cell(Position(2, 8)) is None

    def test_skips_consecutive_separators(self) -> None:
        nav = _navigator("| a |\n|---|\n|---|\n| b |")
        assert nav.next_cell(Position(0, 2)) == Position(3, 2)

    def test_cursor_at_line_start(self) -> None:
        assert _navigator(FORMATTED).next_cell(Position(2, 0)) == Position(2, 2)

    def test_cursor_between_cells(self) -> None:
        assert _navigator(FORMATTED).next_cell(Position(0, 6)) == Position(0, 8)

    def test_cursor_past_last_cell(self) -> None:
        assert _navigator(FORMATTED).next_cell(Position(0, 13)) == Position(0, 2)

    def test_line_outside_table(self) -> None:
        assert _navigator(FORMATTED).next_cell(Position(7, 0)) is None

    def test_org_pipe_after_backslash_is_boundary(self) -> None:
        text = "| a\\| b |"
        table = get_dialect("org").parser.parse(text)
        assert table is not None
        nav = TableNavigator(table, TextDocument(text), escapes=False)
        assert nav.next_cell(Position(0, 2)) == Position(0, 6)

    @pytest.mark.parametrize(("rows", "cols"), [(1, 1), (2, 3), (4, 2), (3, 5)])
    def test_terminates_after_every_cell(self, rows: int, cols: int) -> None:
        line = "|" + " x |" * cols
        nav = _navigator("\n".join([line] * rows))
        position: Position | None = Position(0, 2)
        steps = 0
        while True:
            position = nav.next_cell(position)
            if position is None:
                break
            steps += 1
        assert steps == rows * cols - 1


class TestPreviousCell:
    """previous_cell walks the chain backward."""

    def test_same_row(self) -> None:
        assert _navigator(FORMATTED).previous_cell(Position(0, 8)) == Position(0, 2)

    def test_skips_separator(self) -> None:
        assert _navigator(FORMATTED).previous_cell(Position(2, 2)) == Position(0, 8)

    def test_start_of_chain(self) -> None:
        assert _navigator(FORMATTED).previous_cell(Position(0, 2)) is None


class TestNextRow:
    """next_row finds the cell directly below."""

    def test_without_separator(self) -> None:
        nav = _navigator("| a | b |\n| c | d |")
        assert nav.next_row(Position(0, 6)) == Position(1, 6)

    def test_onto_separator_placeholder_misses(self) -> None:
        assert _navigator(FORMATTED).next_row(Position(0, 8)) is None

    def test_last_row(self) -> None:
        assert _navigator(FORMATTED).next_row(Position(2, 2)) is None


class TestQueries:
    """is_last_cell, is_on_separator_row, cell_at."""

    def test_is_last_cell(self) -> None:
        nav = _navigator(FORMATTED)
        cells = [jmp.start for jmp in nav.jump_positions if not jmp.is_separator]
        assert [nav.is_last_cell(start) for start in cells] == [False, False, False, True]

    def test_is_last_cell_off_table(self) -> None:
        nav = _navigator(FORMATTED)
        assert not nav.is_last_cell(Position(1, 0))
        assert not nav.is_last_cell(Position(9, 9))

    def test_is_on_separator_row(self) -> None:
        nav = _navigator(FORMATTED)
        assert nav.is_on_separator_row(Position(1, 0))
        assert nav.is_on_separator_row(Position(1, 1))
        assert not nav.is_on_separator_row(Position(0, 2))

    def test_cell_at(self) -> None:
        nav = _navigator(FORMATTED)
        assert nav.cell_at(Position(2, 9)) == (2, 1)
        assert nav.cell_at(Position(1, 0)) is None
        assert nav.cell_at(Position(0, 0)) is None
