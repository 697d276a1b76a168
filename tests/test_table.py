"""Tests for the Table model and its width bookkeeping."""

import pytest

from mesita.errors import MesitaError, TableIndexError
from mesita.table import MIN_SEPARATOR_WIDTH, Alignment, RowKind, Table


def _table(*rows: list[str] | None) -> Table:
    """Build a table; None entries become separator rows."""
    table = Table()
    for values in rows:
        if values is None:
            table.add_row(RowKind.SEPARATOR, [])
        else:
            table.add_row(RowKind.DATA, values)
    return table


def _widths(table: Table) -> list[int]:
    return [col.width for col in table.cols]


class TestAddRow:
    """add_row keeps data rows rectangular and widths current."""

    def test_empty_values_on_empty_table_make_one_column(self) -> None:
        table = _table([])
        assert len(table.cols) == 1
        assert table.row_values(0) == ("",)

    def test_empty_values_on_existing_table_pad(self) -> None:
        table = _table(["a", "b"], [])
        assert table.row_values(1) == ("", "")

    def test_wider_row_grows_columns_and_pads_existing(self) -> None:
        table = _table(["a"], ["b", "c", "d"])
        assert len(table.cols) == 3
        assert table.row_values(0) == ("a", "", "")
        assert table.row_values(1) == ("b", "c", "d")

    def test_shorter_row_is_padded(self) -> None:
        table = _table(["a", "b"], ["c"])
        assert table.row_values(1) == ("c", "")

    def test_widths_follow_widest_value(self) -> None:
        table = _table(["a", "bb"], ["ccc", "d"])
        assert _widths(table) == [3, 2]

    def test_wide_characters(self) -> None:
        table = _table(["あい", "x"])
        assert _widths(table) == [4, 1]

    def test_separator_stores_no_cells(self) -> None:
        table = _table(["a", "b"], None)
        assert table.rows[1].kind is RowKind.SEPARATOR
        assert table.row_values(1) == ()

    def test_separator_raises_widths(self) -> None:
        table = _table(["a", "b"], None)
        assert _widths(table) == [MIN_SEPARATOR_WIDTH, MIN_SEPARATOR_WIDTH]

    def test_separator_first_creates_column(self) -> None:
        table = _table(None)
        assert len(table.cols) == 1
        assert table.has_separator

    def test_cells_match_rows(self) -> None:
        table = _table(["a"], None, ["b", "c"])
        assert len(table.rows) == 3
        assert table.data_row_count == 2
        for index, row in enumerate(table.rows):
            if not row.is_separator:
                assert len(table.row_values(index)) == len(table.cols)


class TestAddColumn:
    """add_column appends an empty zero-width column."""

    def test_one_column_two_rows(self) -> None:
        table = _table(["a"], ["b"])
        table.add_column()
        assert len(table.cols) == 2
        assert table.row_values(0) == ("a", "")
        assert table.row_values(1) == ("b", "")

    def test_new_column_defaults(self) -> None:
        table = _table(["a"])
        table.add_column()
        assert table.cols[1].alignment is Alignment.LEFT
        assert table.cols[1].width == 0

    def test_separator_rows_stay_empty(self) -> None:
        table = _table(["a"], None)
        table.add_column()
        assert table.row_values(1) == ()

    def test_alignment_argument(self) -> None:
        table = _table(["a"])
        table.add_column(Alignment.RIGHT)
        assert table.cols[1].alignment is Alignment.RIGHT


class TestCellAccess:
    """get_at / set_at and incremental width updates."""

    def test_get_at(self) -> None:
        table = _table(["a", "b"], ["c", "d"])
        assert table.get_at(1, 0) == "c"

    def test_set_at_widens(self) -> None:
        table = _table(["a", "b"])
        table.set_at(0, 0, "wider")
        assert table.get_at(0, 0) == "wider"
        assert _widths(table) == [5, 1]

    def test_set_at_narrowing_widest_rescans(self) -> None:
        table = _table(["long", "x"], ["ab", "y"])
        table.set_at(0, 0, "a")
        assert _widths(table) == [2, 1]

    def test_set_at_narrowing_other_keeps_width(self) -> None:
        table = _table(["long", "x"], ["ab", "y"])
        table.set_at(1, 0, "a")
        assert _widths(table) == [4, 1]

    def test_set_at_never_below_separator_minimum(self) -> None:
        table = _table(["long"], None, ["b"])
        table.set_at(0, 0, "a")
        assert _widths(table) == [MIN_SEPARATOR_WIDTH]

    def test_set_at_wide_character(self) -> None:
        table = _table(["ab"])
        table.set_at(0, 0, "あい")
        assert _widths(table) == [4]

    def test_incremental_matches_full_recalculation(self) -> None:
        table = _table(["alpha", "b"], None, ["c", "delta"], ["e", "f"])
        table.set_at(0, 0, "a")
        table.set_at(2, 1, "dd")
        table.set_at(3, 0, "epsilon")
        incremental = _widths(table)
        table.recalculate_column_widths()
        assert incremental == _widths(table)


class TestRecalculate:
    """recalculate_column_widths rescans every data row."""

    def test_without_separator(self) -> None:
        table = _table(["a", "bb"])
        table.cols[0].width = 99
        table.recalculate_column_widths()
        assert _widths(table) == [1, 2]

    def test_with_separator(self) -> None:
        table = _table(["a", "bbbb"], None)
        table.cols[1].width = 0
        table.recalculate_column_widths()
        assert _widths(table) == [3, 4]

    def test_empty_columns_without_separator(self) -> None:
        table = _table(["", ""])
        table.recalculate_column_widths()
        assert _widths(table) == [0, 0]


class TestStructuralChanges:
    """Column/row swaps and removals."""

    def test_swap_columns(self) -> None:
        table = _table(["a", "bbbb"], None, ["c", "d"])
        table.set_alignment(0, Alignment.RIGHT)
        table.swap_columns(0, 1)
        assert table.row_values(0) == ("bbbb", "a")
        assert table.row_values(2) == ("d", "c")
        assert table.cols[1].alignment is Alignment.RIGHT
        assert _widths(table) == [4, 3]

    def test_swap_rows(self) -> None:
        table = _table(["a"], None, ["b"])
        table.swap_rows(0, 1)
        assert table.rows[0].kind is RowKind.SEPARATOR
        assert table.row_values(1) == ("a",)

    def test_remove_row(self) -> None:
        table = _table(["wide value"], ["b"])
        table.remove_row(0)
        assert len(table.rows) == 1
        assert _widths(table) == [1]

    def test_remove_column(self) -> None:
        table = _table(["a", "b", "c"], None)
        table.remove_column(1)
        assert table.row_values(0) == ("a", "c")
        assert len(table.cols) == 2

    def test_column_values(self) -> None:
        table = _table(["a", "b"], None, ["c", "d"])
        assert table.column_values(1) == ["b", "d"]


class TestContractViolations:
    """Out-of-range access is a programming error."""

    def test_row_out_of_range(self) -> None:
        table = _table(["a"])
        with pytest.raises(TableIndexError):
            table.get_at(1, 0)

    def test_column_out_of_range(self) -> None:
        table = _table(["a"])
        with pytest.raises(TableIndexError):
            table.set_at(0, 1, "x")

    def test_negative_index(self) -> None:
        table = _table(["a"], ["b"])
        with pytest.raises(TableIndexError):
            table.get_at(-1, 0)

    def test_separator_cell(self) -> None:
        table = _table(["a"], None)
        with pytest.raises(TableIndexError):
            table.get_at(1, 0)

    def test_is_index_error(self) -> None:
        table = Table()
        with pytest.raises(IndexError):
            table.row_values(0)
        with pytest.raises(MesitaError):
            table.swap_columns(0, 1)

    def test_message(self) -> None:
        table = _table(["a"])
        with pytest.raises(TableIndexError, match="row index 3 out of range"):
            table.get_at(3, 0)
