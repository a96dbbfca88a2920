import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from matstats.ranges import row_maxs, row_mins, row_ranges


MATRIX = [
    [3, 1, 4, 1],
    [5, 9, 2, 6],
    [5, 3, 5, 8],
]


def test_row_mins_and_maxs_plain():
    assert row_mins(MATRIX) == [min(r) for r in MATRIX]
    assert row_maxs(MATRIX) == [max(r) for r in MATRIX]


def test_row_ranges_matches_mins_and_maxs():
    assert row_ranges(MATRIX) == list(zip(row_mins(MATRIX), row_maxs(MATRIX)))


def test_selection_of_rows_and_cols():
    result = row_mins(MATRIX, rows=[2, 0], cols=[1, 2])
    assert result == [min(MATRIX[2][1], MATRIX[2][2]), min(MATRIX[0][1], MATRIX[0][2])]


def test_logical_column_selection():
    result = row_maxs(MATRIX, cols=[True, False, False, True])
    assert result == [max(r[0], r[3]) for r in MATRIX]


def test_missing_value_without_na_rm():
    x = [[1.0, None, 3.0], [2.0, 4.0, 6.0]]
    assert row_mins(x) == [None, 2.0]
    assert row_ranges(x) == [(None, None), (2.0, 6.0)]


def test_missing_value_with_na_rm():
    x = [[1.0, None, 3.0], [2.0, 4.0, 6.0]]
    assert row_ranges(x, na_rm=True) == [(1.0, 3.0), (2.0, 6.0)]


def test_nan_propagates_but_missing_wins():
    x = [[1.0, math.nan, 3.0], [math.nan, None, 2.0]]
    mins = row_mins(x)
    assert math.isnan(mins[0])
    assert mins[1] is None


def test_nan_dropped_with_na_rm():
    x = [[1.0, math.nan, 3.0]]
    assert row_maxs(x, na_rm=True) == [3.0]


def test_rows_without_values_give_infinite_bounds():
    x = [[1, 2], [None, None]]
    assert row_ranges(x, na_rm=True) == [(1.0, 2.0), (math.inf, -math.inf)]
    assert isinstance(row_mins(x, na_rm=True)[0], float)


def test_no_columns_selected():
    assert row_mins(MATRIX, cols=[]) == [math.inf] * len(MATRIX)
    assert row_maxs(MATRIX, cols=[]) == [-math.inf] * len(MATRIX)


def test_no_rows_selected():
    assert row_ranges(MATRIX, rows=[]) == []


def test_missing_column_index_gives_missing_cell():
    result = row_mins(MATRIX, cols=[0, None])
    assert result == [None, None, None]
    assert row_mins(MATRIX, cols=[0, None], na_rm=True) == [r[0] for r in MATRIX]


def test_out_of_range_rows_raise():
    with pytest.raises(IndexError):
        row_mins(MATRIX, rows=[len(MATRIX)])


def test_ragged_matrix_raises():
    with pytest.raises(ValueError):
        row_maxs([[1, 2], [3]])


@given(
    st.lists(
        st.lists(st.integers(-1000, 1000), min_size=3, max_size=3),
        min_size=1,
        max_size=8,
    )
)
def test_ranges_match_builtins(x):
    ranges = row_ranges(x)
    assert ranges == [(min(r), max(r)) for r in x]
    assert all(low <= high for low, high in ranges)


@given(
    st.lists(
        st.lists(
            st.one_of(st.none(), st.floats(-1e6, 1e6)), min_size=4, max_size=4
        ),
        min_size=1,
        max_size=6,
    )
)
def test_na_rm_ignores_missing(x):
    for row, (low, high) in zip(x, row_ranges(x, na_rm=True)):
        present = [v for v in row if v is not None]
        if present:
            assert (low, high) == (min(present), max(present))
        else:
            assert (low, high) == (math.inf, -math.inf)