import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from matstats.logsumexp import col_log_sum_exps, log_sum_exp, row_log_sum_exps

finite = st.floats(min_value=-50.0, max_value=50.0, allow_nan=False)

NAN = pytest.approx(math.nan, nan_ok=True)


def test_empty_is_negative_infinity():
    assert log_sum_exp([]) == -math.inf


def test_single_value_returned_as_is():
    assert log_sum_exp([3.5]) == 3.5


def test_two_zeros_give_log_two():
    assert log_sum_exp([0.0, 0.0]) == pytest.approx(math.log(2))


def test_large_values_do_not_overflow():
    assert log_sum_exp([1000.0, 1000.0]) == pytest.approx(1000.0 + math.log(2))


@given(st.lists(finite, min_size=1, max_size=20), finite)
def test_shift_invariance(values, shift):
    shifted = [v + shift for v in values]
    assert log_sum_exp(shifted) == pytest.approx(log_sum_exp(values) + shift, abs=1e-9)


@given(finite, st.integers(min_value=1, max_value=30))
def test_repeated_value(value, n):
    assert log_sum_exp([value] * n) == pytest.approx(value + math.log(n), abs=1e-9)


@given(st.lists(finite, min_size=1, max_size=20))
def test_bounded_by_max(values):
    result = log_sum_exp(values)
    assert max(values) <= result + 1e-12
    assert result <= max(values) + math.log(len(values)) + 1e-9


def test_missing_value_propagates():
    assert log_sum_exp([1.0, float("nan")]) == NAN
    assert log_sum_exp([None, 1.0]) == NAN


def test_missing_value_removed():
    assert log_sum_exp([1.0, float("nan")], na_rm=True) == 1.0
    assert log_sum_exp([None, 2.0], na_rm=True) == 2.0


def test_only_missing_values_removed():
    assert log_sum_exp([None, float("nan")], na_rm=True) == -math.inf
    assert log_sum_exp([None], na_rm=True) == -math.inf
    assert log_sum_exp([float("nan"), None]) == NAN


def test_infinities():
    assert log_sum_exp([math.inf, 1.0]) == math.inf
    assert log_sum_exp([-math.inf, -math.inf]) == -math.inf
    assert log_sum_exp([-math.inf, 2.0]) == 2.0


def test_index_selection():
    x = [5.0, 0.0, 7.0, 0.0]
    assert log_sum_exp(x, idxs=[1, 3]) == log_sum_exp([0.0, 0.0])
    assert log_sum_exp(x, idxs=[True, False]) == log_sum_exp([5.0, 7.0])


def test_out_of_bound_index_is_missing():
    assert log_sum_exp([1.0, 2.0], idxs=[0, 5]) == NAN
    assert log_sum_exp([1.0, 2.0], idxs=[0, 5], na_rm=True) == 1.0


MATRIX = [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]]


def test_rows_match_vector_version():
    assert row_log_sum_exps(MATRIX) == [log_sum_exp(row) for row in MATRIX]


def test_cols_match_vector_version():
    expected = [log_sum_exp([row[j] for row in MATRIX]) for j in range(3)]
    assert col_log_sum_exps(MATRIX) == expected


def test_row_and_col_selection():
    assert row_log_sum_exps(MATRIX, rows=[1], cols=[0, 2]) == [log_sum_exp([3.0, 5.0])]
    assert col_log_sum_exps(MATRIX, rows=[0], cols=[2, 1]) == [2.0, 1.0]


def test_missing_row_index():
    result = row_log_sum_exps(MATRIX, rows=[0, None])
    assert result[0] == log_sum_exp(MATRIX[0])
    assert result[1] == NAN
    assert row_log_sum_exps(MATRIX, rows=[None], na_rm=True) == [-math.inf]


def test_missing_col_index():
    result = col_log_sum_exps(MATRIX, cols=[None, 1])
    assert result[0] == NAN
    assert result[1] == log_sum_exp([1.0, 4.0])


def test_empty_margins():
    assert row_log_sum_exps(MATRIX, cols=[]) == [-math.inf, -math.inf]
    assert col_log_sum_exps(MATRIX, rows=[]) == [-math.inf] * 3


def test_out_of_range_row_rejected():
    with pytest.raises(IndexError):
        row_log_sum_exps(MATRIX, rows=[2])