"""Numerically stable ``log(sum(exp(x)))`` for vectors and matrix margins."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any, Optional

from .indices import subset_vector, validate

_NAN = float("nan")


def _as_float(value: Any) -> float:
    return _NAN if value is None else float(value)


def log_sum_exp(
    x: Sequence[Any],
    idxs: Optional[Iterable[Any]] = None,
    na_rm: bool = False,
) -> float:
    """Return ``log(sum(exp(x)))`` computed without overflow.

    Missing values are ``None`` or NaN.  Without ``na_rm`` a missing value
    makes the result NaN; with it, missing values are dropped.  An empty
    selection, or one holding only dropped values, gives ``-inf``.
    ``idxs`` selects the elements; out-of-bound positions count as missing.
    """
    values = [_as_float(v) for v in subset_vector(x, idxs)]
    if not values:
        return -math.inf

    i_max = 0
    x_max = values[0]
    max_is_na = math.isnan(x_max)

    if len(values) == 1:
        return -math.inf if na_rm and max_is_na else x_max

    for position, value in enumerate(values[1:], start=1):
        if math.isnan(value):
            if na_rm:
                continue
            return _NAN
        if value > x_max or (na_rm and max_is_na):
            i_max = position
            x_max = value
            max_is_na = math.isnan(x_max)

    if max_is_na:
        return -math.inf if na_rm else _NAN
    if x_max == math.inf:
        return math.inf
    if x_max == -math.inf:
        return -math.inf

    total = sum(
        math.exp(value - x_max)
        for position, value in enumerate(values)
        if position != i_max and not math.isnan(value)
    )
    return x_max + math.log1p(total)


def _dims(x: Sequence[Sequence[Any]]) -> tuple[int, int]:
    nrow = len(x)
    ncol = len(x[0]) if nrow else 0
    if any(len(row) != ncol for row in x):
        raise ValueError("all rows of a matrix must have the same length")
    return nrow, ncol


def _positions(
    x: Sequence[Sequence[Any]], rows: Optional[Iterable[Any]], cols: Optional[Iterable[Any]]
) -> tuple[list[Optional[int]], list[Optional[int]]]:
    nrow, ncol = _dims(x)
    row_sel = validate(rows, nrow, False)
    col_sel = validate(cols, ncol, False)
    row_positions = list(range(nrow)) if row_sel is None else row_sel
    col_positions = list(range(ncol)) if col_sel is None else col_sel
    return row_positions, col_positions


def _cell(x: Sequence[Sequence[Any]], i: Optional[int], j: Optional[int]) -> Any:
    return None if i is None or j is None else x[i][j]


def row_log_sum_exps(
    x: Sequence[Sequence[Any]],
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    na_rm: bool = False,
) -> list[float]:
    """Apply :func:`log_sum_exp` to each selected row of a row-major matrix."""
    row_positions, col_positions = _positions(x, rows, cols)
    return [
        log_sum_exp([_cell(x, i, j) for j in col_positions], na_rm=na_rm)
        for i in row_positions
    ]


def col_log_sum_exps(
    x: Sequence[Sequence[Any]],
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    na_rm: bool = False,
) -> list[float]:
    """Apply :func:`log_sum_exp` to each selected column of a row-major matrix."""
    row_positions, col_positions = _positions(x, rows, cols)
    return [
        log_sum_exp([_cell(x, i, j) for i in row_positions], na_rm=na_rm)
        for j in col_positions
    ]