"""Sample variance of each row or column of a matrix."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any, Optional

from .indices import validate


def _dims(x: Sequence[Sequence[Any]]) -> tuple[int, int]:
    nrow = len(x)
    ncol = len(x[0]) if nrow else 0
    if any(len(row) != ncol for row in x):
        raise ValueError("all rows of a matrix must have the same length")
    return nrow, ncol


def _lines(
    x: Sequence[Sequence[Any]],
    rows: Optional[Iterable[Any]],
    cols: Optional[Iterable[Any]],
    by_row: bool,
) -> list[list[Any]]:
    """Return the selected rows (or columns) as lists; missing indices give ``None``."""
    nrow, ncol = _dims(x)
    row_sel = validate(rows, nrow, False)
    col_sel = validate(cols, ncol, False)
    row_positions = list(range(nrow)) if row_sel is None else row_sel
    col_positions = list(range(ncol)) if col_sel is None else col_sel

    def cell(i: Optional[int], j: Optional[int]) -> Any:
        return None if i is None or j is None else x[i][j]

    if by_row:
        return [[cell(i, j) for j in col_positions] for i in row_positions]
    return [[cell(i, j) for i in row_positions] for j in col_positions]


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _variance(line: Sequence[Any], na_rm: bool, refine: bool) -> float:
    values = []
    for value in line:
        if _is_missing(value):
            if not na_rm:
                return math.nan
        else:
            values.append(value)

    n = len(values)
    if n <= 1:
        return math.nan

    mu = sum(float(v) for v in values) / n
    # The refinement pass only applies to floating-point data.
    if refine and any(isinstance(v, float) for v in values):
        mu += sum(v - mu for v in values) / n

    return sum((float(v) - mu) ** 2 for v in values) / (n - 1)


def row_vars(
    x: Sequence[Sequence[Any]],
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    na_rm: bool = False,
    refine: bool = True,
) -> list[float]:
    """Return the sample variance of each selected row of a row-major matrix.

    Missing cells are ``None`` or NaN.  Without ``na_rm`` a missing cell
    gives NaN; a row with fewer than two usable values gives NaN.  With
    ``refine`` the mean of floating-point data is corrected by a second pass.
    """
    return [_variance(line, na_rm, refine) for line in _lines(x, rows, cols, True)]


def col_vars(
    x: Sequence[Sequence[Any]],
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    na_rm: bool = False,
    refine: bool = True,
) -> list[float]:
    """Return the sample variance of each selected column of a row-major matrix."""
    return [_variance(line, na_rm, refine) for line in _lines(x, rows, cols, False)]