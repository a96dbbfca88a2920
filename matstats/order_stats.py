"""Order statistics of matrix columns."""

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


def _sort_key(value: Any) -> tuple[bool, Any]:
    missing = value is None or (isinstance(value, float) and math.isnan(value))
    return (missing, 0 if missing else value)


def col_order_stats(
    x: Sequence[Sequence[Any]],
    which: int,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
) -> list[Any]:
    """Return the ``which``-th smallest value (zero-based) of each column.

    ``rows`` and ``cols`` select the part of the row-major matrix ``x`` to
    use; they must lie inside the matrix and must not hold missing indices.
    """
    nrow, ncol = _dims(x)
    row_sel = validate(rows, nrow, False)
    col_sel = validate(cols, ncol, False)
    row_positions = list(range(nrow)) if row_sel is None else row_sel
    col_positions = list(range(ncol)) if col_sel is None else col_sel

    if None in row_positions and col_positions:
        raise ValueError("Argument 'rows' must not contain missing value")
    if None in col_positions and row_positions:
        raise ValueError("Argument 'cols' must not contain missing value")

    if not col_positions:
        return []
    if not 0 <= which < len(row_positions):
        raise ValueError(
            f"Argument 'which' is out of range [0, {len(row_positions) - 1}]: {which}"
        )

    result = []
    for j in col_positions:
        column = sorted((x[i][j] for i in row_positions), key=_sort_key)
        result.append(column[which])
    return result