"""Minimum, maximum and range of each row of a matrix."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any, NamedTuple, Optional

from .indices import subset_matrix


class _Extremes(NamedTuple):
    low: Any
    high: Any
    counted: bool


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _extremes(row: Sequence[Any], na_rm: bool) -> _Extremes:
    """Scan one row; ``None`` is a missing value and NaN is not-a-number.

    Without ``na_rm`` a missing value settles the answer at once, while a NaN
    is kept but a later missing value may still replace it.
    """
    low: Any = None
    high: Any = None
    counted = False
    for value in row:
        if value is None:
            if na_rm:
                continue
            return _Extremes(None, None, True)
        if _is_nan(value):
            if not na_rm:
                low = high = value
                counted = True
            continue
        if not counted:
            low = high = value
            counted = True
        elif value < low:
            low = value
        elif value > high:
            high = value
    return _Extremes(low, high, counted)


def _as_float(value: Any) -> Any:
    return None if value is None else float(value)


def _scan(
    x: Sequence[Sequence[Any]],
    rows: Optional[Iterable[Any]],
    cols: Optional[Iterable[Any]],
    na_rm: bool,
) -> list[_Extremes]:
    results = [_extremes(row, na_rm) for row in subset_matrix(x, rows, cols)]
    if all(result.counted for result in results):
        return results
    # Rows without any usable value get infinite bounds, so every result
    # switches to floating point.
    return [
        _Extremes(_as_float(r.low), _as_float(r.high), True)
        if r.counted
        else _Extremes(math.inf, -math.inf, False)
        for r in results
    ]


def row_mins(
    x: Sequence[Sequence[Any]],
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    na_rm: bool = False,
) -> list[Any]:
    """Return the smallest value of each selected row.

    A row with no usable value gives ``inf``.  Without ``na_rm`` a missing
    cell (``None``) gives ``None`` and a NaN cell gives NaN.
    """
    return [r.low for r in _scan(x, rows, cols, na_rm)]


def row_maxs(
    x: Sequence[Sequence[Any]],
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    na_rm: bool = False,
) -> list[Any]:
    """Return the largest value of each selected row.

    A row with no usable value gives ``-inf``.  Without ``na_rm`` a missing
    cell (``None``) gives ``None`` and a NaN cell gives NaN.
    """
    return [r.high for r in _scan(x, rows, cols, na_rm)]


def row_ranges(
    x: Sequence[Sequence[Any]],
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    na_rm: bool = False,
) -> list[tuple[Any, Any]]:
    """Return ``(min, max)`` for each selected row.

    A row with no usable value gives ``(inf, -inf)``.
    """
    return [(r.low, r.high) for r in _scan(x, rows, cols, na_rm)]