"""Median absolute deviation of each row or column of a matrix."""

from __future__ import annotations

import math
import statistics
from collections.abc import Iterable, Sequence
from typing import Any, Optional

from .variance import _lines

_DEFAULT_CONSTANT = 1.4826


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _mad(line: Sequence[Any], constant: float, na_rm: bool) -> float:
    values = []
    for value in line:
        if _is_missing(value):
            if not na_rm:
                return math.nan
        else:
            values.append(value)

    if not values:
        return math.nan
    if len(values) == 1:
        return 0.0

    center = statistics.median(values)
    deviation = statistics.median(abs(v - center) for v in values)
    return constant * float(deviation)


def row_mads(
    x: Sequence[Sequence[Any]],
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    constant: float = _DEFAULT_CONSTANT,
    na_rm: bool = False,
) -> list[float]:
    """Return ``constant`` times the median absolute deviation of each selected row.

    Missing cells are ``None`` or NaN.  Without ``na_rm`` a missing cell
    gives NaN; a row with no usable value gives NaN and one with a single
    usable value gives ``0``.
    """
    return [_mad(line, constant, na_rm) for line in _lines(x, rows, cols, True)]


def col_mads(
    x: Sequence[Sequence[Any]],
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    constant: float = _DEFAULT_CONSTANT,
    na_rm: bool = False,
) -> list[float]:
    """Return ``constant`` times the median absolute deviation of each selected column."""
    return [_mad(line, constant, na_rm) for line in _lines(x, rows, cols, False)]