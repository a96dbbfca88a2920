"""Counting and testing occurrences of a value in matrix rows."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, Optional, Union

from .indices import subset_matrix


class CountMode(Enum):
    """What :func:`row_counts` reports for each row."""

    ALL = 0
    ANY = 1
    COUNT = 2


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _all(row: Sequence[Any], value: Any, na_rm: bool) -> Optional[bool]:
    if _is_missing(value):
        return all(_is_missing(v) for v in row)
    result: Optional[bool] = True
    for v in row:
        if v == value:
            continue
        if _is_missing(v):
            if not na_rm:
                result = None
        else:
            return False
    return result


def _any(row: Sequence[Any], value: Any, na_rm: bool) -> Optional[bool]:
    if _is_missing(value):
        return any(_is_missing(v) for v in row)
    result: Optional[bool] = False
    for v in row:
        if v == value:
            return True
        if _is_missing(v) and not na_rm:
            result = None
    return result


def _count(row: Sequence[Any], value: Any, na_rm: bool) -> Optional[int]:
    if _is_missing(value):
        return sum(1 for v in row if _is_missing(v))
    count = 0
    for v in row:
        if v == value:
            count += 1
        elif _is_missing(v) and not na_rm:
            return None
    return count


_HANDLERS = {CountMode.ALL: _all, CountMode.ANY: _any, CountMode.COUNT: _count}


def row_counts(
    x: Sequence[Sequence[Any]],
    value: Any = True,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    mode: Union[CountMode, int] = CountMode.COUNT,
    na_rm: bool = False,
) -> list[Optional[Union[bool, int]]]:
    """Report, for each selected row, how ``value`` occurs in it.

    ``CountMode.ALL`` and ``CountMode.ANY`` give ``True``/``False``, or
    ``None`` when missing cells leave the answer undecided; ``COUNT`` gives
    the number of matches, or ``None`` when a missing cell is met without
    ``na_rm``.  A missing ``value`` (``None`` or NaN) matches missing cells.
    Missing row or column indices yield missing cells.
    """
    handler = _HANDLERS[CountMode(mode)]
    return [handler(row, value, na_rm) for row in subset_matrix(x, rows, cols)]