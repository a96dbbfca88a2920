"""Validation of index selections for vectors and matrices.

A selection is either ``None`` (select everything), a sequence of logical
flags (``True``/``False``, with ``None`` as a missing flag), or a sequence of
zero-based integer positions (with ``None`` as a missing position).

Validated selections are lists of zero-based positions in which ``None``
marks a missing index, or ``None`` when every element is selected.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional

Selection = Optional[list[Optional[int]]]


def _is_selected(flag: Optional[bool]) -> bool:
    """A logical flag selects its element when it is true or missing."""
    return flag is None or bool(flag)


def _is_logical(values: Sequence[Any]) -> bool:
    return any(isinstance(v, bool) for v in values) and all(
        v is None or isinstance(v, bool) for v in values
    )


def _is_positional(values: Sequence[Any]) -> bool:
    return all(v is None or (isinstance(v, int) and not isinstance(v, bool)) for v in values)


def validate_logical(
    idxs: Sequence[Optional[bool]], max_idx: int, allow_out_of_bound: bool = False
) -> Selection:
    """Turn a logical mask over ``max_idx`` elements into positions.

    A mask shorter than ``max_idx`` is recycled.  A mask longer than
    ``max_idx`` raises ``IndexError`` unless ``allow_out_of_bound`` is set,
    in which case every selected flag beyond the end yields a missing index.
    Returns ``None`` when the mask selects every element.
    """
    flags = list(idxs)
    n = len(flags)
    if n == 0:
        return []

    if n > max_idx:
        if not allow_out_of_bound:
            raise IndexError("logical subscript too long")
        inside = [
            None if flag is None else position
            for position, flag in enumerate(flags[:max_idx])
            if _is_selected(flag)
        ]
        beyond = [None for flag in flags[max_idx:] if _is_selected(flag)]
        return inside + beyond

    if all(flag is True for flag in flags):
        return None

    selection: list[Optional[int]] = []
    for position in range(max_idx):
        flag = flags[position % n]
        if _is_selected(flag):
            selection.append(None if flag is None else position)
    return selection


def _validate_positions(
    positions: Sequence[Optional[int]], max_idx: int, allow_out_of_bound: bool
) -> list[Optional[int]]:
    selection: list[Optional[int]] = []
    for position in positions:
        if position is None:
            selection.append(None)
        elif position < 0:
            raise IndexError(f"negative index not allowed: {position}")
        elif position >= max_idx:
            if not allow_out_of_bound:
                raise IndexError(f"index {position} out of range for length {max_idx}")
            selection.append(None)
        else:
            selection.append(position)
    return selection


def validate(idxs: Optional[Iterable[Any]], max_idx: int, allow_out_of_bound: bool = False) -> Selection:
    """Validate a selection of ``max_idx`` elements.

    Returns ``None`` when everything is selected, otherwise a list of
    zero-based positions where ``None`` marks a missing index.
    """
    if idxs is None:
        return None
    if isinstance(idxs, (str, bytes)) or not isinstance(idxs, Iterable):
        raise TypeError("idxs can only be integer, numeric, or logical.")
    values = list(idxs)
    if not values:
        return []
    if _is_logical(values):
        return validate_logical(values, max_idx, allow_out_of_bound)
    if _is_positional(values):
        return _validate_positions(values, max_idx, allow_out_of_bound)
    raise TypeError("idxs can only be integer, numeric, or logical.")


def subset_vector(x: Sequence[Any], idxs: Optional[Iterable[Any]] = None) -> list[Any]:
    """Pick the selected elements of ``x``; missing indices give ``None``."""
    selection = validate(idxs, len(x), True)
    if selection is None:
        return list(x)
    return [None if position is None else x[position] for position in selection]


def _dims(x: Sequence[Sequence[Any]]) -> tuple[int, int]:
    nrow = len(x)
    ncol = len(x[0]) if nrow else 0
    if any(len(row) != ncol for row in x):
        raise ValueError("all rows of a matrix must have the same length")
    return nrow, ncol


def subset_matrix(
    x: Sequence[Sequence[Any]],
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
) -> list[list[Any]]:
    """Pick the selected rows and columns of a row-major matrix.

    Rows and columns must lie inside the matrix; missing indices give
    ``None`` cells.
    """
    nrow, ncol = _dims(x)
    row_sel = validate(rows, nrow, False)
    col_sel = validate(cols, ncol, False)
    row_positions = range(nrow) if row_sel is None else row_sel
    col_positions = range(ncol) if col_sel is None else col_sel
    return [
        [None if i is None or j is None else x[i][j] for j in col_positions]
        for i in row_positions
    ]