"""Lagged and iterated differences of a vector."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional

from .indices import subset_vector


def _difference(later: Any, earlier: Any) -> Any:
    if later is None or earlier is None:
        return None
    return later - earlier


def diff2(
    x: Sequence[Any],
    lag: int = 1,
    differences: int = 1,
    idxs: Optional[Iterable[Any]] = None,
) -> list[Any]:
    """Return the ``differences``-th order lagged differences of ``x``.

    ``idxs`` selects the elements used; out-of-bound positions count as
    missing.  A missing value (``None``) makes each difference it enters
    missing; NaN propagates through ordinary arithmetic.
    """
    if lag < 1:
        raise ValueError(f"Argument 'lag' must be a positive integer: {lag}")
    if differences < 1:
        raise ValueError(f"Argument 'differences' must be a positive integer: {differences}")

    values = subset_vector(x, idxs)
    if len(values) - lag * differences <= 0:
        return []

    for _ in range(differences):
        values = [_difference(later, earlier) for earlier, later in zip(values, values[lag:])]
    return values