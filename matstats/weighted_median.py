"""Weighted median of a vector."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, Optional, Union

from .indices import validate


class Ties(Enum):
    """How a tie between two middle values is resolved."""

    WEIGHTED = 1
    MIN = 2
    MAX = 4
    MEAN = 8


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


class _MissingValue(Exception):
    """Raised internally when a missing entry decides the result."""


def _weight_at(w: Sequence[Any], position: Optional[int]) -> float:
    if position is None:
        return math.nan
    weight = w[position]
    return math.nan if weight is None else float(weight)


def _value_at(x: Sequence[Any], position: Optional[int]) -> Any:
    return None if position is None else x[position]


def _infinite_weight_values(
    x: Sequence[Any], w: Sequence[Any], positions: Sequence[Optional[int]], na_rm: bool
) -> list[Any]:
    """Keep the values with infinite weight, all treated as equally weighted."""
    kept = []
    for position in positions:
        weight = _weight_at(w, position)
        if math.isinf(weight):
            value = _value_at(x, position)
            if _is_missing(value):
                if not na_rm:
                    raise _MissingValue
            else:
                kept.append(value)
        elif math.isnan(weight) and not na_rm:
            raise _MissingValue
    return kept


def _select(
    x: Sequence[Any], w: Sequence[Any], positions: Sequence[Optional[int]], na_rm: bool
) -> tuple[list[tuple[Any, float]], bool]:
    """Return the usable ``(value, weight)`` pairs and whether weights are all equal."""
    pairs: list[tuple[Any, float]] = []
    for position in positions:
        weight = _weight_at(w, position)
        if math.isnan(weight):
            if not na_rm:
                raise _MissingValue
        elif weight <= 0:
            continue
        elif math.isinf(weight):
            values = _infinite_weight_values(x, w, positions, na_rm)
            return [(value, 1.0) for value in values], True
        else:
            value = _value_at(x, position)
            if _is_missing(value):
                if not na_rm:
                    raise _MissingValue
            else:
                pairs.append((value, weight))
    return pairs, False


def _plain_median(values: Sequence[Any]) -> float:
    ordered = sorted(values)
    half = (len(ordered) + 1) // 2
    if len(ordered) % 2 == 1:
        return float(ordered[half - 1])
    return (float(ordered[half - 1]) + float(ordered[half])) / 2


def _resolve_tie(low: float, high: float, wlow: float, whigh: float, ties: Any) -> float:
    try:
        rule = Ties(ties)
    except ValueError:
        raise ValueError(f"Unknown value of argument 'ties': {ties}") from None
    if rule is Ties.WEIGHTED:
        return wlow * low + whigh * high
    if rule is Ties.MIN:
        return low
    if rule is Ties.MAX:
        return high
    return (low + high) / 2


def weighted_median(
    x: Sequence[Any],
    w: Sequence[Any],
    idxs: Optional[Iterable[Any]] = None,
    na_rm: bool = False,
    interpolate: bool = True,
    ties: Union[Ties, int] = Ties.WEIGHTED,
) -> float:
    """Return the weighted median of ``x`` with weights ``w``.

    Missing values and weights are ``None`` or NaN; without ``na_rm`` they
    give NaN.  Non-positive weights drop their value.  If any weight is
    infinite, only the values with infinite weight count, equally weighted.
    With ``interpolate`` the median is linearly interpolated between the two
    middle values; otherwise ``ties`` says how an exact tie is resolved.
    ``idxs`` selects the elements; out-of-bound positions count as missing.
    """
    if len(x) != len(w):
        raise ValueError(
            f"Argument 'x' and 'w' are of different lengths: {len(x)} != {len(w)}"
        )

    selection = validate(idxs, len(x), True)
    positions = list(range(len(x))) if selection is None else selection

    try:
        pairs, equal_weights = _select(x, w, positions, na_rm)
    except _MissingValue:
        return math.nan

    if not pairs:
        return math.nan
    if len(pairs) == 1:
        return float(pairs[0][0])
    if equal_weights:
        return _plain_median([value for value, _ in pairs])

    pairs.sort(key=lambda pair: pair[0])
    values = [float(value) for value, _ in pairs]
    total = sum(weight for _, weight in pairs)

    cumulative: list[float] = []
    running = 0.0
    half = len(pairs) - 1
    for position, (_, weight) in enumerate(pairs):
        share = weight / total
        running += share
        if interpolate:
            cumulative.append(running - share / 2)
            if cumulative[-1] >= 0.5:
                half = position
                break
        else:
            cumulative.append(running)
            if running > 0.5:
                half = position
                break

    if half == 0:
        return values[0]

    if interpolate:
        dx = values[half] - values[half - 1]
        dy_total = cumulative[half] - cumulative[half - 1]
        dy = 0.5 - cumulative[half]
        return (dy / dy_total) * dx + values[half]

    wlow = cumulative[half - 1]
    whigh = 1 - wlow
    if whigh > 0.5:
        return values[half]
    return _resolve_tie(values[half - 1], values[half], wlow, whigh, ties)