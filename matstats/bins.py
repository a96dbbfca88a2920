"""Counting sorted values into consecutive bins."""

from __future__ import annotations

import operator
import warnings
from collections.abc import Iterable, Sequence
from itertools import dropwhile

_INT_MAX = 2**31 - 1


def bin_counts(x: Iterable[float], bx: Sequence[float], right: bool = False) -> list[int]:
    """Count the values of sorted ``x`` in the bins given by sorted ``bx``.

    With ``right=False`` the bins are ``[bx[k], bx[k+1])``; with
    ``right=True`` they are ``(bx[k], bx[k+1]]``.  There are
    ``len(bx) - 1`` bins.  A count that would exceed the largest 32-bit
    integer is capped there with a warning.
    """
    bounds = list(bx)
    nbins = len(bounds) - 1
    if nbins <= 0:
        return []

    if right:
        below, beyond = operator.le, operator.gt
    else:
        below, beyond = operator.lt, operator.ge

    counts = [0] * nbins
    bin_index = 0
    count = 0
    overflow = False

    for value in dropwhile(lambda v: below(v, bounds[0]), x):
        while beyond(value, bounds[bin_index + 1]):
            counts[bin_index] = count
            bin_index += 1
            if bin_index >= nbins:
                return counts
            count = 0
        if count == _INT_MAX:
            overflow = True
            break
        count += 1

    counts[bin_index] = count

    if overflow:
        warnings.warn(
            "Integer overflow. Detected one or more bins with a count that is greater "
            "than what can be represented by the integer data type. Setting count to "
            f"the maximum integer possible ({_INT_MAX}).",
            RuntimeWarning,
            stacklevel=2,
        )
    return counts