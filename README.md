# matstats

Row- and column-wise summary statistics for matrices and vectors, in plain
Python with no third-party dependencies.

Matrices are lists of rows (row-major), and every row must have the same
length. Missing values are `None`; most functions also treat `float("nan")`
as missing. Indices are zero-based.

## Installation

```
pip install .
```

## Modules

| Module | Contents |
| --- | --- |
| `matstats.indices` | `validate`, `validate_logical`, `subset_vector`, `subset_matrix` |
| `matstats.bins` | `bin_counts` |
| `matstats.diff` | `diff2` |
| `matstats.order_stats` | `col_order_stats` |
| `matstats.logsumexp` | `log_sum_exp`, `row_log_sum_exps`, `col_log_sum_exps` |
| `matstats.counts` | `row_counts`, `CountMode` |
| `matstats.ranges` | `row_mins`, `row_maxs`, `row_ranges` |
| `matstats.variance` | `row_vars`, `col_vars` |
| `matstats.mads` | `row_mads`, `col_mads` |
| `matstats.weighted_median` | `weighted_median`, `Ties` |

## Selecting rows, columns and elements

Most functions take `rows` / `cols` (for matrices) or `idxs` (for vectors).
A selection is one of:

- `None` – select everything;
- a list of zero-based integer positions, where `None` is a missing index;
- a list of booleans, where `None` is a missing flag. A mask shorter than the
  dimension is recycled over it.

`validate(idxs, max_idx, allow_out_of_bound)` turns a selection into a list
of positions (or `None` for "everything"). Negative positions raise
`IndexError`; positions past the end raise `IndexError` unless
`allow_out_of_bound` is true, in which case they become missing. Anything
that is not a list of integers or of booleans raises `TypeError`.

Row and column selections for matrices must lie inside the matrix. Vector
selections (`idxs`) may run past the end; those positions count as missing.

## Examples

```python
from matstats.bins import bin_counts
from matstats.counts import CountMode, row_counts
from matstats.diff import diff2
from matstats.logsumexp import log_sum_exp
from matstats.ranges import row_ranges
from matstats.variance import row_vars
from matstats.weighted_median import Ties, weighted_median

x = [[1, 5, 3], [4, None, 2]]

row_ranges(x, na_rm=True)                          # [(1, 5), (2, 4)]
row_ranges(x)                                      # [(1, 5), (None, None)]
row_counts(x, value=5, mode=CountMode.ANY)         # [True, None]
row_vars([[1.0, 2.0, 3.0]])                        # [1.0]

bin_counts([0.5, 1.5, 1.7, 2.2], [0, 1, 2, 3])     # [1, 2, 1]
diff2([1, 4, 9, 16], lag=1, differences=2)         # [2, 2]
log_sum_exp([])                                    # -inf

weighted_median([1, 2, 3, 4], [1, 1, 1, 1],
                interpolate=False, ties=Ties.MEAN)  # 2.5
```

## Notes on behaviour

- `bin_counts(x, bx, right=False)` expects sorted `x` and `bx` and returns
  `len(bx) - 1` counts over `[bx[k], bx[k+1])`, or `(bx[k], bx[k+1]]` with
  `right=True`.
- `col_order_stats(x, which, ...)` returns the `which`-th smallest value
  (zero-based) of each column; missing row or column indices and an
  out-of-range `which` raise `ValueError`.
- `row_counts` reports `CountMode.ALL`, `CountMode.ANY` or `CountMode.COUNT`
  (the default) per row; `None` means the answer is undecided because of
  missing cells.
- `row_mins`, `row_maxs` and `row_ranges` give `inf` / `-inf` for rows with
  no usable value; when any row is like that, all results become floats.
- `row_mads` / `col_mads` scale the median absolute deviation by `constant`
  (default `1.4826`).
- `weighted_median` drops non-positive weights; if any weight is infinite,
  only the values with infinite weight are used, equally weighted. Ties are
  resolved by `Ties.WEIGHTED`, `Ties.MIN`, `Ties.MAX` or `Ties.MEAN`.

## What it does not do

- There is no command-line tool; the package is used as a library.
- It works on Python lists, not on array types, and keeps no row or column
  names.

## Running the tests

```
pip install .[test]
pytest
```