"""Row- and column-wise statistics on matrices and vectors, with subsetting and missing values."""

__version__ = "0.1.0"

__all__ = [
    "indices",
    "bins",
    "diff",
    "order_stats",
    "logsumexp",
    "counts",
    "ranges",
    "variance",
    "mads",
    "weighted_median",
]