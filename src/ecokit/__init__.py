"""ecokit — small helpers for interactive data-analysis sessions.

The transform subpackage holds the routines with a real contract
(partitioning, scope pruning, distinct counts). The general subpackage
wraps a few platform helpers (URLs, directories, file sizes, text).
"""

__all__ = [
    "__version__",
    "InvalidArgument",
    "partition",
    "partition_frame",
    "prune_scope",
    "keep_only",
    "distinct_counts",
]

__version__ = "0.1.0"

from .core.errors import InvalidArgument
from .transform import (
    distinct_counts,
    keep_only,
    partition,
    partition_frame,
    prune_scope,
)
