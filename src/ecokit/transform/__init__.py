"""Data transformation helpers.

- **partition**: split ordered sequences and data frames into chunks
- **scope**: keep only selected names in a working scope
- **distinct**: per-column distinct value counts
"""

from .distinct import distinct_counts
from .partition import partition, partition_frame
from .scope import keep_only, prune_scope

__all__ = [
    "partition",
    "partition_frame",
    "prune_scope",
    "keep_only",
    "distinct_counts",
]
