"""Split ordered sequences and data frames into labelled chunks.

Chunk names follow ``<prefix>_<index>`` with a 1-based index in output
order. Both splitters keep element order and cover every element exactly
once.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from itertools import islice
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from ecokit.core.config import DEFAULT_CHUNK_PREFIX, DEFAULT_N_CHUNKS
from ecokit.core.errors import stop_ctx


logger = logging.getLogger(__name__)


def _is_positive_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, np.integer)) and value >= 1


def _is_ordered_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Sequence, np.ndarray, pd.Series, pd.Index))


def _slice(sequence: Any, start: int, stop: int) -> Any:
    # Positional slicing; Series label slicing would break on integer indexes
    if isinstance(sequence, pd.Series):
        return sequence.iloc[start:stop]
    try:
        return sequence[start:stop]
    except TypeError:
        # Sequences without slice support (e.g. deque)
        return type(sequence)(islice(sequence, start, stop))


def chunk_bounds(length: int, n_splits: int) -> List[tuple[int, int]]:
    """Return ``[start, stop)`` position bounds for a near-equal split.

    The first ``length % n_splits`` chunks hold one extra element.

    Examples:
        >>> chunk_bounds(10, 3)
        [(0, 4), (4, 7), (7, 10)]
    """
    base, extra = divmod(length, n_splits)
    sizes = np.full(n_splits, base, dtype=np.int64)
    sizes[:extra] += 1
    edges = np.concatenate(([0], np.cumsum(sizes)))
    return [(int(edges[i]), int(edges[i + 1])) for i in range(n_splits)]


def partition(
    sequence: Any, n_splits: Optional[int], prefix: str = DEFAULT_CHUNK_PREFIX
) -> Dict[str, Any]:
    """Split an ordered sequence into ``n_splits`` contiguous chunks.

    Chunk sizes differ by at most one element; earlier chunks absorb the
    remainder. Each chunk is a slice of the input, so it keeps the input's
    container type.

    Args:
        sequence: Ordered sequence (list, tuple, range, numpy array, pandas
            Series, ...). A bare string is not accepted.
        n_splits: Number of chunks; must not exceed ``len(sequence)``.
        prefix: Label prefix for chunk names.

    Returns:
        Dict mapping ``<prefix>_<i>`` to the i-th chunk, in chunk order.

    Raises:
        InvalidArgument: If an argument is missing or invalid, or if
            ``n_splits`` exceeds the sequence length.

    Examples:
        >>> chunks = partition(list(range(1, 101)), n_splits=3)
        >>> {name: len(chunk) for name, chunk in chunks.items()}
        {'Chunk_1': 34, 'Chunk_2': 33, 'Chunk_3': 33}
    """
    if sequence is None or n_splits is None:
        stop_ctx(
            "`sequence` and `n_splits` cannot be NULL",
            sequence=sequence,
            n_splits=n_splits,
        )

    if not _is_ordered_sequence(sequence):
        stop_ctx(
            "`sequence` must be an ordered sequence of values",
            sequence_type=type(sequence).__name__,
        )

    if not _is_positive_int(n_splits):
        stop_ctx("`n_splits` must be a positive integer", n_splits=n_splits)

    if not isinstance(prefix, str):
        stop_ctx("`prefix` must be a character string", prefix=prefix)

    length = len(sequence)
    if n_splits > length:
        stop_ctx(
            "`n_splits` cannot be greater than the length of sequence",
            length=length,
            n_splits=n_splits,
        )

    bounds = chunk_bounds(length, int(n_splits))
    output = {
        f"{prefix}_{i}": _slice(sequence, start, stop)
        for i, (start, stop) in enumerate(bounds, start=1)
    }
    logger.debug(
        "Split %d elements into %d chunks: %s",
        length,
        n_splits,
        [stop - start for start, stop in bounds],
    )
    return output


def partition_frame(
    data: Any,
    chunk_size: Optional[int] = None,
    n_chunks: Optional[int] = None,
    prefix: str = DEFAULT_CHUNK_PREFIX,
) -> Dict[str, pd.DataFrame]:
    """Split a data frame row-wise into chunks.

    Either ``chunk_size`` (rows per chunk) or ``n_chunks`` sets the split.
    With neither, the frame is split into ``min(5, nrow)`` chunks. Row index
    labels are preserved, so ``pd.concat(chunks.values())`` rebuilds the
    input.

    Raises:
        InvalidArgument: If ``data`` is missing or empty, or the chunk
            settings are invalid.
    """
    if data is None:
        stop_ctx("`data` cannot be NULL", data=data)

    if not isinstance(data, pd.DataFrame):
        try:
            data = pd.DataFrame(data)
        except (TypeError, ValueError) as e:
            stop_ctx("`data` cannot be converted to a data frame", cause=e, data=data)

    n_rows = len(data)
    if n_rows == 0:
        stop_ctx("`data` must have at least one row", n_rows=n_rows)

    if chunk_size is not None and not _is_positive_int(chunk_size):
        stop_ctx("`chunk_size` must be a positive integer", chunk_size=chunk_size)

    if n_chunks is not None and not _is_positive_int(n_chunks):
        stop_ctx("`n_chunks` must be a positive integer", n_chunks=n_chunks)

    if chunk_size is None and n_chunks is None:
        n_chunks = min(DEFAULT_N_CHUNKS, n_rows)
        logger.info(
            "`chunk_size` and `n_chunks` are not set. Defaulting to split into %d chunks.",
            n_chunks,
        )

    if chunk_size is not None and n_rows <= chunk_size:
        stop_ctx(
            "`chunk_size` is larger than the number of rows in the data frame",
            chunk_size=chunk_size,
            n_rows=n_rows,
        )

    if chunk_size is None:
        chunk_size = math.ceil(n_rows / n_chunks)

    groups = np.arange(n_rows) // int(chunk_size)
    output: Dict[str, pd.DataFrame] = {}
    for i, group in enumerate(np.unique(groups), start=1):
        output[f"{prefix}_{i}"] = data.iloc[groups == group]
    return output


__all__ = ["chunk_bounds", "partition", "partition_frame"]
