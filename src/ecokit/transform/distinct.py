"""Per-column distinct value counts."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Tuple

import pandas as pd
import polars as pl

from ecokit.core.errors import stop_ctx


logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["variable", "n_unique"]


def _count_pandas(df: pd.DataFrame) -> List[Tuple[Any, int]]:
    # dropna=False: missing values count as one distinct value. items() is
    # positional, so duplicated column names each get their own row
    return [(name, int(s.nunique(dropna=False))) for name, s in df.items()]


def _count_polars(df: pl.DataFrame) -> List[Tuple[Any, int]]:
    # Polars counts null as one distinct value
    return [(s.name, int(s.n_unique())) for s in df.get_columns()]


def _mapping_to_frame(data: Mapping) -> pd.DataFrame:
    bad = [
        name
        for name, values in data.items()
        if isinstance(values, (str, bytes)) or not hasattr(values, "__len__")
    ]
    if bad:
        stop_ctx("Every column of `dataset` must be a sequence of values", columns=bad)
    lengths = {name: len(values) for name, values in data.items()}
    if len(set(lengths.values())) > 1:
        stop_ctx("All columns of `dataset` must have the same length", lengths=lengths)
    return pd.DataFrame({name: pd.Series(list(values)) for name, values in data.items()})


def distinct_counts(dataset: Any, arrange: bool = True) -> pd.DataFrame:
    """Count distinct values in every column of a tabular dataset.

    Args:
        dataset: pandas DataFrame, polars DataFrame/LazyFrame, or a mapping
            of column name -> sequence of values (all the same length).
        arrange: Sort by ``n_unique`` descending. The sort is stable, so
            ties keep column order. When False, column order is kept.

    Returns:
        DataFrame with columns ``variable`` and ``n_unique``, one row per
        input column.

    Raises:
        InvalidArgument: If ``dataset`` is missing, of an unsupported type,
            or a mapping with columns of different lengths.

    Examples:
        >>> distinct_counts({"a": [1, 1, 2, 3, 3, 3], "b": [1] * 6})
          variable  n_unique
        0        a         3
        1        b         1
    """
    if dataset is None:
        stop_ctx("`dataset` cannot be NULL", dataset=dataset)

    if isinstance(dataset, pl.LazyFrame):
        dataset = dataset.collect()

    if isinstance(dataset, pd.DataFrame):
        counts = _count_pandas(dataset)
    elif isinstance(dataset, pl.DataFrame):
        counts = _count_polars(dataset)
    elif isinstance(dataset, Mapping):
        counts = _count_pandas(_mapping_to_frame(dataset))
    else:
        stop_ctx(
            "`dataset` must be a data frame or a mapping of columns",
            dataset_type=type(dataset).__name__,
        )

    report = pd.DataFrame(counts, columns=REPORT_COLUMNS)
    report["n_unique"] = report["n_unique"].astype("int64")
    if arrange:
        report = report.sort_values("n_unique", ascending=False, kind="stable")
    logger.debug("Counted distinct values for %d columns", len(report))
    return report.reset_index(drop=True)


__all__ = ["distinct_counts"]
