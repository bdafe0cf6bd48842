"""Tests for distinct_counts."""

import numpy as np
import pandas as pd
import polars as pl
import pytest

from ecokit.core.errors import InvalidArgument
from ecokit.transform.distinct import distinct_counts


def test_distinct_counts_single_column():
    report = distinct_counts(pd.DataFrame({"x": [1, 1, 2, 3, 3, 3]}))
    assert report.to_dict("records") == [{"variable": "x", "n_unique": 3}]


def test_distinct_counts_arranged_descending(species_df):
    report = distinct_counts(species_df)

    assert list(report.columns) == ["variable", "n_unique"]
    assert len(report) == species_df.shape[1]
    assert report["variable"].tolist() == ["year", "species", "country", "flag"]
    assert report["n_unique"].tolist() == [6, 3, 2, 1]
    assert report.index.tolist() == [0, 1, 2, 3]


def test_distinct_counts_keep_column_order(species_df):
    report = distinct_counts(species_df, arrange=False)

    assert report["variable"].tolist() == list(species_df.columns)
    assert report["n_unique"].tolist() == [3, 2, 6, 1]


def test_distinct_counts_ties_keep_input_order():
    df = pd.DataFrame({"b": [1, 2], "a": [1, 2], "c": [1, 1], "d": [3, 4]})
    report = distinct_counts(df)
    assert report["variable"].tolist() == ["b", "a", "d", "c"]


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1.0, np.nan, np.nan, 2.0], 3),
        (["a", None, "a", None], 2),
        ([np.nan, np.nan], 1),
    ],
    ids=["float_nan", "text_none", "all_missing"],
)
def test_distinct_counts_missing_counts_once(values, expected):
    report = distinct_counts(pd.DataFrame({"x": values}))
    assert report.loc[0, "n_unique"] == expected


def test_distinct_counts_columns_are_independent():
    df = pd.DataFrame({"a": [1, 2, 3], "b": [1, 2, 3]})
    report = distinct_counts(df, arrange=False)
    assert report["n_unique"].tolist() == [3, 3]


def test_distinct_counts_mapping():
    report = distinct_counts({"x": [1, 1, 2, 3, 3, 3], "y": ["a"] * 6}, arrange=False)
    assert report.to_dict("records") == [
        {"variable": "x", "n_unique": 3},
        {"variable": "y", "n_unique": 1},
    ]


def test_distinct_counts_polars():
    df = pl.DataFrame({"x": [1, 1, 2, None], "y": ["a", "b", "c", "d"]})
    report = distinct_counts(df)
    assert report.to_dict("records") == [
        {"variable": "y", "n_unique": 4},
        {"variable": "x", "n_unique": 3},
    ]


def test_distinct_counts_polars_lazy():
    lf = pl.DataFrame({"x": [1, 1, 2]}).lazy()
    report = distinct_counts(lf)
    assert report.loc[0, "n_unique"] == 2


def test_distinct_counts_no_columns():
    report = distinct_counts(pd.DataFrame())
    assert report.empty
    assert list(report.columns) == ["variable", "n_unique"]


def test_distinct_counts_does_not_modify_input(species_df):
    before = species_df.copy()
    distinct_counts(species_df)
    pd.testing.assert_frame_equal(species_df, before)


@pytest.mark.parametrize(
    "dataset",
    [None, [1, 2, 3], 42, {"x": [1, 2], "y": [1]}, {"x": "abc"}, {"x": 5}],
    ids=["null", "list", "scalar", "ragged", "string_column", "scalar_column"],
)
def test_distinct_counts_invalid(dataset):
    with pytest.raises(InvalidArgument):
        distinct_counts(dataset)


def test_distinct_counts_duplicated_column_names():
    """Columns sharing a name (e.g. after concat) are counted separately."""
    df = pd.concat(
        [pd.DataFrame({"a": [1, 1, 2]}), pd.DataFrame({"a": [1, 2, 3]})], axis=1
    )
    report = distinct_counts(df, arrange=False)

    assert report["variable"].tolist() == ["a", "a"]
    assert report["n_unique"].tolist() == [2, 3]
    assert distinct_counts(df)["n_unique"].tolist() == [3, 2]
