"""Shared pytest fixtures for ecokit tests."""

import pandas as pd
import pytest


@pytest.fixture
def species_df():
    """Small occurrence table with columns of different cardinality."""
    data = {
        "species": ["Abies alba", "Abies alba", "Pinus nigra", "Quercus robur", "Pinus nigra", "Abies alba"],
        "country": ["DE", "DE", "DE", "FR", "FR", "DE"],
        "year": [2001, 2002, 2003, 2004, 2005, 2006],
        "flag": [True, True, True, True, True, True],
    }
    return pd.DataFrame(data)


@pytest.fixture
def session_scope():
    """A working scope as an interactive session would hold it."""
    return {"A": 1, "B": 2, "C": 3, "df": pd.DataFrame({"x": [1, 2]})}
