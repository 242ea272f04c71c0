"""Test configuration for the Chernoff face toolbox."""

from pathlib import Path
import sys

import matplotlib
import numpy as np
import pandas as pd
import pytest


matplotlib.use("Agg")

# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(scope="session")
def iris_df() -> pd.DataFrame:
    """Iris measurements with a textual ``species`` column (150 rows)."""
    from sklearn.datasets import load_iris

    iris = load_iris(as_frame=True)
    species = [str(name) for name in iris.target_names[iris.target.to_numpy()]]
    return iris.data.assign(species=pd.Series(species, index=iris.data.index, dtype=object))


@pytest.fixture
def mixed_df() -> pd.DataFrame:
    """Small frame with every column kind."""
    return pd.DataFrame(
        {
            "name": ["Anna", "Ben", "Cleo", "Dan", "Eve", "Finn", "Gus"],
            "city": ["Berlin", "Bonn", "Berlin", "Köln", "Bonn", "Berlin", "Köln"],
            "grade": pd.Categorical(["b", "a", "c", "a", "b", "c", "a"], categories=["c", "b", "a"]),
            "height": [1.62, 1.80, 1.75, 1.91, 1.55, 1.70, 1.68],
            "age": [23, 35, 41, 29, 52, 33, 47],
        },
    )


@pytest.fixture
def numeric_df() -> pd.DataFrame:
    """Purely numeric frame with 10 rows and 3 features."""
    rng = np.random.default_rng(7)
    return pd.DataFrame(
        {
            "x": rng.normal(10, 2, 10),
            "y": np.arange(10, dtype=float) * 3,
            "z": rng.uniform(-5, 5, 10),
        },
    )
