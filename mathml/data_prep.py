from __future__ import annotations

"""
Data preparation helpers: CSV loading, bias column, train/test split.
"""

from pathlib import Path
from typing import Sequence

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split

from .constants import TOY_FEATURES, TOY_LABELS


def add_bias(X: np.ndarray) -> np.ndarray:
    return np.hstack([np.ones((X.shape[0], 1)), X])


def toy_dataset() -> tuple[np.ndarray, np.ndarray]:
    """Four examples, bias column included; only the last one is positive."""
    return np.array(TOY_FEATURES), np.array(TOY_LABELS)


def load_dataset(
    csv_path: Path,
    label_column: str,
    feature_columns: Sequence[str] | None = None,
):
    """
    Read a CSV into a feature DataFrame (no bias column) and a label Series.

    Every column other than the label is a feature unless ``feature_columns``
    is given. Values are coerced to numbers and incomplete rows dropped.
    """
    df = pd.read_csv(csv_path)
    if feature_columns is None:
        feature_columns = [c for c in df.columns if c != label_column]

    missing = [c for c in list(feature_columns) + [label_column] if c not in df.columns]
    if missing:
        raise ValueError(f"CSV is missing expected columns: {missing}")

    df = df[list(feature_columns) + [label_column]].apply(pd.to_numeric, errors="coerce")
    n_rows = len(df)
    df = df.dropna()

    X = df[list(feature_columns)]
    y = df[label_column].astype(float)
    meta = {
        "num_rows": len(df),
        "dropped_rows": n_rows - len(df),
        "positive_rate": float((y > 0.5).mean()) if len(y) else float("nan"),
        "feature_count": X.shape[1],
    }
    return X, y, meta


def make_train_test_split(
    X: pd.DataFrame,
    y: pd.Series,
    test_size: float = 0.2,
    random_state: int | None = 42,
    stratify: bool = True,
):
    """Random row-level split, stratified on the labels by default."""
    return train_test_split(
        X,
        y,
        test_size=test_size,
        random_state=random_state,
        stratify=y if stratify else None,
    )
