from __future__ import annotations

"""
Metric helpers: classification summaries and coefficient dumps.
"""

import numpy as np
import pandas as pd
from sklearn import metrics


def compute_classification_metrics(
    y_true: np.ndarray | pd.Series, probs: np.ndarray, threshold: float = 0.5
):
    """Compute standard binary metrics given probabilities and a threshold."""
    preds = (np.asarray(probs) >= threshold).astype(int)
    y_int = (np.asarray(y_true) > 0.5).astype(int)
    precision, recall, f1, _ = metrics.precision_recall_fscore_support(
        y_int, preds, average="binary", zero_division=0
    )
    try:
        roc_auc = metrics.roc_auc_score(y_int, probs)
    except ValueError:
        # single-class y_true
        roc_auc = float("nan")

    return {
        "accuracy": metrics.accuracy_score(y_int, preds),
        "precision": precision,
        "recall": recall,
        "f1": f1,
        "roc_auc": roc_auc,
        "log_loss": metrics.log_loss(y_int, probs, labels=[0, 1]),
        "confusion_matrix": metrics.confusion_matrix(y_int, preds, labels=[0, 1]),
    }


def majority_baseline(y_train: np.ndarray | pd.Series, y_test: np.ndarray | pd.Series):
    """
    Predicts the positive rate learned from the training set for every row.
    """
    prob = float(np.mean(np.asarray(y_train) > 0.5))
    probs = np.full(len(y_test), prob, dtype=float)
    return compute_classification_metrics(y_test, probs)


def summarize_coefficients(
    coef: np.ndarray, feature_names: list[str], top_k: int = 8
) -> dict[str, pd.Series]:
    coef_series = pd.Series(coef, index=feature_names)
    coef_sorted = coef_series.sort_values()
    return {
        "positive": coef_sorted.tail(top_k)[::-1],
        "negative": coef_sorted.head(top_k),
    }
