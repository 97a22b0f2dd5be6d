"""
Tests for the metric helpers.
"""

import math

import numpy as np

from mathml.metrics import compute_classification_metrics, majority_baseline, summarize_coefficients


def test_perfect_predictions():
    y = np.array([0, 0, 1, 1])
    probs = np.array([0.1, 0.2, 0.8, 0.9])

    m = compute_classification_metrics(y, probs)

    assert m["accuracy"] == 1.0
    assert m["f1"] == 1.0
    assert m["roc_auc"] == 1.0
    assert m["confusion_matrix"].tolist() == [[2, 0], [0, 2]]


def test_threshold_changes_predictions():
    y = np.array([0, 1])
    probs = np.array([0.4, 0.6])

    m = compute_classification_metrics(y, probs, threshold=0.7)

    assert m["confusion_matrix"].tolist() == [[1, 0], [1, 0]]
    assert m["recall"] == 0.0


def test_single_class_roc_is_nan():
    m = compute_classification_metrics(np.array([1, 1]), np.array([0.7, 0.9]))
    assert math.isnan(m["roc_auc"])


def test_majority_baseline_predicts_negatives():
    m = majority_baseline(np.array([0, 0, 0, 1]), np.array([0, 1, 0]))

    assert m["confusion_matrix"].tolist() == [[2, 0], [1, 0]]
    assert m["roc_auc"] == 0.5


def test_summarize_coefficients():
    summary = summarize_coefficients(np.array([0.5, -2.0, 3.0, -0.1]), ["a", "b", "c", "d"], top_k=2)

    assert list(summary["positive"].index) == ["c", "a"]
    assert list(summary["negative"].index) == ["b", "d"]
