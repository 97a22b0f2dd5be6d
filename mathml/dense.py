from __future__ import annotations

"""
Dense-matrix gradients for the training loops.

Same gradient contract as ``mathml.classifier.gradient`` but evaluated over a
``(m, n)`` array in one pass, writing into a caller-owned buffer.
"""

import numpy as np

from .constants import POSITIVE_LABEL_THRESHOLD
from .primitives import sigmoid


def _check_shapes(X: np.ndarray, y: np.ndarray, theta: np.ndarray, out: np.ndarray) -> None:
    if X.ndim != 2:
        raise ValueError(f"Expected a 2-D feature matrix, got {X.ndim}-D")
    m, n = X.shape
    if theta.shape != (n,):
        raise ValueError(f"theta has length {theta.shape[0]}, matrix has {n} columns")
    if y.shape != (m,):
        raise ValueError(f"Got {y.shape[0]} labels for {m} rows")
    if out.shape != (n,):
        raise ValueError(f"Output buffer has length {out.shape[0]}, expected {n}")


def dense_gradient(X: np.ndarray, y: np.ndarray, theta: np.ndarray, out: np.ndarray) -> np.ndarray:
    """Mean unregularized gradient; ``out`` is overwritten and returned."""
    _check_shapes(X, y, theta, out)
    error = sigmoid(X @ theta) - y
    out[:] = X.T @ error
    out /= X.shape[0]
    return out


def weighted_gradient(
    X: np.ndarray,
    y: np.ndarray,
    theta: np.ndarray,
    lam: float,
    weight_class0: float,
    out: np.ndarray,
) -> np.ndarray:
    """
    Class-weighted, L2-regularized gradient written into ``out``.

    Positive examples (label > 0.5) weigh 1.0, the rest ``weight_class0``.
    The summed gradient plus ``lam * theta[1:]`` is divided by the total
    weight rather than by the number of rows.
    """
    _check_shapes(X, y, theta, out)
    weights = np.where(y > POSITIVE_LABEL_THRESHOLD, 1.0, weight_class0)
    error = (sigmoid(X @ theta) - y) * weights
    out[:] = X.T @ error
    out[1:] += lam * theta[1:]
    out /= weights.sum()
    return out


def weighted_cost(
    X: np.ndarray,
    y: np.ndarray,
    theta: np.ndarray,
    lam: float,
    weight_class0: float,
) -> float:
    """
    Objective whose gradient is ``weighted_gradient``: class-weighted
    cross-entropy plus ``lam/2 * sum(theta[1:]^2)``, divided by the total weight.
    """
    _check_shapes(X, y, theta, theta)
    weights = np.where(y > POSITIVE_LABEL_THRESHOLD, 1.0, weight_class0)
    h = sigmoid(X @ theta)
    losses = -y * np.log(h) - (1 - y) * np.log(1 - h)
    penalty = 0.5 * lam * np.sum(theta[1:] ** 2)
    return float((np.sum(weights * losses) + penalty) / weights.sum())
