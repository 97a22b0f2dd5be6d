from __future__ import annotations

"""
Reference logistic regression: hypothesis, cross-entropy cost and gradients
composed from the vector primitives, one example at a time.
"""

from typing import Sequence

import numpy as np

from .primitives import (
    check_same_length,
    dot_product,
    scalar_product,
    sigmoid,
    vector_add,
    vector_sum,
)

Vector = Sequence[float]
Matrix = Sequence[Sequence[float]]


def hypothesis(x: Vector, theta: Vector) -> float:
    """Predicted probability that ``x`` belongs to the positive class."""
    return sigmoid(dot_product(x, theta))


def probability(x: Vector, theta: Vector) -> float:
    return hypothesis(x, theta)


def example_cost(x: Vector, y: float, theta: Vector) -> float:
    """
    Cross-entropy loss of a single example.

    Not guarded: a hypothesis of exactly 0 or 1 yields inf or nan.
    """
    h = hypothesis(x, theta)
    return -y * np.log(h) - (1 - y) * np.log(1 - h)


def cost(xs: Matrix, ys: Vector, theta: Vector, lam: float | None = None) -> float:
    """
    Mean cross-entropy over the batch.

    With ``lam`` set, adds the L2 penalty ``lam * sum(theta[1:]^2) / (2m)``;
    the bias weight is never penalized.
    """
    check_same_length(xs, ys)
    m = len(xs)
    total = sum(example_cost(x, y, theta) for x, y in zip(xs, ys)) / m
    if lam is None:
        return total
    return total + sum(t * t for t in theta[1:]) * lam / (2 * m)


def example_gradient(x: Vector, y: float, theta: Vector) -> list[float]:
    return scalar_product(x, hypothesis(x, theta) - y)


def gradient_sum(xs: Matrix, ys: Vector, theta: Vector) -> list[float]:
    """Unnormalized sum of the per-example gradients."""
    check_same_length(xs, ys)
    return vector_sum([example_gradient(x, y, theta) for x, y in zip(xs, ys)])


def gradient(xs: Matrix, ys: Vector, theta: Vector, lam: float | None = None) -> list[float]:
    """
    Mean gradient of the batch cost.

    With ``lam`` set, every example also contributes ``lam/m * [0, theta[1:]]``
    before the sum is divided by ``m``.
    """
    check_same_length(xs, ys)
    m = len(xs)
    grads = [example_gradient(x, y, theta) for x, y in zip(xs, ys)]
    if lam is not None:
        penalty = scalar_product([0.0] + list(theta[1:]), lam / m)
        grads = [vector_add(g, penalty) for g in grads]
    return scalar_product(vector_sum(grads), 1.0 / m)
