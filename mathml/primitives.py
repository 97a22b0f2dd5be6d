from __future__ import annotations

"""
Vector and scalar building blocks for the reference classifier.

Vectors are plain sequences of floats; results come back as lists so the
reference tier stays independent of the dense NumPy path.
"""

from typing import Sequence

import numpy as np


def check_same_length(xs: Sequence[float], ys: Sequence[float]) -> None:
    if len(xs) != len(ys):
        raise ValueError(f"Length mismatch: {len(xs)} != {len(ys)}")


def sigmoid(v):
    """Logistic function 1 / (1 + e^-v) for a scalar or a NumPy array."""
    return 1.0 / (1.0 + np.exp(-v))


def dot_product(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Sum of pairwise products of two equal-length vectors."""
    check_same_length(xs, ys)
    return sum(x * y for x, y in zip(xs, ys))


def scalar_product(xs: Sequence[float], y: float) -> list[float]:
    return [x * y for x in xs]


def vector_add(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    """Elementwise sum of two equal-length vectors."""
    check_same_length(xs, ys)
    return [x + y for x, y in zip(xs, ys)]


def vector_sum(vectors: Sequence[Sequence[float]]) -> list[float]:
    """
    Elementwise sum of any number of same-length vectors.

    Folds from a zero vector sized after the first vector, so every vector
    must match that length.
    """
    if not vectors:
        raise ValueError("vector_sum needs at least one vector")
    total = [0.0] * len(vectors[0])
    for vec in vectors:
        total = vector_add(total, vec)
    return total
