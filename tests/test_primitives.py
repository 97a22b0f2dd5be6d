"""
Unit tests for the vector primitives.
"""

import numpy as np
import pytest

from mathml.primitives import dot_product, scalar_product, sigmoid, vector_add, vector_sum


def test_sigmoid_midpoint_and_tails():
    """Test sigmoid at zero and on both sides."""
    assert 0.49 <= sigmoid(0) <= 0.51
    assert 0.8 <= sigmoid(2) <= 1.0
    assert 0.0 <= sigmoid(-2) <= 0.2


def test_sigmoid_limits():
    """Large inputs saturate to 1, large negative ones underflow to 0."""
    assert sigmoid(1000.0) == 1.0
    with np.errstate(over="ignore"):
        assert sigmoid(-1000.0) == 0.0


def test_sigmoid_monotonic_on_arrays():
    values = sigmoid(np.linspace(-10, 10, 101))
    assert np.all(np.diff(values) > 0)


def test_dot_product():
    assert dot_product([1, 2], [2, 3]) == 8.0


def test_dot_product_length_mismatch():
    with pytest.raises(ValueError, match="Length mismatch"):
        dot_product([1, 2, 3], [1, 2])


def test_scalar_product():
    assert scalar_product([3, 4], 5) == [15, 20]


def test_vector_add():
    assert vector_add([1, 1], [3, 5]) == [4, 6]


def test_vector_sum(toy_xs):
    assert vector_sum(toy_xs) == [4, 14]


def test_vector_sum_requires_matching_lengths():
    with pytest.raises(ValueError):
        vector_sum([[1, 2], [1, 2, 3]])


def test_vector_sum_empty():
    with pytest.raises(ValueError):
        vector_sum([])
