"""
Pytest configuration and shared datasets for the classifier tests.
"""

import numpy as np
import pytest

from mathml.constants import TOY_FEATURES, TOY_LABELS, TOY_THETA


@pytest.fixture
def toy_xs():
    """Toy features as nested lists, bias column included."""
    return [list(row) for row in TOY_FEATURES]


@pytest.fixture
def toy_ys():
    return list(TOY_LABELS)


@pytest.fixture
def toy_theta():
    return list(TOY_THETA)


@pytest.fixture
def toy_matrix():
    """Toy features as a dense (4, 2) array."""
    return np.array(TOY_FEATURES)


@pytest.fixture
def wide_xs():
    """Two features plus bias, same labels as the toy set."""
    return [
        [1.0, 2.0, 3.0],
        [1.0, 3.0, 4.0],
        [1.0, 4.0, 5.0],
        [1.0, 5.0, 6.0],
    ]
