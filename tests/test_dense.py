"""
Cross-checks of the dense gradients against the reference gradient.
"""

import numpy as np
import pytest

from mathml.classifier import cost, gradient
from mathml.dense import dense_gradient, weighted_cost, weighted_gradient


def test_dense_gradient_matches_reference(toy_xs, toy_ys, toy_theta):
    expected = gradient(toy_xs, toy_ys, toy_theta)
    out = np.zeros(2)

    dense_gradient(np.array(toy_xs), np.array(toy_ys), np.array(toy_theta), out)

    np.testing.assert_allclose(out, expected, atol=0.001)


def test_weighted_gradient_matches_reference_with_lambda(wide_xs, toy_ys):
    theta = [1.0, 1.0, 1.0]
    expected = gradient(wide_xs, toy_ys, theta, 0.1)
    out = np.zeros(3)

    weighted_gradient(np.array(wide_xs), np.array(toy_ys), np.array(theta), 0.1, 1.0, out)

    np.testing.assert_allclose(out, expected, atol=0.001)


def test_weighted_gradient_unit_weight_without_lambda_equals_dense(toy_matrix, toy_ys):
    theta = np.array([0.5, -0.3])
    y = np.array(toy_ys)

    np.testing.assert_allclose(
        weighted_gradient(toy_matrix, y, theta, 0.0, 1.0, np.zeros(2)),
        dense_gradient(toy_matrix, y, theta, np.zeros(2)),
    )


def test_weighted_gradient_divides_by_weight_sum(toy_matrix, toy_ys):
    theta = np.array([0.5, -0.3])
    y = np.array(toy_ys)
    lam, w0 = 0.2, 3.0

    weights = np.array([w0, w0, w0, 1.0])
    error = (1.0 / (1.0 + np.exp(-(toy_matrix @ theta))) - y) * weights
    expected = toy_matrix.T @ error
    expected[1] += lam * theta[1]
    expected /= weights.sum()

    out = weighted_gradient(toy_matrix, y, theta, lam, w0, np.zeros(2))
    np.testing.assert_allclose(out, expected)


def test_output_buffer_is_overwritten(toy_matrix, toy_ys):
    theta = np.array([1.0, 1.0])
    y = np.array(toy_ys)
    fresh = dense_gradient(toy_matrix, y, theta, np.zeros(2)).copy()

    out = np.full(2, 123.0)
    returned = dense_gradient(toy_matrix, y, theta, out)

    assert returned is out
    np.testing.assert_allclose(out, fresh)


@pytest.mark.parametrize(
    "theta, y, out",
    [
        (np.ones(3), np.zeros(4), np.zeros(3)),
        (np.ones(2), np.zeros(3), np.zeros(2)),
        (np.ones(2), np.zeros(4), np.zeros(5)),
    ],
)
def test_shape_mismatches_raise(toy_matrix, theta, y, out):
    with pytest.raises(ValueError):
        dense_gradient(toy_matrix, y, theta, out)
    with pytest.raises(ValueError):
        weighted_gradient(toy_matrix, y, theta, 0.1, 1.0, out)


def test_rejects_one_dimensional_matrix():
    with pytest.raises(ValueError, match="2-D"):
        dense_gradient(np.ones(4), np.zeros(4), np.ones(4), np.zeros(4))


def test_weighted_cost_matches_reference_cost_for_unit_weights(toy_xs, toy_ys, toy_matrix):
    theta = [0.5, -0.3]

    assert weighted_cost(toy_matrix, np.array(toy_ys), np.array(theta), 0.0, 1.0) == pytest.approx(
        cost(toy_xs, toy_ys, theta)
    )


def test_weighted_gradient_is_derivative_of_weighted_cost(wide_xs, toy_ys):
    X, y = np.array(wide_xs), np.array(toy_ys)
    theta = np.array([0.2, -0.4, 0.3])
    lam, w0, eps = 0.3, 2.5, 1e-6

    numeric = np.zeros(3)
    for j in range(3):
        step = np.zeros(3)
        step[j] = eps
        numeric[j] = (
            weighted_cost(X, y, theta + step, lam, w0) - weighted_cost(X, y, theta - step, lam, w0)
        ) / (2 * eps)

    analytic = weighted_gradient(X, y, theta, lam, w0, np.zeros(3))
    np.testing.assert_allclose(analytic, numeric, rtol=1e-5, atol=1e-8)
