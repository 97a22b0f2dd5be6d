from __future__ import annotations

"""
Batch gradient-descent drivers.

``train`` and ``train_until_converged`` run on the reference tier and watch
the cost; ``fast_train`` runs on the dense tier with a decaying step size and
no cost checks at all.
"""

from typing import NamedTuple

import numpy as np

from .classifier import cost, gradient
from .constants import (
    DEFAULT_DELTA,
    DEFAULT_HALF_LIVES,
    DEFAULT_ITERATIONS,
    DEFAULT_WEIGHT_CLASS0,
    LOG_EVERY,
)
from .dense import weighted_cost, weighted_gradient
from .primitives import scalar_product, vector_add


class TrainingResult(NamedTuple):
    theta: list[float]  # plain list from every trainer
    remaining: int  # unused iteration budget
    alpha: float  # learning rate in effect when training stopped


def _log_step(step: int, loss: float) -> None:
    print(f"[GD] step={step}, loss={loss:.4f}")


def train(
    xs,
    ys,
    theta,
    min_alpha: float,
    max_alpha: float,
    iterations: int,
    lam: float | None = None,
    verbose: bool = False,
    log_every: int = LOG_EVERY,
) -> TrainingResult:
    """
    Gradient descent that halves the step whenever the cost goes up.

    Starts at ``max_alpha`` and stops once the budget is spent or the step
    falls below ``min_alpha``. The step that triggered the stop is kept even
    if it raised the cost. Pass ``lam`` to train on the regularized cost.
    """
    alpha = max_alpha
    theta = list(theta)
    prev_cost = cost(xs, ys, theta, lam)
    remaining = iterations

    while remaining > 0:
        remaining -= 1
        theta = vector_add(theta, scalar_product(gradient(xs, ys, theta, lam), -alpha))
        current = cost(xs, ys, theta, lam)

        step = iterations - remaining
        if verbose and step % log_every == 0:
            _log_step(step, current)

        if current > prev_cost:
            alpha /= 2
            if alpha < min_alpha:
                break
        prev_cost = current

    return TrainingResult(theta, remaining, alpha)


def train_until_converged(
    xs,
    ys,
    theta,
    alpha: float,
    delta: float = DEFAULT_DELTA,
    max_iterations: int = DEFAULT_ITERATIONS,
    verbose: bool = False,
    log_every: int = LOG_EVERY,
) -> TrainingResult:
    """
    Fixed-step gradient descent that stops when the cost changes by less
    than ``delta`` between two steps, in either direction.
    """
    theta = list(theta)
    prev_cost = cost(xs, ys, theta)
    remaining = max_iterations

    while remaining > 0:
        remaining -= 1
        theta = vector_add(theta, scalar_product(gradient(xs, ys, theta), -alpha))
        current = cost(xs, ys, theta)

        step = max_iterations - remaining
        if verbose and step % log_every == 0:
            _log_step(step, current)

        if abs(current - prev_cost) < delta:
            break
        prev_cost = current

    return TrainingResult(theta, remaining, alpha)


def decay_rate(iterations: int, half_lives: float) -> float:
    """Per-step change that halves the learning rate every iterations/half_lives steps."""
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    return 0.5 ** (half_lives / iterations) - 1


def learning_rate_schedule(alpha: float, iterations: int, half_lives: float = DEFAULT_HALF_LIVES) -> np.ndarray:
    """Learning rate used at each step of ``fast_train``."""
    return alpha * (1 + decay_rate(iterations, half_lives)) ** np.arange(iterations)


def fast_train(
    X,
    y,
    theta,
    lam: float = 0.0,
    weight_class0: float = DEFAULT_WEIGHT_CLASS0,
    alpha: float = 0.5,
    iterations: int = DEFAULT_ITERATIONS,
    half_lives: float = DEFAULT_HALF_LIVES,
    verbose: bool = False,
    log_every: int = LOG_EVERY,
) -> TrainingResult:
    """
    Weighted, regularized gradient descent over a dense matrix.

    Runs exactly ``iterations`` steps. The learning rate shrinks
    geometrically so that it has halved ``half_lives`` times by the end.
    With ``verbose`` the logged loss is the weighted objective from
    ``weighted_cost``.
    """
    decay = decay_rate(iterations, half_lives)
    X_arr = np.asarray(X, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    theta_arr = np.array(theta, dtype=float)
    grad = np.zeros_like(theta_arr)

    for step in range(1, iterations + 1):
        weighted_gradient(X_arr, y_arr, theta_arr, lam, weight_class0, grad)
        theta_arr -= alpha * grad
        alpha *= 1 + decay

        if verbose and step % log_every == 0:
            _log_step(step, weighted_cost(X_arr, y_arr, theta_arr, lam, weight_class0))

    return TrainingResult(theta_arr.tolist(), 0, alpha)
