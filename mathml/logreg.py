from __future__ import annotations

"""
Estimator wrapper around the gradient-descent trainers, in the familiar
fit / predict_proba / predict shape.
"""

import numpy as np

from .constants import (
    DEFAULT_HALF_LIVES,
    DEFAULT_ITERATIONS,
    DEFAULT_MAX_ALPHA,
    DEFAULT_MIN_ALPHA,
    DEFAULT_WEIGHT_CLASS0,
    LOG_EVERY,
)
from .data_prep import add_bias
from .primitives import sigmoid
from .training import fast_train, train

SOLVERS = ("simple", "fast")


class LogisticRegressionGD:
    """
    Binary logistic regression trained with batch gradient descent.

    solver="simple" halves the step from ``lr`` down to ``min_lr`` whenever
    the cost rises; solver="fast" decays ``lr`` geometrically over
    ``half_lives`` halvings and supports class-0 weighting. Features are used
    as given; a bias column is prepended internally. "fast" is the default
    since it runs on the dense tier.
    """

    def __init__(
        self,
        solver: str = "fast",
        lr: float = DEFAULT_MAX_ALPHA,
        min_lr: float = DEFAULT_MIN_ALPHA,
        max_iter: int = DEFAULT_ITERATIONS,
        l2: float = 0.0,
        weight_class0: float = DEFAULT_WEIGHT_CLASS0,
        half_lives: float = DEFAULT_HALF_LIVES,
        verbose: bool = False,
    ):
        if solver not in SOLVERS:
            raise ValueError(f"Unknown solver: {solver}")
        self.solver = solver
        self.lr = lr
        self.min_lr = min_lr
        self.max_iter = max_iter
        self.l2 = l2
        self.weight_class0 = weight_class0
        self.half_lives = half_lives
        self.verbose = verbose
        self.weights_: np.ndarray | None = None
        self.n_iter_: int = 0

    def fit(self, X, y):
        """Train from zero weights on the chosen solver."""
        X_bias = add_bias(np.asarray(X, dtype=float))
        y_arr = np.asarray(y, dtype=float)
        theta = np.zeros(X_bias.shape[1])

        if self.solver == "simple":
            result = train(
                X_bias.tolist(),
                y_arr.tolist(),
                theta,
                min_alpha=self.min_lr,
                max_alpha=self.lr,
                iterations=self.max_iter,
                lam=self.l2 or None,
                verbose=self.verbose,
                log_every=LOG_EVERY,
            )
        else:
            result = fast_train(
                X_bias,
                y_arr,
                theta,
                lam=self.l2,
                weight_class0=self.weight_class0,
                alpha=self.lr,
                iterations=self.max_iter,
                half_lives=self.half_lives,
                verbose=self.verbose,
                log_every=LOG_EVERY,
            )

        self.weights_ = np.asarray(result.theta, dtype=float)
        self.n_iter_ = self.max_iter - result.remaining
        self.intercept_ = float(self.weights_[0])
        self.coef_ = self.weights_[1:]
        return self

    def predict_proba(self, X) -> np.ndarray:
        """Return P(y=1) for each row in X."""
        if self.weights_ is None:
            raise RuntimeError("Model is not fitted.")
        X_arr = np.asarray(X, dtype=float)
        return sigmoid(add_bias(X_arr) @ self.weights_)

    def predict(self, X, threshold: float = 0.5) -> np.ndarray:
        """Binary predictions using the provided threshold."""
        return (self.predict_proba(X) >= threshold).astype(int)
