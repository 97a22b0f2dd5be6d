"""
Binary logistic regression trained with batch gradient descent.

Two interchangeable gradient implementations live side by side: a reference
tier composed from small vector primitives (``classifier``) and a dense NumPy
tier (``dense``). The training drivers, a small estimator class, data
preparation and metric helpers build on top of them.
"""

from .classifier import (
    cost,
    example_cost,
    example_gradient,
    gradient,
    gradient_sum,
    hypothesis,
    probability,
)
from .data_prep import add_bias, load_dataset, make_train_test_split, toy_dataset
from .dense import dense_gradient, weighted_cost, weighted_gradient
from .logreg import LogisticRegressionGD
from .metrics import compute_classification_metrics, summarize_coefficients
from .primitives import dot_product, scalar_product, sigmoid, vector_add, vector_sum
from .training import (
    TrainingResult,
    fast_train,
    learning_rate_schedule,
    train,
    train_until_converged,
)

__all__ = [
    "sigmoid",
    "dot_product",
    "scalar_product",
    "vector_add",
    "vector_sum",
    "hypothesis",
    "probability",
    "example_cost",
    "cost",
    "example_gradient",
    "gradient_sum",
    "gradient",
    "dense_gradient",
    "weighted_gradient",
    "weighted_cost",
    "TrainingResult",
    "train",
    "train_until_converged",
    "fast_train",
    "learning_rate_schedule",
    "LogisticRegressionGD",
    "add_bias",
    "load_dataset",
    "make_train_test_split",
    "toy_dataset",
    "compute_classification_metrics",
    "summarize_coefficients",
]
