from __future__ import annotations

"""
CLI entrypoint: train the gradient-descent logistic regression on a CSV (or
the built-in toy dataset) and print classification metrics.
"""

import argparse
from pathlib import Path

import pandas as pd
from sklearn.linear_model import LogisticRegression

from mathml import (
    LogisticRegressionGD,
    compute_classification_metrics,
    load_dataset,
    make_train_test_split,
    summarize_coefficients,
    toy_dataset,
)
from mathml.constants import (
    DEFAULT_HALF_LIVES,
    DEFAULT_ITERATIONS,
    DEFAULT_MAX_ALPHA,
    DEFAULT_MIN_ALPHA,
    DEFAULT_WEIGHT_CLASS0,
)
from mathml.metrics import majority_baseline


def print_metrics(label: str, metrics: dict):
    """Nicely format the metric dict produced by compute_classification_metrics."""
    cm = metrics["confusion_matrix"]
    print(
        f"[{label}] Acc {metrics['accuracy']:.3f} | "
        f"Prec {metrics['precision']:.3f} | Rec {metrics['recall']:.3f} | "
        f"F1 {metrics['f1']:.3f} | ROC-AUC {metrics['roc_auc']:.3f} | "
        f"LogLoss {metrics['log_loss']:.4f}"
    )
    print(f"    Confusion matrix [[TN, FP], [FN, TP]]: {cm.tolist()}")


def build_arg_parser():
    """CLI parser with knobs for data, split and trainer hyperparameters."""
    parser = argparse.ArgumentParser(
        description="Binary logistic regression trained with gradient descent."
    )
    parser.add_argument(
        "--csv-path",
        type=Path,
        default=None,
        help="CSV with numeric features and a 0/1 label column. Uses the toy dataset if omitted.",
    )
    parser.add_argument("--label-column", type=str, default="label")
    parser.add_argument(
        "--solver",
        choices=["simple", "fast"],
        default="fast",
        help="simple: halve the step when cost rises; fast: geometric decay with class weighting.",
    )
    parser.add_argument("--lr", type=float, default=DEFAULT_MAX_ALPHA, help="Initial learning rate.")
    parser.add_argument("--min-lr", type=float, default=DEFAULT_MIN_ALPHA, help="Stop once the simple solver's step drops below this.")
    parser.add_argument("--l2", type=float, default=0.0, help="L2 regularization strength.")
    parser.add_argument("--max-iter", type=int, default=DEFAULT_ITERATIONS, help="Iteration budget.")
    parser.add_argument("--weight-class0", type=float, default=DEFAULT_WEIGHT_CLASS0, help="Weight of negative examples (fast solver).")
    parser.add_argument("--half-lives", type=float, default=DEFAULT_HALF_LIVES, help="Learning-rate halvings over the run (fast solver).")
    parser.add_argument("--test-size", type=float, default=0.2)
    parser.add_argument("--random-state", type=int, default=42)
    parser.add_argument(
        "--compare-sklearn",
        action="store_true",
        help="Also fit sklearn's LogisticRegression as a reference.",
    )
    parser.add_argument("--verbose", action="store_true", help="Print the loss during training.")
    return parser


def load_splits(args: argparse.Namespace):
    """Return train/test frames; the toy dataset is too small to split and is reused for both."""
    if args.csv_path is None:
        X_toy, y_toy = toy_dataset()
        X = pd.DataFrame(X_toy[:, 1:], columns=["x1"])
        y = pd.Series(y_toy, name=args.label_column)
        print(f"Toy dataset: {len(X)} rows, {X.shape[1]} feature(s)")
        return X, X, y, y

    X, y, meta = load_dataset(args.csv_path, label_column=args.label_column)
    print(
        f"Rows: {meta['num_rows']} (dropped {meta['dropped_rows']}), "
        f"features: {meta['feature_count']}, positive rate: {meta['positive_rate']:.3f}"
    )
    X_train, X_test, y_train, y_test = make_train_test_split(
        X, y, test_size=args.test_size, random_state=args.random_state
    )
    print(f"Train size: {len(X_train)}, Test size: {len(X_test)}")
    return X_train, X_test, y_train, y_test


def main(args: argparse.Namespace | None = None):
    args = args or build_arg_parser().parse_args()

    X_train, X_test, y_train, y_test = load_splits(args)

    baseline = majority_baseline(y_train, y_test)
    print_metrics("Majority baseline", baseline)

    gd_model = LogisticRegressionGD(
        solver=args.solver,
        lr=args.lr,
        min_lr=args.min_lr,
        max_iter=args.max_iter,
        l2=args.l2,
        weight_class0=args.weight_class0,
        half_lives=args.half_lives,
        verbose=args.verbose,
    )
    gd_model.fit(X_train.values, y_train.values)
    gd_probs = gd_model.predict_proba(X_test.values)
    gd_metrics = compute_classification_metrics(y_test, gd_probs)
    print_metrics(f"GD logistic ({args.solver})", gd_metrics)
    print(f"    GD steps: {gd_model.n_iter_}")
    print(f"    Intercept: {gd_model.intercept_:.4f}")

    gd_top = summarize_coefficients(gd_model.coef_, list(X_train.columns), top_k=8)
    print("\nTop positive features (GD):")
    print(gd_top["positive"])
    print("\nTop negative features (GD):")
    print(gd_top["negative"])

    if args.compare_sklearn:
        # C is the inverse regularization strength; effectively unpenalized when l2 is 0
        C = 1.0 / args.l2 if args.l2 > 0 else 1e12
        sk_model = LogisticRegression(C=C, max_iter=5000)
        sk_model.fit(X_train, y_train.astype(int))
        sk_probs = sk_model.predict_proba(X_test)[:, 1]
        print_metrics("sklearn LogisticRegression", compute_classification_metrics(y_test, sk_probs))
        print(f"    Intercept: {sk_model.intercept_[0]:.4f}")

    return gd_model


if __name__ == "__main__":
    main()
