
import sys
import os

# Add parent directory to sys.path
sys.path.append(os.path.abspath(".."))

import numpy as np
import matplotlib.pyplot as plt

from mathml import (
    fast_train,
    learning_rate_schedule,
    probability,
    toy_dataset,
    train,
)
from mathml.constants import (
    DEFAULT_HALF_LIVES,
    DEFAULT_ITERATIONS,
    DEFAULT_MAX_ALPHA,
    DEFAULT_MIN_ALPHA,
    TOY_THETA,
)

# Configuration
ALPHA = 0.5
HALF_LIVES = [1, DEFAULT_HALF_LIVES, 6]


def plot_learning_rate_schedule(filename):
    plt.figure(figsize=(8, 6))
    steps = np.arange(DEFAULT_ITERATIONS)
    for half_lives in HALF_LIVES:
        rates = learning_rate_schedule(ALPHA, DEFAULT_ITERATIONS, half_lives)
        plt.plot(steps, rates, lw=2, label=f"half-lives = {half_lives}")
    plt.xlabel("Step")
    plt.ylabel("Learning rate")
    plt.title("Fast trainer learning-rate decay")
    plt.legend(loc="upper right")
    plt.grid(True)
    plt.tight_layout()
    plt.savefig(filename)
    plt.close()


def plot_toy_probabilities(filename):
    xs, ys = toy_dataset()

    simple = train(
        xs.tolist(), ys.tolist(), TOY_THETA,
        min_alpha=DEFAULT_MIN_ALPHA,
        max_alpha=DEFAULT_MAX_ALPHA,
        iterations=DEFAULT_ITERATIONS,
    )
    fast = fast_train(
        xs, ys, TOY_THETA,
        lam=0.0,
        weight_class0=1.0,
        alpha=ALPHA,
        iterations=DEFAULT_ITERATIONS,
        half_lives=DEFAULT_HALF_LIVES,
    )

    grid = np.linspace(0, 7, 200)
    plt.figure(figsize=(8, 6))
    for label, theta in (("simple", simple.theta), ("fast", fast.theta)):
        curve = [probability([1.0, g], theta) for g in grid]
        plt.plot(grid, curve, lw=2, label=f"{label} trainer")
    plt.scatter(xs[:, 1], ys, color="black", zorder=3, label="training examples")
    plt.axhline(0.5, color="navy", lw=1, linestyle="--")
    plt.xlabel("x")
    plt.ylabel("P(y=1)")
    plt.title("Learned probability on the toy dataset")
    plt.legend(loc="upper left")
    plt.grid(True)
    plt.tight_layout()
    plt.savefig(filename)
    plt.close()


if __name__ == "__main__":
    print("Generating learning-rate schedule plot...")
    plot_learning_rate_schedule("learning_rate_schedule.png")
    print("Generating toy probability plot...")
    plot_toy_probabilities("toy_probabilities.png")
    print("All plots generated successfully.")
