"""
Default hyperparameters and the toy dataset shared by the CLI, plots and tests.
"""

# Simple (halving) trainer
DEFAULT_MIN_ALPHA = 0.001
DEFAULT_MAX_ALPHA = 0.5
DEFAULT_ITERATIONS = 100000

# Delta-threshold trainer
DEFAULT_DELTA = 1e-9

# Fast (decaying) trainer
DEFAULT_HALF_LIVES = 3
DEFAULT_WEIGHT_CLASS0 = 1.0

# Positive class is anything above this label value when weighting examples.
POSITIVE_LABEL_THRESHOLD = 0.5

LOG_EVERY = 500

# Four examples on one feature; only the last one is positive.
TOY_FEATURES = [
    [1.0, 2.0],
    [1.0, 3.0],
    [1.0, 4.0],
    [1.0, 5.0],
]
TOY_LABELS = [0.0, 0.0, 0.0, 1.0]
TOY_THETA = [1.0, 1.0]
