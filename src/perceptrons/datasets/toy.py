from __future__ import annotations
import numpy as np


def make_separable(n: int = 200, d: int = 2, margin: float = 0.5, seed: int = 42):
    """
    Linearly separable data with labels in {-1, +1}.
    Logits X·w + b are pushed away from the boundary by `margin * sign(logits)`,
    so every point sits at least `margin` from the true hyperplane (|w| = 1).
    Returns (X, y, w_true, b_true).
    """
    rng = np.random.default_rng(seed)
    X = rng.normal(size=(n, d))
    w_true = rng.normal(size=(d,))
    # normalize w so 'margin' has consistent meaning
    w_true = w_true / (np.linalg.norm(w_true) + 1e-12)
    b_true = rng.normal()

    logits = X @ w_true + b_true
    shift = margin * np.where(logits >= 0.0, 1.0, -1.0)
    X = X + np.outer(shift, w_true)  # move points along w so the margin is geometric
    y = np.where(logits >= 0.0, 1, -1).astype(np.int64)
    return X.astype(np.float64), y, w_true, float(b_true)


def make_xor(n: int = 200, spread: float = 0.3, seed: int = 42):
    """Four gaussian blobs at (±1, ±1): +1 for the (1, 1) and (-1, -1) blobs, -1 otherwise. Not linearly separable."""
    rng = np.random.default_rng(seed)
    centers = np.array([[1.0, 1.0], [-1.0, -1.0], [1.0, -1.0], [-1.0, 1.0]])
    labels = np.array([1, 1, -1, -1], dtype=np.int64)
    idx = rng.integers(0, 4, size=n)
    X = centers[idx] + spread * rng.normal(size=(n, 2))
    return X.astype(np.float64), labels[idx]
