from __future__ import annotations

import numpy as np

from ...errors import DimensionMismatchError, LabelError

# Margins at or below this count as violations; scores above it predict +1.
TOLERANCE = float(np.finfo(np.float64).eps)


def as_matrix(X) -> np.ndarray:
    """(n,) -> (n, 1); (n, d) unchanged. Always a float64 copy."""
    X = np.array(X, dtype=np.float64)
    if X.ndim == 1:
        return X.reshape(-1, 1)
    if X.ndim != 2:
        raise DimensionMismatchError(f"expected a 1-D or 2-D feature array, got ndim={X.ndim}")
    return X


def as_labels(y, n: int) -> np.ndarray:
    y = np.array(y, dtype=np.float64).ravel()
    if y.shape[0] != n:
        raise DimensionMismatchError(f"got {y.shape[0]} labels for {n} samples")
    bad = ~np.isin(y, (-1.0, 1.0))
    if bad.any():
        raise LabelError(f"labels must be -1 or +1, found {np.unique(y[bad])[:5].tolist()}")
    return y


def primal_margin(x: np.ndarray, y: float, theta: np.ndarray, theta0: float) -> float:
    return float(y * (theta @ x + theta0))


def dual_margin(i: int, y: np.ndarray, alpha: np.ndarray, gram: np.ndarray) -> float:
    # gram[j, i] = K(x_j, x_i)
    return float(y[i] * ((alpha * y) @ gram[:, i]))


def is_violated(margin: float) -> bool:
    return margin <= TOLERANCE


def to_label(score: np.ndarray) -> np.ndarray:
    return np.where(score > TOLERANCE, 1, -1).astype(np.int64)
