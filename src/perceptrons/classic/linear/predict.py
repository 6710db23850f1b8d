from __future__ import annotations

import numpy as np

from ...errors import DimensionMismatchError
from ...kernels import Kernel, check_kernel, gram_matrix, radial_kernel
from .margins import as_matrix, to_label


def predict(X, theta, theta0: float = 0.0) -> np.ndarray:
    """
    Labels in {-1, +1} from a hyperplane: +1 where theta·x + theta0 exceeds the
    tolerance, -1 otherwise (including exactly on the boundary).
    """
    X = as_matrix(X)
    theta = np.asarray(theta, dtype=np.float64).ravel()
    if theta.shape[0] != X.shape[1]:
        raise DimensionMismatchError(f"X has {X.shape[1]} columns but theta has length {theta.shape[0]}")
    return to_label(X @ theta + float(theta0))


def predict_kernel(X, X_train, y_train, alpha, kernel: Kernel = radial_kernel) -> np.ndarray:
    """Labels from the dual form sum_j alpha[j] y_train[j] K(X_train[j], x)."""
    X = as_matrix(X)
    X_train = as_matrix(X_train)
    y_train = np.asarray(y_train, dtype=np.float64).ravel()
    alpha = np.asarray(alpha, dtype=np.float64).ravel()
    n_train, d = X_train.shape
    if X.shape[1] != d:
        raise DimensionMismatchError(f"X has {X.shape[1]} columns, X_train has {d}")
    if y_train.shape[0] != n_train or alpha.shape[0] != n_train:
        raise DimensionMismatchError(
            f"X_train, y_train and alpha must have the same length "
            f"({n_train}, {y_train.shape[0]}, {alpha.shape[0]})"
        )
    check_kernel(kernel, X[0] if X.shape[0] else None)
    if X.shape[0] == 0:
        return np.zeros(0, dtype=np.int64)
    G = gram_matrix(kernel, X_train, X)  # (n_train, n)
    return to_label((alpha * y_train) @ G)
