from __future__ import annotations

import math
from typing import Callable, Optional

import numpy as np

from .errors import InvalidConfigError

Kernel = Callable[[np.ndarray, np.ndarray], float]


def linear_kernel(u: np.ndarray, v: np.ndarray) -> float:
    return float(np.dot(u, v))


def radial_kernel(u: np.ndarray, v: np.ndarray, gamma: float = 0.5) -> float:
    """
    Gaussian similarity exp(-gamma * ||u - v||^2). gamma = 1 / (2 sigma^2).
    """
    diff = np.asarray(u, dtype=np.float64) - np.asarray(v, dtype=np.float64)
    return float(np.exp(-gamma * float(diff @ diff)))


def polynomial_kernel(u: np.ndarray, v: np.ndarray, degree: int = 2, coef0: float = 0.0) -> float:
    return float((np.dot(u, v) + coef0) ** degree)


def make_radial(gamma: float = 0.5) -> Kernel:
    if gamma <= 0:
        raise InvalidConfigError(f"radial kernel needs gamma > 0, got {gamma}")

    def k(u: np.ndarray, v: np.ndarray) -> float:
        return radial_kernel(u, v, gamma=gamma)

    k.__name__ = f"radial(gamma={gamma})"
    return k


def make_polynomial(degree: int = 2, coef0: float = 0.0) -> Kernel:
    if degree < 1:
        raise InvalidConfigError(f"polynomial kernel needs degree >= 1, got {degree}")

    def k(u: np.ndarray, v: np.ndarray) -> float:
        return polynomial_kernel(u, v, degree=degree, coef0=coef0)

    k.__name__ = f"polynomial(degree={degree}, coef0={coef0})"
    return k


def check_kernel(kernel: Kernel, sample: Optional[np.ndarray] = None) -> None:
    """
    Reject anything that cannot be called as kernel(u, v) -> finite real.
    `sample` is a single feature vector, paired with itself. Without one
    (empty data) only callability is checked.
    """
    if not callable(kernel):
        raise InvalidConfigError(f"kernel must be callable, got {type(kernel).__name__}")
    if sample is None:
        return
    try:
        val = kernel(sample, sample)
    except TypeError as exc:
        raise InvalidConfigError(f"kernel does not accept two feature vectors: {exc}") from exc
    try:
        val = float(val)
    except (TypeError, ValueError) as exc:
        raise InvalidConfigError(f"kernel must return a real scalar, got {val!r}") from exc
    if not math.isfinite(val):
        raise InvalidConfigError(f"kernel returned a non-finite value: {val}")


def gram_matrix(kernel: Kernel, A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """G[i, j] = kernel(A[i], B[j])."""
    G = np.empty((A.shape[0], B.shape[0]), dtype=np.float64)
    for i in range(A.shape[0]):
        for j in range(B.shape[0]):
            G[i, j] = kernel(A[i], B[j])
    return G
