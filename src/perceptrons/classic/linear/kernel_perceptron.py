from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from ...errors import DimensionMismatchError, InvalidConfigError
from ...kernels import Kernel, check_kernel, gram_matrix, radial_kernel
from .convergence import ConvergenceRecord, EpochTracker, RandomSource, check_epochs, check_rng, resolve_rng
from .margins import as_labels, as_matrix, dual_margin, is_violated
from .predict import predict_kernel

log = logging.getLogger("perceptrons.kernel")


@dataclass(frozen=True)
class KernelResult:
    """
    X, y, alpha in the order training actually used. With shuffle enabled this
    differs from the caller's order, and alpha only lines up with these copies.
    """

    X: np.ndarray
    y: np.ndarray
    alpha: np.ndarray
    record: ConvergenceRecord

    @property
    def errors(self) -> int:
        return self.record.errors

    @property
    def best_errors(self) -> int:
        return self.record.best_errors

    @property
    def iterations(self) -> int:
        return self.record.iterations

    @property
    def separated(self) -> bool:
        return self.record.separated


def train_kernel(
    X,
    y,
    kernel: Kernel = radial_kernel,
    alpha=None,
    max_epochs: int = 1000,
    shuffle: bool = False,
    rng: RandomSource = None,
    n_msgs: int = 10,
) -> KernelResult:
    """
    Kernel perceptron in dual form: alpha[i] counts the mistakes made on sample i
    and the decision value of x is sum_j alpha[j] y[j] K(x_j, x).

    The Gram matrix is computed once and permuted together with X, y and alpha,
    so an epoch costs O(n^2) arithmetic but no further kernel calls.
    """
    max_epochs = check_epochs(max_epochs)
    X = as_matrix(X)
    n, _ = X.shape
    y = as_labels(y, n)
    check_kernel(kernel, X[0] if n else None)
    if alpha is None:
        alpha = np.zeros(n, dtype=np.int64)
    else:
        alpha = np.array(alpha).ravel()
        if alpha.shape[0] != n:
            raise DimensionMismatchError(f"alpha has length {alpha.shape[0]} for {n} samples")
        if (alpha < 0).any() or (alpha != np.round(alpha)).any():
            raise InvalidConfigError("alpha must hold non-negative integer counts")
        alpha = alpha.astype(np.int64)
    check_rng(rng)
    gen = resolve_rng(rng) if shuffle else None

    G = gram_matrix(kernel, X, X)
    tracker = EpochTracker("kernel perceptron", max_epochs, n, n_msgs=n_msgs, log=log)
    tracker.start(shuffle)

    for t in range(1, max_epochs + 1):
        if shuffle:
            ridx = gen.permutation(n)
            X, y, alpha = X[ridx], y[ridx], alpha[ridx]
            G = G[np.ix_(ridx, ridx)]
        errors = 0
        for i in range(n):
            if is_violated(dual_margin(i, y, alpha, G)):
                alpha[i] += 1
                errors += 1
        if tracker.end_epoch(t, errors):
            break

    return KernelResult(X=X, y=y.astype(np.int64), alpha=alpha, record=tracker.record())


def kernel_perceptron(X, y, **kwargs) -> KernelResult:
    return train_kernel(X, y, **kwargs)


@dataclass
class KernelPerceptronClassifier:
    kernel: Kernel = field(default=radial_kernel)
    max_epochs: int = 1000
    shuffle: bool = False
    seed: int | None = None
    n_msgs: int = 0

    result_: KernelResult | None = None

    def fit(self, X: np.ndarray, y: np.ndarray):
        self.result_ = train_kernel(
            X,
            y,
            kernel=self.kernel,
            max_epochs=self.max_epochs,
            shuffle=self.shuffle,
            rng=self.seed,
            n_msgs=self.n_msgs,
        )
        return self

    def predict(self, X: np.ndarray) -> np.ndarray:
        assert self.result_ is not None, "call fit() first"
        r = self.result_
        return predict_kernel(X, r.X, r.y, r.alpha, kernel=self.kernel)

    def accuracy(self, X: np.ndarray, y: np.ndarray) -> float:
        y = np.asarray(y, dtype=np.int64).ravel()
        return float((self.predict(X) == y).mean())
