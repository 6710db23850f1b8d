from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Tuple, Union

import numpy as np

from ...errors import DimensionMismatchError, InvalidConfigError
from .convergence import ConvergenceRecord, EpochTracker, RandomSource, check_epochs, check_rng, resolve_rng
from .margins import as_labels, as_matrix, is_violated, primal_margin, to_label

log = logging.getLogger("perceptrons.linear")


def inverse_sqrt(t: int) -> float:
    return 1.0 / np.sqrt(t)


# -------------------------------
# Update rules
# -------------------------------


@dataclass(frozen=True)
class Perceptron:
    """theta += y x on every violation; nothing happens otherwise."""

    name: str = field(default="perceptron", init=False)

    def rate(self, t: int) -> float:
        return 1.0

    def update(self, theta, theta0, x, y, violated, eta, force_origin) -> Tuple[np.ndarray, float]:
        if not violated:
            return theta, theta0
        return theta + y * x, 0.0 if force_origin else theta0 + y


@dataclass(frozen=True)
class Pegasos:
    """
    Sub-gradient step on the L2-regularised hinge objective, with the margin
    threshold at zero. theta shrinks by (1 - eta*lam) on every sample; the
    data term and the bias step only apply on violations.
    """

    lam: float = 0.5
    eta: Callable[[int], float] = inverse_sqrt  # learning rate as a function of the epoch
    name: str = field(default="pegasos", init=False)

    def __post_init__(self):
        if self.lam < 0:
            raise InvalidConfigError(f"pegasos lam must be >= 0, got {self.lam}")
        if not callable(self.eta):
            raise InvalidConfigError("pegasos eta must be a callable epoch -> learning rate")

    def rate(self, t: int) -> float:
        return float(self.eta(t))

    def update(self, theta, theta0, x, y, violated, eta, force_origin) -> Tuple[np.ndarray, float]:
        shrunk = (1.0 - eta * self.lam) * theta
        if not violated:
            return shrunk, theta0
        return shrunk + eta * y * x, 0.0 if force_origin else theta0 + eta * y


UpdateRule = Union[Perceptron, Pegasos]


# -------------------------------
# Training
# -------------------------------


@dataclass(frozen=True)
class PrimalResult:
    theta: np.ndarray
    theta0: float
    avg_theta: np.ndarray
    avg_theta0: float
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


def train(
    X,
    y,
    theta=None,
    theta0: float = 0.0,
    rule: UpdateRule = Perceptron(),
    max_epochs: int = 1000,
    shuffle: bool = False,
    force_origin: bool = False,
    rng: RandomSource = None,
    n_msgs: int = 10,
) -> PrimalResult:
    """
    Mistake-driven training of a separating hyperplane theta·x + theta0 = 0.

    X: (n, d) features (a 1-D array is read as a single feature column).
    y: n labels in {-1, +1}.
    rule: `Perceptron()` or `Pegasos(lam, eta)`.
    shuffle: draw a fresh row permutation from `rng` at the start of every epoch.
    force_origin: keep theta0 at exactly zero.

    Stops at the first epoch without violations. The averaged parameters are
    the running sums of every updated (theta, theta0), seeded with the initial
    values, divided by n * max_epochs: the configured budget, not the epochs
    actually run, so an early exit yields a proportionally smaller average.
    """
    if not hasattr(rule, "update") or not hasattr(rule, "rate"):
        raise InvalidConfigError(f"unknown update rule: {rule!r}")
    max_epochs = check_epochs(max_epochs)
    X = as_matrix(X)
    n, d = X.shape
    y = as_labels(y, n)
    theta = np.zeros(d) if theta is None else np.array(theta, dtype=np.float64).ravel()
    if theta.shape[0] != d:
        raise DimensionMismatchError(f"theta has length {theta.shape[0]}, X has {d} columns")
    theta0 = 0.0 if force_origin else float(theta0)
    check_rng(rng)
    gen = resolve_rng(rng) if shuffle else None

    sum_theta = theta.copy()
    sum_theta0 = theta0
    tracker = EpochTracker(rule.name, max_epochs, n, n_msgs=n_msgs, log=log)
    tracker.start(shuffle)

    for t in range(1, max_epochs + 1):
        eta = rule.rate(t)
        if shuffle:
            ridx = gen.permutation(n)
            X, y = X[ridx], y[ridx]
        errors = 0
        for i in range(n):
            violated = is_violated(primal_margin(X[i], y[i], theta, theta0))
            theta, theta0 = rule.update(theta, theta0, X[i], y[i], violated, eta, force_origin)
            if violated:
                sum_theta = sum_theta + theta
                sum_theta0 += theta0
                errors += 1
        if tracker.end_epoch(t, errors):
            break

    norm = n * max_epochs
    return PrimalResult(
        theta=theta,
        theta0=float(theta0),
        avg_theta=sum_theta / norm,
        avg_theta0=float(sum_theta0 / norm),
        record=tracker.record(),
    )


def perceptron(X, y, **kwargs) -> PrimalResult:
    return train(X, y, rule=Perceptron(), **kwargs)


def pegasos(X, y, lam: float = 0.5, eta: Callable[[int], float] = inverse_sqrt, **kwargs) -> PrimalResult:
    return train(X, y, rule=Pegasos(lam=lam, eta=eta), **kwargs)


# -------------------------------
# Estimator
# -------------------------------


@dataclass
class PerceptronClassifier:
    rule: UpdateRule = field(default_factory=Perceptron)
    max_epochs: int = 1000
    shuffle: bool = False
    force_origin: bool = False
    averaged: bool = False  # predict with the averaged hyperplane
    seed: int | None = None
    n_msgs: int = 0

    w: np.ndarray | None = None
    b: float = 0.0
    result_: PrimalResult | None = None

    def fit(self, X: np.ndarray, y: np.ndarray):
        res = train(
            X,
            y,
            rule=self.rule,
            max_epochs=self.max_epochs,
            shuffle=self.shuffle,
            force_origin=self.force_origin,
            rng=self.seed,
            n_msgs=self.n_msgs,
        )
        self.result_ = res
        self.w, self.b = (res.avg_theta, res.avg_theta0) if self.averaged else (res.theta, res.theta0)
        return self

    def decision_function(self, X: np.ndarray) -> np.ndarray:
        assert self.w is not None, "call fit() first"
        X = as_matrix(X)
        if X.shape[1] != self.w.shape[0]:
            raise DimensionMismatchError(f"X has {X.shape[1]} columns, model has {self.w.shape[0]}")
        return X @ self.w + self.b

    def predict(self, X: np.ndarray) -> np.ndarray:
        return to_label(self.decision_function(X))

    def accuracy(self, X: np.ndarray, y: np.ndarray) -> float:
        y = np.asarray(y, dtype=np.int64).ravel()
        return float((self.predict(X) == y).mean())
