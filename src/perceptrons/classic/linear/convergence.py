from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

import numpy as np

from ...errors import InvalidConfigError

RandomSource = Union[np.random.Generator, int, None]


@dataclass(frozen=True)
class ConvergenceRecord:
    iterations: int  # epochs actually run
    errors: int  # violations in the last epoch
    best_errors: int  # fewest violations seen in any epoch
    separated: bool
    history: Tuple[int, ...] = ()  # violations per epoch

    def as_dict(self) -> dict:
        return {
            "iterations": self.iterations,
            "errors": self.errors,
            "best_errors": self.best_errors,
            "separated": self.separated,
            "history": list(self.history),
        }


def check_epochs(max_epochs: int) -> int:
    if isinstance(max_epochs, bool) or not isinstance(max_epochs, numbers.Integral) or max_epochs < 1:
        raise InvalidConfigError(f"max_epochs must be an integer >= 1, got {max_epochs!r}")
    return int(max_epochs)


def check_rng(rng: RandomSource) -> RandomSource:
    if rng is None or isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, bool) or not isinstance(rng, numbers.Integral) or rng < 0:
        raise InvalidConfigError(f"rng must be a numpy Generator, a non-negative int seed or None, got {rng!r}")
    return rng


def resolve_rng(rng: RandomSource) -> np.random.Generator:
    """
    Generator -> used as is; int -> seeded generator; None -> fresh unseeded generator.
    The global numpy state is never touched.
    """
    rng = check_rng(rng)
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


@dataclass
class EpochTracker:
    """Per-call bookkeeping shared by the primal and dual trainers."""

    name: str
    max_epochs: int
    n_samples: int
    n_msgs: int = 10
    log: Optional[logging.Logger] = None

    best: Optional[int] = None
    last: Optional[int] = None
    history: List[int] = field(default_factory=list)

    def start(self, shuffle: bool) -> None:
        if self.log and self.n_msgs:
            self.log.info(
                f"Training {self.name} for maximum {self.max_epochs} epochs. Random shuffle: {shuffle}"
            )

    def end_epoch(self, t: int, errors: int) -> bool:
        """Record epoch t; True when the data has been separated."""
        self.history.append(errors)
        if self.log:
            self.log.debug(f"{self.name} epoch {t}: {errors} violations")
        if errors == 0:
            self.best = self.last = 0
            if self.log and self.n_msgs:
                self.log.info(
                    f"Avg. error after epoch {t}: 0.0 (all elements of the set have been correctly classified)"
                )
            return True
        if self.best is None or errors < self.best:
            self.best = errors
        self.last = errors
        if self.log and self.n_msgs:
            every = math.ceil(self.max_epochs / self.n_msgs)
            if t % every == 0 or t == 1 or t == self.max_epochs:
                self.log.info(f"Avg. error after epoch {t}: {errors / self.n_samples:.4f}")
        return False

    def record(self) -> ConvergenceRecord:
        separated = bool(self.history) and self.history[-1] == 0
        return ConvergenceRecord(
            iterations=len(self.history),
            errors=int(self.last or 0),
            best_errors=int(self.best or 0),
            separated=separated,
            history=tuple(self.history),
        )
