from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

from .classic.linear.convergence import check_epochs
from .classic.linear.perceptron import Pegasos, Perceptron, UpdateRule
from .core.io import load_yaml
from .errors import InvalidConfigError
from .kernels import Kernel, linear_kernel, make_polynomial, make_radial

ALGORITHMS = ("perceptron", "pegasos", "kernel")
KERNELS = ("radial", "polynomial", "linear")


@dataclass
class TrainConfig:
    algorithm: str = "perceptron"  # "perceptron" | "pegasos" | "kernel"
    max_epochs: int = 1000
    shuffle: bool = False
    seed: Optional[int] = None
    force_origin: bool = False

    # pegasos
    lam: float = 0.5

    # kernel perceptron
    kernel: str = "radial"  # "radial" | "polynomial" | "linear"
    gamma: float = 0.5
    degree: int = 2
    coef0: float = 0.0

    # logging
    n_msgs: int = 10
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.algorithm not in ALGORITHMS:
            raise InvalidConfigError(f"algorithm must be one of {ALGORITHMS}, got {self.algorithm!r}")
        if self.kernel not in KERNELS:
            raise InvalidConfigError(f"kernel must be one of {KERNELS}, got {self.kernel!r}")
        check_epochs(self.max_epochs)
        if self.n_msgs < 0:
            raise InvalidConfigError(f"n_msgs must be >= 0, got {self.n_msgs}")

    def rule(self) -> UpdateRule:
        if self.algorithm == "pegasos":
            return Pegasos(lam=self.lam)
        return Perceptron()

    def kernel_fn(self) -> Kernel:
        if self.kernel == "radial":
            return make_radial(self.gamma)
        if self.kernel == "polynomial":
            return make_polynomial(self.degree, self.coef0)
        return linear_kernel

    def to_dict(self) -> dict:
        return asdict(self)


def load_config(path: Path | str, **overrides) -> TrainConfig:
    """Read a YAML mapping into TrainConfig; keyword overrides win over the file."""
    raw = load_yaml(path) or {}
    if not isinstance(raw, dict):
        raise InvalidConfigError(f"{path}: expected a mapping at top level")
    raw.update({k: v for k, v in overrides.items() if v is not None})
    known = {f.name for f in fields(TrainConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise InvalidConfigError(f"{path}: unknown keys {unknown}")
    return TrainConfig(**raw)
