# Mistake-driven binary classifiers: perceptron, pegasos and kernel perceptron.

from .classic.linear.convergence import ConvergenceRecord as ConvergenceRecord
from .classic.linear.kernel_perceptron import (
    KernelPerceptronClassifier as KernelPerceptronClassifier,
    KernelResult as KernelResult,
    kernel_perceptron as kernel_perceptron,
    train_kernel as train_kernel,
)
from .classic.linear.margins import TOLERANCE as TOLERANCE
from .classic.linear.perceptron import (
    Pegasos as Pegasos,
    Perceptron as Perceptron,
    PerceptronClassifier as PerceptronClassifier,
    PrimalResult as PrimalResult,
    inverse_sqrt as inverse_sqrt,
    pegasos as pegasos,
    perceptron as perceptron,
    train as train,
)
from .classic.linear.predict import predict as predict, predict_kernel as predict_kernel
from .errors import (
    DimensionMismatchError as DimensionMismatchError,
    InvalidConfigError as InvalidConfigError,
    LabelError as LabelError,
    PerceptronError as PerceptronError,
)
from .kernels import (
    linear_kernel as linear_kernel,
    make_polynomial as make_polynomial,
    make_radial as make_radial,
    polynomial_kernel as polynomial_kernel,
    radial_kernel as radial_kernel,
)
from .metrics import accuracy as accuracy, error_rate as error_rate

__all__ = [
    "ConvergenceRecord",
    "KernelPerceptronClassifier",
    "KernelResult",
    "kernel_perceptron",
    "train_kernel",
    "TOLERANCE",
    "Pegasos",
    "Perceptron",
    "PerceptronClassifier",
    "PrimalResult",
    "inverse_sqrt",
    "pegasos",
    "perceptron",
    "train",
    "predict",
    "predict_kernel",
    "DimensionMismatchError",
    "InvalidConfigError",
    "LabelError",
    "PerceptronError",
    "linear_kernel",
    "make_polynomial",
    "make_radial",
    "polynomial_kernel",
    "radial_kernel",
    "accuracy",
    "error_rate",
]
