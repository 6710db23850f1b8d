from __future__ import annotations

import numpy as np

from .errors import DimensionMismatchError


def _pair(y_pred, y_true) -> tuple[np.ndarray, np.ndarray]:
    y_pred = np.asarray(y_pred).ravel()
    y_true = np.asarray(y_true).ravel()
    if y_pred.shape[0] != y_true.shape[0]:
        raise DimensionMismatchError(f"{y_pred.shape[0]} predictions for {y_true.shape[0]} labels")
    return y_pred, y_true


def accuracy(y_pred, y_true) -> float:
    y_pred, y_true = _pair(y_pred, y_true)
    if y_true.shape[0] == 0:
        return float("nan")
    return float((y_pred == y_true).mean())


def error_rate(y_pred, y_true) -> float:
    return 1.0 - accuracy(y_pred, y_true)
