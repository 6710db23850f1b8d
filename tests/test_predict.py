import numpy as np
import pytest

from perceptrons.classic.linear.margins import TOLERANCE, as_labels, as_matrix, is_violated
from perceptrons.classic.linear.predict import predict, predict_kernel
from perceptrons.errors import DimensionMismatchError, LabelError
from perceptrons.kernels import radial_kernel
from perceptrons.metrics import accuracy, error_rate


def test_predict_dimension_mismatch():
    X = np.array([[1.0, 2.0], [3.0, 4.0]])
    with pytest.raises(DimensionMismatchError):
        predict(X, np.array([1.0, 2.0, 3.0]))


def test_predict_kernel_dimension_mismatch():
    Xtr = np.array([[1.0, 2.0], [3.0, 4.0]])
    ytr = np.array([1, -1])
    alpha = np.array([1, 1])
    with pytest.raises(DimensionMismatchError):
        predict_kernel(np.zeros((1, 3)), Xtr, ytr, alpha)
    with pytest.raises(DimensionMismatchError):
        predict_kernel(np.zeros((1, 2)), Xtr, ytr[:1], alpha)
    with pytest.raises(DimensionMismatchError):
        predict_kernel(np.zeros((1, 2)), Xtr, ytr, np.array([1, 1, 1]))


def test_boundary_and_tolerance_predict_negative():
    X = np.array([[0.0], [TOLERANCE], [2 * TOLERANCE], [-1.0]])
    assert predict(X, [1.0]).tolist() == [-1, -1, 1, -1]


def test_training_and_prediction_rules_are_asymmetric():
    assert is_violated(0.0) and is_violated(TOLERANCE)
    assert not is_violated(2 * TOLERANCE)


def test_predict_is_pure_and_idempotent():
    rng = np.random.default_rng(0)
    X = rng.normal(size=(20, 3))
    theta = rng.normal(size=3)
    X_copy, theta_copy = X.copy(), theta.copy()
    a = predict(X, theta, 0.3)
    b = predict(X, theta, 0.3)
    assert np.array_equal(a, b)
    assert set(a.tolist()) <= {-1, 1}
    assert np.array_equal(X, X_copy) and np.array_equal(theta, theta_copy)

    Xtr = rng.normal(size=(6, 3))
    ytr = np.array([1, -1, 1, -1, 1, -1])
    alpha = np.array([1, 0, 2, 1, 0, 3])
    k1 = predict_kernel(X, Xtr, ytr, alpha, kernel=radial_kernel)
    k2 = predict_kernel(X, Xtr, ytr, alpha, kernel=radial_kernel)
    assert np.array_equal(k1, k2)


def test_zero_alpha_predicts_negative():
    Xtr = np.array([[0.0, 0.0], [1.0, 1.0]])
    out = predict_kernel(np.array([[0.5, 0.5]]), Xtr, [1, 1], [0, 0])
    assert out.tolist() == [-1]


def test_input_normalisation():
    assert as_matrix([1.0, 2.0, 3.0]).shape == (3, 1)
    assert as_matrix([[1.0, 2.0]]).shape == (1, 2)
    with pytest.raises(DimensionMismatchError):
        as_matrix(np.zeros((2, 2, 2)))
    assert as_labels([1, -1], 2).tolist() == [1.0, -1.0]
    with pytest.raises(LabelError):
        as_labels([1, 2], 2)
    with pytest.raises(DimensionMismatchError):
        as_labels([1, -1, 1], 2)


def test_metrics():
    assert accuracy([1, -1, 1, 1], [1, -1, -1, 1]) == 0.75
    assert error_rate([1, -1, 1, 1], [1, -1, -1, 1]) == pytest.approx(0.25)
    with pytest.raises(DimensionMismatchError):
        accuracy([1, -1], [1])
