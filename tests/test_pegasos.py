import numpy as np
import pytest

from perceptrons.classic.linear.perceptron import Pegasos, Perceptron, PerceptronClassifier, pegasos, train
from perceptrons.errors import InvalidConfigError


def _blobs(n=80, seed=0):
    rng = np.random.default_rng(seed)
    X0 = rng.normal(size=(n // 2, 2)) + np.array([+3, 0])
    X1 = rng.normal(size=(n // 2, 2)) + np.array([-3, 0])
    X = np.vstack([X0, X1])
    y = np.array([1] * (n // 2) + [-1] * (n // 2))
    return X, y


def test_pegasos_single_point_step_by_step():
    # epoch 1 (eta = 1): violation, theta = 0.5 * 0 + 1, theta0 = 1
    # epoch 2 (eta = 1/sqrt(2)): correct, theta only shrinks, bias untouched
    res = pegasos([[1.0]], [1], lam=0.5, max_epochs=10)
    assert res.separated and res.iterations == 2
    assert res.theta[0] == pytest.approx(1.0 - 0.5 / np.sqrt(2))
    assert res.theta0 == 1.0
    # running sums only grow on violations
    assert res.avg_theta == pytest.approx([0.1])


def test_pegasos_learns_blobs():
    X, y = _blobs()
    clf = PerceptronClassifier(rule=Pegasos(lam=0.01), max_epochs=200, shuffle=True, seed=1).fit(X, y)
    assert clf.accuracy(X, y) >= 0.95


def test_pegasos_without_regularisation_matches_perceptron():
    X, y = _blobs(seed=2)
    a = train(X, y, rule=Pegasos(lam=0.0, eta=lambda t: 1.0), max_epochs=50)
    b = train(X, y, rule=Perceptron(), max_epochs=50)
    assert np.array_equal(a.theta, b.theta)
    assert a.theta0 == b.theta0
    assert a.record == b.record


def test_pegasos_force_origin():
    X, y = _blobs(seed=3)
    res = pegasos(X, y, lam=0.1, max_epochs=5, force_origin=True)
    assert res.theta0 == 0.0 and res.avg_theta0 == 0.0


def test_learning_rate_is_evaluated_once_per_epoch():
    calls = []

    def eta(t):
        calls.append(t)
        return 1.0 / t

    X, y = _blobs(n=20, seed=4)
    res = pegasos(X, y, lam=0.1, eta=eta, max_epochs=7)
    assert calls == list(range(1, res.iterations + 1))


def test_pegasos_rejects_bad_parameters():
    with pytest.raises(InvalidConfigError):
        Pegasos(lam=-1.0)
    with pytest.raises(InvalidConfigError):
        Pegasos(eta=0.1)
