import logging
from pathlib import Path

import numpy as np

from perceptrons.classic.linear.perceptron import train
from perceptrons.core.io import ensure_dir, load_json, load_labeled_csv, load_yaml, save_json
from perceptrons.core.logs import setup_logging
from perceptrons.core.timers import Timer, timed


def test_io_roundtrip(tmp_path: Path):
    p = tmp_path / "x" / "y.json"
    ensure_dir(p.parent)
    save_json(p, {"a": 1})
    obj = load_json(p)
    assert obj["a"] == 1
    (tmp_path / "c.yaml").write_text("a: [1, 2]\n")
    assert load_yaml(tmp_path / "c.yaml") == {"a": [1, 2]}


def test_setup_logging_does_not_duplicate_handlers(tmp_path: Path):
    log = logging.getLogger("perceptrons")
    before = list(log.handlers)
    try:
        setup_logging("DEBUG", str(tmp_path / "logs" / "run.log"))
        n = len(log.handlers)
        assert setup_logging("WARNING") is log
        assert len(log.handlers) == n
        assert log.level == logging.WARNING
        assert (tmp_path / "logs" / "run.log").exists()
    finally:
        for h in log.handlers[:]:
            if h not in before:
                log.removeHandler(h)
                h.close()
        log.setLevel(logging.NOTSET)
    assert log.handlers == before


def test_training_progress_messages(caplog):
    X = np.array([[1.1, 2.1], [5.3, 4.2], [1.8, 1.7]])
    y = np.array([-1, 1, -1])
    with caplog.at_level(logging.INFO, logger="perceptrons"):
        train(X, y, n_msgs=10)
    assert any("Training perceptron" in r.getMessage() for r in caplog.records)
    caplog.clear()
    with caplog.at_level(logging.INFO, logger="perceptrons"):
        train(X, y, n_msgs=0)
    assert not caplog.records


def test_timer(caplog):
    t = Timer()
    assert t.elapsed >= 0.0
    with caplog.at_level(logging.INFO, logger="perceptrons"):
        with timed("noop") as tt:
            pass
    assert tt.elapsed >= 0.0
    assert any("[timer] noop" in r.getMessage() for r in caplog.records)


def test_save_json_handles_numpy_values(tmp_path: Path):
    p = tmp_path / "summary.json"
    save_json(p, {"theta": np.array([0.5, -1.0]), "errors": np.int64(3), "acc": np.float64(0.75)})
    assert load_json(p) == {"theta": [0.5, -1.0], "errors": 3, "acc": 0.75}


def test_load_labeled_csv(tmp_path: Path):
    p = tmp_path / "data.csv"
    p.write_text("x1,x2,label\n1.1,2.1,-1\n5.3,4.2,1\n1.8,1.7,-1\n")
    X, y = load_labeled_csv(p, skip_header=1)
    assert X.shape == (3, 2)
    assert y.tolist() == [-1.0, 1.0, -1.0]
    res = train(X, y)
    assert res.separated
