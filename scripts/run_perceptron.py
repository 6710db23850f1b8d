from pathlib import Path
from typing import Optional

import numpy as np
import typer

from perceptrons.classic.linear.kernel_perceptron import train_kernel
from perceptrons.classic.linear.perceptron import train
from perceptrons.classic.linear.predict import predict, predict_kernel
from perceptrons.config import TrainConfig, load_config
from perceptrons.core import load_labeled_csv, save_json, setup_logging, timed
from perceptrons.datasets.toy import make_separable, make_xor
from perceptrons.metrics import accuracy

app = typer.Typer(add_completion=False)


def _fit_predict(cfg: TrainConfig, X: np.ndarray, y: np.ndarray):
    if cfg.algorithm == "kernel":
        K = cfg.kernel_fn()
        res = train_kernel(X, y, kernel=K, max_epochs=cfg.max_epochs, shuffle=cfg.shuffle, rng=cfg.seed, n_msgs=cfg.n_msgs)
        return res, predict_kernel(X, res.X, res.y, res.alpha, kernel=K)
    res = train(
        X, y, rule=cfg.rule(), max_epochs=cfg.max_epochs, shuffle=cfg.shuffle,
        force_origin=cfg.force_origin, rng=cfg.seed, n_msgs=cfg.n_msgs,
    )
    return res, predict(X, res.theta, res.theta0)


@app.command()
def demo(n: int = 200, margin: float = 0.5, max_epochs: int = 200, seed: int = 0):
    setup_logging("WARNING")
    X, y, w_true, b_true = make_separable(n=n, margin=margin, seed=seed)
    for algo in ("perceptron", "pegasos"):
        cfg = TrainConfig(algorithm=algo, max_epochs=max_epochs, shuffle=True, seed=seed, n_msgs=0)
        res, y_hat = _fit_predict(cfg, X, y)
        typer.echo(f"{algo:10s} acc={accuracy(y_hat, y):.3f} separated={res.separated} epochs={res.iterations} best_errors={res.best_errors}")
    typer.echo(f"True w: {w_true} b: {b_true:.3f}")

    Xx, yx = make_xor(n=n // 2, seed=seed)
    for algo, kernel in (("perceptron", "radial"), ("kernel", "radial"), ("kernel", "polynomial")):
        cfg = TrainConfig(algorithm=algo, kernel=kernel, max_epochs=max_epochs, n_msgs=0)
        res, y_hat = _fit_predict(cfg, Xx, yx)
        name = algo if algo != "kernel" else f"kernel/{kernel}"
        typer.echo(f"xor {name:18s} acc={accuracy(y_hat, yx):.3f} separated={res.separated}")


@app.command("train")
def train_csv(
    data: Path = typer.Argument(..., help="CSV file; last column holds -1/+1 labels"),
    config: Optional[Path] = typer.Option(None, help="YAML TrainConfig"),
    algorithm: Optional[str] = None,
    max_epochs: Optional[int] = None,
    seed: Optional[int] = None,
    out: Path = Path("outputs/perceptron/summary.json"),
    skip_header: int = 0,
):
    overrides = {"algorithm": algorithm, "max_epochs": max_epochs, "seed": seed}
    if config is not None:
        cfg = load_config(config, **overrides)
    else:
        cfg = TrainConfig(**{k: v for k, v in overrides.items() if v is not None})
    log = setup_logging(cfg.log_level, cfg.log_file)

    X, y = load_labeled_csv(data, skip_header=skip_header)
    log.info(f"Loaded {X.shape[0]} samples x {X.shape[1]} features from {data}")

    with timed(f"train {cfg.algorithm}", log) as t:
        res, y_hat = _fit_predict(cfg, X, y)
        elapsed = t.elapsed
    acc = accuracy(y_hat, y)
    typer.echo(f"Training accuracy: {acc:.3f} | separated={res.separated} epochs={res.iterations} best_errors={res.best_errors}")
    save_json(out, {
        "data": str(data),
        "config": cfg.to_dict(),
        "convergence": res.record.as_dict(),
        "train_accuracy": acc,
        "elapsed_s": elapsed,
    })
    typer.echo(f"Summary -> {out}")


if __name__ == "__main__":
    app()
