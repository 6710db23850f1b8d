from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Tuple

import numpy as np
import yaml


def ensure_dir(path: Path | str) -> Path:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def _to_builtin(obj: Any) -> Any:
    # numpy scalars / arrays show up in run summaries (thetas, counts, accuracies)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"not JSON serializable: {type(obj).__name__}")


def save_json(path: Path | str, payload: Any) -> None:
    p = Path(path)
    ensure_dir(p.parent)
    p.write_text(json.dumps(payload, indent=2, default=_to_builtin))


def load_json(path: Path | str) -> Any:
    return json.loads(Path(path).read_text())


def load_yaml(path: Path | str) -> Any:
    """Parsed YAML document; an empty file gives None."""
    return yaml.safe_load(Path(path).read_text())


def load_labeled_csv(path: Path | str, skip_header: int = 0, delimiter: str = ",") -> Tuple[np.ndarray, np.ndarray]:
    """
    Numeric CSV with the label in the last column. Returns (X (n, d), y (n,)).
    Labels are returned as read; trainers check they are -1/+1.
    """
    raw = np.loadtxt(path, delimiter=delimiter, skiprows=skip_header, ndmin=2)
    if raw.shape[1] < 2:
        raise ValueError(f"{path}: need at least one feature column and a label column")
    return raw[:, :-1], raw[:, -1]
