from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .io import ensure_dir

FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optional file) handlers to the package logger.
    Trainers log to children of "perceptrons" and never add handlers themselves.
    """
    log = logging.getLogger("perceptrons")
    lvl = getattr(logging, level.upper(), logging.INFO)
    log.setLevel(lvl)
    # Avoid adding multiple handlers on repeated runs
    if not log.handlers:
        fmt = logging.Formatter(FORMAT)
        ch = logging.StreamHandler()
        ch.setFormatter(fmt)
        log.addHandler(ch)
        if log_file:
            ensure_dir(Path(log_file).parent)
            fh = logging.FileHandler(log_file)
            fh.setFormatter(fmt)
            log.addHandler(fh)
    for h in log.handlers:
        h.setLevel(lvl)
    return log
