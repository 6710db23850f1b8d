# Shared utilities. Explicit re-exports for a clean public API.

from .io import (
    ensure_dir as ensure_dir,
    load_json as load_json,
    load_labeled_csv as load_labeled_csv,
    load_yaml as load_yaml,
    save_json as save_json,
)
from .logs import setup_logging as setup_logging
from .timers import Timer as Timer, timed as timed

__all__ = [
    "ensure_dir",
    "load_json",
    "load_labeled_csv",
    "load_yaml",
    "save_json",
    "setup_logging",
    "Timer",
    "timed",
]
