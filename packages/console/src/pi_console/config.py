"""
Configuration for the shipped drivers.

Only AnsiDriver reads these; Console itself is configuration-free.
"""
from __future__ import annotations

import os


APP_NAME: str = "pi-console"
VERSION: str = "0.0.1"

ENV_WRITE_LOG: str = "PI_CONSOLE_WRITE_LOG"

DEFAULT_COLUMNS: int = 80
DEFAULT_ROWS: int = 24


def get_write_log_path() -> str:
    """Path that receives a copy of every raw write, or "" when disabled."""
    return os.environ.get(ENV_WRITE_LOG, "")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_fallback_size() -> tuple[int, int]:
    """Window size to use when the stream is not attached to a terminal."""
    return (_env_int("COLUMNS", DEFAULT_COLUMNS), _env_int("LINES", DEFAULT_ROWS))
