"""Exceptions raised by pi_console."""
from __future__ import annotations


class ConsoleError(Exception):
    """Base class for pi_console errors."""


class ConsoleDriverError(ConsoleError):
    """The underlying terminal device failed (closed stream, I/O error, ...)."""
