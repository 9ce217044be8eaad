"""
Driver boundary — the primitive terminal operations the console builds on.

Provides:
- ConsoleDriver: abstract base class (interface) plus the shared lock
- AnsiDriver: real driver writing ANSI escape sequences to a text stream
"""
from __future__ import annotations

import logging
import os
import sys
import threading
from abc import ABC, abstractmethod
from typing import TextIO

from .colors import Color, Colors
from .config import get_fallback_size, get_write_log_path
from .errors import ConsoleDriverError
from .layout import advance_cursor

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# ConsoleDriver ABC
# ─────────────────────────────────────────────────────────────────────────────

class ConsoleDriver(ABC):
    """
    Primitive get/set operations on the terminal's ambient state.

    Each call is atomic on its own; nothing is atomic across calls. The
    ``lock`` is the single mutual-exclusion domain for everything that runs
    a capture/mutate/emit/restore sequence against this driver, so every
    Console bound to the same driver contends on it.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()

    @abstractmethod
    def get_foreground(self) -> Color:
        """Current foreground color."""

    @abstractmethod
    def get_background(self) -> Color:
        """Current background color."""

    @abstractmethod
    def set_foreground(self, color: Color) -> None:
        """Set the foreground color for subsequent output."""

    @abstractmethod
    def set_background(self, color: Color) -> None:
        """Set the background color for subsequent output."""

    @abstractmethod
    def get_cursor_position(self) -> tuple[int, int]:
        """Cursor position as (column, row), zero-based."""

    @abstractmethod
    def set_cursor_position(self, column: int, row: int) -> None:
        """Move the cursor. Out-of-window positions follow the driver's policy."""

    @abstractmethod
    def get_cursor_visible(self) -> bool:
        """Whether the cursor is shown."""

    @abstractmethod
    def set_cursor_visible(self, visible: bool) -> None:
        """Show or hide the cursor."""

    @abstractmethod
    def get_window_size(self) -> tuple[int, int]:
        """Window size as (width, height) in cells."""

    @abstractmethod
    def write_raw(self, text: str) -> None:
        """Emit text at the cursor using the current colors."""

    @abstractmethod
    def clear_screen(self) -> None:
        """Clear the entire screen and move the cursor to (0, 0)."""


# ─────────────────────────────────────────────────────────────────────────────
# AnsiDriver
# ─────────────────────────────────────────────────────────────────────────────

class AnsiDriver(ConsoleDriver):
    """
    Driver for ANSI terminals over a text stream (stdout by default).

    ANSI terminals cannot be queried synchronously for colors or cursor
    position, so the driver keeps a shadow copy of the ambient state and
    updates it after every successful emission. Pass *column* and *row* when
    the cursor is not at the home position on start, or call clear_screen()
    first.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        colors: Colors | None = None,
        column: int = 0,
        row: int = 0,
        cursor_visible: bool = True,
    ) -> None:
        super().__init__()
        self._stream = stream if stream is not None else sys.stdout
        colors = colors or Colors.white_on_black()
        self._foreground = colors.foreground
        self._background = colors.background
        self._column = max(column, 0)
        self._row = max(row, 0)
        self._cursor_visible = cursor_visible
        self._write_log_path = get_write_log_path()

    def _emit(self, data: str) -> None:
        try:
            self._stream.write(data)
            self._stream.flush()
        except (OSError, ValueError) as exc:
            raise ConsoleDriverError(f"terminal write failed: {exc}") from exc
        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError as exc:
                logger.debug("Could not append to write log %s: %s", self._write_log_path, exc)

    def get_foreground(self) -> Color:
        return self._foreground

    def get_background(self) -> Color:
        return self._background

    def set_foreground(self, color: Color) -> None:
        self._emit(f"\x1b[{color.fg_code}m")
        self._foreground = color

    def set_background(self, color: Color) -> None:
        self._emit(f"\x1b[{color.bg_code}m")
        self._background = color

    def get_cursor_position(self) -> tuple[int, int]:
        return (self._column, self._row)

    def set_cursor_position(self, column: int, row: int) -> None:
        # Terminals clamp CUP to the window; keep the shadow in step with that.
        width, height = self.get_window_size()
        clamped_column = min(max(column, 0), max(width - 1, 0))
        clamped_row = min(max(row, 0), max(height - 1, 0))
        if (clamped_column, clamped_row) != (column, row):
            logger.debug("Cursor move to (%d, %d) clamped to (%d, %d)", column, row, clamped_column, clamped_row)
        self._emit(f"\x1b[{clamped_row + 1};{clamped_column + 1}H")
        self._column = clamped_column
        self._row = clamped_row

    def get_cursor_visible(self) -> bool:
        return self._cursor_visible

    def set_cursor_visible(self, visible: bool) -> None:
        self._emit("\x1b[?25h" if visible else "\x1b[?25l")
        self._cursor_visible = visible

    def get_window_size(self) -> tuple[int, int]:
        try:
            size = os.get_terminal_size(self._stream.fileno())
        except (AttributeError, OSError, ValueError):
            return get_fallback_size()
        if size.columns <= 0 or size.lines <= 0:
            # Some ptys report 0x0 before the window is sized.
            return get_fallback_size()
        return (size.columns, size.lines)

    def write_raw(self, text: str) -> None:
        if not text:
            return
        self._emit(text)
        width, height = self.get_window_size()
        self._column, self._row = advance_cursor(self._column, self._row, text, width, height)

    def clear_screen(self) -> None:
        self._emit("\x1b[2J\x1b[H")
        self._column = 0
        self._row = 0
