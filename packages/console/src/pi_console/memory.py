"""
In-memory driver.

Renders onto a fixed-size character grid and records every mutating call,
so output can be inspected without a real terminal.
"""
from __future__ import annotations

from typing import Any

from .colors import Color, Colors
from .driver import ConsoleDriver
from .layout import char_width

TraceEntry = tuple[str, Any]


class MemoryDriver(ConsoleDriver):
    """
    Driver backed by a ``width`` x ``height`` grid of characters.

    Cursor moves are clamped into the window. Text wraps at the right edge
    and scrolls the grid up at the bottom. Wide characters fill their first
    cell and leave the following cell as ``""``.

    ``trace`` lists the mutating calls in order, e.g.
    ``("set_foreground", Color.RED)``, ``("set_cursor_position", (3, 1))``,
    ``("write", "hi")``, ``("clear", None)``.
    """

    def __init__(
        self,
        width: int = 80,
        height: int = 24,
        colors: Colors | None = None,
        column: int = 0,
        row: int = 0,
        cursor_visible: bool = True,
    ) -> None:
        super().__init__()
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        colors = colors or Colors()
        self._foreground = colors.foreground
        self._background = colors.background
        self._column = min(max(column, 0), width - 1)
        self._row = min(max(row, 0), height - 1)
        self._cursor_visible = cursor_visible
        self._grid: list[list[str]] = [self._blank_row() for _ in range(height)]
        self.trace: list[TraceEntry] = []

    def _blank_row(self) -> list[str]:
        return [" "] * self.width

    # ── colors ───────────────────────────────────────────────────────────────

    def get_foreground(self) -> Color:
        return self._foreground

    def get_background(self) -> Color:
        return self._background

    def set_foreground(self, color: Color) -> None:
        self.trace.append(("set_foreground", color))
        self._foreground = color

    def set_background(self, color: Color) -> None:
        self.trace.append(("set_background", color))
        self._background = color

    # ── cursor ───────────────────────────────────────────────────────────────

    def get_cursor_position(self) -> tuple[int, int]:
        return (self._column, self._row)

    def set_cursor_position(self, column: int, row: int) -> None:
        self.trace.append(("set_cursor_position", (column, row)))
        self._column = min(max(column, 0), self.width - 1)
        self._row = min(max(row, 0), self.height - 1)

    def get_cursor_visible(self) -> bool:
        return self._cursor_visible

    def set_cursor_visible(self, visible: bool) -> None:
        self.trace.append(("set_cursor_visible", visible))
        self._cursor_visible = visible

    def get_window_size(self) -> tuple[int, int]:
        return (self.width, self.height)

    # ── output ───────────────────────────────────────────────────────────────

    def _newline(self) -> None:
        self._column = 0
        if self._row == self.height - 1:
            del self._grid[0]
            self._grid.append(self._blank_row())
        else:
            self._row += 1

    def write_raw(self, text: str) -> None:
        self.trace.append(("write", text))
        for ch in text:
            if ch == "\n":
                self._newline()
                continue
            if ch == "\r":
                self._column = 0
                continue
            w = char_width(ch)
            if w == 0 or w > self.width:
                continue
            if self._column + w > self.width:
                self._newline()
            line = self._grid[self._row]
            line[self._column] = ch
            for extra in range(1, w):
                line[self._column + extra] = ""
            self._column += w
            if self._column >= self.width:
                self._newline()

    def clear_screen(self) -> None:
        self.trace.append(("clear", None))
        self._grid = [self._blank_row() for _ in range(self.height)]
        self._column = 0
        self._row = 0

    # ── inspection ───────────────────────────────────────────────────────────

    def line(self, row: int) -> str:
        """Content of *row* with trailing blanks removed."""
        return "".join(self._grid[row]).rstrip()

    def screen_text(self) -> str:
        return "\n".join(self.line(r) for r in range(self.height))
