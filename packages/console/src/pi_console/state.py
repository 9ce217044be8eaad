"""Snapshot of the terminal's ambient state."""
from __future__ import annotations

from dataclasses import dataclass

from .colors import Color


@dataclass(frozen=True)
class ConsoleState:
    """
    Immutable capture of colors, cursor position and cursor visibility.

    Coordinates are stored verbatim, negative values included; the driver
    decides what to do with them when the snapshot is applied.
    """

    foreground: Color
    background: Color
    column: int
    row: int
    cursor_visible: bool

    @classmethod
    def from_xy(
        cls,
        foreground: Color,
        background: Color,
        x: int,
        y: int,
        cursor_visible: bool,
    ) -> ConsoleState:
        """Build a snapshot from x (column) and y (row)."""
        return cls(foreground, background, column=x, row=y, cursor_visible=cursor_visible)

    @property
    def position(self) -> tuple[int, int]:
        return (self.column, self.row)
