"""
Color palette and color pairs.

Provides:
- Color: the conventional 16-color terminal palette
- Colors: immutable foreground/background pair with named presets
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """16-color terminal palette. Values are the ANSI SGR foreground codes."""

    BLACK = 30
    DARK_RED = 31
    DARK_GREEN = 32
    DARK_YELLOW = 33
    DARK_BLUE = 34
    DARK_MAGENTA = 35
    DARK_CYAN = 36
    GRAY = 37
    DARK_GRAY = 90
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    WHITE = 97

    @property
    def fg_code(self) -> int:
        return self.value

    @property
    def bg_code(self) -> int:
        return self.value + 10


@dataclass(frozen=True)
class Colors:
    """A foreground/background pair. Defaults to white on black."""

    foreground: Color = Color.WHITE
    background: Color = Color.BLACK

    @staticmethod
    def white_on_black() -> Colors:
        return Colors(Color.GRAY, Color.BLACK)

    @staticmethod
    def black_on_white() -> Colors:
        return Colors(Color.BLACK, Color.GRAY)
