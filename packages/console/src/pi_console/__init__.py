"""
pi_console — colored and positional terminal writes that leave the
terminal's colors and cursor as they found them, safe across threads.
"""
from .capabilities import PrintAt, PrintAtColor, Write, WriteColor
from .colors import Color, Colors
from .config import VERSION as __version__
from .console import Console
from .driver import AnsiDriver, ConsoleDriver
from .errors import ConsoleDriverError, ConsoleError
from .layout import advance_cursor, char_width, visible_width
from .memory import MemoryDriver
from .state import ConsoleState

__all__ = [
    "AnsiDriver",
    "Color",
    "Colors",
    "Console",
    "ConsoleDriver",
    "ConsoleDriverError",
    "ConsoleError",
    "ConsoleState",
    "MemoryDriver",
    "PrintAt",
    "PrintAtColor",
    "Write",
    "WriteColor",
    "advance_cursor",
    "char_width",
    "visible_width",
]
