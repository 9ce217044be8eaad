"""
Console — colored, positional and plain writes over one ConsoleDriver.

Every write that changes colors or moves the cursor captures the ambient
state first and puts it back before returning, on success and on failure.
The capture/mutate/emit/restore sequence runs under the driver's lock, so
concurrent writers never see each other's temporary colors or cursor.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from .colors import Color, Colors
from .driver import ConsoleDriver
from .state import ConsoleState

logger = logging.getLogger(__name__)


def _format(text: object, args: tuple[object, ...]) -> str:
    """Apply str.format only when arguments are given; braces are literal otherwise."""
    text = text if isinstance(text, str) else str(text)
    return text.format(*args) if args else text


def _split_color(first: object, rest: tuple[object, ...]) -> tuple[Color | None, str]:
    if isinstance(first, Color):
        if not rest:
            raise TypeError("a color must be followed by the text to write")
        return first, _format(rest[0], rest[1:])
    return None, _format(first, rest)


class Console:
    """
    Implements WriteColor, PrintAt, PrintAtColor and Write.

    Consoles created over the same driver share the driver's lock. Hold
    ``console.lock`` to make several calls appear as one unit to other
    writers; the lock is re-entrant.
    """

    def __init__(self, driver: ConsoleDriver) -> None:
        self._driver = driver

    @property
    def driver(self) -> ConsoleDriver:
        return self._driver

    @property
    def lock(self):
        return self._driver.lock

    # ─────────────────────────────────────────────────────────────────────
    # State capture / restore
    # ─────────────────────────────────────────────────────────────────────

    def capture_state(self) -> ConsoleState:
        """Snapshot the ambient colors, cursor position and cursor visibility."""
        with self.lock:
            return self._capture()

    def _capture(self) -> ConsoleState:
        d = self._driver
        column, row = d.get_cursor_position()
        return ConsoleState(d.get_foreground(), d.get_background(), column, row, d.get_cursor_visible())

    @staticmethod
    def _attempt_all(steps: list[Callable[[], None]]) -> None:
        """Run every step even if some fail, then raise the first failure."""
        first_error: Exception | None = None
        for step in steps:
            try:
                step()
            except Exception as exc:
                if first_error is None:
                    first_error = exc
                else:
                    logger.warning("Another console restore step failed", exc_info=True)
        if first_error is not None:
            raise first_error

    def _color_steps(self, colors: Colors) -> list[Callable[[], None]]:
        d = self._driver

        def foreground() -> None:
            if d.get_foreground() != colors.foreground:
                d.set_foreground(colors.foreground)

        def background() -> None:
            if d.get_background() != colors.background:
                d.set_background(colors.background)

        return [foreground, background]

    def _restore_colors(self, colors: Colors) -> None:
        self._attempt_all(self._color_steps(colors))

    def _restore(self, state: ConsoleState) -> None:
        d = self._driver

        def cursor() -> None:
            if d.get_cursor_position() != state.position:
                d.set_cursor_position(state.column, state.row)

        def visibility() -> None:
            if d.get_cursor_visible() != state.cursor_visible:
                d.set_cursor_visible(state.cursor_visible)

        colors = self._color_steps(Colors(state.foreground, state.background))
        self._attempt_all([cursor, *colors, visibility])

    @contextmanager
    def _restoring(self, restore: Callable[[], None]) -> Iterator[None]:
        """
        Run *restore* when the block exits. If the block failed, its error
        wins and a failing restore is only logged.
        """
        try:
            yield
        except BaseException:
            try:
                restore()
            except Exception:
                logger.warning("Could not restore console state after a failed write", exc_info=True)
            raise
        restore()

    # ─────────────────────────────────────────────────────────────────────
    # WriteColor / Write
    # ─────────────────────────────────────────────────────────────────────

    def _write_color(self, color: Color, text: str) -> None:
        d = self._driver
        with self.lock:
            saved = Colors(d.get_foreground(), d.get_background())
            with self._restoring(lambda: self._restore_colors(saved)):
                d.set_foreground(color)
                d.write_raw(text)

    def _write_plain(self, text: str) -> None:
        with self.lock:
            self._driver.write_raw(text)

    def write(self, color_or_text: object, *args: object) -> None:
        """
        ``write(color, text, *args)`` writes in *color* and restores the
        previous colors. ``write(text, *args)`` writes with the current colors.
        With args, text is a ``str.format`` template.
        """
        color, text = _split_color(color_or_text, args)
        if color is None:
            self._write_plain(text)
        else:
            self._write_color(color, text)

    def write_line(self, color_or_text: object, *args: object) -> None:
        """Like write(), followed by a line terminator."""
        color, text = _split_color(color_or_text, args)
        if color is None:
            self._write_plain(text + "\n")
        else:
            self._write_color(color, text + "\n")

    def clear(self) -> None:
        with self.lock:
            self._driver.clear_screen()

    # ─────────────────────────────────────────────────────────────────────
    # PrintAt / PrintAtColor
    # ─────────────────────────────────────────────────────────────────────

    def _print_at(
        self,
        x: int,
        y: int,
        text: str,
        foreground: Color | None,
        background: Color | None,
    ) -> None:
        d = self._driver
        with self.lock:
            state = self._capture()
            with self._restoring(lambda: self._restore(state)):
                d.set_cursor_position(x, y)
                if foreground is not None:
                    d.set_foreground(foreground)
                if background is not None:
                    d.set_background(background)
                d.write_raw(text)

    def print_at(self, x: int, y: int, text: object, *args: object) -> None:
        """Write *text* (a template when args are given) at column x, row y."""
        self._print_at(x, y, _format(text, args), None, None)

    def print_at_color(
        self,
        foreground: Color,
        x: int,
        y: int,
        text: object,
        background: Color | None = None,
    ) -> None:
        """Write at (x, y) in *foreground*, and *background* when given."""
        self._print_at(x, y, _format(text, ()), foreground, background)

    @property
    def window_width(self) -> int:
        return self._driver.get_window_size()[0]

    @property
    def window_height(self) -> int:
        return self._driver.get_window_size()[1]
