"""Tests for pi_console.driver.AnsiDriver"""
import io
import os
from unittest.mock import patch

import pytest

from pi_console.colors import Color, Colors
from pi_console.console import Console
from pi_console.driver import AnsiDriver, ConsoleDriver
from pi_console.errors import ConsoleDriverError


@pytest.fixture(autouse=True)
def _window_env():
    with patch.dict(os.environ, {"COLUMNS": "80", "LINES": "24"}):
        yield


def _driver(**kwargs) -> tuple[AnsiDriver, io.StringIO]:
    stream = io.StringIO()
    return AnsiDriver(stream=stream, **kwargs), stream


class _TtyStream(io.StringIO):
    def fileno(self) -> int:
        return 1


class TestAnsiDriverEscapes:
    def test_is_console_driver(self):
        d, _ = _driver()
        assert isinstance(d, ConsoleDriver)

    def test_default_ambient_colors(self):
        d, _ = _driver()
        assert d.get_foreground() == Color.GRAY
        assert d.get_background() == Color.BLACK

    def test_initial_colors_from_pair(self):
        d, _ = _driver(colors=Colors(Color.GREEN, Color.DARK_BLUE))
        assert d.get_foreground() == Color.GREEN
        assert d.get_background() == Color.DARK_BLUE

    def test_set_foreground(self):
        d, out = _driver()
        d.set_foreground(Color.RED)
        assert out.getvalue() == "\x1b[91m"
        assert d.get_foreground() == Color.RED

    def test_set_background(self):
        d, out = _driver()
        d.set_background(Color.DARK_BLUE)
        assert out.getvalue() == "\x1b[44m"
        assert d.get_background() == Color.DARK_BLUE

    def test_cursor_move_is_one_based(self):
        d, out = _driver()
        d.set_cursor_position(10, 2)
        assert out.getvalue() == "\x1b[3;11H"
        assert d.get_cursor_position() == (10, 2)

    def test_cursor_visibility(self):
        d, out = _driver()
        d.set_cursor_visible(False)
        d.set_cursor_visible(True)
        assert out.getvalue() == "\x1b[?25l\x1b[?25h"
        assert d.get_cursor_visible() is True

    def test_clear_screen(self):
        d, out = _driver()
        d.write_raw("abc")
        d.clear_screen()
        assert out.getvalue().endswith("\x1b[2J\x1b[H")
        assert d.get_cursor_position() == (0, 0)


class TestAnsiDriverShadowCursor:
    def test_write_advances_cursor(self):
        d, out = _driver()
        d.write_raw("hello")
        assert out.getvalue() == "hello"
        assert d.get_cursor_position() == (5, 0)

    def test_newline_advances_row(self):
        d, _ = _driver()
        d.write_raw("hi\nthere")
        assert d.get_cursor_position() == (5, 1)

    def test_out_of_window_move_is_clamped(self):
        d, out = _driver()
        with patch.dict(os.environ, {"COLUMNS": "20", "LINES": "10"}):
            d.set_cursor_position(-4, 99)
        assert d.get_cursor_position() == (0, 9)
        assert out.getvalue() == "\x1b[10;1H"

    def test_empty_write_emits_nothing(self):
        d, out = _driver()
        d.write_raw("")
        assert out.getvalue() == ""


class TestAnsiDriverWindowSize:
    def test_fallback_when_not_a_tty(self):
        d, _ = _driver()
        with patch.dict(os.environ, {"COLUMNS": "100", "LINES": "40"}):
            assert d.get_window_size() == (100, 40)

    def test_default_fallback(self):
        d, _ = _driver()
        with patch.dict(os.environ, {"COLUMNS": "", "LINES": "junk"}):
            assert d.get_window_size() == (80, 24)

    def test_uses_terminal_size(self):
        d = AnsiDriver(stream=_TtyStream())
        with patch("pi_console.driver.os.get_terminal_size", return_value=os.terminal_size((132, 50))) as get_size:
            assert d.get_window_size() == (132, 50)
        get_size.assert_called_once_with(1)


class TestAnsiDriverErrors:
    def test_closed_stream_raises_driver_error(self):
        d, out = _driver()
        out.close()
        with pytest.raises(ConsoleDriverError) as exc_info:
            d.write_raw("x")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_failed_write_leaves_shadow_untouched(self):
        d, out = _driver()
        out.close()
        with pytest.raises(ConsoleDriverError):
            d.set_foreground(Color.RED)
        assert d.get_foreground() == Color.GRAY


class TestAnsiDriverWriteLog:
    def test_write_log_receives_output(self, tmp_path):
        log = tmp_path / "writes.log"
        with patch.dict(os.environ, {"PI_CONSOLE_WRITE_LOG": str(log)}):
            d, _ = _driver()
        d.write_raw("abc")
        d.set_foreground(Color.RED)
        assert log.read_text(encoding="utf-8") == "abc\x1b[91m"

    def test_unwritable_log_is_ignored(self, tmp_path):
        with patch.dict(os.environ, {"PI_CONSOLE_WRITE_LOG": str(tmp_path / "missing" / "writes.log")}):
            d, out = _driver()
        d.write_raw("abc")
        assert out.getvalue() == "abc"


class TestAnsiDriverStartPosition:
    def test_start_position_from_constructor(self):
        d, _ = _driver(column=7, row=3)
        assert d.get_cursor_position() == (7, 3)

    def test_print_at_returns_to_start_position(self):
        d, out = _driver(column=7, row=3)
        Console(d).print_at(0, 0, "x")
        assert d.get_cursor_position() == (7, 3)
        assert out.getvalue().endswith("\x1b[4;8H")


class TestAnsiDriverZeroSize:
    def test_zero_size_falls_back(self):
        d = AnsiDriver(stream=_TtyStream())
        with patch("pi_console.driver.os.get_terminal_size", return_value=os.terminal_size((0, 0))):
            assert d.get_window_size() == (80, 24)

    def test_zero_size_move_never_goes_negative(self):
        d, out = _driver()
        with patch.object(AnsiDriver, "get_window_size", return_value=(0, 0)):
            d.set_cursor_position(5, 5)
        assert d.get_cursor_position() == (0, 0)
        assert out.getvalue() == "\x1b[1;1H"
