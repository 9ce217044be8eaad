"""
Display-width helpers.

Provides:
- char_width(): terminal columns taken by one character
- visible_width(): terminal columns taken by a string
- advance_cursor(): where the cursor ends up after emitting text
"""
from __future__ import annotations

from wcwidth import wcwidth


def char_width(ch: str) -> int:
    """Columns occupied by *ch*. Control and non-printable characters take 0."""
    w = wcwidth(ch)
    return w if w > 0 else 0


def visible_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def advance_cursor(
    column: int,
    row: int,
    text: str,
    width: int,
    height: int,
) -> tuple[int, int]:
    """
    Return the (column, row) reached after writing *text* from (column, row).

    ``\\n`` moves to the start of the next row and ``\\r`` to the start of the
    current one. Text wraps at *width*; rows past the bottom stay on the last
    row, as the screen scrolls.
    """
    last_row = max(height - 1, 0)
    for ch in text:
        if ch == "\n":
            column = 0
            row += 1
        elif ch == "\r":
            column = 0
        else:
            w = char_width(ch)
            if w == 0:
                continue
            if column + w > width:
                column = 0
                row += 1
            column += w
            if column >= width:
                column = 0
                row += 1
        if row > last_row:
            row = last_row
    return (column, row)
