"""
Capability contracts.

Callers depend on the narrow protocol they need; Console implements all of
them over one driver and one lock.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from .colors import Color


@runtime_checkable
class WriteColor(Protocol):
    """
    Write in a given foreground color, putting the previous colors back
    afterwards. Implementations must be thread-safe.
    """

    def write(self, color: Color, text: object, *args: object) -> None:
        ...

    def write_line(self, color: Color, text: object, *args: object) -> None:
        ...


@runtime_checkable
class PrintAtColor(Protocol):
    def print_at_color(
        self,
        foreground: Color,
        x: int,
        y: int,
        text: object,
        background: Color | None = None,
    ) -> None:
        ...


@runtime_checkable
class PrintAt(PrintAtColor, Protocol):
    """Write at absolute (x, y) without moving the caller's cursor."""

    def print_at(self, x: int, y: int, text: object, *args: object) -> None:
        ...

    @property
    def window_width(self) -> int:
        ...

    @property
    def window_height(self) -> int:
        ...


@runtime_checkable
class Write(Protocol):
    def write(self, text: object, *args: object) -> None:
        ...

    def write_line(self, text: object, *args: object) -> None:
        ...

    def clear(self) -> None:
        ...
