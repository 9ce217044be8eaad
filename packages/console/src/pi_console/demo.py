"""
Demo CLI: several threads draw progress bars on one shared terminal.

Each worker repaints its own row with print_at/print_at_color while the
others do the same, so broken locking shows up as misplaced or miscolored
cells.
"""
from __future__ import annotations

import threading
import time

import typer

from .colors import Color
from .config import APP_NAME
from .console import Console
from .driver import AnsiDriver

_APP = typer.Typer(name=f"{APP_NAME}-demo", help="Concurrent progress bars on one terminal")

_BAR_COLORS = [Color.GREEN, Color.CYAN, Color.YELLOW, Color.MAGENTA, Color.BLUE, Color.RED]
_LABEL_WIDTH = 10


def render_bar(console: Console, row: int, label: str, done: int, total: int, color: Color) -> None:
    """Paint one progress bar on *row* as a single unit."""
    bar_width = max(console.window_width - _LABEL_WIDTH - 6, 10)
    filled = bar_width * done // total if total else bar_width
    with console.lock:
        console.print_at(0, row, "{0:<{1}}", label[:_LABEL_WIDTH - 1], _LABEL_WIDTH)
        if filled:
            console.print_at_color(color, _LABEL_WIDTH, row, "#" * filled)
        if filled < bar_width:
            console.print_at_color(Color.DARK_GRAY, _LABEL_WIDTH + filled, row, "." * (bar_width - filled))
        console.print_at(_LABEL_WIDTH + bar_width + 1, row, "{0:3d}%", 100 * done // total if total else 100)


def run_demo(console: Console, workers: int, steps: int, delay: float) -> None:
    # Header and "done" lines need one row each; the rest is for bars.
    workers = min(workers, max(console.window_height - 2, 1))
    console.write_line(Color.WHITE, "pi-console demo: {0} workers x {1} steps", workers, steps)
    # Reserve the bar rows up front so the screen scrolls before any bar is drawn.
    console.write("\n" * workers)
    _, bottom_row = console.capture_state().position
    first_row = bottom_row - workers

    def work(index: int) -> None:
        color = _BAR_COLORS[index % len(_BAR_COLORS)]
        for done in range(steps + 1):
            render_bar(console, first_row + index, f"worker {index + 1}", done, steps, color)
            if delay:
                time.sleep(delay)

    threads = [threading.Thread(target=work, args=(i,), daemon=True) for i in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    console.write_line(Color.GREEN, "done")


@_APP.command()
def demo(
    workers: int = typer.Option(4, "--workers", "-w", min=1, help="Number of concurrent bars"),
    steps: int = typer.Option(20, "--steps", "-s", min=1, help="Updates per bar"),
    delay: float = typer.Option(0.05, "--delay", "-d", min=0.0, help="Seconds between updates"),
    no_clear: bool = typer.Option(False, "--no-clear", help="Draw below the current output instead of clearing"),
) -> None:
    """Render concurrent progress bars."""
    console = Console(AnsiDriver())
    if not no_clear:
        console.clear()
    run_demo(console, workers, steps, delay)


def main() -> None:
    _APP()


if __name__ == "__main__":
    main()
