"""The bordered playing field window."""

from __future__ import annotations

from typing import Any, Callable, Optional

WIDTH = 80
HEIGHT = 22
TOP = 1
LEFT = 10


class MainScreen:
    """Owns the boxed window that elements are drawn on."""

    def __init__(self, stdscr: Any, window_factory: Callable[[int, int, int, int], Any]) -> None:
        self.stdscr = stdscr
        self.window_factory = window_factory
        self.window: Optional[Any] = None

    def display_view(self) -> None:
        """Set up non-blocking key input, create the field window and draw its border."""
        self.stdscr.keypad(True)
        self.stdscr.nodelay(True)
        window = self.window_factory(HEIGHT, WIDTH, TOP, LEFT)
        window.keypad(True)
        window.nodelay(True)
        self.stdscr.refresh()
        window.box()
        window.refresh()
        self.window = window

    def end_view(self) -> None:
        """Release the field window and return the standard screen to plain key input."""
        self.stdscr.keypad(False)
        self.window = None

    def clear_view(self) -> None:
        """Blank everything inside the border and refresh."""
        if self.window is None:
            raise RuntimeError("screen is not displayed")
        for row in range(1, HEIGHT - 1):
            for column in range(1, WIDTH - 1):
                self.window.addch(row, column, " ")
        self.window.refresh()