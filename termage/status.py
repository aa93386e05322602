"""The three-line status panel below the playing field."""

from __future__ import annotations

from typing import Any, List, Protocol

LINES = 3
WIDTH = 80
HEIGHT = 5


class StatusWindow(Protocol):
    """The part of a curses window the status panel draws with."""

    def addstr(self, y: int, x: int, text: str) -> Any: ...

    def addch(self, y: int, x: int, ch: str) -> Any: ...

    def refresh(self) -> Any: ...


class StatusView:
    """Draws a status's lines on its window."""

    def __init__(self, status: "Status", window: StatusWindow) -> None:
        self.status = status
        self.window = window

    def display_view(self) -> None:
        """Write every line and refresh."""
        for index in range(LINES):
            self.window.addstr(index, 1, self.status.get_line(index))
        self.window.refresh()

    def update_view(self) -> None:
        """Blank and rewrite every line, then refresh."""
        for index in range(LINES):
            self.clear_line(index)
            self.window.addstr(index, 1, self.status.get_line(index))
        self.window.refresh()

    def clear_line(self, line: int) -> None:
        """Overwrite one line's inner cells with spaces."""
        for column in range(1, WIDTH - 1):
            self.window.addch(line, column, " ")


class Status:
    """Three lines of text shown to the player."""

    def __init__(self, window: StatusWindow) -> None:
        self._lines: List[str] = [""] * LINES
        self.view = StatusView(self, window)

    @staticmethod
    def _check(index: int) -> None:
        if not 0 <= index < LINES:
            raise IndexError(f"status line {index} out of range 0..{LINES - 1}")

    def change_line(self, index: int, text: str) -> None:
        """Replace a line and redraw the panel."""
        self._check(index)
        self._lines[index] = text
        self.view.update_view()

    def get_line(self, index: int) -> str:
        """Return a line's text."""
        self._check(index)
        return self._lines[index]

    def display(self) -> None:
        """Draw the panel."""
        self.view.display_view()