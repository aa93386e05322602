"""The game loop: elements, the player, the status panel and the screen."""

from __future__ import annotations

import curses
import time
from typing import Any, List, Optional

from .element import Element
from .player import NO_KEY, PlayerElement

ESCAPE = 27
MAX_TICKS = 10000
TICK_DELAY = 0.05


class Model:
    """Holds every element, ticks them in depth order and runs the game."""

    def __init__(self, screen: Any, status: Any, input_window: Any) -> None:
        self.screen = screen
        self.status = status
        self.input = input_window
        self.elements: List[Element] = []
        self.player: Optional[PlayerElement] = None
        self.play = True
        self.score = 0
        screen.display_view()
        status.display()
        self.window = screen.window

    def go(self, max_ticks: int = MAX_TICKS, delay: float = TICK_DELAY) -> None:
        """Tick until the game stops or the tick limit is reached, then wait for a key."""
        ticks = 0
        while ticks < max_ticks and self.play:
            self.tick()
            time.sleep(delay)
            ticks += 1
        self.status.display()
        self.input.nodelay(False)
        self.input.getch()
        self.screen.end_view()

    def tick(self) -> None:
        """Advance one frame: handle escape, redraw, tick elements and adopt spawns."""
        key = self.input.getch()
        if key == ESCAPE:
            self.play = False
            return
        if key != NO_KEY:
            curses.ungetch(key)

        self.screen.clear_view()
        for element in list(self.elements):
            self._advance(element)
        if self.player is not None:
            self._advance(self.player)

    def _advance(self, element: Element) -> None:
        element.tick()
        element.display()
        spawned = element.spawn
        if spawned is not None:
            self._insert(spawned, spawned.position(2))
            element.spawn = None

    def _insert(self, element: Element, depth: float) -> None:
        index = next(
            (i for i, existing in enumerate(self.elements) if depth <= existing.position(2)),
            len(self.elements),
        )
        self.elements.insert(index, element)

    def make_element(self, x: float, y: float, z: float, *args: float) -> Element:
        """Create an element and place it before the first element at least as deep."""
        element = Element(self.window, x, y, z, *args)
        self._insert(element, z)
        return element

    def add_player(self, *args: float) -> PlayerElement:
        """Create the player, replacing any previous one."""
        self.player = PlayerElement(self.window, *args)
        return self.player

    def delete_element(self, element: Element) -> None:
        """Remove an element; unknown elements are ignored."""
        for index, existing in enumerate(self.elements):
            if existing is element:
                del self.elements[index]
                return