"""The keyboard-controlled element."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .element import FIELD_HEIGHT, FIELD_WIDTH, Element

NO_KEY = -1


@dataclass
class Motion:
    """A key that changes position (0), velocity (1) or acceleration (2).

    A motion without a condition always applies.
    """

    key: int
    axis: int
    physics: int
    distance: float
    condition: Optional[Callable[[Element], bool]] = None

    def applies(self, key: int, element: Element) -> bool:
        """Whether this motion is bound to ``key`` and its condition holds."""
        if self.key != key:
            return False
        return self.condition is None or bool(self.condition(element))


@dataclass
class Interaction:
    """A key that runs a callback with the player."""

    key: int
    callback: Callable[[Element], Any]


class PlayerElement(Element):
    """An element that reads keys from its window each tick."""

    def __init__(
        self,
        window,
        x: float,
        y: float,
        z: float,
        x_v: float = 0.0,
        y_v: float = 0.0,
        z_v: float = 0.0,
        x_a: float = 0.0,
        y_a: float = 0.0,
        z_a: float = 0.0,
    ) -> None:
        super().__init__(window, x, y, z, x_v, y_v, z_v, x_a, y_a, z_a)
        self.keybinds: List[Motion] = []
        self.interactions: List[Interaction] = []

    def add_key_motion(
        self,
        key: int,
        axis: int,
        physics: int,
        difference: float,
        condition: Optional[Callable[[Element], bool]] = None,
    ) -> None:
        """Bind a key to a change of position, velocity or acceleration."""
        self.keybinds.append(Motion(key, axis, physics, difference, condition))

    def add_interaction(self, key: int, callback: Callable[[Element], Any]) -> None:
        """Bind a key to a callback that receives the player."""
        self.interactions.append(Interaction(key, callback))

    def check_keybinds(self, key: int) -> None:
        """Apply the first matching motion; if none applies, run interactions."""
        for motion in self.keybinds:
            if not motion.applies(key, self):
                continue
            if motion.physics == 0:
                target = self.pos[motion.axis] + motion.distance
                limit = FIELD_WIDTH - self.forms[self.cycle].width
                if (motion.axis == 0 and 0 < target < limit) or (
                    motion.axis == 1 and 0 < target < FIELD_HEIGHT
                ):
                    self.pos[motion.axis] = target
            elif motion.physics == 1:
                self.vel[motion.axis] += motion.distance
            elif motion.physics == 2:
                self.acc[motion.axis] += motion.distance
            return
        for interaction in self.interactions:
            if interaction.key == key:
                interaction.callback(self)

    def tick(self) -> None:
        """Handle a pending key, run colliders, then move one step."""
        key = self.window.getch()
        if key != NO_KEY:
            self.check_keybinds(key)
        for collider in list(self.colliders):
            if self.check_collision(collider):
                collider.callback(collider.element)
        self._move()