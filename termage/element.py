"""Screen elements: shapes, simple physics, collisions and drawing."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Callable, Iterable, List, Optional, Protocol

# Drawable area inside the bordered playing field (exclusive bounds).
FIELD_WIDTH = 79
FIELD_HEIGHT = 21


class Window(Protocol):
    """The part of a curses window an element draws with."""

    def addch(self, y: int, x: int, ch: str) -> Any: ...

    def refresh(self) -> Any: ...


class Shape(Enum):
    """How a form was built."""

    SINGLE = "single"
    RECTANGLE = "rectangle"
    BITMAP = "bitmap"


class Direction(IntEnum):
    """Side on which one element touches another."""

    ALL = 0
    NONE = 1
    LEFT = 2
    RIGHT = 3
    TOP = 4
    BOTTOM = 5


@dataclass(frozen=True)
class CharMap:
    """A character at an offset from the element's position."""

    x: float
    y: float
    c: str


@dataclass
class Form:
    """One look of an element: its characters and its extent."""

    shape: Shape
    chars: List[CharMap] = field(default_factory=list)
    width: int = 0
    height: int = 0


@dataclass
class Collider:
    """A callback run when this element touches another on a given side."""

    element: "Element"
    callback: Callable[["Element"], Any]
    collided: bool = False
    direction: Direction = Direction.ALL


class ElementView:
    """Draws an element's current form on a window."""

    def __init__(self, window: Window, element: "Element") -> None:
        self.window = window
        self.element = element

    def display_view(self) -> None:
        """Draw every character of the current form and refresh."""
        element = self.element
        form = element.forms[element.cycle]
        for ch in form.chars:
            self.place_char(element.position(0) + ch.x, element.position(1) + ch.y, ch.c)
        self.window.refresh()

    def place_char(self, x: float, y: float, c: str) -> None:
        """Draw a character if it lies inside the playing field."""
        x, y = int(x), int(y)
        if 0 < x < FIELD_WIDTH and 0 < y < FIELD_HEIGHT:
            self.window.addch(y, x, c)


class Element:
    """A moving, animated thing on the playing field."""

    def __init__(
        self,
        window: Window,
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
        self.window = window
        self.pos: List[float] = [x, y, z]
        self.vel: List[float] = [x_v, y_v, z_v]
        self.acc: List[float] = [x_a, y_a, z_a]
        self.is_cyclic = False
        self.cycle = 0
        self.ticker = 0
        self.forms: List[Form] = [Form(Shape.SINGLE, [CharMap(0, 0, "X")], 1, 1)]
        self.colliders: List[Collider] = []
        self.current_collision = Direction.NONE
        self.spawn: Optional[Element] = None
        self.view = ElementView(window, self)

    def display(self) -> None:
        """Draw the element."""
        self.view.display_view()

    def position(self, axis: int) -> int:
        """Whole-cell position on an axis (0 x, 1 y, 2 z), truncated."""
        return int(self.pos[axis])

    def dimension(self, axis: int) -> int:
        """Extent of the current form along x (axis 0) or y (any other)."""
        form = self.forms[self.cycle]
        return form.width if axis == 0 else form.height

    def set_char(self, c: str) -> None:
        """Replace all forms with a single character."""
        self.cycle = 0
        self.forms.clear()
        self.add_char(c)
        self.is_cyclic = False

    def set_rectangle(self, c: str, width: int, height: int) -> None:
        """Replace all forms with a filled rectangle."""
        self.cycle = 0
        self.forms.clear()
        self.add_rectangle(c, width, height)
        self.is_cyclic = False

    def set_bitmap(self, chars: Iterable[CharMap]) -> None:
        """Replace all forms with a bitmap."""
        self.cycle = 0
        self.forms.clear()
        self.add_bitmap(chars)
        self.is_cyclic = False

    def add_char(self, c: str) -> None:
        """Append a single-character form to the animation cycle."""
        self.is_cyclic = True
        self.forms.append(Form(Shape.SINGLE, [CharMap(0, 0, c)], 1, 1))

    def add_rectangle(self, c: str, width: int, height: int) -> None:
        """Append a filled rectangle form to the animation cycle."""
        self.is_cyclic = True
        chars = [CharMap(i, j, c) for i in range(width) for j in range(height)]
        self.forms.append(Form(Shape.RECTANGLE, chars, width, height))

    def add_bitmap(self, chars: Iterable[CharMap]) -> None:
        """Append a bitmap form; its extent is its largest offsets."""
        self.is_cyclic = True
        chars = list(chars)
        width = max((int(ch.x) for ch in chars), default=0)
        height = max((int(ch.y) for ch in chars), default=0)
        self.forms.append(Form(Shape.BITMAP, chars, max(width, 0), max(height, 0)))

    def _advance_cycle(self) -> None:
        self.ticker = (self.ticker + 1) % 3
        if self.is_cyclic and self.ticker == 0:
            self.cycle = 0 if self.cycle == len(self.forms) - 1 else self.cycle + 1

    def _move(self) -> None:
        for axis in range(3):
            self.pos[axis] += self.vel[axis]
            self.vel[axis] += self.acc[axis]

    def tick(self) -> None:
        """Animate, run matching colliders, then move one step."""
        self._advance_cycle()
        for collider in list(self.colliders):
            side = self.check_collision(collider)
            if side == collider.direction or (
                side != Direction.NONE and collider.direction == Direction.ALL
            ):
                collider.callback(collider.element)
        self._move()

    def add_collider(
        self,
        other: "Element",
        callback: Callable[["Element"], Any],
        direction: Direction,
    ) -> None:
        """Run ``callback(other)`` when touching ``other`` on ``direction``."""
        self.colliders.append(Collider(other, callback, False, direction))

    def check_collision(self, collider: Collider) -> Direction:
        """Return the side on which this element touches the collider's element."""
        other = collider.element
        self.current_collision = Direction.NONE
        if self.pos[2] != other.position(2):
            return self.current_collision
        ox, oy = other.position(0), other.position(1)
        ow, oh = other.dimension(0), other.dimension(1)
        sw, sh = self.dimension(0), self.dimension(1)
        x, y = self.pos[0], self.pos[1]
        if not (x + sw >= ox and x <= ox + ow):
            return self.current_collision
        if not (y + sh >= oy and y <= oy + oh):
            return self.current_collision
        collider.collided = True
        fx, fy = math.floor(x), math.floor(y)
        if fx + sw == ox:
            self.current_collision = Direction.RIGHT
        elif fx == ox + ow:
            self.current_collision = Direction.LEFT
        elif fy + sh == oy:
            self.current_collision = Direction.BOTTOM
        elif fy == oy + oh:
            self.current_collision = Direction.TOP
        else:
            self.current_collision = Direction.ALL
        return self.current_collision

    def spawner(
        self,
        x: float,
        y: float,
        z: float,
        x_v: float = 0.0,
        y_v: float = 0.0,
        z_v: float = 0.0,
        x_a: float = 0.0,
        y_a: float = 0.0,
        z_a: float = 0.0,
    ) -> "Element":
        """Create a new element to be picked up by the model on this tick."""
        self.spawn = Element(self.window, x, y, z, x_v, y_v, z_v, x_a, y_a, z_a)
        return self.spawn

    def remove_colliders(self) -> None:
        """Drop every collider."""
        self.colliders = []

    def kill(self) -> None:
        """Blank the element, drop its colliders and park it out of play."""
        self.set_bitmap([])
        self.remove_colliders()
        self.pos = [0.0, 0.0, -100.0]
        self.vel = [0.0, 0.0, 0.0]
        self.acc = [0.0, 0.0, 0.0]