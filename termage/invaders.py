"""Space Invaders: shoot the descending aliens before they reach the ground."""

from __future__ import annotations

import argparse
import curses
import sys
from typing import Callable, List, Optional, Sequence

from .element import CharMap, Direction, Element
from .model import Model
from .player import PlayerElement
from .screen import MainScreen
from .status import HEIGHT as STATUS_HEIGHT
from .status import WIDTH as STATUS_WIDTH
from .status import Status

PLAYER_SHAPE = [
    CharMap(0, 0, "/"),
    CharMap(1, 0, "\\"),
    CharMap(0, 1, "="),
    CharMap(1, 1, "="),
]

ALIEN_OPEN = [
    CharMap(1, 0, "^"),
    CharMap(2, 0, "^"),
    CharMap(0, 1, "/"),
    CharMap(3, 1, "\\"),
    CharMap(1, 1, "o"),
    CharMap(2, 1, "o"),
]

ALIEN_BLINK = [
    CharMap(1, 0, "^"),
    CharMap(2, 0, "^"),
    CharMap(0, 1, "/"),
    CharMap(3, 1, "\\"),
    CharMap(1, 1, "-"),
    CharMap(2, 1, "-"),
]

DEPTH = -1


def _end_game(model: Model, headline: str) -> None:
    model.play = False
    model.status.change_line(0, headline)
    model.status.change_line(1, "SCORE:")
    model.status.change_line(2, str(model.score))


def _ender(model: Model, headline: str) -> Callable[[Element], None]:
    def callback(_: Element) -> None:
        _end_game(model, headline)

    return callback


def _bounce(element: Element) -> None:
    element.vel[0] *= -1


def _new_alien(
    model: Model, player: PlayerElement, x: float, y: float, shift: float, fall: float
) -> Element:
    alien = model.make_element(x, y, DEPTH, shift, fall)
    alien.set_bitmap(ALIEN_OPEN)
    for _ in range(5):
        alien.add_bitmap(ALIEN_OPEN)
    alien.add_bitmap(ALIEN_BLINK)

    def caught(target: Element) -> None:
        target.set_rectangle("X", 2, 2)
        _end_game(model, "You died! Press any key to leave.")

    alien.add_collider(player, caught, Direction.ALL)
    return alien


def _hit(model: Model, shot: Element) -> Callable[[Element], None]:
    def callback(target: Element) -> None:
        if shot.position(2) > -50:
            model.score += 1
        shot.kill()
        target.kill()

    return callback


def build(model: Model) -> PlayerElement:
    """Populate the model with the player, the alien waves and the borders."""
    model.score = 0
    model.status.change_line(0, "Welcome to Space Invaders!")
    model.status.change_line(1, "Press space to shoot, and L/R to control your player.")
    model.status.change_line(2, "Don't let the aliens get to you!")

    player = model.add_player(40, 19, DEPTH)
    player.set_bitmap(PLAYER_SHAPE)

    early_waves = (
        [(20 * i, 3, -0.1, 0.03) for i in range(1, 4)]
        + [(20 * i - 10, -5, 0, 0.03) for i in range(1, 4)]
        + [(20 * i, -7, 0.1, 0.05) for i in range(1, 4)]
        + [(20 * i - 15, -15, 0, 0.05) for i in range(1, 5)]
    )
    aliens: List[Element] = [
        _new_alien(model, player, x, y, shift, fall) for x, y, shift, fall in early_waves
    ]

    # An invisible marker trailing the last wave: when it lands, the player has won.
    marker = model.make_element(20, -15, DEPTH, 0, 0.05)
    marker.set_char(" ")

    aliens.extend(
        _new_alien(model, player, 20 * i - 13, -17, 0, 0.05) for i in range(1, 6)
    )

    bottom = model.make_element(1, 20, DEPTH)
    bottom.set_rectangle(" ", 78, 1)
    for alien in aliens:
        bottom.add_collider(alien, _ender(model, "You lost! Press any key to leave."), Direction.TOP)
    bottom.add_collider(marker, _ender(model, "You win! Press any key to leave."), Direction.TOP)

    for wall_x in (78, 0):
        wall = model.make_element(wall_x, 1, DEPTH)
        wall.set_rectangle(" ", 1, 22)
        for alien in aliens:
            wall.add_collider(alien, _bounce, Direction.ALL)

    def shoot(shooter: Element) -> None:
        shot = shooter.spawner(shooter.position(0), shooter.position(1), DEPTH, 0, -0.5)
        shot.set_char("|")
        for alien in aliens:
            shot.add_collider(alien, _hit(model, shot), Direction.ALL)

    player.add_interaction(ord(" "), shoot)
    player.add_key_motion(curses.KEY_LEFT, 0, 0, -1)
    player.add_key_motion(curses.KEY_RIGHT, 0, 0, 1)
    return player


def _session(stdscr) -> None:
    curses.raw()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen = MainScreen(stdscr, curses.newwin)
    status = Status(curses.newwin(STATUS_HEIGHT, STATUS_WIDTH, 23, 10))
    model = Model(screen, status, stdscr)
    build(model)
    model.go()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play Space Invaders in the terminal."""
    parser = argparse.ArgumentParser(
        prog="termage-invaders",
        description="Shoot the aliens with space; move with the left and right keys; Esc quits.",
    )
    parser.parse_args(argv)
    try:
        curses.wrapper(_session)
    except curses.error as exc:
        print(f"termage-invaders: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())