"""Geometry Dash: jump over spikes and onto platforms scrolling towards you."""

from __future__ import annotations

import argparse
import curses
import sys
from typing import Iterable, List, Optional, Sequence

from .element import CharMap, Direction, Element
from .model import Model
from .player import PlayerElement
from .screen import MainScreen
from .status import HEIGHT as STATUS_HEIGHT
from .status import WIDTH as STATUS_WIDTH
from .status import Status

SCROLL = -0.5
DIED = "You died! Press any key to leave."
WON = "You win! Press any key to leave."

SPIKE = [
    CharMap(0, 1, "/"),
    CharMap(2, 1, "\\"),
    CharMap(1, 0, "^"),
]

BOOST_OPEN = [
    CharMap(2, 0, "|"),
    CharMap(0, 1, ">"),
    CharMap(2, 1, "O"),
    CharMap(4, 1, "<"),
    CharMap(2, 2, "|"),
]

BOOST_SPIN = [
    CharMap(1, 0, "^"),
    CharMap(0, 1, "-"),
    CharMap(2, 1, "-"),
    CharMap(4, 1, "-"),
    CharMap(1, 2, "v"),
]

STARS = [(10, 10), (50, 15), (30, 5), (46, 9), (52, 3), (27, 13), (4, 2), (2, 18), (72, 15), (68, 8)]


def _land(element: Element) -> None:
    element.vel[1] = 0


def _spike(model: Model, player: PlayerElement, x: float, y: float) -> Element:
    spike = model.make_element(x, y, 0, SCROLL)
    spike.set_bitmap(SPIKE)

    def impale(target: Element) -> None:
        target.set_rectangle("X", 2, 2)
        model.play = False
        model.status.change_line(2, DIED)

    spike.add_collider(player, impale, Direction.ALL)
    return spike


def _platform(
    model: Model,
    player: PlayerElement,
    x: float,
    y: float,
    width: int,
    height: int,
    deadly: Iterable[Direction],
) -> Element:
    base = model.make_element(x, y, 0, SCROLL)
    base.set_rectangle("|", width, height)

    def crash(target: Element) -> None:
        target.vel[1] = 0
        model.status.change_line(2, DIED)
        model.play = False

    for side in deadly:
        base.add_collider(player, crash, side)
    base.add_collider(player, _land, Direction.ALL)
    return base


def build(model: Model) -> PlayerElement:
    """Populate the model with the runner, the ground, the obstacles and the finish line."""
    model.status.change_line(0, "Welcome to Geometry Dash!")
    model.status.change_line(1, "Press the UP key to jump.")
    model.status.change_line(2, " ")

    player = model.add_player(10, 15, 0, 0, 0, 0, 0, 0.1, 0)
    player.set_rectangle("#", 2, 2)

    platforms: List[Element] = []

    ground = model.make_element(1, 20, 0)
    ground.set_rectangle("=", 80, 1)
    platforms.append(ground)
    ground.add_collider(player, _land, Direction.ALL)

    for x, y in STARS:
        star = model.make_element(x, y, -5)
        star.set_char("+")
        star.add_char("*")

    for i in range(1, 5):
        _spike(model, player, 20 + 15 * i, 18)

    for i in range(5):
        platforms.append(
            _platform(model, player, 100 + 10 * i, 17 - 3 * i, 6, 3 + 3 * i, [Direction.LEFT])
        )

    for i in range(2):
        platforms.append(
            _platform(
                model, player, 200 + 45 * i, 18, 40, 2, [Direction.BOTTOM, Direction.LEFT]
            )
        )
        _spike(model, player, 215 + 45 * i, 16)

    for i in range(4):
        platforms.append(
            _platform(
                model, player, 288 + 10 * i, 15 - i * 3, 7, 1, [Direction.LEFT, Direction.BOTTOM]
            )
        )

    for i in range(12):
        _spike(model, player, 290 + 5 * i, 18)

    boost = model.make_element(336, 10, 0, SCROLL)
    boost.set_bitmap(BOOST_OPEN)
    boost.add_bitmap(BOOST_SPIN)
    boost.add_collider(player, lambda _: None, Direction.ALL)
    platforms.append(boost)

    finish = model.make_element(360, 1, 0, SCROLL)
    finish.set_rectangle("|", 1, 20)

    def win(_: Element) -> None:
        model.play = False
        model.status.change_line(2, WON)

    finish.add_collider(player, win, Direction.ALL)

    def jump(jumper: Element) -> None:
        if any(p.current_collision != Direction.NONE for p in platforms):
            jumper.vel[1] = -1

    player.add_interaction(curses.KEY_UP, jump)
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
    """Play Geometry Dash in the terminal."""
    parser = argparse.ArgumentParser(
        prog="termage-dash",
        description="Jump with the up key to avoid spikes and walls; Esc quits.",
    )
    parser.parse_args(argv)
    try:
        curses.wrapper(_session)
    except curses.error as exc:
        print(f"termage-dash: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())