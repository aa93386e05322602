from unittest.mock import patch

import pytest

from termage.element import Element
from termage.model import Model
from termage.player import PlayerElement
from termage.screen import MainScreen
from termage.status import Status


class FakeWindow:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.cells = {}
        self.texts = []
        self.refreshes = 0
        self.modes = {}

    def addch(self, y, x, ch):
        self.cells[(y, x)] = ch

    def addstr(self, y, x, text):
        self.texts.append((y, x, text))

    def refresh(self):
        self.refreshes += 1

    def box(self):
        pass

    def keypad(self, flag):
        self.modes["keypad"] = flag

    def nodelay(self, flag):
        self.modes["nodelay"] = flag

    def getch(self):
        return self.keys.pop(0) if self.keys else -1


def make_model(input_keys=()):
    screen = MainScreen(FakeWindow(), lambda *args: FakeWindow())
    status = Status(FakeWindow())
    return Model(screen, status, FakeWindow(input_keys))


def test_construction_displays_screen_and_status():
    model = make_model()
    assert model.play is True
    assert model.window is model.screen.window
    assert model.status.view.window.refreshes >= 1
    assert model.elements == []
    assert model.player is None


def test_make_element_keeps_depth_order():
    model = make_model()
    a = model.make_element(0, 0, 0)
    b = model.make_element(0, 0, -5)
    c = model.make_element(0, 0, 3)
    d = model.make_element(0, 0, 0)
    assert model.elements == [b, d, a, c]


def test_make_element_passes_motion():
    model = make_model()
    element = model.make_element(1, 2, 3, 0.5, -0.5, 0, 0, 0.1)
    assert element.pos == [1, 2, 3]
    assert element.vel == [0.5, -0.5, 0]
    assert element.acc == [0, 0.1, 0.0]
    assert element.window is model.window


def test_add_player_replaces_player():
    model = make_model()
    first = model.add_player(1, 1, 0)
    second = model.add_player(4, 5, 0, 1)
    assert isinstance(second, PlayerElement)
    assert model.player is second
    assert first is not second
    assert second.vel[0] == 1
    assert second not in model.elements


def test_delete_element_removes_and_ignores_unknown():
    model = make_model()
    a = model.make_element(0, 0, 0)
    b = model.make_element(0, 0, 1)
    model.delete_element(a)
    assert model.elements == [b]
    model.delete_element(Element(model.window, 0, 0, 0))
    assert model.elements == [b]


def test_escape_stops_before_ticking():
    model = make_model([27])
    element = model.make_element(5, 5, 0, 1)
    model.tick()
    assert model.play is False
    assert element.pos[0] == 5


@patch("curses.ungetch")
def test_other_keys_are_pushed_back(ungetch):
    model = make_model([ord("a")])
    model.tick()
    ungetch.assert_called_once_with(ord("a"))
    assert model.play is True


@patch("curses.ungetch")
def test_no_key_is_not_pushed_back(ungetch):
    model = make_model()
    element = model.make_element(5, 5, 0, 1)
    model.tick()
    assert ungetch.call_count == 0
    assert model.play is True
    assert element.position(0) == 6


def test_tick_moves_and_draws_elements():
    model = make_model()
    element = model.make_element(5, 5, 0, 1)
    model.tick()
    assert element.position(0) == 6
    assert model.window.cells[(5, 6)] == "X"
    assert model.window.cells[(5, 5)] == " "


def test_tick_adopts_element_spawn_in_depth_order():
    model = make_model()
    parent = model.make_element(5, 5, 0)
    shot = parent.spawner(1, 1, -2)
    model.tick()
    assert model.elements[0] is shot
    assert parent.spawn is None
    assert shot.pos[0] == 1


def test_tick_adopts_player_spawn():
    model = make_model()
    model.make_element(5, 5, 0)
    player = model.add_player(10, 10, 0)
    player.add_interaction(ord("s"), lambda el: el.spawner(3, 3, 1))
    model.window.keys = [ord("s")]
    model.tick()
    assert player.spawn is None
    assert len(model.elements) == 2
    assert model.elements[-1].position(2) == 1


def test_go_stops_at_tick_limit_and_ends_view():
    model = make_model()
    element = model.make_element(5, 5, 0, 1)
    model.go(max_ticks=3, delay=0)
    assert element.position(0) == 8
    assert model.input.modes["nodelay"] is False
    assert model.screen.window is None


def test_go_stops_when_play_ends():
    model = make_model()
    hits = []
    a = model.make_element(5, 5, 0)
    b = model.make_element(5, 5, 0)

    def stop(other):
        hits.append(other)
        model.play = False

    a.add_collider(b, stop, a.current_collision.ALL)
    model.go(max_ticks=100, delay=0)
    assert hits == [b]
    assert model.play is False


@pytest.mark.parametrize("ticks", [0, 1])
def test_go_redisplays_status(ticks):
    model = make_model()
    before = model.status.view.window.refreshes
    model.go(max_ticks=ticks, delay=0)
    assert model.status.view.window.refreshes == before + 1