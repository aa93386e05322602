import pytest

from termage.element import Direction, Element
from termage.player import NO_KEY, PlayerElement

LEFT = 260
RIGHT = 261
UP = 259
SPACE = ord(" ")


class FakeWindow:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.chars = {}

    def getch(self):
        return self.keys.pop(0) if self.keys else NO_KEY

    def addch(self, y, x, ch):
        self.chars[(x, y)] = ch

    def refresh(self):
        pass


@pytest.fixture
def window():
    return FakeWindow()


def test_position_motion_moves_player(window):
    p = PlayerElement(window, 40, 19, -1)
    p.add_key_motion(LEFT, 0, 0, -1)
    p.add_key_motion(RIGHT, 0, 0, 1)
    p.check_keybinds(LEFT)
    assert p.pos[0] == 40 - 1
    p.check_keybinds(RIGHT)
    p.check_keybinds(RIGHT)
    assert p.pos[0] == 40 + 1


def test_position_motion_stays_in_field(window):
    p = PlayerElement(window, 1, 19, -1)
    p.add_key_motion(LEFT, 0, 0, -1)
    p.check_keybinds(LEFT)
    assert p.pos[0] == 1

    q = PlayerElement(window, 77, 20, -1)
    q.add_key_motion(RIGHT, 0, 0, 1)
    q.add_key_motion(UP, 1, 0, 1)
    q.check_keybinds(RIGHT)
    q.check_keybinds(UP)
    assert q.pos[:2] == [77, 20]


def test_velocity_and_acceleration_motions(window):
    p = PlayerElement(window, 10, 15, 0)
    p.add_key_motion(UP, 1, 1, -1)
    p.add_key_motion(RIGHT, 0, 2, 0.25)
    p.check_keybinds(UP)
    p.check_keybinds(RIGHT)
    assert p.vel == [0, -1, 0]
    assert p.acc == [0.25, 0, 0]


def test_motion_skips_interactions(window):
    p = PlayerElement(window, 10, 10, 0)
    calls = []
    p.add_key_motion(SPACE, 1, 1, -1)
    p.add_interaction(SPACE, calls.append)
    p.check_keybinds(SPACE)
    assert calls == []
    assert p.vel[1] == -1


def test_failed_condition_falls_through_to_interaction(window):
    p = PlayerElement(window, 10, 10, 0)
    calls = []
    p.add_key_motion(SPACE, 1, 1, -1, lambda e: False)
    p.add_interaction(SPACE, calls.append)
    p.check_keybinds(SPACE)
    assert calls == [p]
    assert p.vel[1] == 0


def test_interaction_can_spawn_shot(window):
    p = PlayerElement(window, 40, 19, -1)
    p.add_interaction(SPACE, lambda e: e.spawner(e.position(0), e.position(1), -1, 0, -0.5))
    p.check_keybinds(SPACE)
    assert p.spawn is not None
    assert p.spawn.pos == [40, 19, -1]
    assert p.spawn.vel[1] == -0.5


def test_tick_reads_key_and_moves():
    window = FakeWindow([UP])
    p = PlayerElement(window, 10, 15, 0, 0, 0, 0, 0, 0.1, 0)
    p.add_key_motion(UP, 1, 1, -1)
    p.tick()
    assert p.pos[1] == 15 - 1
    assert p.vel[1] == pytest.approx(-1 + 0.1)
    p.tick()
    assert window.keys == []
    assert p.pos[1] == pytest.approx(15 - 1 - 0.9)


def test_player_does_not_cycle_forms(window):
    p = PlayerElement(window, 10, 10, 0)
    p.set_char("a")
    p.add_char("b")
    for _ in range(3):
        p.tick()
    assert p.cycle == 0


def test_player_colliders_skip_full_overlap(window):
    p = PlayerElement(window, 10, 10, 0)
    overlapping = Element(window, 10, 10, 0)
    far = Element(window, 50, 50, 0)
    hits = []
    p.add_collider(overlapping, hits.append, Direction.ALL)
    p.add_collider(far, hits.append, Direction.ALL)
    p.tick()
    assert hits == [far]