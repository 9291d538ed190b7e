import math

import pygame
import pytest

from orrery.core.canvas import Canvas
from orrery.core.keys import KeyState
from orrery.entities.ship import Ship


def make_ship(**kw):
    kw.setdefault("x", 100.0)
    kw.setdefault("y", 100.0)
    kw.setdefault("width", 400)
    kw.setdefault("height", 300)
    kw.setdefault("speed", 100.0)
    kw.setdefault("turn_speed", math.pi)
    return Ship(**kw)


def test_idle_ship_stays_put():
    ship = make_ship()
    ship.update(0.5, KeyState())
    assert (ship.x, ship.y, ship.angle) == (100.0, 100.0, 0.0)
    assert not ship.thrusting


def test_thrust_moves_along_heading(press):
    ship = make_ship(angle=math.pi / 2)
    ship.update(0.5, press(pygame.K_UP))
    assert ship.x == pytest.approx(100.0)
    assert ship.y == pytest.approx(150.0)
    assert ship.thrusting


def test_reverse_moves_backwards(press):
    ship = make_ship()
    ship.update(0.5, press(pygame.K_s))
    assert ship.x == pytest.approx(50.0)
    assert not ship.thrusting


def test_turning(press):
    ship = make_ship()
    ship.update(0.5, press(pygame.K_RIGHT))
    assert ship.angle == pytest.approx(math.pi / 2)
    ship.update(1.0, press(pygame.K_a))
    assert ship.angle == pytest.approx(3 * math.pi / 2)


def test_opposite_keys_cancel(press):
    ship = make_ship()
    ship.update(1.0, press(pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN))
    assert (ship.x, ship.y, ship.angle) == (100.0, 100.0, 0.0)


def test_position_clamped_to_bounds(press):
    ship = make_ship(x=390.0, y=5.0)
    keys = press(pygame.K_w)
    for _ in range(10):
        ship.update(0.1, keys)
    assert ship.x == 400.0

    ship = make_ship(x=10.0, y=10.0, angle=-math.pi / 2)
    ship.update(1.0, keys)
    assert ship.y == 0.0


def test_start_outside_bounds_is_clamped():
    ship = make_ship(x=-50.0, y=900.0)
    assert (ship.x, ship.y) == (0.0, 300.0)


def test_resize_reclamps():
    ship = make_ship(x=350.0, y=250.0)
    ship.resize(200, 100)
    assert (ship.x, ship.y) == (200.0, 100.0)


def test_render_pose_interpolates(press):
    ship = make_ship()
    ship.update(1.0, press(pygame.K_UP))
    x, y, a = ship.render_pose(0.25)
    assert x == pytest.approx(125.0)
    assert y == pytest.approx(100.0)
    assert a == pytest.approx(0.0)


def test_draw_renders_hull_at_position(press):
    surface = pygame.Surface((400, 300))
    canvas = Canvas(surface)
    canvas.clear((0, 0, 0))
    ship = make_ship(x=200.0, y=150.0, size=20.0)
    ship.draw(canvas)
    assert canvas.depth == 0
    # nose points along +x
    assert surface.get_at((210, 150))[:3] != (0, 0, 0)
    assert surface.get_at((190, 170))[:3] == (0, 0, 0)


def test_draw_flame_only_while_thrusting(press):
    surface = pygame.Surface((400, 300))
    canvas = Canvas(surface)
    ship = make_ship(x=200.0, y=150.0, size=20.0, speed=0.0)
    canvas.clear((0, 0, 0))
    ship.draw(canvas)
    assert surface.get_at((180, 150))[:3] == (0, 0, 0)

    ship.update(0.1, press(pygame.K_UP))
    canvas.clear((0, 0, 0))
    ship.draw(canvas)
    assert surface.get_at((180, 150))[:3] != (0, 0, 0)


def test_large_turn_interpolates_in_direction_of_turn(press):
    ship = make_ship(turn_speed=3.5)
    ship.update(1.0, press(pygame.K_RIGHT))
    # 3.5 rad in one step is past half a turn; the heading still sweeps clockwise
    _, _, a = ship.render_pose(0.5)
    assert a == pytest.approx(1.75)
    ship.update(1.0, press(pygame.K_LEFT))
    _, _, a = ship.render_pose(0.5)
    assert a == pytest.approx(3.5 - 1.75)


def test_released_keys_hold_heading_between_steps(press):
    ship = make_ship(angle=1.0)
    ship.update(0.5, KeyState())
    assert ship.render_pose(0.3)[2] == pytest.approx(1.0)
