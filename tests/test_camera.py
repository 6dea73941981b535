from dataclasses import dataclass, field

import pygame

from platformer.camera import Camera
from platformer.libs import Rect, Vec2d


@dataclass
class Mover:
    rect: Rect
    vel: Vec2d = field(default_factory=Vec2d)


@dataclass
class Thing:
    rect: Rect


def camera():
    return Camera(100.0, 100.0, 100.0, 100.0, 1000.0, 1000.0)


def tile(x, y):
    return Rect(x, y, 0.0, 0.0, 40.0)


def test_player_inside_box_changes_nothing():
    cam = camera()
    player = Mover(tile(120.0, 120.0), Vec2d(2.0, 3.0))
    thing = Thing(tile(300.0, 300.0))
    cam.update(player, [thing])
    assert (player.rect.x, player.rect.y) == (120.0, 120.0)
    assert (thing.rect.x, thing.rect.y) == (300.0, 300.0)


def test_left_edge_clamps_player_and_scrolls_world():
    cam = camera()
    player = Mover(tile(90.0, 120.0), Vec2d(-3.0, 0.0))
    thing = Thing(tile(300.0, 300.0))
    cam.update(player, [thing])
    assert player.rect.x == cam.x
    assert thing.rect.x == 300.0 - player.vel.x
    assert thing.rect.y == 300.0


def test_right_edge_clamps_player_and_scrolls_world():
    cam = camera()
    player = Mover(tile(180.0, 120.0), Vec2d(4.0, 0.0))
    thing = Thing(tile(300.0, 300.0))
    cam.update(player, [thing])
    assert player.rect.x + player.rect.scale == cam.x + cam.w
    assert thing.rect.x == 300.0 - player.vel.x


def test_top_edge_clamps_player_and_scrolls_world():
    cam = camera()
    player = Mover(tile(120.0, 95.0), Vec2d(0.0, -5.0))
    thing = Thing(tile(300.0, 300.0))
    cam.update(player, [thing])
    assert player.rect.y == cam.y
    assert thing.rect.y == 300.0 - player.vel.y
    assert thing.rect.x == 300.0


def test_bottom_edge_clamps_player_and_scrolls_world():
    cam = camera()
    player = Mover(tile(120.0, 170.0), Vec2d(0.0, 6.0))
    things = [Thing(tile(0.0, 0.0)), Thing(tile(40.0, 400.0))]
    cam.update(player, things)
    assert player.rect.y + player.rect.scale == cam.y + cam.h
    assert [t.rect.y for t in things] == [0.0 - 6.0, 400.0 - 6.0]


def test_update_accepts_generator_of_objects():
    cam = camera()
    player = Mover(tile(50.0, 120.0), Vec2d(-2.0, 0.0))
    things = [Thing(tile(10.0, 10.0))]
    cam.update(player, (t for t in things))
    assert things[0].rect.x == 10.0 + 2.0


def test_show_draws_red_outline():
    canvas = pygame.Surface((300, 300))
    canvas.fill((0, 0, 0))
    cam = camera()
    cam.show(canvas)
    assert tuple(canvas.get_at((100, 100)))[:3] == (255, 0, 0)
    assert tuple(canvas.get_at((150, 100)))[:3] == (255, 0, 0)
    assert tuple(canvas.get_at((150, 150)))[:3] == (0, 0, 0)