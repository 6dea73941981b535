"""The player character: input, physics and collision response."""

from __future__ import annotations

from typing import Iterable

import pygame

from platformer.collider import Collider, Interact
from platformer.libs import Controller, Rect, Vec2d
from platformer.object import GameObject, blit_scaled
from platformer.sprite import Sprite

GRAVITY = 20.0
RUN_ACCELERATION = 10.0
JUMP_VELOCITY = -10.0
FRICTION = 2.0

_KEY_FIELDS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_SPACE: "up",
}


class Player:
    """A controllable square that runs, jumps and lands on solid objects."""

    def __init__(self, sprite: Sprite, rect: Rect) -> None:
        self.sprite = sprite
        self.rect = rect
        self.controller = Controller()
        self.ground = False
        self.acc = Vec2d()
        self.vel = Vec2d()
        self.friction = FRICTION
        self.collider = Collider()
        self.flip = False

    def update(self, dt: float, objects: Iterable[GameObject]) -> None:
        """Advance the player by one step of ``dt`` seconds."""
        self.acc = Vec2d(0.0, GRAVITY)
        self.ground = False

        if self.controller.left:
            self.acc.x = -RUN_ACCELERATION
            self.flip = True
        if self.controller.right:
            self.acc.x = RUN_ACCELERATION
            self.flip = False

        if self.collider.collision(self.rect, list(objects)) and self.collider.interact:
            side, pos = self.collider.interact
            if side in (Interact.TOP, Interact.BOTTOM):
                if side is Interact.BOTTOM:
                    self.ground = True
                self.vel.y = 0.0
                self.rect.y = pos
            else:
                self.vel.x = 0.0
                self.rect.x = pos

        if self.controller.up and self.ground:
            self.vel.y = JUMP_VELOCITY
            self.ground = False

        self.acc.x += self.vel.x * -self.friction
        self.vel.add(self.acc.x * dt, self.acc.y * dt)

        self.rect.x += self.vel.x
        self.rect.y += self.vel.y

    def key_event(self, event: pygame.event.Event) -> None:
        """Update the held-key state from a key press or release."""
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return
        field = _KEY_FIELDS.get(getattr(event, "key", None))
        if field is not None:
            setattr(self.controller, field, event.type == pygame.KEYDOWN)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the player, mirrored when facing left."""
        blit_scaled(surface, self.sprite.texture(1 if self.flip else 0), self.rect)