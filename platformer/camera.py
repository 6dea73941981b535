"""A dead-zone camera that scrolls the world when the player reaches its edge."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

import pygame

from platformer.libs import Rect, Vec2d


class _Mover(Protocol):
    rect: Rect
    vel: Vec2d


class _Placed(Protocol):
    rect: Rect


@dataclass
class Camera:
    """A box the player stays inside; the world moves instead when pushed."""

    x: float
    y: float
    w: float
    h: float
    max_w: float
    max_h: float

    def show(self, surface: pygame.Surface) -> None:
        """Outline the camera box in red."""
        box = pygame.Rect(round(self.x), round(self.y), round(self.w), round(self.h))
        pygame.draw.rect(surface, (255, 0, 0), box, 1)

    def update(self, player: _Mover, objects: Iterable[_Placed]) -> None:
        """Clamp the player into the box and scroll objects by its velocity."""
        objects = list(objects)
        rect = player.rect
        vel = player.vel

        if rect.x <= self.x:
            rect.x = self.x
            self._scroll(objects, vel.x, 0.0)

        if rect.y <= self.y:
            rect.y = self.y
            self._scroll(objects, 0.0, vel.y)

        if rect.x + rect.scale >= self.x + self.w:
            rect.x = self.x + self.w - rect.scale
            self._scroll(objects, vel.x, 0.0)

        if rect.y + rect.scale >= self.y + self.h:
            rect.y = self.y + self.h - rect.scale
            self._scroll(objects, 0.0, vel.y)

    @staticmethod
    def _scroll(objects: list[_Placed], dx: float, dy: float) -> None:
        for obj in objects:
            obj.rect.x -= dx
            obj.rect.y -= dy