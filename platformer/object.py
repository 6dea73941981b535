"""Static scene objects such as ground, bricks and clouds."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from platformer.libs import Rect
from platformer.sprite import Sprite


def blit_scaled(surface: pygame.Surface, texture: pygame.Surface, rect: Rect) -> None:
    """Draw ``texture`` stretched to a square of side ``rect.scale`` at the rect's position."""
    side = max(0, round(rect.scale))
    scaled = pygame.transform.scale(texture, (side, side))
    surface.blit(scaled, (round(rect.x), round(rect.y)))


@dataclass
class GameObject:
    """A sprite placed in the world; solid objects block the player."""

    sprite: Sprite
    rect: Rect
    solid: bool

    def render(self, surface: pygame.Surface) -> None:
        blit_scaled(surface, self.sprite.texture(0), self.rect)