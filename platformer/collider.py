"""Collision detection between the player and solid objects."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Protocol

from platformer.libs import Rect


class Interact(enum.Enum):
    """The side of the player that touched an object."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    TOP = enum.auto()
    BOTTOM = enum.auto()


class _Collidable(Protocol):
    solid: bool
    rect: Rect


@dataclass
class Collider:
    """Finds the first solid object touching a rectangle.

    After a hit, ``interact`` holds the side touched and the coordinate the
    player should be moved to so it rests against the object.
    """

    interact: tuple[Interact, float] | None = None

    def collision(self, player: Rect, objects: Iterable[_Collidable]) -> bool:
        """Return True and record the contact if ``player`` touches a solid object."""
        for obj in objects:
            if not obj.solid:
                continue
            other = obj.rect
            if not (
                player.right() >= other.left()
                and player.left() <= other.right()
                and player.bottom() >= other.top()
                and player.top() <= other.bottom()
            ):
                continue

            mine = player.center()
            theirs = other.center()
            dx = mine.x - theirs.x
            dy = mine.y - theirs.y

            if dy * dy > dx * dx:
                if dy > 0.0:
                    self.interact = (Interact.TOP, other.bottom())
                else:
                    self.interact = (Interact.BOTTOM, other.top() - player.scale)
            elif dx > 0.0:
                self.interact = (Interact.LEFT, other.right())
            else:
                self.interact = (Interact.RIGHT, other.left() - player.scale)
            return True
        return False