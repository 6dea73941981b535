"""Basic geometry, input state and tile map loading."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike


@dataclass
class Vec2d:
    """A mutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def add(self, x: float, y: float) -> None:
        """Add the given components to this vector in place."""
        self.x += x
        self.y += y


@dataclass
class Rect:
    """A square tile of side ``scale`` at (x, y), with edge insets ``w`` and ``h``."""

    x: float
    y: float
    w: float
    h: float
    scale: float

    def left(self) -> float:
        return self.x + self.w

    def right(self) -> float:
        return self.x + self.scale - self.w

    def top(self) -> float:
        return self.y + self.h

    def bottom(self) -> float:
        return self.y + self.scale - self.h

    def center(self) -> Vec2d:
        half = self.scale / 2.0
        return Vec2d(self.x + half, self.y + half)


@dataclass
class Controller:
    """Which movement keys are currently held."""

    up: bool = False
    left: bool = False
    right: bool = False


def load_tilemap(path: str | PathLike[str]) -> list[list[str]]:
    """Read a text tile map into rows of single-character tiles.

    Lines end at ``\\n``; a trailing ``\\r`` on a line is dropped, and a final
    line terminator does not produce an empty row.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        content = handle.read()

    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [list(line.removesuffix("\r")) for line in lines]