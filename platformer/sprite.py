"""Sprites: one or more textures loaded from image files."""

from __future__ import annotations

from os import PathLike

import pygame


class Sprite:
    """An ordered set of textures; index 0 is the default look."""

    def __init__(self, texture: pygame.Surface) -> None:
        self._textures: list[pygame.Surface] = [texture]

    def __len__(self) -> int:
        return len(self._textures)

    def texture(self, index: int) -> pygame.Surface:
        """Return the texture at ``index``; raises IndexError if absent."""
        return self._textures[index]

    def add_texture(self, texture: pygame.Surface) -> None:
        self._textures.append(texture)


def load_texture(path: str | PathLike[str], flip: bool = False) -> pygame.Surface:
    """Load an image file, mirrored horizontally when ``flip`` is true."""
    surface = pygame.image.load(path)
    if pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    if flip:
        surface = pygame.transform.flip(surface, True, False)
    return surface


def load_sprite(path: str | PathLike[str], flip: bool = False) -> Sprite:
    """Load an image file as a single-texture sprite."""
    return Sprite(load_texture(path, flip))