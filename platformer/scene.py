"""The game scene: staged asset loading, the world and its drawing."""

from __future__ import annotations

import enum
import time
from collections import deque
from os import PathLike
from pathlib import Path

import pygame

from platformer.camera import Camera
from platformer.libs import Rect, load_tilemap
from platformer.object import GameObject
from platformer.player import Player
from platformer.sprite import Sprite, load_sprite, load_texture

TILE_SIZE = 40.0
BACKGROUND = (0xAA, 0xEE, 0xFF)
WHITE = (255, 255, 255)
LOADING_FONT_SIZE = 48

_SPRITE_FILES = ("ground", "brick", "brick2", "cloud")

# Tile character -> (sprite name, solid)
_TILES = {
    "1": ("ground", True),
    "2": ("brick", True),
    "?": ("brick2", True),
    "@": ("cloud", False),
}


class LoadProgress(enum.Enum):
    """The stages of loading a scene, in order."""

    SPRITES = enum.auto()
    OBJECTS = enum.auto()
    PLAYER = enum.auto()


class Scene:
    """Loads assets step by step, then runs and draws the level."""

    def __init__(self, assets: str | PathLike[str], load_delay: float = 0.5) -> None:
        self.assets = Path(assets)
        self.load_delay = load_delay
        self.player: Player | None = None
        self.objects: list[GameObject] = []
        self.camera: Camera | None = None
        self.is_loaded = False
        self.sprites: dict[str, Sprite] = {}
        self.load_progress: deque[LoadProgress] = deque(LoadProgress)
        self.progress_value = 0.0
        self.max_progress_value = float(len(LoadProgress))

    def load(self, size: tuple[float, float]) -> None:
        """Run the next loading stage; mark the scene loaded once none remain."""
        if self.load_progress:
            stage = self.load_progress.popleft()
            if stage is LoadProgress.SPRITES:
                self._load_sprites()
            elif stage is LoadProgress.OBJECTS:
                self._load_objects(size)
            else:
                self._load_player()
        else:
            self.is_loaded = True

        if self.progress_value < self.max_progress_value:
            time.sleep(self.load_delay)

    def _load_sprites(self) -> None:
        for name in _SPRITE_FILES:
            self.sprites[name] = load_sprite(self.assets / f"{name}.png")
        player_sprite = load_sprite(self.assets / "player.png")
        player_sprite.add_texture(load_texture(self.assets / "player.png", flip=True))
        self.sprites["player"] = player_sprite
        self.progress_value += 1.0

    def _load_objects(self, size: tuple[float, float]) -> None:
        tilemap = load_tilemap(self.assets / "map.txt")
        for row, tiles in enumerate(tilemap):
            for col, tile in enumerate(tiles):
                kind = _TILES.get(tile)
                if kind is None:
                    continue
                name, solid = kind
                sprite = self.sprites.get(name)
                if sprite is None:
                    continue
                rect = Rect(col * TILE_SIZE, row * TILE_SIZE, 0.0, 0.0, TILE_SIZE)
                self.objects.append(GameObject(sprite, rect, solid))

        width, height = size
        max_w = len(tilemap[0]) * TILE_SIZE
        max_h = len(tilemap) * TILE_SIZE
        self.camera = Camera(width / 2.0 - 50.0, height / 2.0 - 50.0, 100.0, 100.0, max_w, max_h)
        self.progress_value += 1.0

    def _load_player(self) -> None:
        sprite = self.sprites.get("player")
        if sprite is not None:
            self.player = Player(sprite, Rect(0.0, 0.0, 5.0, 0.0, TILE_SIZE))
            self.progress_value += 1.0

    def _require_world(self) -> tuple[Player, Camera]:
        if self.player is None or self.camera is None:
            raise RuntimeError("scene finished loading without a player or camera")
        return self.player, self.camera

    def handle_event(self, event: pygame.event.Event) -> None:
        """Pass input to the player once the scene is loaded."""
        if self.is_loaded:
            player, _ = self._require_world()
            player.key_event(event)

    def tick(self, dt: float, size: tuple[float, float]) -> None:
        """Advance the world by ``dt`` seconds, or run a loading stage."""
        if self.is_loaded:
            player, camera = self._require_world()
            player.update(dt, self.objects)
            camera.update(player, self.objects)
        else:
            self.load(size)

    def _visible(self, width: float, height: float) -> list[GameObject]:
        return [
            obj
            for obj in self.objects
            if -TILE_SIZE <= round(obj.rect.x) <= width
            and round(obj.rect.y) >= -TILE_SIZE
            and round(obj.rect.x) <= height
        ]

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Draw the level, or the loading screen while assets load."""
        surface.fill(BACKGROUND)
        width, height = surface.get_size()

        if self.is_loaded:
            player, _ = self._require_world()
            for obj in self._visible(width, height):
                obj.render(surface)
            player.render(surface)
            return

        ratio = self.progress_value / self.max_progress_value
        label = font.render(f"Loading {int(ratio * 100.0)}%", True, WHITE)
        surface.blit(
            label,
            (round((width - label.get_width()) / 2.0), round(height / 2.0 - LOADING_FONT_SIZE)),
        )

        border_h = 40.0
        bar_h = 30.0
        border = pygame.Rect(
            round((width - border_h / 2.0) / 4.0),
            round((height - border_h) / 2.0),
            round((width + border_h / 2.0) / 2.0),
            round(border_h),
        )
        pygame.draw.rect(surface, WHITE, border, 1)

        bar_w = round(width / 2.0 * ratio)
        if bar_w > 0:
            bar = pygame.Rect(round(width / 4.0), round((height - bar_h) / 2.0), bar_w, round(bar_h))
            pygame.draw.rect(surface, WHITE, bar)