"""Command-line entry point: opens the window and runs the game loop."""

from __future__ import annotations

import argparse
from os import PathLike
from pathlib import Path

import pygame

from platformer.scene import Scene

WINDOW_SIZE = (600, 600)
TITLE = "2D Platformer"
UPDATES_PER_SECOND = 60
FONT_FILE = "FiraSans-Regular.ttf"
ASSETS_DIR = "assets"


def find_assets(start: str | PathLike[str] | None = None) -> Path:
    """Find an ``assets`` folder in ``start`` or one of its immediate subfolders."""
    root = Path.cwd() if start is None else Path(start)
    direct = root / ASSETS_DIR
    if direct.is_dir():
        return direct
    if root.is_dir():
        for child in sorted(root.iterdir()):
            candidate = child / ASSETS_DIR
            if child.is_dir() and candidate.is_dir():
                return candidate
    raise FileNotFoundError(f"no {ASSETS_DIR!r} folder found from {root}")


def main(argv: list[str] | None = None) -> int:
    """Run the game until the window is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="platformer", description="A small 2D platformer.")
    parser.add_argument("--assets", help="folder holding images, the map and the font")
    args = parser.parse_args(argv)

    assets = Path(args.assets) if args.assets else find_assets()
    if not assets.is_dir():
        raise FileNotFoundError(f"assets folder not found: {assets}")

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        fps_font = pygame.font.Font(assets / FONT_FILE, 24)
        loading_font = pygame.font.Font(assets / FONT_FILE, 48)
        scene = Scene(assets)
        clock = pygame.time.Clock()
        fps_text = ""
        dt = 1.0 / UPDATES_PER_SECOND

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    return 0
                scene.handle_event(event)

            scene.draw(screen, loading_font)
            scene.tick(dt, screen.get_size())

            label = fps_font.render(fps_text, True, (0, 0, 0))
            screen.blit(label, (10, 25 - fps_font.get_ascent()))
            pygame.display.flip()

            clock.tick(UPDATES_PER_SECOND)
            fps_text = f"{round(clock.get_fps())} fps"
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())