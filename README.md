# platformer

A small 2D platformer built on pygame. The level is a plain-text tile map, and
the player runs and jumps across ground and brick tiles. A 100×100 camera box in
the middle of the window holds the player; when the player pushes against its
edge, the world scrolls instead.

## Installing

    pip install .

## Playing

    platformer
    platformer --assets path/to/assets

Without `--assets`, the game looks for an `assets` folder in the current
directory or in one of the folders directly below it, and stops with
`FileNotFoundError` if there is none. The folder holds:

- `map.txt`: the level, one line per row of 40×40 pixel tiles
- `ground.png`, `brick.png`, `brick2.png`, `cloud.png`: tile images
- `player.png`: the player image, mirrored when the player faces left
- `FiraSans-Regular.ttf`: the font for the loading screen and frame counter

Tile characters in `map.txt`:

| Character | Tile                      |
|-----------|---------------------------|
| `1`       | ground (solid)            |
| `2`       | brick (solid)             |
| `?`       | second brick kind (solid) |
| `@`       | cloud (not solid)         |

Any other character is empty space.

Controls:

- Left and Right arrows move the player
- Space jumps while the player is standing on something
- Escape, or closing the window, quits

The window is 600×600 and runs at 60 updates a second. A loading screen with a
progress bar comes first while sprites, the level and the player are set up in
three stages. The frame rate is shown in the top-left corner.

## Using the pieces

The game logic can be driven without opening a window:

- `platformer.libs`: `Vec2d`, `Rect` (with `left()`, `right()`, `top()`,
  `bottom()` and `center()`), `Controller`, and `load_tilemap(path)`, which
  returns the map as rows of single-character tiles
- `platformer.collider`: `Collider.collision(player, objects)` returns `True`
  for the first solid object touching the player rectangle and sets
  `interact` to the side hit (an `Interact` member) and the coordinate the
  player should be moved to
- `platformer.sprite`: `Sprite`, `load_texture(path, flip)` and
  `load_sprite(path, flip)`
- `platformer.object`: `GameObject(sprite, rect, solid)` with `render(surface)`
- `platformer.camera`: `Camera.update(player, objects)` clamps the player into
  the box and scrolls the objects; `Camera.show(surface)` outlines the box
- `platformer.player`: `Player.update(dt, objects)` for gravity, running,
  friction, jumping and collision response; `Player.key_event(event)` for
  arrow and Space keys; `Player.render(surface)`
- `platformer.scene`: `Scene(assets, load_delay=0.5)` runs one `LoadProgress`
  stage per `tick(dt, size)` until loaded, then advances the world;
  `handle_event(event)` and `draw(surface, font)` handle input and drawing
- `platformer.main`: `find_assets(start)` and `main(argv)`

## What it does not do

The camera stores the level's width and height but does not stop scrolling at
the level's edges. There is only one level, with no enemies, scoring, sound or
saved progress.

## Running the tests

    pip install .[test]
    pytest