# raycube

raycube is a small raycasting engine for grid maps. It is written in pure
Python and needs nothing beyond the standard library.

## Modules

- `raycube.mapcheck` checks map grids. A grid is made of `0` (floor), `1`
  (wall), spaces (empty) and exactly one player start (`N`, `S`, `E` or `W`).
  - `square_map(rows)` pads every row with spaces to the length of the
    longest row.
  - `check_map(rows)` pads the grid, checks it, and returns a `PlayerStart`
    holding `direction`, `x` and `y`.
  - A bad map raises `MapError`. Its `kind` is an `ErrorKind`:
    `INVALID_WALL` when a floor touches empty space (diagonals count),
    `INVALID_PLAYER` when there is no player start or more than one, and
    `INVALID_CHARACTER` for any other character.
  - Helpers: `parse_color_component` (a decimal value from 0 to 255),
    `degrees_to_radians` and `has_other_char`.
- `raycube.raycast` holds the scene and the ray casting.
  - `Ray` holds the view angle, half field of view, per-column increment,
    step precision and distance limit. `Ray.from_direction(direction,
    screen_width)` builds a `Ray` for a player facing `N`, `S`, `E` or `W`.
  - `AnimatedTexture` is a looping list of `Image` frames, with `current()`
    and `advance()`.
  - `Scene` holds the grid, the player position, the speed and one
    animated texture per wall side. It also takes an optional fallback
    image and an optional minimap image.
    - `move(key)` steps the player and slides along walls.
    - `apply_keys(pressed)` turns by 3 degrees for `Key.LEFT` and
      `Key.RIGHT`, then moves for each of `Key.W`, `Key.A`, `Key.S` and
      `Key.D` that is held.
    - `cast(ray_angle)` returns the distance to the wall with fish-eye
      correction. It records the hit point in `hit_x` and `hit_y`, and
      plots the ray on the minimap if there is one.
    - `wall_texture()` picks the texture for the wall face that was hit.
    - `texture_color(image, row)` samples that texture.
- `raycube.image` provides `Image`, an in-memory 32-bit pixel buffer.
  - `Image` has `put_pixel`, `get_pixel`, `fill_area`, and `blit`, which
    copies onto another image and skips one transparent colour.
  - `channel_shifts(red_mask, green_mask, blue_mask)` and
    `good_color(color, depth, shifts)` convert `0xRRGGBB` colours for
    displays with fewer than 24 bits.
- `raycube.colornames` provides `lookup_color(name)`. It returns the
  `0xRRGGBB` value of a named X11 colour, matched case-insensitively.
  `"none"` gives `-1`, and an unknown name raises `KeyError`.
- `raycube.events` is a headless event dispatcher.
  - `Display.new_window` opens a `Window`.
  - Callbacks are registered with `Window.hook`, `key_hook`, `mouse_hook`
    and `expose_hook`, and with `Display.loop_hook`.
  - `Display.loop(batches)` delivers the `Event` objects in each batch to
    their window's hooks, then calls the loop hook.
  - `Display.loop_end()` stops the loop.
  - `Display.destroy_window` closes a window; events sent to it afterwards
    are ignored.

## Installing

```
pip install .
```

## Example

```python
from raycube.image import Image
from raycube.mapcheck import check_map
from raycube.raycast import AnimatedTexture, Key, Ray, Scene
from raycube.events import Display, Event, EventKind

rows = ["111111", "1N0001", "111111"]
start = check_map(rows)          # PlayerStart(direction='N', x=1.0, y=1.0)

brick = Image(4, 4)
brick.fill_area(0, 0, 4, 4, 0xAA3300)
wall = AnimatedTexture([brick])

scene = Scene(
    grid=rows, x=start.x, y=start.y,
    ray=Ray.from_direction(start.direction, 640), speed=0.1,
    north=wall, south=wall, east=wall, west=wall,
)
scene.apply_keys({Key.RIGHT})
print(scene.cast(scene.ray.angle))

display = Display()
window = display.new_window(640, 480, "view")
window.key_hook(lambda key: display.loop_end() if key == 0xFF1B else None)
display.loop([[Event(EventKind.KEY_RELEASE, window, key=0xFF1B)]])
```

## What it does not do

- raycube does not read texture files. Textures are `Image` objects that
  you build and fill in memory.
- raycube opens no real window and draws nothing on screen. `Display` only
  dispatches the `Event` objects you pass to it.
- raycube does not parse scene description files. `raycube.mapcheck` checks
  map rows that you have already read.
- raycube has no command to run a game.

## Running the tests

```
pip install .[test]
pytest
```