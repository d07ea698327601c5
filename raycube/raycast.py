"""Player movement and ray casting over a map grid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Optional

from raycube.image import Image
from raycube.mapcheck import degrees_to_radians

_DIRECTION_ANGLES = {"E": 0.0, "S": 90.0, "W": 180.0, "N": 270.0}
_EDGE = 0.02

WALL_RAY_COLOR = 0x00FF0000
CENTRE_RAY_COLOR = 0x0000FF00
RAY_COLOR = 0x00BDC1C6
PLAYER_COLOR = 0x00FDD663


class Key(Enum):
    """Keys that steer the player."""

    W = auto()
    A = auto()
    S = auto()
    D = auto()
    LEFT = auto()
    RIGHT = auto()


_KEY_OFFSETS = {Key.W: 0.0, Key.A: -90.0, Key.S: -180.0, Key.D: 90.0}


@dataclass
class Ray:
    """Viewing direction and ray casting parameters, angles in degrees."""

    angle: float
    hfov: float = 30.0
    increment: float = 0.0
    precision: float = 70.0
    limit: float = 11.0

    @classmethod
    def from_direction(cls, direction: str, screen_width: int) -> Ray:
        """Build the ray settings for a player facing N, S, E or W."""
        try:
            angle = _DIRECTION_ANGLES[direction]
        except KeyError:
            raise ValueError(f"unknown direction: {direction!r}") from None
        hfov = 30.0
        return cls(angle=angle, hfov=hfov, increment=2 * hfov / screen_width)


@dataclass
class AnimatedTexture:
    """A looping sequence of texture frames."""

    frames: list[Image]
    index: int = 0

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError("an animated texture needs at least one frame")

    def current(self) -> Image:
        """Return the frame shown now."""
        return self.frames[self.index]

    def advance(self) -> None:
        """Move to the next frame, wrapping to the first after the last."""
        self.index = (self.index + 1) % len(self.frames)


@dataclass
class Scene:
    """A map grid, the player in it and the wall textures."""

    grid: list[str]
    x: float
    y: float
    ray: Ray
    speed: float
    north: AnimatedTexture
    south: AnimatedTexture
    east: AnimatedTexture
    west: AnimatedTexture
    fallback: Optional[Image] = None
    minimap: Optional[Image] = None
    minimap_scale: int = 1
    hit_x: float = field(default=0.0, init=False)
    hit_y: float = field(default=0.0, init=False)

    def _is_wall(self, x: float, y: float) -> bool:
        column, row = int(x), int(y)
        if x < 0 or y < 0 or row >= len(self.grid) or column >= len(self.grid[row]):
            return True
        return self.grid[row][column] == "1"

    def move(self, key: Key) -> None:
        """Step the player for one movement key, sliding along walls."""
        angle = self.ray.angle + _KEY_OFFSETS.get(key, 0.0)
        step_x = math.cos(degrees_to_radians(angle)) * self.speed
        step_y = math.sin(degrees_to_radians(angle)) * self.speed
        if not self._is_wall(self.x + 0.5, self.y + 0.5 + 3 * step_y):
            self.y += step_y
        if not self._is_wall(self.x + 0.5 + 3 * step_x, self.y + 0.5):
            self.x += step_x

    def apply_keys(self, pressed: Iterable[Key]) -> None:
        """Turn and move for every key currently held down."""
        held = set(pressed)
        if Key.LEFT in held:
            self.ray.angle -= 3
        if Key.RIGHT in held:
            self.ray.angle += 3
        for key in (Key.W, Key.A, Key.S, Key.D):
            if key in held:
                self.move(key)

    def _plot(self, x: float, y: float, color: int) -> None:
        if self.minimap is None:
            return
        px, py = int(x * self.minimap_scale), int(y * self.minimap_scale)
        if 0 <= px < self.minimap.width and 0 <= py < self.minimap.height:
            self.minimap.put_pixel(px, py, color)

    def _plot_player(self) -> None:
        if self.minimap is None:
            return
        size = self.minimap_scale
        left = int(self.x + 0.5) * size
        top = int(self.y + 0.5) * size
        for py in range(max(top, 0), min(top + size, self.minimap.height)):
            for px in range(max(left, 0), min(left + size, self.minimap.width)):
                self.minimap.put_pixel(px, py, PLAYER_COLOR)

    def cast(self, ray_angle: float) -> float:
        """Cast one ray and return its fish-eye corrected distance to a wall.

        The point where the ray stopped is kept in hit_x and hit_y.
        """
        step_x = math.cos(degrees_to_radians(ray_angle)) / self.ray.precision
        step_y = math.sin(degrees_to_radians(ray_angle)) / self.ray.precision
        origin_x, origin_y = self.x + 0.5, self.y + 0.5
        x, y = origin_x, origin_y
        while not self._is_wall(x, y) and math.hypot(x - origin_x, y - origin_y) < self.ray.limit:
            x += step_x
            y += step_y
            if self._is_wall(x, y):
                self._plot(x, y, WALL_RAY_COLOR)
            elif ray_angle - 1 < self.ray.angle < ray_angle + 1:
                self._plot(x, y, CENTRE_RAY_COLOR)
            else:
                self._plot(x, y, RAY_COLOR)
        self._plot_player()
        self.hit_x, self.hit_y = x, y
        distance = math.hypot(x - origin_x, y - origin_y)
        return distance * math.cos(degrees_to_radians(ray_angle - self.ray.angle))

    def wall_texture(self) -> Optional[Image]:
        """Pick the texture for the wall face the last ray stopped on."""
        x, y = self.hit_x, self.hit_y
        inside_x = int(x) + _EDGE < x < int(x) + 1 - _EDGE
        inside_y = int(y) + _EDGE < y < int(y) + 1 - _EDGE
        if y - int(y) < _EDGE and inside_x:
            return self.north.current()
        if int(y) + 1 - y < _EDGE and inside_x:
            return self.south.current()
        if x - int(x) < _EDGE and inside_y:
            return self.west.current()
        if int(x) + 1 - x < _EDGE and inside_y:
            return self.east.current()
        return self.fallback

    def texture_color(self, image: Image, row: int) -> int:
        """Return the texel of image at row for the last hit, or 0 off a wall."""
        if not self._is_wall(self.hit_x, self.hit_y) or self.grid[int(self.hit_y)][int(self.hit_x)] != "1":
            return 0
        column = int(image.width * (self.hit_x + self.hit_y)) % image.width
        return image.get_pixel(column, row)