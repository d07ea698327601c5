"""Validation of map grids and small parsing helpers for scene files."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

_DIRECTIONS = "NSWE"
_FLOORS = "01"
_NEIGHBOURS = ((-1, -1), (1, -1), (0, -1), (-1, 0), (1, 0), (-1, 1), (1, 1), (0, 1))


class ErrorKind(Enum):
    """The ways a map grid can be rejected."""

    INVALID_WALL = "invalid_wall"
    INVALID_PLAYER = "invalid_player"
    INVALID_CHARACTER = "invalid_character"


class MapError(ValueError):
    """Raised when a map grid does not describe a playable level."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class PlayerStart:
    """Where the player stands and which way it faces when the level starts."""

    direction: str
    x: float
    y: float


def square_map(rows: Sequence[str]) -> list[str]:
    """Pad every row with spaces to the length of the longest row."""
    width = max((len(row) for row in rows), default=0)
    return [row.ljust(width) for row in rows]


def _check_walls(grid: list[str], column: int, row: int) -> None:
    for dx, dy in _NEIGHBOURS:
        x, y = column + dx, row + dy
        if 0 <= y < len(grid) and 0 <= x < len(grid[y]) and grid[y][x] == "0":
            raise MapError(
                ErrorKind.INVALID_WALL,
                f"open floor at ({x}, {y}) touches empty space at ({column}, {row})",
            )


def check_map(rows: Sequence[str]) -> PlayerStart:
    """Check a map grid and return the player's starting position.

    The grid may only hold walls, floors, spaces and exactly one player
    marker; no floor may touch empty space, diagonals included.
    """
    grid = square_map(rows)
    start: PlayerStart | None = None
    for y, line in enumerate(grid):
        for x, cell in enumerate(line):
            if cell == " ":
                _check_walls(grid, x, y)
            elif cell in _DIRECTIONS:
                if start is not None:
                    raise MapError(
                        ErrorKind.INVALID_PLAYER, f"second player at ({x}, {y})"
                    )
                start = PlayerStart(cell, float(x), float(y))
            elif cell not in _FLOORS:
                raise MapError(
                    ErrorKind.INVALID_CHARACTER, f"unexpected {cell!r} at ({x}, {y})"
                )
    if start is None:
        raise MapError(ErrorKind.INVALID_PLAYER, "the map has no player")
    return start


def parse_color_component(text: str) -> int:
    """Parse a decimal colour channel in the range 0 to 255."""
    if not text or not text[0].isdigit():
        raise ValueError(f"invalid colour component: {text!r}")
    value = 0
    for char in text:
        if not ("0" <= char <= "9"):
            raise ValueError(f"invalid colour component: {text!r}")
        value = value * 10 + int(char)
        if value > 255:
            raise ValueError(f"colour component out of range: {text!r}")
    return value


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180


def has_other_char(text: str, char: str, start: int, stop: int) -> bool:
    """Tell whether text[start:stop] holds a character other than char.

    Nothing is examined when start is negative.
    """
    if start < 0:
        return False
    return any(c != char for c in text[start:stop])