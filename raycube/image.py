"""In-memory 32-bit pixel images and colour conversion helpers."""

from __future__ import annotations

import struct

_PIXEL = struct.Struct("<I")


class Image:
    """A little-endian 32 bits-per-pixel image in ZPixmap layout."""

    bits_per_pixel = 32
    endian = 0

    __slots__ = ("width", "height", "line_length", "data")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.line_length = width * (self.bits_per_pixel // 8)
        self.data = bytearray(self.line_length * height)

    def __repr__(self) -> str:
        return f"Image({self.width}x{self.height})"

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.line_length + x * (self.bits_per_pixel // 8)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store color as an unsigned 32-bit value at (x, y)."""
        _PIXEL.pack_into(self.data, self._offset(x, y), color & 0xFFFFFFFF)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned 32-bit value stored at (x, y)."""
        return _PIXEL.unpack_from(self.data, self._offset(x, y))[0]

    def fill_area(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Fill a width x height rectangle whose top-left corner is (x, y)."""
        for row in range(y, y + height):
            for column in range(x, x + width):
                self.put_pixel(column, row, color)

    def blit(self, target: Image, x: int, y: int, transparent: int) -> None:
        """Copy this image onto target at (x, y), skipping transparent pixels.

        Pixels that would land outside the target are left out.
        """
        key = transparent & 0xFFFFFFFF
        for row in range(self.height):
            for column in range(self.width):
                tx, ty = column + x, row + y
                if not target._contains(tx, ty):
                    continue
                color = self.get_pixel(column, row)
                if color != key:
                    target.put_pixel(tx, ty, color)


def channel_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (offset, width) pairs for the red, green and blue masks.

    The result is a flat 6-tuple: red offset, red width, green offset,
    green width, blue offset, blue width.
    """
    shifts: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        if mask <= 0:
            raise ValueError(f"invalid channel mask: {mask:#x}")
        offset = 0
        while not mask & 1:
            mask >>= 1
            offset += 1
        bits = 0
        while mask & 1:
            mask >>= 1
            bits += 1
        shifts.extend((offset, bits))
    return tuple(shifts)


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a display of depth bits.

    Displays of 24 bits or more take the colour unchanged; shallower ones
    pack the channels using shifts as returned by channel_shifts.
    """
    if depth >= 24:
        return color
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )