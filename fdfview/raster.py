"""Rasterising into the frame image: clipped pixels, clearing and Bresenham lines."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from fdfview.pixels import Image

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
_CLEAR_ROWS = 1024


class _HasXY(Protocol):
    x: int
    y: int


def put_pixel(image: Image, x: int, y: int, color: int) -> None:
    """Store a colour at (x, y), ignoring points outside the visible screen."""
    if x < 0 or y < 0 or x >= SCREEN_WIDTH or y >= SCREEN_HEIGHT:
        return
    if x >= image.width or y >= image.height:
        return
    image.put_pixel(x, y, color & 0xFFFFFFFF)


def clear_image(image: Image, color: int) -> None:
    """Paint the visible part of the image with one colour."""
    width = min(SCREEN_WIDTH, image.width)
    height = min(SCREEN_HEIGHT, _CLEAR_ROWS, image.height)
    opp = image.bpp // 8
    order = "big" if image.byte_order else "little"
    row = (color & ((1 << (8 * opp)) - 1)).to_bytes(opp, order) * width
    for y in range(height):
        start = y * image.size_line
        image.data[start:start + len(row)] = row


def line_points(a: _HasXY, b: _HasXY) -> Iterator[tuple[int, int]]:
    """Yield the Bresenham points from a towards b; b itself is not included."""
    dx = abs(b.x - a.x)
    dy = abs(b.y - a.y)
    step_x = 1 if a.x < b.x else -1
    step_y = 1 if a.y < b.y else -1
    err = dx - dy
    x, y = a.x, a.y
    while x != b.x or y != b.y:
        yield x, y
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += step_x
        if e2 < dx:
            err += dx
            y += step_y


def bresenham(a: _HasXY, b: _HasXY, image: Image, color: int) -> None:
    """Draw a line from a towards b in one colour."""
    for x, y in line_points(a, b):
        put_pixel(image, x, y, color)