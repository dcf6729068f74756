"""Pixel formats and in-memory images."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class ImageType(enum.IntEnum):
    """Storage kind of an image."""

    XIMAGE = 1
    SHM = 2
    SHM_PIXMAP = 3


def _shift_and_bits(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit field, got {mask!r}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


@dataclass(frozen=True)
class PixelFormat:
    """How 0xRRGGBB colours are packed into pixel values."""

    depth: int
    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int
    byte_order: int = 0

    @classmethod
    def from_masks(cls, depth, red_mask, green_mask, blue_mask):
        """Build a format from the channel bit masks of a TrueColor visual."""
        red = _shift_and_bits(red_mask)
        green = _shift_and_bits(green_mask)
        blue = _shift_and_bits(blue_mask)
        return cls(depth, *red, *green, *blue)

    @property
    def bits_per_pixel(self) -> int:
        if self.depth > 16:
            return 32
        if self.depth > 8:
            return 16
        return 8

    def good_color(self, color: int) -> int:
        """Convert a 0xRRGGBB colour to this format's pixel value."""
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - self.red_bits)) << self.red_shift)
            + ((green >> (16 - self.green_bits)) << self.green_shift)
            + ((blue >> (16 - self.blue_bits)) << self.blue_shift)
        )


TRUE_COLOR = PixelFormat.from_masks(24, 0xFF0000, 0x00FF00, 0x0000FF)


@dataclass
class Image:
    """A rectangular pixel buffer laid out row by row."""

    width: int
    height: int
    bpp: int
    size_line: int
    byte_order: int
    data: bytearray
    kind: ImageType = ImageType.XIMAGE
    transparent: set[tuple[int, int]] = field(default_factory=set)

    @property
    def _bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def _order(self) -> str:
        return "big" if self.byte_order else "little"

    def _encode(self, color: int) -> bytes:
        opp = self._bytes_per_pixel
        return (color & ((1 << (8 * opp)) - 1)).to_bytes(opp, self._order)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self._bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a pixel value at (x, y)."""
        offset = self._offset(x, y)
        self.data[offset:offset + self._bytes_per_pixel] = self._encode(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + self._bytes_per_pixel], self._order)

    def fill(self, color: int) -> None:
        """Set every pixel to one value."""
        row = (self._encode(color) * self.width).ljust(self.size_line, b"\0")
        self.data[:] = row * self.height


def new_image(pixel_format: PixelFormat, width: int, height: int) -> Image:
    """Create a zero-filled image in the given pixel format."""
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    bpp = pixel_format.bits_per_pixel
    size_line = ((width * bpp + 31) // 32) * 4
    return Image(
        width=width,
        height=height,
        bpp=bpp,
        size_line=size_line,
        byte_order=pixel_format.byte_order,
        data=bytearray(size_line * height),
    )