"""Reading XPM pixmaps into images."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator

from fdfview.colornames import lookup_color
from fdfview.pixels import Image, PixelFormat, new_image
from fdfview.wordtab import str_to_wordtab, strip_comments

_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_INT = re.compile(r"\s*([+-]?\d+)")
_NAME_LIMIT = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    digits = match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if match.group(1) == "-" else value


def _parse_int(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Resolve a colour spec (``#RRGGBB`` or a name) to 0xRRGGBB; unknown is 0."""
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1:end]
        pos = end + 1


def parse_xpm(lines: Iterable[str], pixel_format: PixelFormat) -> Image:
    """Build an image from XPM strings: header, colours, then pixel rows."""
    rows = iter(lines)

    def next_line() -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError("unexpected end of XPM data") from None

    header = str_to_wordtab(next_line())
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_parse_int(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(header)!r}")

    # With one or two characters per pixel a later colour line overrides an
    # earlier one with the same key; with more, the earlier line is kept.
    override = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        words = str_to_wordtab(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if at >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        rgb = text_to_rgb(words[at], words[at + 1] if at + 1 < len(words) else None)
        value = pixel_format.good_color(rgb) if rgb >= 0 else rgb
        key = line[:cpp]
        if override:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    image = new_image(pixel_format, width, height)
    for y in range(height):
        line = next_line()
        for x in range(width):
            value = palette.get(line[cpp * x:cpp * (x + 1)], 0)
            if value == -1:
                image.transparent.add((x, y))
            else:
                image.put_pixel(x, y, value)
    return image


def xpm_to_image(data: Iterable[str], pixel_format: PixelFormat) -> Image:
    """Build an image from in-memory XPM strings."""
    return parse_xpm(data, pixel_format)


def xpm_file_to_image(path: str | os.PathLike[str], pixel_format: PixelFormat) -> Image:
    """Read an XPM file and build an image from it."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)), pixel_format)