"""Reading height maps: one row of whitespace-separated altitudes per line."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_DIGITS = frozenset("0123456789")
_INT_SPAN = 1 << 32
_INT_HALF = 1 << 31


class MapError(ValueError):
    """Raised when a map cannot be read or is malformed."""


@dataclass(frozen=True)
class Point:
    """A grid point: column, row, altitude and an optional colour (-1 for none)."""

    x: int
    y: int
    z: int
    color: int = -1


@dataclass
class HeightMap:
    """A rectangular grid of points, stored row by row."""

    width: int
    height: int
    points: list[list[Point]]


def split_fields(line: str) -> list[str]:
    """Split a line on spaces, dropping empty fields.

    Only the space character separates fields; a trailing newline stays
    attached to the last field.
    """
    return [field for field in line.split(" ") if field]


def is_valid(token: str) -> bool:
    """Tell whether a token is an optional sign followed by digits up to a comma."""
    if not token:
        return False
    body = token[1:] if token[0] in "+-" else token
    body = body.split(",", 1)[0]
    return all(ch in _DIGITS for ch in body)


def parse_int(text: str) -> int:
    """Read a leading decimal integer, as a 32-bit signed value; 0 if none."""
    match = _ATOI.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return (value + _INT_HALF) % _INT_SPAN - _INT_HALF


def _parse_row(line: str, y: int, width: int) -> list[Point]:
    fields = split_fields(line)
    if not fields or not is_valid(fields[0]):
        raise MapError(f"invalid map: bad value on line {y + 1}")
    if len(fields) < width:
        raise MapError(
            f"invalid map: line {y + 1} has {len(fields)} values, expected {width}"
        )
    return [Point(x, y, parse_int(field)) for x, field in enumerate(fields[:width])]


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from text lines; the first line fixes the width."""
    rows = list(lines)
    if not rows:
        raise MapError("map is empty")
    width = len(split_fields(rows[0]))
    if width == 0:
        raise MapError("first line of the map holds no values")
    points = [_parse_row(line, y, width) for y, line in enumerate(rows)]
    return HeightMap(width=width, height=len(rows), points=points)


def _split_lines(text: str) -> Iterator[str]:
    parts = text.split("\n")
    for part in parts[:-1]:
        yield part + "\n"
    if parts[-1]:
        yield parts[-1]


def read_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read a height map file."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(f"cannot read map {os.fspath(path)!r}: {exc}") from exc
    return parse_map(_split_lines(text))