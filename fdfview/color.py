"""Altitude colouring."""

from __future__ import annotations

_BANDS: tuple[tuple[int, int], ...] = (
    (100, 0x8B3A3A),
    (200, 0xE99696),
    (300, 0xFADDDD),
    (500, 0xEDEDED),
)
_TOP = 0xFFFFFF


def get_color(z: int) -> int:
    """Return the 0xRRGGBB colour for an altitude."""
    for limit, color in _BANDS:
        if z <= limit:
            return color
    return _TOP