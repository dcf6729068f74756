import pytest

from fdfview.color import get_color


@pytest.mark.parametrize(
    ("z", "expected"),
    [
        (-50, 0x8B3A3A),
        (0, 0x8B3A3A),
        (100, 0x8B3A3A),
        (101, 0xE99696),
        (200, 0xE99696),
        (201, 0xFADDDD),
        (300, 0xFADDDD),
        (301, 0xEDEDED),
        (500, 0xEDEDED),
        (501, 0xFFFFFF),
        (10_000, 0xFFFFFF),
    ],
)
def test_get_color_bands(z, expected):
    assert get_color(z) == expected


def test_get_color_is_monotone_in_band_order():
    order = [0x8B3A3A, 0xE99696, 0xFADDDD, 0xEDEDED, 0xFFFFFF]
    seen = [order.index(get_color(z)) for z in range(-10, 700)]
    assert seen == sorted(seen)