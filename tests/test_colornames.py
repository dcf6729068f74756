import pytest

from fdfview.colornames import color_names, lookup_color


def test_basic_names():
    assert lookup_color("snow") == 0xfffafa
    assert lookup_color("black") == 0x0
    assert lookup_color("red") == 0xff0000


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == 0xf8f8ff


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("NONE") == -1


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2f4f4f
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xfafad2


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")
    with pytest.raises(KeyError):
        lookup_color("")


def test_names_are_unique_and_ordered():
    names = color_names()
    assert len(names) == len(set(names))
    assert names[0] == "snow"
    assert names[-1] == "none"


def test_every_name_resolves_in_range():
    for name in color_names():
        value = lookup_color(name)
        if name == "none":
            assert value == -1
        else:
            assert 0 <= value <= 0xFFFFFF


def test_spaced_and_joined_names_agree():
    assert lookup_color("navy blue") == lookup_color("navyblue")
    assert lookup_color("gray50") == lookup_color("grey50")
    assert lookup_color("dark red") == lookup_color("red4")