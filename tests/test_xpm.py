import pytest

from fdfview.colornames import lookup_color
from fdfview.pixels import TRUE_COLOR, PixelFormat
from fdfview.xpm import (
    XpmError,
    parse_xpm,
    quoted_lines,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

RGB565 = PixelFormat.from_masks(16, 0xF800, 0x07E0, 0x001F)

SAMPLE = ["2 2 2 1", ". c #FF0000", "# c None", ".#", "#."]


def test_text_to_rgb_hex_and_names():
    assert text_to_rgb("#FF0000", None) == 0xFF0000
    assert text_to_rgb("Red", None) == lookup_color("red")
    assert text_to_rgb("light", "grey") == lookup_color("light grey")
    assert text_to_rgb("None", None) == -1


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("nosuchcolour", None) == 0


def test_quoted_lines_extracts_strings():
    text = 'static char *x[] = {"a b", "cd"};'
    assert list(quoted_lines(text)) == ["a b", "cd"]


def test_parse_xpm_pixels_and_transparency():
    image = parse_xpm(SAMPLE, TRUE_COLOR)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 1) == 0xFF0000
    assert image.transparent == {(1, 0), (0, 1)}


def test_parse_xpm_converts_through_format():
    image = parse_xpm(SAMPLE, RGB565)
    assert image.get_pixel(0, 0) == RGB565.good_color(0xFF0000)


def test_parse_xpm_many_chars_per_pixel():
    image = parse_xpm(["1 1 1 3", "abc c blue", "abc"], TRUE_COLOR)
    assert image.get_pixel(0, 0) == lookup_color("blue")


def test_xpm_to_image_matches_parse():
    assert xpm_to_image(SAMPLE, TRUE_COLOR).data == parse_xpm(SAMPLE, TRUE_COLOR).data


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", ". c red", "."],
        ["1 1"],
        ["1 1 1 1", ". x red", "."],
        ["1 1 1 1", ". c", "."],
        ["1 2 1 1", ". c red", "."],
        [],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines, TRUE_COLOR)


def test_xpm_file_with_comments(tmp_path):
    path = tmp_path / "demo.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *demo[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '"a c #00FF00",\n'
        '"b c None", // transparent\n'
        '"ab"\n'
        "};\n"
    )
    image = xpm_file_to_image(path, TRUE_COLOR)
    assert image.get_pixel(0, 0) == 0x00FF00
    assert image.transparent == {(1, 0)}


def test_xpm_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(tmp_path / "absent.xpm", TRUE_COLOR)