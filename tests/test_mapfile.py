import pytest

from fdfview.mapfile import (
    HeightMap,
    MapError,
    Point,
    is_valid,
    parse_int,
    parse_map,
    read_map,
    split_fields,
)


def test_split_fields_drops_empty_fields():
    assert split_fields("1  2 3") == ["1", "2", "3"]


def test_split_fields_only_spaces_is_empty():
    assert split_fields("    ") == []


def test_split_fields_tab_is_not_a_separator():
    assert split_fields("1\t2 3") == ["1\t2", "3"]


def test_split_fields_keeps_newline_on_last_field():
    assert split_fields("4 5\n") == ["4", "5\n"]


@pytest.mark.parametrize("token", ["42", "-3", "+7", "10,0xFF", "-", "0"])
def test_is_valid_accepts(token):
    assert is_valid(token) is True


@pytest.mark.parametrize("token", ["", "a1", "1a", "\n", "--1", "1 "])
def test_is_valid_rejects(token):
    assert is_valid(token) is False


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("  -17abc", -17),
        ("10,0xFF", 10),
        ("+5", 5),
        ("\n", 0),
        ("", 0),
        ("abc", 0),
        ("7\n", 7),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_parse_int_wraps_to_32_bits():
    assert parse_int(str(2**32 + 5)) == 5
    assert parse_int(str(2**31)) == -(2**31)


def test_parse_map_builds_grid():
    hmap = parse_map(["0 1 2\n", "3 4 5\n"])
    assert isinstance(hmap, HeightMap)
    assert (hmap.width, hmap.height) == (3, 2)
    assert hmap.points[1][2] == Point(2, 1, 5, -1)
    assert [p.z for row in hmap.points for p in row] == [0, 1, 2, 3, 4, 5]


def test_parse_map_points_know_their_position():
    hmap = parse_map(["1 1\n", "1 1\n", "1 1"])
    for y, row in enumerate(hmap.points):
        for x, point in enumerate(row):
            assert (point.x, point.y) == (x, y)


def test_parse_map_ignores_colour_suffix():
    hmap = parse_map(["5,0xFF 6"])
    assert hmap.points[0][0].z == 5
    assert hmap.points[0][0].color == -1


def test_parse_map_ignores_extra_values():
    hmap = parse_map(["1 2\n", "3 4 9\n"])
    assert hmap.width == 2
    assert [p.z for p in hmap.points[1]] == [3, 4]


def test_parse_map_trailing_space_adds_zero_column():
    hmap = parse_map(["1 2 \n"])
    assert hmap.width == 3
    assert hmap.points[0][2].z == 0


def test_parse_map_empty_raises():
    with pytest.raises(MapError):
        parse_map([])


def test_parse_map_blank_first_line_raises():
    with pytest.raises(MapError):
        parse_map(["   "])


def test_parse_map_invalid_first_token_raises():
    with pytest.raises(MapError):
        parse_map(["1 2\n", "x 2\n"])


def test_parse_map_empty_line_raises():
    with pytest.raises(MapError):
        parse_map(["1 2\n", "\n"])


def test_parse_map_short_row_raises():
    with pytest.raises(MapError):
        parse_map(["1 2 3\n", "4 5\n"])


def test_read_map_from_file(tmp_path):
    path = tmp_path / "grid.fdf"
    path.write_text("0 0 0\n0 10 0\n0 0 0")
    hmap = read_map(path)
    assert (hmap.width, hmap.height) == (3, 3)
    assert hmap.points[1][1] == Point(1, 1, 10)


def test_read_map_counts_final_line_without_newline(tmp_path):
    with_nl = tmp_path / "a.fdf"
    without_nl = tmp_path / "b.fdf"
    with_nl.write_text("1 2\n3 4\n")
    without_nl.write_text("1 2\n3 4")
    assert read_map(with_nl) == read_map(without_nl)


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_map(tmp_path / "missing.fdf")


def test_read_map_empty_file(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    with pytest.raises(MapError):
        read_map(path)