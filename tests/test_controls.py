from dataclasses import replace

import pytest

from fdfview.controls import Key, default_view, handle_key
from fdfview.display import Display
from fdfview.mapfile import parse_map
from fdfview.render import PANEL_TEXT, Session


def _session():
    height_map = parse_map(["0 1\n", "2 3\n"])
    display = Display()
    window = display.new_window(1280, 720, "FdF")
    image = display.new_image(1280, 720)
    view = default_view(height_map)
    return Session(display, window, image, height_map, view, replace(view))


def test_default_view():
    height_map = parse_map(["0 1 2\n", "2 3 4\n"])
    view = default_view(height_map)
    assert (view.scale, view.z_scale) == (3.0, 5.0)
    assert (view.offset_x, view.offset_y) == (640, 360)
    assert (view.angle_x, view.angle_y, view.angle_z) == (0, 0, 0)
    assert view.projection_mode == 0
    assert (view.map_width, view.map_height) == (3, 2)


def test_zoom_in_and_out():
    session = _session()
    start = session.view.scale
    handle_key(Key.Z, session)
    assert session.view.scale == pytest.approx(start * 1.1)
    handle_key(Key.X, session)
    assert session.view.scale == pytest.approx(start * 1.1 * 0.9)


@pytest.mark.parametrize(
    "key,dx,dy",
    [(Key.LEFT, -30, 0), (Key.RIGHT, 30, 0), (Key.UP, 0, -30), (Key.DOWN, 0, 30)],
)
def test_arrows_pan(key, dx, dy):
    session = _session()
    x, y = session.view.offset_x, session.view.offset_y
    handle_key(key, session)
    assert (session.view.offset_x, session.view.offset_y) == (x + dx, y + dy)


@pytest.mark.parametrize(
    "key,attr,sign",
    [
        (Key.W, "angle_x", 1),
        (Key.S, "angle_x", -1),
        (Key.E, "angle_y", 1),
        (Key.Q, "angle_y", -1),
        (Key.L, "angle_z", 1),
        (Key.R, "angle_z", -1),
    ],
)
def test_rotations(key, attr, sign):
    session = _session()
    handle_key(key, session)
    assert getattr(session.view, attr) == pytest.approx(sign * 0.1)


def test_projection_toggle():
    session = _session()
    handle_key(Key.B, session)
    assert session.view.projection_mode == 1
    handle_key(Key.B, session)
    assert session.view.projection_mode == 0


def test_unused_key_in_tilt_range_changes_nothing():
    session = _session()
    before = replace(session.view)
    handle_key(116, session)
    assert session.view == before


def test_backspace_resets_view():
    session = _session()
    handle_key(Key.Z, session)
    handle_key(Key.LEFT, session)
    handle_key(Key.BACKSPACE, session)
    assert session.view == session.reset_view
    session.view.scale = 99.0
    assert session.reset_view.scale == 3.0


def test_panel_toggle_redraws():
    session = _session()
    handle_key(Key.H, session)
    assert session.show_panel is False
    assert session.window.texts == []
    handle_key(Key.H, session)
    assert len(session.window.texts) == len(PANEL_TEXT)


def test_escape_exits():
    session = _session()
    with pytest.raises(SystemExit) as info:
        handle_key(Key.ESCAPE, session)
    assert info.value.code == 0