from fdfview.color import get_color
from fdfview.display import Display
from fdfview.mapfile import parse_map
from fdfview.raster import line_points
from fdfview.render import (
    PANEL_TEXT,
    Session,
    draw_line,
    draw_map,
    instructions,
    panel_lines,
    render_frame,
)
from fdfview.view import Projected, View, project


def _session(lines=("0 0 0\n", "0 0 0\n", "0 0 0\n")):
    height_map = parse_map(list(lines))
    display = Display()
    window = display.new_window(1280, 720, "FdF")
    image = display.new_image(1280, 720)
    view = View(map_width=height_map.width, map_height=height_map.height)
    return Session(display, window, image, height_map, view, View(**vars(view)))


def test_draw_line_uses_start_altitude_color():
    session = _session()
    a, b = Projected(10, 10, 250), Projected(30, 15, 0)
    draw_line(a, b, session.image)
    for x, y in line_points(a, b):
        assert session.image.get_pixel(x, y) == get_color(250)


def test_draw_map_marks_edge_starts():
    session = _session()
    draw_map(session.height_map, session.image, session.view)
    hm = session.height_map
    for y in range(hm.height):
        for x in range(hm.width):
            if x < hm.width - 1 or y < hm.height - 1:
                p = project(hm.points[y][x], session.view)
                assert session.image.get_pixel(p.x, p.y) == get_color(0)


def test_panel_lines_layout():
    session = _session()
    lines = panel_lines(session)
    assert [text for _, _, _, text in lines] == list(PANEL_TEXT)
    assert lines[0][3] == "--- CONTROLES ---"
    assert all(x == 15 for x, _, _, _ in lines)
    assert [y for _, y, _, _ in lines] == [20 + 20 * i for i in range(len(PANEL_TEXT))]


def test_panel_hidden():
    session = _session()
    session.show_panel = False
    assert panel_lines(session) == []
    instructions(session)
    assert session.window.texts == []


def test_instructions_writes_texts():
    session = _session()
    instructions(session)
    assert [t.text for t in session.window.texts] == list(PANEL_TEXT)


def test_render_frame_shows_map_and_panel():
    session = _session()
    render_frame(session)
    render_frame(session)
    assert len(session.window.texts) == len(PANEL_TEXT)
    p = project(session.height_map.points[0][0], session.view)
    assert session.window.pixel(p.x, p.y) == get_color(0)
    assert session.window.pixel(0, 719) == 0