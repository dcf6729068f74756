import math

import pytest

from fdfview.mapfile import Point
from fdfview.view import Projected, View, project, rotate_axes


def _view(**kwargs):
    base = dict(scale=2.0, z_scale=5.0, offset_x=100.0, offset_y=50.0,
                map_width=2, map_height=2)
    base.update(kwargs)
    return View(**base)


@pytest.mark.parametrize("mode", [0, 1])
def test_centre_point_lands_on_offsets(mode):
    view = _view(projection_mode=mode)
    assert project(Point(1, 1, 0), view) == Projected(100, 50, 0)


def test_projected_keeps_altitude():
    assert project(Point(0, 0, 37), _view()).z == 37


def test_rotate_axes_identity_at_zero_angles():
    assert rotate_axes(1.5, -2.0, 3.0, View()) == (1.5, -2.0, 3.0)


def test_rotate_axes_preserves_length():
    view = View(angle_x=0.7, angle_y=-1.3)
    x, y, z = rotate_axes(3.0, -4.0, 12.0, view)
    assert math.isclose(math.hypot(x, y, z), math.hypot(3.0, -4.0, 12.0))


def test_rotate_axes_quarter_turn_about_x():
    x, y, z = rotate_axes(0.0, 1.0, 0.0, View(angle_x=math.pi / 2))
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(0.0, abs=1e-12)
    assert z == pytest.approx(1.0)


def test_isometric_altitude_lifts_point():
    view = _view()
    low = project(Point(1, 1, 0), view)
    high = project(Point(1, 1, 1), view)
    assert high.x == low.x
    assert low.y - high.y == view.z_scale * view.scale


def test_isometric_right_and_down_mirror_each_other():
    view = _view()
    centre = project(Point(1, 1, 0), view)
    right = project(Point(2, 1, 0), view)
    down = project(Point(1, 2, 0), view)
    assert right.x - centre.x == centre.x - down.x
    assert right.y - centre.y == down.y - centre.y
    assert right.x > centre.x and right.y > centre.y


def test_parallel_column_step_equals_scale():
    view = _view(projection_mode=1)
    a = project(Point(1, 1, 0), view)
    b = project(Point(2, 1, 0), view)
    assert b.x - a.x == view.scale
    assert b.y == a.y


def test_parallel_rotation_about_z_quarter_turn():
    view = _view(projection_mode=1, angle_z=math.pi / 2)
    p = project(Point(2, 1, 0), view)
    assert p.x == int(view.offset_x)
    assert p.y == int(view.offset_y + view.scale)


def test_coordinates_truncate_toward_zero():
    view = View(scale=0.5, offset_x=0.0, offset_y=0.0, projection_mode=1,
                map_width=0, map_height=0)
    assert project(Point(-1, 0, 0), view).x == 0


def test_larger_scale_spreads_points():
    small = _view(scale=1.0)
    large = _view(scale=4.0)
    d_small = project(Point(2, 1, 0), small).x - project(Point(1, 1, 0), small).x
    d_large = project(Point(2, 1, 0), large).x - project(Point(1, 1, 0), large).x
    assert d_large == 4 * d_small