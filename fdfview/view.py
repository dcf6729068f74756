"""Camera settings and the projection of map points to screen coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

from fdfview.mapfile import Point


@dataclass
class View:
    """Zoom, offsets, rotation angles and projection mode of the camera.

    ``projection_mode`` 0 is isometric; any other value is a flat,
    parallel view from above.
    """

    scale: float = 3.0
    z_scale: float = 5.0
    offset_y: float = 360.0
    offset_x: float = 640.0
    angle_z: float = 0.0
    angle_x: float = 0.0
    angle_y: float = 0.0
    projection_mode: int = 0
    map_width: int = 0
    map_height: int = 0


@dataclass(frozen=True)
class Projected:
    """A point in screen coordinates, keeping its altitude for colouring."""

    x: int
    y: int
    z: int


def rotate_axes(x: float, y: float, z: float, view: View) -> tuple[float, float, float]:
    """Rotate a point about the x axis, then about the y axis."""
    cos_x, sin_x = math.cos(view.angle_x), math.sin(view.angle_x)
    y, z = y * cos_x - z * sin_x, y * sin_x + z * cos_x
    cos_y, sin_y = math.cos(view.angle_y), math.sin(view.angle_y)
    x, z = x * cos_y + z * sin_y, -x * sin_y + z * cos_y
    return x, y, z


def _projection_view(x: float, y: float, view: View, point: Point) -> Projected:
    cos_z, sin_z = math.cos(view.angle_z), math.sin(view.angle_z)
    rot_x = x * cos_z - y * sin_z
    rot_y = x * sin_z + y * cos_z
    if view.projection_mode == 0:
        px = ((rot_x - rot_y) * 10) * view.scale * 1.5 + view.offset_x
        py = ((rot_x + rot_y) * 5 - point.z * view.z_scale) * view.scale + view.offset_y
    else:
        px = rot_x * view.scale + view.offset_x
        py = (rot_y * view.scale - point.z * (view.z_scale * 0.1)) + view.offset_y
    return Projected(int(px), int(py), point.z)


def project(point: Point, view: View) -> Projected:
    """Project a map point to the screen, centring the map on the view offsets."""
    x = point.x - view.map_width / 2
    y = point.y - view.map_height / 2
    x, y, _ = rotate_axes(x, y, float(point.z), view)
    return _projection_view(x, y, view, point)