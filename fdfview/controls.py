"""Keyboard controls of the viewer."""

from __future__ import annotations

import enum
from dataclasses import replace

from fdfview.mapfile import HeightMap
from fdfview.render import Session, render_frame
from fdfview.view import View

ZOOM_IN = 1.1
ZOOM_OUT = 0.9
PAN_STEP = 30
ROTATE_STEP = 0.1


class Key(enum.IntEnum):
    """Key symbols the viewer reacts to."""

    BACKSPACE = 65288
    ESCAPE = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364
    B = 98
    E = 101
    H = 104
    L = 108
    Q = 113
    R = 114
    S = 115
    W = 119
    X = 120
    Z = 122


def default_view(height_map: HeightMap) -> View:
    """Return the starting view for a map."""
    return View(
        scale=3.0,
        z_scale=5.0,
        offset_x=640.0,
        offset_y=360.0,
        angle_z=0.0,
        angle_x=0.0,
        angle_y=0.0,
        projection_mode=0,
        map_width=height_map.width,
        map_height=height_map.height,
    )


def _pan(keycode: int, view: View) -> None:
    if keycode == Key.LEFT:
        view.offset_x -= PAN_STEP
    elif keycode == Key.RIGHT:
        view.offset_x += PAN_STEP
    elif keycode == Key.DOWN:
        view.offset_y += PAN_STEP
    elif keycode == Key.UP:
        view.offset_y -= PAN_STEP


def _tilt(keycode: int, view: View) -> None:
    if keycode == Key.W:
        view.angle_x += ROTATE_STEP
    elif keycode == Key.S:
        view.angle_x -= ROTATE_STEP
    elif keycode == Key.E:
        view.angle_y += ROTATE_STEP
    elif keycode == Key.Q:
        view.angle_y -= ROTATE_STEP


def handle_key(keycode: int, session: Session) -> int:
    """Apply a key to the view and redraw; Escape ends the program."""
    view = session.view
    if keycode == Key.ESCAPE:
        raise SystemExit(0)
    if keycode == Key.Z:
        view.scale *= ZOOM_IN
    elif keycode == Key.X:
        view.scale *= ZOOM_OUT
    elif Key.LEFT <= keycode <= Key.DOWN:
        _pan(keycode, view)
    elif keycode == Key.L:
        view.angle_z += ROTATE_STEP
    elif keycode == Key.R:
        view.angle_z -= ROTATE_STEP
    elif keycode == Key.B:
        view.projection_mode = int(not view.projection_mode)
    elif keycode == Key.E or Key.Q <= keycode <= Key.W:
        _tilt(keycode, view)
    elif keycode == Key.BACKSPACE:
        session.view = replace(session.reset_view)
    elif keycode == Key.H:
        session.show_panel = not session.show_panel
    render_frame(session)
    return 0