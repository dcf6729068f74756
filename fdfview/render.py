"""Drawing the wireframe and the help panel into a session's window."""

from __future__ import annotations

from dataclasses import dataclass, field

from fdfview.color import get_color
from fdfview.display import Display, Window
from fdfview.mapfile import HeightMap
from fdfview.pixels import Image
from fdfview.raster import bresenham, clear_image
from fdfview.view import Projected, View, project

PANEL_TEXT: tuple[str, ...] = (
    "--- CONTROLES ---",
    "Z/X: Zoom",
    "Flechas: Mover mapa",
    "W/S: Rotar eje Y",
    "Q/E: Rotar eje X",
    "R/L: Rotar eje Z",
    "B: Cambiar proyeccion",
    "Backspace: Resetear vista",
    "H: Ocultar controles",
)
PANEL_X = 15
PANEL_TOP = 20
PANEL_STEP = 20
PANEL_COLOR = 0xCCCCCC
BACKGROUND = 0x000000


@dataclass
class Session:
    """Everything the viewer needs between frames."""

    display: Display
    window: Window
    image: Image
    height_map: HeightMap
    view: View
    reset_view: View = field(default_factory=View)
    show_panel: bool = True


def draw_line(a: Projected, b: Projected, image: Image) -> None:
    """Draw an edge coloured by the altitude of its start point."""
    bresenham(a, b, image, get_color(a.z))


def draw_map(height_map: HeightMap, image: Image, view: View) -> None:
    """Draw every grid edge to the right and downward neighbours."""
    rows = height_map.points
    for y, row in enumerate(rows):
        for x, point in enumerate(row):
            if x < height_map.width - 1:
                draw_line(project(point, view), project(row[x + 1], view), image)
            if y < height_map.height - 1:
                draw_line(project(point, view), project(rows[y + 1][x], view), image)


def panel_lines(session: Session) -> list[tuple[int, int, int, str]]:
    """Return (x, y, colour, text) for each help line, or nothing when hidden."""
    if not session.show_panel:
        return []
    return [
        (PANEL_X, PANEL_TOP + i * PANEL_STEP, PANEL_COLOR, text)
        for i, text in enumerate(PANEL_TEXT)
    ]


def instructions(session: Session) -> None:
    """Write the help panel into the window."""
    for x, y, color, text in panel_lines(session):
        session.display.string_put(session.window, x, y, color, text)


def render_frame(session: Session) -> None:
    """Redraw the whole frame from the current view."""
    session.display.clear_window(session.window)
    clear_image(session.image, BACKGROUND)
    draw_map(session.height_map, session.image, session.view)
    session.display.put_image_to_window(session.window, session.image, 0, 0)
    instructions(session)