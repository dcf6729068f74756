# fdfview

A small wireframe viewer for height maps. A map is a plain text file of
space-separated integers; each number is the height of a grid point.
The viewer links each point to its right and lower neighbours with lines
and draws the grid in an isometric or a parallel projection, in a 1280×720
window opened with pygame.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
fdfview path/to/map.fdf
```

The command takes exactly one argument, the map file. It exits with status 1
if the argument is missing (or there are several), or if the map cannot be
read or is malformed; in the latter case the reason is printed to standard
error.

A map looks like this:

```
0 0 0 0
0 10 10 0
0 10 10 0
0 0 0 0
```

Fields are separated by spaces. The first line fixes the width of the map;
every later row must have at least that many values, and any extra values
are ignored. A value may carry a suffix after a comma (such as
`10,0xFF0000`), which is ignored; the first value of each row must be an
optional sign followed by digits.

Lines are coloured by the height of their starting point: heights up to
100, 200, 300 and 500 each get a lighter band, and anything higher is white.

## Controls

| Key          | Action                         |
|--------------|--------------------------------|
| Z / X        | Zoom in / out                  |
| Arrow keys   | Move the map                   |
| W / S        | Rotate about the X axis        |
| E / Q        | Rotate about the Y axis        |
| L / R        | Rotate about the Z axis        |
| B            | Toggle isometric / parallel    |
| Backspace    | Reset the view                 |
| H            | Show / hide the controls panel |
| Esc          | Quit                           |

Closing the window also quits. The controls panel drawn in the window is
written in Spanish.

## Using it from Python

The pieces work on their own, without a window:

```python
from fdfview.mapfile import read_map
from fdfview.controls import default_view
from fdfview.view import project

height_map = read_map("map.fdf")
view = default_view(height_map)
corner = project(height_map.points[0][0], view)
print(corner.x, corner.y, corner.z)
```

- `fdfview.mapfile`: `read_map`, `parse_map`, `HeightMap`, `Point`; bad
  input raises `MapError`.
- `fdfview.view`: `View` (camera settings) and `project`.
- `fdfview.pixels`: in-memory images (`new_image`, `Image.put_pixel`,
  `Image.get_pixel`, `Image.fill`) and `PixelFormat`.
- `fdfview.raster`: `bresenham`, `line_points`, `put_pixel` and
  `clear_image` on those images.
- `fdfview.render`: `draw_map` and `render_frame` for a `Session`.
- `fdfview.display`: a headless `Display` with windows backed by
  framebuffers, event hooks, an event queue and `loop`.
- `fdfview.xpm`: reads XPM pictures into images (`xpm_file_to_image`,
  `xpm_to_image`); bad data raises `XpmError`.
- `fdfview.colornames`: X11 colour names through `lookup_color`.

## Limitations

- There are no mouse controls; only the keys above are handled.
- Per-point colours written after a comma in a map are not used; colour
  comes from height alone.
- Nothing is saved: the viewer does not export images or write maps.