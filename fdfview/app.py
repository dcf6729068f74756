"""The viewer program: load a map, open a window and react to the keyboard."""

from __future__ import annotations

import os
import sys
from dataclasses import replace

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from fdfview.controls import Key, default_view, handle_key  # noqa: E402
from fdfview.display import (  # noqa: E402
    KEY_PRESS_MASK,
    Display,
    Event,
    EventType,
    Window,
)
from fdfview.mapfile import MapError, read_map  # noqa: E402
from fdfview.render import Session, render_frame  # noqa: E402

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
TITLE = "FdF"
_FONT_SIZE = 18

_SPECIAL_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_BACKSPACE: Key.BACKSPACE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_UP: Key.UP,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
}


def keycode_for(pygame_key: int) -> int | None:
    """Translate a pygame key constant to the viewer's key symbol, if any."""
    if pygame_key in _SPECIAL_KEYS:
        return int(_SPECIAL_KEYS[pygame_key])
    if 32 <= pygame_key < 127:
        return pygame_key
    return None


def handle_close(session: Session) -> int:
    """Release the window and the frame image, then end the program."""
    display = session.display
    if session.window is not None and session.window in display.windows:
        display.destroy_window(session.window)
    if session.image is not None and session.image in display.images:
        display.destroy_image(session.image)
    raise SystemExit(0)


def build_session(path: str | os.PathLike[str]) -> Session:
    """Load a map and prepare the window, frame image, view and hooks."""
    height_map = read_map(path)
    display = Display()
    window = display.new_window(WINDOW_WIDTH, WINDOW_HEIGHT, TITLE)
    image = display.new_image(WINDOW_WIDTH, WINDOW_HEIGHT)
    view = default_view(height_map)
    session = Session(
        display=display,
        window=window,
        image=image,
        height_map=height_map,
        view=view,
        reset_view=replace(view),
        show_panel=True,
    )
    render_frame(session)
    window.hook(EventType.KEY_PRESS, KEY_PRESS_MASK, handle_key, session)
    window.hook(EventType.DESTROY_NOTIFY, 0, handle_close, session)
    return session


def _present(screen: pygame.Surface, font: pygame.font.Font, window: Window) -> None:
    fb = window.framebuffer
    surface = pygame.Surface((fb.width, fb.height), 0, 32, (0xFF0000, 0x00FF00, 0x0000FF, 0))
    pitch = surface.get_pitch()
    buffer = surface.get_buffer()
    row_bytes = fb.width * (fb.bpp // 8)
    if pitch == fb.size_line:
        buffer.write(bytes(fb.data), 0)
    else:
        for y in range(fb.height):
            start = y * fb.size_line
            buffer.write(bytes(fb.data[start:start + row_bytes]), y * pitch)
    del buffer
    screen.blit(surface, (0, 0))
    ascent = font.get_ascent()
    for text in window.texts:
        rgb = ((text.color >> 16) & 0xFF, (text.color >> 8) & 0xFF, text.color & 0xFF)
        screen.blit(font.render(text.text, True, rgb), (text.x, text.y - ascent))
    pygame.display.flip()


def run(session: Session) -> int:
    """Show the session in a real window until it is closed; return the exit code."""
    pygame.init()
    try:
        window = session.window
        screen = pygame.display.set_mode((window.width, window.height))
        pygame.display.set_caption(window.title)
        font = pygame.font.Font(None, _FONT_SIZE)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    session.display.post_event(Event(EventType.DESTROY_NOTIFY, window))
                elif event.type == pygame.KEYDOWN:
                    code = keycode_for(event.key)
                    if code is not None:
                        session.display.post_event(
                            Event(EventType.KEY_PRESS, window, keycode=code)
                        )
            session.display.loop()
            _present(screen, font, window)
            clock.tick(60)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Run the viewer on the map named by the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1
    try:
        session = build_session(args[0])
    except MapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return run(session)