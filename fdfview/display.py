"""A headless display: windows with framebuffers, images, event hooks and a loop."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fdfview.pixels import TRUE_COLOR, Image, PixelFormat, new_image

MAX_EVENT = 36

KEY_PRESS_MASK = 1 << 0
KEY_RELEASE_MASK = 1 << 1
BUTTON_PRESS_MASK = 1 << 2
BUTTON_RELEASE_MASK = 1 << 3
POINTER_MOTION_MASK = 1 << 6
EXPOSURE_MASK = 1 << 15
STRUCTURE_NOTIFY_MASK = 1 << 17


class EventType(enum.IntEnum):
    """Event codes a window can be hooked on."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


@dataclass(frozen=True)
class Event:
    """One input or window event addressed to a window."""

    type: int
    window: "Window"
    keycode: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0


@dataclass
class _Hook:
    mask: int
    func: Callable[..., Any]
    param: Any


@dataclass(frozen=True)
class Text:
    """A string drawn into a window."""

    x: int
    y: int
    color: int
    text: str


class Window:
    """A fixed-size window backed by a framebuffer."""

    def __init__(self, pixel_format: PixelFormat, width: int, height: int, title: str):
        self.title = title
        self.framebuffer: Image = new_image(pixel_format, width, height)
        self.hooks: dict[EventType, _Hook] = {}
        self.texts: list[Text] = []

    @property
    def width(self) -> int:
        return self.framebuffer.width

    @property
    def height(self) -> int:
        return self.framebuffer.height

    def hook(self, event_type, mask, func, param=None) -> None:
        """Call func with param whenever an event of event_type reaches this window."""
        try:
            kind = EventType(event_type)
        except ValueError:
            raise ValueError(f"cannot hook event type {event_type!r}") from None
        self.hooks[kind] = _Hook(mask, func, param)

    def key_hook(self, func, param=None) -> None:
        """Hook key releases: func(keycode, param)."""
        self.hook(EventType.KEY_RELEASE, KEY_RELEASE_MASK, func, param)

    def mouse_hook(self, func, param=None) -> None:
        """Hook button presses: func(button, x, y, param)."""
        self.hook(EventType.BUTTON_PRESS, BUTTON_PRESS_MASK, func, param)

    def expose_hook(self, func, param=None) -> None:
        """Hook exposures: func(param)."""
        self.hook(EventType.EXPOSE, EXPOSURE_MASK, func, param)

    def event_mask(self) -> int:
        """Return the union of the masks of all installed hooks."""
        mask = 0
        for hook in self.hooks.values():
            mask |= hook.mask
        return mask

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value shown at (x, y)."""
        return self.framebuffer.get_pixel(x, y)


class Display:
    """Owns windows and images and delivers queued events to window hooks."""

    def __init__(self, pixel_format: PixelFormat = TRUE_COLOR):
        self.pixel_format = pixel_format
        self.windows: list[Window] = []
        self.images: list[Image] = []
        self._queue: deque[Event] = deque()
        self._loop_func: Callable[..., Any] | None = None
        self._loop_param: Any = None
        self._running = False

    @property
    def pending(self) -> int:
        """Number of events waiting to be delivered."""
        return len(self._queue)

    def _find_window(self, window: Window) -> int:
        for index, candidate in enumerate(self.windows):
            if candidate is window:
                return index
        return -1

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window; its first exposure is queued."""
        window = Window(self.pixel_format, width, height, title)
        self.windows.insert(0, window)
        self._queue.append(Event(EventType.EXPOSE, window))
        return window

    def destroy_window(self, window: Window) -> None:
        """Close a window; its pending events are no longer delivered."""
        index = self._find_window(window)
        if index < 0:
            raise ValueError("window does not belong to this display")
        del self.windows[index]

    def new_image(self, width: int, height: int) -> Image:
        """Create a zero-filled image in the display's pixel format."""
        image = new_image(self.pixel_format, width, height)
        self.images.append(image)
        return image

    def destroy_image(self, image: Image) -> None:
        """Release an image created by this display."""
        for index, candidate in enumerate(self.images):
            if candidate is image:
                del self.images[index]
                return
        raise ValueError("image does not belong to this display")

    def get_color_value(self, color: int) -> int:
        """Convert 0xRRGGBB to the display's pixel value."""
        return self.pixel_format.good_color(color)

    def pixel_put(self, window: Window, x: int, y: int, color: int) -> None:
        """Draw one pixel; points outside the window are clipped."""
        if 0 <= x < window.width and 0 <= y < window.height:
            window.framebuffer.put_pixel(x, y, self.get_color_value(color))

    def string_put(self, window: Window, x: int, y: int, color: int, text: str) -> None:
        """Draw a string with its baseline starting at (x, y)."""
        window.texts.append(Text(x, y, self.get_color_value(color), text))

    def clear_window(self, window: Window) -> None:
        """Reset a window to its black background."""
        window.framebuffer.fill(0)
        window.texts.clear()

    def put_image_to_window(self, window: Window, image: Image, x: int, y: int) -> None:
        """Copy an image into a window at (x, y), clipped, skipping transparent pixels."""
        fb = window.framebuffer
        x0, x1 = max(0, x), min(fb.width, x + image.width)
        y0, y1 = max(0, y), min(fb.height, y + image.height)
        if x0 >= x1 or y0 >= y1:
            return
        raw_copy = (
            image.bpp == fb.bpp
            and image.byte_order == fb.byte_order
            and not image.transparent
        )
        opp = fb.bpp // 8
        span = (x1 - x0) * opp
        for ty in range(y0, y1):
            sy = ty - y
            if raw_copy:
                src = sy * image.size_line + (x0 - x) * opp
                dst = ty * fb.size_line + x0 * opp
                fb.data[dst:dst + span] = image.data[src:src + span]
                continue
            for tx in range(x0, x1):
                sx = tx - x
                if (sx, sy) not in image.transparent:
                    fb.put_pixel(tx, ty, image.get_pixel(sx, sy))

    def loop_hook(self, func, param=None) -> None:
        """Call func(param) each time the event queue runs dry inside the loop."""
        self._loop_func = func
        self._loop_param = param

    def post_event(self, event: Event) -> None:
        """Queue an event for delivery."""
        self._queue.append(event)

    def dispatch(self, event: Event) -> bool:
        """Deliver one event to its window's hook; return whether a hook ran."""
        if self._find_window(event.window) < 0 or not 0 <= event.type < MAX_EVENT:
            return False
        hook = event.window.hooks.get(event.type)
        if hook is None:
            return False
        kind = event.type
        if kind in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            hook.func(event.keycode, hook.param)
        elif kind in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            hook.func(event.button, event.x, event.y, hook.param)
        elif kind == EventType.MOTION_NOTIFY:
            hook.func(event.x, event.y, hook.param)
        elif kind == EventType.EXPOSE:
            if event.count:
                return False
            hook.func(hook.param)
        else:
            hook.func(hook.param)
        return True

    def flush_events(self) -> int:
        """Discard every pending event and return how many there were."""
        count = len(self._queue)
        self._queue.clear()
        return count

    def loop(self) -> None:
        """Deliver events until stopped.

        Without a loop hook the loop ends once the queue is empty, since
        nothing could wake it again.
        """
        self._running = True
        while self._running:
            while self._running and self._queue:
                self.dispatch(self._queue.popleft())
            if not self._running or self._loop_func is None:
                break
            self._loop_func(self._loop_param)
        self._running = False

    def stop(self) -> None:
        """Make the running loop return after the current hook."""
        self._running = False