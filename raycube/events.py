"""Windows with event hooks and a display that runs the event loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Iterable, Optional, Union

KEY_PRESS_MASK = 1 << 0
KEY_RELEASE_MASK = 1 << 1
BUTTON_PRESS_MASK = 1 << 2
BUTTON_RELEASE_MASK = 1 << 3
POINTER_MOTION_MASK = 1 << 6
EXPOSURE_MASK = 1 << 15
STRUCTURE_NOTIFY_MASK = 1 << 17


class EventKind(IntEnum):
    """Event type numbers as used by the X protocol."""

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
    """One event delivered to a window.

    ``close_request`` marks a client message asking the window to close.
    """

    kind: EventKind
    window: "Window"
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    close_request: bool = False


@dataclass
class _Hook:
    mask: int
    callback: Callable[..., object]


@dataclass(eq=False)
class Window:
    """A window and the callbacks registered for its events."""

    width: int
    height: int
    title: str
    hooks: dict[EventKind, _Hook] = field(default_factory=dict, repr=False)
    selected_mask: int = 0

    def hook(self, event: Union[EventKind, int], mask: int,
             callback: Callable[..., object]) -> None:
        """Register callback for an event kind, selecting events with mask."""
        self.hooks[EventKind(event)] = _Hook(mask, callback)

    def key_hook(self, callback: Callable[[int], object]) -> None:
        """Call callback(key) whenever a key is released."""
        self.hook(EventKind.KEY_RELEASE, KEY_RELEASE_MASK, callback)

    def mouse_hook(self, callback: Callable[[int, int, int], object]) -> None:
        """Call callback(button, x, y) whenever a mouse button is pressed."""
        self.hook(EventKind.BUTTON_PRESS, BUTTON_PRESS_MASK, callback)

    def expose_hook(self, callback: Callable[[], object]) -> None:
        """Call callback() whenever the window needs redrawing."""
        self.hook(EventKind.EXPOSE, EXPOSURE_MASK, callback)

    def event_mask(self) -> int:
        """Return the union of the masks of all registered hooks."""
        mask = 0
        for registered in self.hooks.values():
            mask |= registered.mask
        return mask

    def _dispatch(self, event: Event) -> None:
        registered = self.hooks.get(event.kind)
        if registered is None:
            return
        callback = registered.callback
        kind = event.kind
        if kind in (EventKind.KEY_PRESS, EventKind.KEY_RELEASE):
            callback(event.key)
        elif kind in (EventKind.BUTTON_PRESS, EventKind.BUTTON_RELEASE):
            callback(event.button, event.x, event.y)
        elif kind is EventKind.MOTION_NOTIFY:
            callback(event.x, event.y)
        elif kind is EventKind.EXPOSE:
            if not event.count:
                callback()
        else:
            callback()


class Display:
    """Owns the open windows and runs the event loop over them."""

    def __init__(self) -> None:
        self._windows: list[Window] = []
        self._loop_callback: Optional[Callable[[], object]] = None
        self._ended = False

    @property
    def windows(self) -> tuple[Window, ...]:
        """The open windows, most recently created first."""
        return tuple(self._windows)

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window of the given size and title."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid window size {width}x{height}")
        window = Window(width, height, title)
        self._windows.insert(0, window)
        return window

    def destroy_window(self, window: Window) -> None:
        """Close window; its later events are ignored."""
        self._windows = [w for w in self._windows if w is not window]

    def loop_hook(self, callback: Optional[Callable[[], object]]) -> None:
        """Call callback() after each pass over the pending events."""
        self._loop_callback = callback

    def loop_end(self) -> None:
        """Ask the running loop to stop."""
        self._ended = True

    def _dispatch(self, event: Event) -> None:
        window = next((w for w in self._windows if w is event.window), None)
        if window is None:
            return
        if event.kind is EventKind.CLIENT_MESSAGE and event.close_request:
            closer = window.hooks.get(EventKind.DESTROY_NOTIFY)
            if closer is not None:
                closer.callback()
        window._dispatch(event)

    def loop(self, events: Iterable[Iterable[Event]]) -> None:
        """Deliver events to their windows' hooks.

        events yields batches: the events pending at each pass. After every
        batch the loop hook, if any, is called. Without a loop hook the loop
        runs until loop_end is called or the events run out; with one it
        also stops once no window is left.
        """
        for window in self._windows:
            window.selected_mask = window.event_mask()
        if not self._windows:
            return
        self._ended = False
        for batch in events:
            for event in batch:
                if self._ended:
                    break
                self._dispatch(event)
            callback = self._loop_callback
            if callback is not None:
                callback()
            if self._ended or (callback is not None and not self._windows):
                return