import pytest

from raycube.events import (
    BUTTON_PRESS_MASK,
    EXPOSURE_MASK,
    KEY_RELEASE_MASK,
    POINTER_MOTION_MASK,
    Display,
    Event,
    EventKind,
)

ESCAPE = 0xFF1B


def test_new_windows_are_listed_most_recent_first():
    display = Display()
    first = display.new_window(300, 300, "win1")
    second = display.new_window(600, 600, "win2")
    assert display.windows == (second, first)
    assert (second.width, second.height, second.title) == (600, 600, "win2")


def test_new_window_rejects_empty_size():
    with pytest.raises(ValueError):
        Display().new_window(0, 10, "bad")


def test_event_mask_combines_hooks():
    window = Display().new_window(242, 242, "Title1")
    window.key_hook(lambda key: None)
    window.mouse_hook(lambda b, x, y: None)
    window.expose_hook(lambda: None)
    window.hook(EventKind.MOTION_NOTIFY, POINTER_MOTION_MASK, lambda x, y: None)
    assert window.event_mask() == (
        KEY_RELEASE_MASK | BUTTON_PRESS_MASK | EXPOSURE_MASK | POINTER_MOTION_MASK
    )


def test_hook_rejects_unknown_event_kind():
    window = Display().new_window(10, 10, "w")
    with pytest.raises(ValueError):
        window.hook(99, 0, lambda: None)


def test_loop_records_selected_mask():
    display = Display()
    window = display.new_window(10, 10, "w")
    window.key_hook(lambda key: None)
    display.loop([])
    assert window.selected_mask == KEY_RELEASE_MASK


def test_mouse_click_replaces_window():
    display = Display()
    log = []
    state = {}

    def on_mouse(button, x, y):
        log.append((button, x, y))
        display.destroy_window(state["win1"])
        state["win1"] = display.new_window(120, 80, "new win")
        state["win1"].mouse_hook(on_mouse)

    state["win1"] = display.new_window(300, 300, "win1")
    win2 = display.new_window(600, 600, "win2")
    state["win1"].mouse_hook(on_mouse)
    win2.mouse_hook(on_mouse)
    old = state["win1"]
    display.loop([[
        Event(EventKind.BUTTON_PRESS, old, button=1, x=5, y=6),
        Event(EventKind.BUTTON_PRESS, old, button=3, x=7, y=8),
    ]])
    assert log == [(1, 5, 6)]
    assert len(display.windows) == 2
    assert old not in display.windows
    assert state["win1"].title == "new win"


def test_key_hooks_destroy_and_end_loop():
    display = Display()
    keys = []
    win1 = display.new_window(242, 242, "Title1")
    win3 = display.new_window(242, 242, "Title3")

    def key_win1(key):
        keys.append(("win1", key))
        if key == ESCAPE:
            display.loop_end()

    def key_win3(key):
        keys.append(("win3", key))
        if key == ESCAPE:
            display.destroy_window(win3)

    win1.key_hook(key_win1)
    win3.key_hook(key_win3)
    display.loop([
        [Event(EventKind.KEY_RELEASE, win3, key=ESCAPE)],
        [Event(EventKind.KEY_RELEASE, win3, key=97)],
        [Event(EventKind.KEY_RELEASE, win1, key=ESCAPE),
         Event(EventKind.KEY_RELEASE, win1, key=98)],
        [Event(EventKind.KEY_RELEASE, win1, key=99)],
    ])
    assert keys == [("win3", ESCAPE), ("win1", ESCAPE)]
    assert display.windows == (win1,)


def test_key_press_not_delivered_to_release_hook():
    display = Display()
    window = display.new_window(10, 10, "w")
    keys = []
    window.key_hook(keys.append)
    display.loop([[Event(EventKind.KEY_PRESS, window, key=65),
                   Event(EventKind.KEY_RELEASE, window, key=66)]])
    assert keys == [66]


def test_motion_and_expose_callbacks():
    display = Display()
    window = display.new_window(10, 10, "w")
    moves, exposes = [], []
    window.hook(EventKind.MOTION_NOTIFY, POINTER_MOTION_MASK,
                lambda x, y: moves.append((x, y)))
    window.expose_hook(lambda: exposes.append("expose"))
    display.loop([[
        Event(EventKind.MOTION_NOTIFY, window, x=3, y=4),
        Event(EventKind.EXPOSE, window, count=2),
        Event(EventKind.EXPOSE, window, count=0),
    ]])
    assert moves == [(3, 4)]
    assert exposes == ["expose"]


def test_close_request_calls_destroy_hook():
    display = Display()
    window = display.new_window(10, 10, "w")
    closed = []
    window.hook(EventKind.DESTROY_NOTIFY, 0, lambda: closed.append(True))
    display.loop([[Event(EventKind.CLIENT_MESSAGE, window, close_request=True),
                   Event(EventKind.CLIENT_MESSAGE, window)]])
    assert closed == [True]


def test_loop_hook_runs_after_each_batch_and_once_after_end():
    display = Display()
    window = display.new_window(10, 10, "w")
    frames = []

    def tick():
        frames.append(len(frames))
        if len(frames) == 2:
            display.loop_end()

    display.loop_hook(tick)
    display.loop([[], [], [], []])
    assert frames == [0, 1]
    assert display.windows == (window,)


def test_loop_hook_called_after_end_requested_by_event():
    display = Display()
    window = display.new_window(10, 10, "w")
    frames = []
    window.key_hook(lambda key: display.loop_end())
    display.loop_hook(lambda: frames.append("frame"))
    display.loop([[Event(EventKind.KEY_RELEASE, window, key=1)], [], []])
    assert frames == ["frame"]


def test_loop_with_hook_stops_when_no_window_left():
    display = Display()
    window = display.new_window(10, 10, "w")
    frames = []
    window.key_hook(lambda key: display.destroy_window(window))
    display.loop_hook(lambda: frames.append("frame"))
    display.loop([[], [Event(EventKind.KEY_RELEASE, window, key=1)], [], []])
    assert frames == ["frame", "frame"]
    assert display.windows == ()


def test_loop_without_windows_does_nothing():
    display = Display()
    frames = []
    display.loop_hook(lambda: frames.append("frame"))
    display.loop([[], []])
    assert frames == []
    assert display.windows == ()