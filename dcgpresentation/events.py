"""
Input event streams shared between the static background and the slide canvas.

DearCyGui delivers input through handlers attached to items. The presentation
turns those handler callbacks into `KeyEvent` and `MouseButtonEvent` records
and pushes them through `EventStream` objects, where listeners are invoked in
a fixed order: higher priority first, then subscription order.

A listener returning True consumes the event, which stops the remaining
listeners of that stream from seeing it.
"""
import dearcygui as dcg
import enum
import logging

from typing import Any, Callable, NamedTuple

logger = logging.getLogger(__name__)


class Action(enum.Enum):
    PRESS = "press"
    RELEASE = "release"


class KeyEvent(NamedTuple):
    key: Any
    action: Action


class MouseButtonEvent(NamedTuple):
    button: Any
    action: Action


# Keys forwarded from DearCyGui into the keyboard streams
BRIDGED_KEYS = (
    dcg.Key.LEFTARROW,
    dcg.Key.RIGHTARROW,
    dcg.Key.UPARROW,
    dcg.Key.DOWNARROW,
    dcg.Key.ENTER,
    dcg.Key.SPACE,
    dcg.Key.HOME,
    dcg.Key.END,
    dcg.Key.ESCAPE,
    dcg.Key.F,
)

BRIDGED_MOUSE_BUTTONS = (
    dcg.MouseButton.LEFT,
    dcg.MouseButton.RIGHT,
)


class _Listener(NamedTuple):
    priority: int
    order: int
    callback: Callable[[Any], Any]


class EventStream:
    """An ordered list of listeners for one kind of event."""

    def __init__(self, name: str = ""):
        self.name = name
        self._listeners: list[_Listener] = []
        self._counter = 0

    def __len__(self):
        return len(self._listeners)

    def __repr__(self):
        return f"EventStream({self.name!r}, listeners={len(self._listeners)})"

    def on(self, callback: Callable[[Any], Any], priority: int = 0):
        """Subscribe `callback`. Returns it so `on` can be used as a decorator."""
        self._listeners.append(_Listener(priority, self._counter, callback))
        self._counter += 1
        self._listeners.sort(key=lambda l: (-l.priority, l.order))
        return callback

    def off(self, callback: Callable[[Any], Any]) -> bool:
        """Unsubscribe `callback`. Returns whether it was subscribed."""
        for i, listener in enumerate(self._listeners):
            if listener.callback is callback:
                del self._listeners[i]
                return True
        return False

    def clear(self):
        self._listeners.clear()

    def notify(self, event) -> bool:
        """Deliver `event` to the listeners. Returns True if one consumed it."""
        # Listeners may subscribe or unsubscribe while we iterate
        for listener in list(self._listeners):
            if listener.callback(event) is True:
                logger.debug("%s event %s consumed by %r",
                             self.name, event, listener.callback)
                return True
        return False


class Events:
    """The set of input streams of a canvas."""

    _stream_names = ("keyboardbutton", "mousebutton")

    def __init__(self):
        self.keyboardbutton = EventStream("keyboardbutton")
        self.mousebutton = EventStream("mousebutton")

    def streams(self):
        return [getattr(self, name) for name in self._stream_names]

    def clear(self):
        """Drop every listener of every stream."""
        for stream in self.streams():
            stream.clear()

    def forward_to(self, target: 'Events', priority: int = 100):
        """Copy every event of these streams into the same stream of `target`.

        Forwarding never consumes the event, so listeners of lower priority
        on the source still see it whatever the target listeners do.
        """
        for source, sink in zip(self.streams(), target.streams()):
            def forward(event, sink=sink):
                sink.notify(event)
                return False
            source.on(forward, priority=priority)


def _notify_callback(stream: EventStream, event):
    def callback(sender, target, value):
        stream.notify(event)
    return callback


def bridge_handlers(C: dcg.Context, events: Events) -> list:
    """Create DearCyGui handlers feeding `events`.

    The returned handlers must be attached to an item that is rendered
    every frame, typically the primary window.
    """
    handlers = []
    for key in BRIDGED_KEYS:
        handlers.append(dcg.KeyPressHandler(C, key=key,
            callback=_notify_callback(events.keyboardbutton, KeyEvent(key, Action.PRESS))))
        handlers.append(dcg.KeyReleaseHandler(C, key=key,
            callback=_notify_callback(events.keyboardbutton, KeyEvent(key, Action.RELEASE))))
    for button in BRIDGED_MOUSE_BUTTONS:
        handlers.append(dcg.MouseClickHandler(C, button=button,
            callback=_notify_callback(events.mousebutton, MouseButtonEvent(button, Action.PRESS))))
        handlers.append(dcg.MouseReleaseHandler(C, button=button,
            callback=_notify_callback(events.mousebutton, MouseButtonEvent(button, Action.RELEASE))))
    return handlers
