"""Blocking window, keyboard and mouse events and their dispatcher."""

from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import Callable, ClassVar, TypeVar


class EventType(IntEnum):
    """Kinds of event."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15

    @property
    def display_name(self) -> str:
        """The type name in CamelCase, e.g. ``WindowResize``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class EventCategory(IntFlag):
    """Bit flags grouping events."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _num(value: float) -> str:
    return f"{value:g}"


class Event:
    """Base of all events; concrete subclasses set the type and categories."""

    event_type: ClassVar[EventType] = EventType.NONE
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        if self.event_type is EventType.NONE:
            raise TypeError(f"{type(self).__name__} cannot be instantiated directly")
        self.handled = False

    @property
    def name(self) -> str:
        """Name of the event type."""
        return self.event_type.display_name

    def is_in_category(self, category: EventCategory) -> bool:
        """Whether the event belongs to any of the given categories."""
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self}>"


# Application events


class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    category_flags = EventCategory.APPLICATION

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self._width = int(width)
        self._height = int(height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __str__(self) -> str:
        return f"WindowResizeEvent {self._width}, {self._height}"


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    category_flags = EventCategory.APPLICATION


class AppTickEvent(Event):
    event_type = EventType.APP_TICK
    category_flags = EventCategory.APPLICATION


class AppUpdateEvent(Event):
    event_type = EventType.APP_UPDATE
    category_flags = EventCategory.APPLICATION


class AppRenderEvent(Event):
    event_type = EventType.APP_RENDER
    category_flags = EventCategory.APPLICATION


# Keyboard events


class KeyEvent(Event):
    """Base of keyboard events."""

    category_flags = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, key_code: int) -> None:
        super().__init__()
        self._key_code = int(key_code)

    @property
    def key_code(self) -> int:
        return self._key_code


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED

    def __init__(self, key_code: int, repeat_count: int) -> None:
        super().__init__(key_code)
        self._repeat_count = int(repeat_count)

    @property
    def repeat_count(self) -> int:
        return self._repeat_count

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self._key_code} ({self._repeat_count} repeats)"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self._key_code}"


class KeyTypedEvent(KeyEvent):
    event_type = EventType.KEY_TYPED

    def __str__(self) -> str:
        return f"KeyTypedEvent: {self._key_code}"


# Mouse events


class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self._x = float(x)
        self._y = float(y)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_num(self._x)}, {_num(self._y)}"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self._x_offset = float(x_offset)
        self._y_offset = float(y_offset)

    @property
    def x_offset(self) -> float:
        return self._x_offset

    @property
    def y_offset(self) -> float:
        return self._y_offset

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_num(self._x_offset)}, {_num(self._y_offset)}"


class MouseButtonEvent(Event):
    """Base of mouse button events."""

    category_flags = EventCategory.MOUSE_BUTTON | EventCategory.INPUT

    def __init__(self, button: int) -> None:
        super().__init__()
        self._button = int(button)

    @property
    def button(self) -> int:
        return self._button


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self._button}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self._button}"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to handlers registered for its exact type."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` if the event is of ``event_class``'s type.

        The handler's result becomes the event's ``handled`` flag. Returns
        whether the handler was called.
        """
        if self._event.event_type != event_class.event_type:
            return False
        self._event.handled = bool(func(self._event))  # type: ignore[arg-type]
        return True