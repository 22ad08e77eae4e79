"""Input event model - mouse, keyboard and resize events."""

from typing import Union

from textvision.event.keypress import Key, KeyEvent
from textvision.event.mouse import MouseEvent, MouseEventKind
from textvision.event.resize import ResizeEvent, ResizeEventKind

InputEvent = Union[MouseEvent, ResizeEvent, KeyEvent]

__all__ = [
    "InputEvent",
    "Key",
    "KeyEvent",
    "MouseEvent",
    "MouseEventKind",
    "ResizeEvent",
    "ResizeEventKind",
]
