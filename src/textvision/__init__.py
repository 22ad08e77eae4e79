"""
textvision: event model and widget-tree dispatch for text-mode windowing

Route mouse, keyboard and resize events through a tree of windows and
widgets, the way Turbo Vision style toolkits do.

Quick Start:
    >>> import textvision as tv
    >>> app = tv.Application(80, 24)
    >>> window = app.add_window(tv.Window("Hello", 10, 5, 40, 12))
    >>> button = window.add_child(tv.Widget(2, 2, 10, 1))
    >>> mouse = tv.MouseEvent.from_screen(tv.MouseEventKind.MOUSE_DOWN, 14, 7, mouse1=True)
    >>> window.hit_path(mouse.x - window.x, mouse.y - window.y)[-1]
    (Widget(2, 2, 10x1), 2, 0)

Features:
    - Mouse events carrying both screen and widget-relative coordinates
    - Front-most-wins hit-testing through trees of any depth
    - Unhandled events bubble back up towards the window
    - Screen resize broadcast and window-to-content resize propagation
    - Keyboard routing along the active widget chain
"""

__version__ = "0.1.0"

# Events
from textvision.event import (
    InputEvent,
    Key,
    KeyEvent,
    MouseEvent,
    MouseEventKind,
    ResizeEvent,
    ResizeEventKind,
)

# Widget tree
from textvision.widgets.base import Rect, Widget
from textvision.widgets.window import Window, WindowFlags
from textvision.application import Application

from textvision.errors import TextVisionError, WidgetTreeError

__all__ = [
    # Version
    "__version__",
    # Events
    "InputEvent",
    "Key",
    "KeyEvent",
    "MouseEvent",
    "MouseEventKind",
    "ResizeEvent",
    "ResizeEventKind",
    # Widget tree
    "Rect",
    "Widget",
    "Window",
    "WindowFlags",
    "Application",
    # Errors
    "TextVisionError",
    "WidgetTreeError",
]
