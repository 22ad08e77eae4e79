"""Widget tree: base widget, windows and the bundled demo widgets."""

from textvision.widgets.base import Rect, Widget
from textvision.widgets.window import Window, WindowFlags
from textvision.widgets.status_bar import Command, Shortcut, StatusBar
from textvision.widgets.text_area import TextArea

__all__ = [
    "Rect",
    "Widget",
    "Window",
    "WindowFlags",
    "Command",
    "Shortcut",
    "StatusBar",
    "TextArea",
]
