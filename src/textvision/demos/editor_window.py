"""Resizable window wrapping a text area."""

from __future__ import annotations

from textvision.config import BORDER_MARGIN
from textvision.event.keypress import Key
from textvision.widgets.status_bar import Command, StatusBar
from textvision.widgets.text_area import TextArea
from textvision.widgets.window import Window, WindowFlags

SAMPLE_TEXT = """\
This is an example of an editable text area. Some example text follows.

textvision routes mouse, keyboard and resize events through a tree of
text-mode windows and widgets, in the spirit of Borland's Turbo Vision.

Click anywhere in this text to move the cursor. Resize the window and
the text area follows it, keeping clear of the window frame.

1 2 3 123
"""

WINDOW_WIDTH = 44
WINDOW_HEIGHT = 22


class EditorWindow(Window):
    """Window whose primary content is a TextArea that tracks the window size."""

    def __init__(
        self,
        title: str = "Editor",
        text: str = SAMPLE_TEXT,
        border_margin: int = BORDER_MARGIN,
    ) -> None:
        super().__init__(
            title, 0, 0, WINDOW_WIDTH, WINDOW_HEIGHT,
            flags=WindowFlags.RESIZABLE,
            border_margin=border_margin,
        )
        self.editor = self.add_child(TextArea(
            text, 0, 0,
            WINDOW_WIDTH - border_margin,
            WINDOW_HEIGHT - border_margin,
        ))
        self.primary = self.editor

        self.status_bar = StatusBar("Editable text demo window")
        self.status_bar.add_shortcut(Key.F1, Command.HELP, "Help")
        self.status_bar.add_shortcut(Key.F2, Command.SHELL, "Shell")
        self.status_bar.add_shortcut(Key.F10, Command.EXIT, "Exit")
