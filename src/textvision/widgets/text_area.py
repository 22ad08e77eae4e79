"""Scrollable text region with a cursor that follows the mouse."""

from __future__ import annotations

from textvision.event.keypress import Key, KeyEvent
from textvision.event.mouse import MouseEvent
from textvision.event.resize import ResizeEvent
from textvision.widgets.base import Widget


class TextArea(Widget):
    """
    Holds lines of text, a cursor and a vertical scroll offset.

    Clicking places the cursor on the clicked cell, clamped to the text.
    The wheel and the navigation keys scroll.
    """

    def __init__(self, text: str = "", x: int = 0, y: int = 0, width: int = 0, height: int = 0) -> None:
        super().__init__(x, y, width, height)
        self._lines: list[str] = text.split('\n')
        self._scroll_y: int = 0
        self.cursor_x: int = 0
        self.cursor_y: int = 0

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def scroll_y(self) -> int:
        return self._scroll_y

    @property
    def max_scroll(self) -> int:
        return max(0, len(self._lines) - self.height)

    def _scroll_to(self, value: int) -> None:
        self._scroll_y = min(self.max_scroll, max(0, value))

    def _place_cursor(self, line: int, column: int) -> None:
        line = min(len(self._lines) - 1, max(0, line))
        self.cursor_y = line
        self.cursor_x = min(len(self._lines[line]), max(0, column))

    def on_resize(self, resize: ResizeEvent) -> None:
        super().on_resize(resize)
        self._scroll_to(self._scroll_y)

    def on_mouse_down(self, mouse: MouseEvent) -> bool:
        if mouse.is_wheel:
            step = -1 if mouse.mouse_wheel_up else 1
            self._scroll_to(self._scroll_y + step)
            return True
        if not mouse.mouse1:
            return False
        self._place_cursor(self._scroll_y + mouse.y, mouse.x)
        return True

    def on_keypress(self, event: KeyEvent) -> bool:
        if event.key == Key.PAGE_UP:
            self._scroll_to(self._scroll_y - self.height)
            return True
        if event.key == Key.PAGE_DOWN:
            self._scroll_to(self._scroll_y + self.height)
            return True
        if event.key == Key.HOME:
            self._scroll_to(0)
            return True
        if event.key == Key.END:
            self._scroll_to(self.max_scroll)
            return True

        if event.key == Key.UP:
            self._place_cursor(self.cursor_y - 1, self.cursor_x)
        elif event.key == Key.DOWN:
            self._place_cursor(self.cursor_y + 1, self.cursor_x)
        elif event.key == Key.LEFT:
            self._place_cursor(self.cursor_y, self.cursor_x - 1)
        elif event.key == Key.RIGHT:
            self._place_cursor(self.cursor_y, self.cursor_x + 1)
        else:
            return False

        # Keep the cursor on screen
        if self.cursor_y < self._scroll_y:
            self._scroll_to(self.cursor_y)
        elif self.height > 0 and self.cursor_y >= self._scroll_y + self.height:
            self._scroll_to(self.cursor_y - self.height + 1)
        return True
