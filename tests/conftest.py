"""Shared widgets and trees for dispatch tests."""

from typing import Optional

import pytest

from textvision.event.keypress import KeyEvent
from textvision.event.mouse import MouseEvent
from textvision.event.resize import ResizeEvent
from textvision.widgets.base import Widget
from textvision.widgets.window import Window


class RecordingWidget(Widget):
    """Widget that remembers every event it is handed."""

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        parent: Optional[Widget] = None,
        consume: bool = True,
    ) -> None:
        super().__init__(x, y, width, height, parent)
        self.consume = consume
        self.mouse_events: list[MouseEvent] = []
        self.resizes: list[ResizeEvent] = []
        self.keys: list[KeyEvent] = []

    def handle_mouse(self, mouse: MouseEvent) -> bool:
        self.mouse_events.append(mouse)
        return self.consume

    def on_keypress(self, event: KeyEvent) -> bool:
        self.keys.append(event)
        return self.consume

    def on_resize(self, resize: ResizeEvent) -> None:
        self.resizes.append(resize)
        super().on_resize(resize)


@pytest.fixture
def nested_tree() -> dict[str, Widget]:
    """
    Four levels deep:

        root   0,0  80x24
        panel  10,5 40x15   (absolute 10,5)
        group  3,2  20x10   (absolute 13,7)
        leaf   4,1  8x4     (absolute 17,8)
    """
    root = RecordingWidget(0, 0, 80, 24)
    panel = RecordingWidget(10, 5, 40, 15, parent=root, consume=False)
    group = RecordingWidget(3, 2, 20, 10, parent=panel, consume=False)
    leaf = RecordingWidget(4, 1, 8, 4, parent=group)
    return {"root": root, "panel": panel, "group": group, "leaf": leaf}


@pytest.fixture
def editor_layout() -> dict[str, Widget]:
    """Resizable window with a primary content widget and a sibling."""
    window = Window("Editor", 0, 0, 44, 22)
    content = RecordingWidget(0, 0, 42, 20, parent=window)
    sibling = RecordingWidget(0, 20, 42, 1, parent=window)
    window.primary = content
    return {"window": window, "content": content, "sibling": sibling}
