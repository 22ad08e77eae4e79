"""Application: owns the screen and the window stack and drives dispatch."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from textvision.config import DEFAULT_SCREEN_HEIGHT, DEFAULT_SCREEN_WIDTH
from textvision.errors import WidgetTreeError
from textvision.event import InputEvent
from textvision.event.keypress import KeyEvent
from textvision.event.mouse import MouseEvent, MouseEventKind
from textvision.event.resize import ResizeEvent, ResizeEventKind
from textvision.widgets.base import Widget
from textvision.widgets.status_bar import Command
from textvision.widgets.window import Window

logger = logging.getLogger(__name__)


class Application:
    """
    Single-threaded event driver.

    Windows are kept front-to-back; the first one is the active window.
    Every event passed to dispatch() is routed to completion before the
    call returns.
    """

    def __init__(self, width: int = DEFAULT_SCREEN_WIDTH, height: int = DEFAULT_SCREEN_HEIGHT) -> None:
        self.screen_width = width
        self.screen_height = height
        self.running = False
        self._windows: list[Window] = []

    @property
    def windows(self) -> list[Window]:
        return list(self._windows)

    @property
    def active_window(self) -> Optional[Window]:
        return self._windows[0] if self._windows else None

    def add_window(self, window: Window) -> Window:
        """Put window in front of all others and make it active."""
        if window in self._windows:
            raise WidgetTreeError(f"{window!r} is already open")
        if window.parent is not None:
            raise WidgetTreeError(f"{window!r} is a child of {window.parent!r}")
        if window.centered:
            window.move_to(
                max(0, (self.screen_width - window.width) // 2),
                max(0, (self.screen_height - window.height) // 2),
            )
        self._windows.insert(0, window)
        logger.debug("opened %r", window)
        return window

    def remove_window(self, window: Window) -> None:
        if window not in self._windows:
            raise WidgetTreeError(f"{window!r} is not open")
        self._windows.remove(window)
        logger.debug("closed %r", window)

    def activate_window(self, window: Window) -> None:
        if window not in self._windows:
            raise WidgetTreeError(f"{window!r} is not open")
        self._windows.remove(window)
        self._windows.insert(0, window)

    def window_at(self, x: int, y: int) -> Optional[Window]:
        """Front-most visible window containing the screen point (x, y)."""
        for window in self._windows:
            if window.visible and window.rect.contains(x, y):
                return window
        return None

    def dispatch(self, event: InputEvent) -> Optional[Widget]:
        """
        Route one event to completion.

        Returns:
            The widget that consumed the event, or None.
        """
        if isinstance(event, MouseEvent):
            return self._dispatch_mouse(event)
        if isinstance(event, ResizeEvent):
            self._dispatch_resize(event)
            return None
        return self._dispatch_keypress(event)

    def _dispatch_mouse(self, mouse: MouseEvent) -> Optional[Widget]:
        front = self.active_window
        if front is not None and front.modal:
            window: Optional[Window] = front
        else:
            window = self.window_at(mouse.x, mouse.y)
        if window is None:
            logger.debug("no window under %s", mouse)
            return None

        if mouse.kind is MouseEventKind.MOUSE_DOWN and window is not front:
            self.activate_window(window)
        return window.dispatch_mouse(mouse.translated(window.x, window.y))

    def _dispatch_resize(self, resize: ResizeEvent) -> None:
        if resize.kind is ResizeEventKind.SCREEN:
            self.screen_width = resize.width
            self.screen_height = resize.height
            for window in list(self._windows):
                window.on_resize(resize)
            return

        window = self.active_window
        if window is not None:
            window.on_resize(resize)

    def _dispatch_keypress(self, event: KeyEvent) -> Optional[Widget]:
        window = self.active_window
        if window is None:
            return None
        consumer = window.dispatch_keypress(event)
        if consumer is not None:
            return consumer

        # Unhandled keys fall through to the window's status bar shortcuts
        status_bar = window.status_bar
        command = status_bar.command_for(event) if status_bar is not None else None
        if command is not None and self.on_command(command):
            return status_bar
        return None

    def on_command(self, command: Command) -> bool:
        """Handle an application command. Returns True if handled."""
        logger.debug("command %s", command.name)
        if command is Command.EXIT:
            self.running = False
            return True
        return False

    def run(self, events: Iterable[InputEvent]) -> int:
        """
        Dispatch events in order until they run out or EXIT is handled.

        Returns the number of events dispatched.
        """
        self.running = True
        count = 0
        for event in events:
            if not self.running:
                break
            self.dispatch(event)
            count += 1
        self.running = False
        return count
