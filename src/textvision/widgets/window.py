"""Top-level windows."""

from __future__ import annotations

import logging
from enum import Flag, auto
from typing import Optional

from textvision.config import BORDER_MARGIN
from textvision.errors import WidgetTreeError
from textvision.event.resize import ResizeEvent, ResizeEventKind
from textvision.widgets.base import Widget
from textvision.widgets.status_bar import StatusBar

logger = logging.getLogger(__name__)


class WindowFlags(Flag):
    """Window behavior flags."""
    NONE = 0
    RESIZABLE = auto()
    CENTERED = auto()  # Centered on the screen when added to an application
    MODAL = auto()  # Captures all mouse input while in front


class Window(Widget):
    """
    Root of a widget sub-tree with a title and a frame.

    A window may designate one direct child as its primary content. When the
    window itself is resized, the primary child is kept the size of the
    window minus the frame; the other children keep their size.
    """

    def __init__(
        self,
        title: str,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        flags: WindowFlags = WindowFlags.RESIZABLE,
        border_margin: int = BORDER_MARGIN,
    ) -> None:
        super().__init__(x, y, width, height)
        self.title = title
        self.flags = flags
        self.border_margin = border_margin
        self._primary: Optional[Widget] = None
        self._status_bar: Optional[StatusBar] = None

    @property
    def resizable(self) -> bool:
        return bool(self.flags & WindowFlags.RESIZABLE)

    @property
    def modal(self) -> bool:
        return bool(self.flags & WindowFlags.MODAL)

    @property
    def centered(self) -> bool:
        return bool(self.flags & WindowFlags.CENTERED)

    @property
    def primary(self) -> Optional[Widget]:
        return self._primary

    @primary.setter
    def primary(self, widget: Optional[Widget]) -> None:
        if widget is not None and widget.parent is not self:
            raise WidgetTreeError(f"primary widget {widget!r} must be a direct child of {self!r}")
        self._primary = widget

    @property
    def status_bar(self) -> Optional[StatusBar]:
        """Status bar shown while this window is active. Not part of the child list."""
        return self._status_bar

    @status_bar.setter
    def status_bar(self, widget: Optional[StatusBar]) -> None:
        self._status_bar = widget

    def remove_child(self, child: Widget) -> None:
        super().remove_child(child)
        if self._primary is child:
            self._primary = None

    def resize(self, width: int, height: int) -> bool:
        """
        Resize the window as a user drag would.

        Returns False, leaving the window untouched, if it is not resizable.
        """
        if not self.resizable:
            logger.debug("%r is not resizable", self)
            return False
        self.on_resize(ResizeEvent(ResizeEventKind.WIDGET, width, height))
        return True

    def on_resize(self, resize: ResizeEvent) -> None:
        if resize.kind is ResizeEventKind.WIDGET:
            self.rect.width = resize.width
            self.rect.height = resize.height
            if self._primary is None:
                return
            content = ResizeEvent(
                ResizeEventKind.WIDGET,
                resize.width - self.border_margin,
                resize.height - self.border_margin,
            )
            logger.debug("%r resizing primary %r: %s", self, self._primary, content)
            self._primary.on_resize(content)
            return

        for child in list(self._children):
            child.on_resize(resize)

    def __repr__(self) -> str:
        r = self.rect
        return f"{type(self).__name__}({self.title!r}, {r.x}, {r.y}, {r.width}x{r.height})"
