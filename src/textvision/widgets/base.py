"""Widget tree nodes, hit-testing and event routing."""

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass
from typing import Iterator, Optional

from textvision.errors import WidgetTreeError
from textvision.event.keypress import KeyEvent
from textvision.event.mouse import MouseEvent, MouseEventKind
from textvision.event.resize import ResizeEvent, ResizeEventKind

logger = logging.getLogger(__name__)


@dataclass
class Rect:
    """Rectangle bounds for widget positioning, relative to the parent."""
    x: int
    y: int
    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        """Check if (x, y), in the same coordinate space as the rect, is inside."""
        return (
            self.x <= x < self.x + self.width
            and self.y <= y < self.y + self.height
        )


class Widget:
    """
    A node in the widget tree.

    Children are kept front-to-back: the first child is drawn last and is
    the first one tested when routing a mouse event. The parent reference
    is weak; a widget never keeps its parent alive.
    """

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        parent: Optional[Widget] = None,
    ) -> None:
        self.rect = Rect(x, y, width, height)
        self._children: list[Widget] = []
        self._parent_ref: Optional[weakref.ReferenceType[Widget]] = None
        self._active: Optional[Widget] = None
        self._visible = True
        if parent is not None:
            parent.add_child(self)

    # Geometry

    @property
    def x(self) -> int:
        return self.rect.x

    @property
    def y(self) -> int:
        return self.rect.y

    @property
    def width(self) -> int:
        return self.rect.width

    @property
    def height(self) -> int:
        return self.rect.height

    def move_to(self, x: int, y: int) -> None:
        self.rect.x = x
        self.rect.y = y

    @property
    def absolute_x(self) -> int:
        """Screen column of this widget's origin."""
        parent = self.parent
        return self.rect.x + (parent.absolute_x if parent is not None else 0)

    @property
    def absolute_y(self) -> int:
        """Screen row of this widget's origin."""
        parent = self.parent
        return self.rect.y + (parent.absolute_y if parent is not None else 0)

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self._visible = value

    # Tree structure

    @property
    def parent(self) -> Optional[Widget]:
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def children(self) -> list[Widget]:
        """Direct children, front-to-back. The list is a copy."""
        return list(self._children)

    @property
    def active(self) -> Optional[Widget]:
        """Child that receives keyboard input."""
        return self._active

    def is_ancestor_of(self, widget: Widget) -> bool:
        node = widget.parent
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def add_child(self, child: Widget) -> Widget:
        """Append child at the back of the z-order and return it."""
        if child is self or child.is_ancestor_of(self):
            raise WidgetTreeError(f"{child!r} cannot be its own ancestor")
        if child.parent is not None:
            raise WidgetTreeError(f"{child!r} already belongs to {child.parent!r}")
        child._parent_ref = weakref.ref(self)
        self._children.append(child)
        if self._active is None:
            self._active = child
        return child

    def remove_child(self, child: Widget) -> None:
        if child not in self._children:
            raise WidgetTreeError(f"{child!r} is not a child of {self!r}")
        self._children.remove(child)
        child._parent_ref = None
        if self._active is child:
            self._active = self._children[0] if self._children else None

    def raise_child(self, child: Widget) -> None:
        """Move child to the front of the z-order."""
        if child not in self._children:
            raise WidgetTreeError(f"{child!r} is not a child of {self!r}")
        self._children.remove(child)
        self._children.insert(0, child)

    def activate(self, child: Widget) -> None:
        """Give keyboard focus to child."""
        if child not in self._children:
            raise WidgetTreeError(f"{child!r} is not a child of {self!r}")
        self._active = child

    def walk(self) -> Iterator[tuple[int, Widget]]:
        """Yield (depth, widget) for this widget and all descendants, depth first."""
        stack: list[tuple[int, Widget]] = [(0, self)]
        while stack:
            depth, widget = stack.pop()
            yield depth, widget
            for child in reversed(widget._children):
                stack.append((depth + 1, child))

    # Mouse routing

    def child_at(self, x: int, y: int) -> Optional[Widget]:
        """Front-most visible child containing (x, y), given in this widget's coordinates."""
        for child in self._children:
            if child.visible and child.rect.contains(x, y):
                return child
        return None

    def hit_path(self, x: int, y: int) -> list[tuple[Widget, int, int]]:
        """
        Widgets the point (x, y) descends through, starting with this one.

        Each entry carries the point re-expressed in that widget's coordinates.
        """
        path = [(self, x, y)]
        widget = self
        child = widget.child_at(x, y)
        while child is not None:
            x -= child.x
            y -= child.y
            path.append((child, x, y))
            widget = child
            child = widget.child_at(x, y)
        return path

    def dispatch_mouse(self, mouse: MouseEvent) -> Optional[Widget]:
        """
        Route a mouse event, expressed relative to this widget, to its target.

        The event passed in is not modified. Each widget whose handler runs
        receives its own copy with (x, y) relative to that widget. If the
        target does not consume the event it bubbles up towards this widget.

        Returns:
            The widget that consumed the event, or None.
        """
        return self._route_mouse(mouse, 0, 0)

    def _route_mouse(self, mouse: MouseEvent, origin_x: int, origin_y: int) -> Optional[Widget]:
        # origin_x/origin_y: this widget's origin in the coordinate space of mouse
        child = self.child_at(mouse.x - origin_x, mouse.y - origin_y)
        if child is not None:
            consumer = child._route_mouse(mouse, origin_x + child.x, origin_y + child.y)
            if consumer is not None:
                return consumer

        local = mouse.translated(origin_x, origin_y)
        if self.handle_mouse(local):
            logger.debug("%r consumed %s", self, local)
            return self
        return None

    def handle_mouse(self, mouse: MouseEvent) -> bool:
        """Call the handler for the event's kind. Returns True if consumed."""
        if mouse.kind is MouseEventKind.MOUSE_DOWN:
            return self.on_mouse_down(mouse)
        if mouse.kind is MouseEventKind.MOUSE_UP:
            return self.on_mouse_up(mouse)
        if mouse.kind is MouseEventKind.MOUSE_MOTION:
            return self.on_mouse_motion(mouse)
        return self.on_mouse_double_click(mouse)

    def on_mouse_down(self, mouse: MouseEvent) -> bool:
        return False

    def on_mouse_up(self, mouse: MouseEvent) -> bool:
        return False

    def on_mouse_motion(self, mouse: MouseEvent) -> bool:
        return False

    def on_mouse_double_click(self, mouse: MouseEvent) -> bool:
        return False

    # Keyboard routing

    def dispatch_keypress(self, event: KeyEvent) -> Optional[Widget]:
        """Offer a keypress to the active chain, deepest widget first."""
        active = self._active
        if active is not None and active.visible:
            consumer = active.dispatch_keypress(event)
            if consumer is not None:
                return consumer
        if self.on_keypress(event):
            return self
        return None

    def on_keypress(self, event: KeyEvent) -> bool:
        return False

    # Resize

    def on_resize(self, resize: ResizeEvent) -> None:
        """
        Handle a resize.

        A WIDGET resize sets this widget's own size. Anything else is passed
        unchanged to every child.
        """
        if resize.kind is ResizeEventKind.WIDGET:
            self.rect.width = resize.width
            self.rect.height = resize.height
            return

        for child in list(self._children):
            child.on_resize(resize)

    def __repr__(self) -> str:
        r = self.rect
        return f"{type(self).__name__}({r.x}, {r.y}, {r.width}x{r.height})"
