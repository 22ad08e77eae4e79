"""Mouse input events.

The relative (x, y) of a MouseEvent are mutable and always expressed in the
coordinate space of the widget that is handling the event. The absolute
coordinates are fixed when the event is decoded from the terminal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class MouseEventKind(Enum):
    """What the mouse did."""
    MOUSE_MOTION = auto()
    MOUSE_DOWN = auto()
    MOUSE_UP = auto()
    MOUSE_DOUBLE_CLICK = auto()


_FIXED_FIELDS = frozenset({
    "kind",
    "absolute_x",
    "absolute_y",
    "mouse1",
    "mouse2",
    "mouse3",
    "mouse_wheel_up",
    "mouse_wheel_down",
})


@dataclass
class MouseEvent:
    """A mouse motion or click.

    Attributes:
        kind: Type of event
        x: Column relative to the handling widget
        y: Row relative to the handling widget
        absolute_x: Screen column
        absolute_y: Screen row
        mouse1: Left button is down
        mouse2: Right button is down
        mouse3: Middle button is down
        mouse_wheel_up: Wheel up (button 4)
        mouse_wheel_down: Wheel down (button 5)
    """
    kind: MouseEventKind
    x: int
    y: int
    absolute_x: int
    absolute_y: int
    mouse1: bool = False
    mouse2: bool = False
    mouse3: bool = False
    mouse_wheel_up: bool = False
    mouse_wheel_down: bool = False

    def __setattr__(self, name: str, value: object) -> None:
        if name in _FIXED_FIELDS and name in self.__dict__:
            raise AttributeError(f"MouseEvent.{name} is fixed at construction")
        super().__setattr__(name, value)

    @classmethod
    def from_screen(
        cls,
        kind: MouseEventKind,
        absolute_x: int,
        absolute_y: int,
        mouse1: bool = False,
        mouse2: bool = False,
        mouse3: bool = False,
        mouse_wheel_up: bool = False,
        mouse_wheel_down: bool = False,
    ) -> MouseEvent:
        """Create an event whose relative origin is the screen itself."""
        return cls(
            kind, absolute_x, absolute_y, absolute_x, absolute_y,
            mouse1, mouse2, mouse3, mouse_wheel_up, mouse_wheel_down,
        )

    def dup(self) -> MouseEvent:
        """Return a value-equal copy that can be mutated independently."""
        return MouseEvent(
            self.kind, self.x, self.y, self.absolute_x, self.absolute_y,
            self.mouse1, self.mouse2, self.mouse3,
            self.mouse_wheel_up, self.mouse_wheel_down,
        )

    def translated(self, dx: int, dy: int) -> MouseEvent:
        """Return a copy re-expressed relative to an origin at (dx, dy)."""
        mouse = self.dup()
        mouse.x -= dx
        mouse.y -= dy
        return mouse

    @property
    def is_wheel(self) -> bool:
        return self.mouse_wheel_up or self.mouse_wheel_down

    def __str__(self) -> str:
        return (
            f"Mouse: {self.kind.name} x {self.x} y {self.y} "
            f"absolute_x {self.absolute_x} absolute_y {self.absolute_y} "
            f"1 {self.mouse1} 2 {self.mouse2} 3 {self.mouse3} "
            f"wheel_up {self.mouse_wheel_up} wheel_down {self.mouse_wheel_down}"
        )
