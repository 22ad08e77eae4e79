"""Screen and widget resize events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ResizeEventKind(Enum):
    """Scope of a resize."""
    SCREEN = auto()  # The whole terminal changed size
    WIDGET = auto()  # A container is resizing one of its children


@dataclass(frozen=True)
class ResizeEvent:
    """New dimensions for the receiver of the event."""
    kind: ResizeEventKind
    width: int
    height: int

    def __str__(self) -> str:
        return f"Resize: {self.kind.name} width {self.width} height {self.height}"
