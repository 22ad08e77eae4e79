"""Status bar holding a window's info text and keyboard shortcuts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from textvision.event.keypress import Key, KeyEvent
from textvision.widgets.base import Widget


class Command(Enum):
    """Application-level commands a shortcut can trigger."""
    HELP = auto()
    SHELL = auto()
    EXIT = auto()


@dataclass
class Shortcut:
    """A keyboard shortcut to display."""
    key: Key | str
    command: Command
    label: str

    def matches(self, event: KeyEvent) -> bool:
        """Check if a key event matches this shortcut."""
        if isinstance(self.key, Key):
            return event.key == self.key
        return event.char == self.key


class StatusBar(Widget):
    """Bottom status bar showing info and keyboard shortcuts."""

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self.text = text
        self._shortcuts: list[Shortcut] = []

    @property
    def shortcuts(self) -> list[Shortcut]:
        return list(self._shortcuts)

    def add_shortcut(self, key: Key | str, command: Command, label: str) -> Shortcut:
        shortcut = Shortcut(key, command, label)
        self._shortcuts.append(shortcut)
        return shortcut

    def command_for(self, event: KeyEvent) -> Optional[Command]:
        """Command bound to event, if any."""
        for shortcut in self._shortcuts:
            if shortcut.matches(event):
                return shortcut.command
        return None
