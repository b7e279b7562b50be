"""Key events and the base class of devices that deliver them."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import NamedTuple

from .interfaces import Scheduler

__all__ = ["KeyType", "Key", "InputDevice"]


class KeyType(Enum):
    ASCII = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    BACKSPACE = auto()
    CANC = auto()
    HOME = auto()
    END = auto()
    RET = auto()
    EOF = auto()
    IGNORED = auto()


class Key(NamedTuple):
    """A key event: its kind and, for ASCII keys, the character typed."""

    type: KeyType
    char: str = " "


class InputDevice:
    """Source of key events, delivered to a handler through a scheduler."""

    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self._handler: Callable[[Key], None] | None = None

    def register(self, handler: Callable[[Key], None] | None) -> None:
        """Set the function that receives key events."""
        self._handler = handler

    def notify(self, key: Key) -> None:
        """Post *key* to the scheduler for delivery to the current handler."""
        self._scheduler.post(lambda: self._deliver(key))

    def _deliver(self, key: Key) -> None:
        if self._handler is not None:
            self._handler(key)