"""Abstract interfaces for task schedulers and command history storage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

__all__ = ["Scheduler", "HistoryStorage"]


class Scheduler(ABC):
    """An engine that runs submitted tasks.

    ``post`` may be called from any thread; the task runs later, as soon as
    possible, and never before ``post`` has returned.
    """

    @abstractmethod
    def post(self, task: Callable[[], None]) -> None:
        """Submit *task* for execution."""


class HistoryStorage(ABC):
    """Persistent store for the commands of a session history."""

    @abstractmethod
    def store(self, commands: Sequence[str]) -> None:
        """Store *commands* in the history."""

    @abstractmethod
    def commands(self) -> list[str]:
        """Return every stored command."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored command; ``commands`` then returns an empty list."""