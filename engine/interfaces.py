"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod
from typing import Callable


class Storage(ABC):
    """Durable key-value store holding one record per game namespace."""

    @abstractmethod
    def get(self, key: str) -> dict | None:
        """Load a record. Returns None when absent or unreadable."""
        pass

    @abstractmethod
    def set(self, key: str, value: dict) -> None:
        """Save a record, replacing any previous value."""
        pass


class ContentPool(ABC):
    """Read-only catalog of quiz items for one or more domains."""

    @abstractmethod
    def query(self, domain, max_tier: int, group: str | None = None,
              mode: str | None = None) -> list:
        """Return items of a domain at max_tier or easier.
        group/mode of None match everything."""
        pass


class ScheduledCall(ABC):
    """Handle for a callback registered with a Scheduler."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call twice."""
        pass


class Scheduler(ABC):
    """Source of time and deferred callbacks for a session."""

    @abstractmethod
    def now(self) -> float:
        """Monotonic time in seconds."""
        pass

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """Run callback after delay seconds."""
        pass
