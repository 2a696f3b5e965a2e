"""Per-question countdown."""

import logging
from typing import Callable

from .config import TICK_SECONDS
from .interfaces import Scheduler

logger = logging.getLogger(__name__)


class QuestionTimer:
    """Counts down whole seconds and calls on_expire at zero.

    Only one tick is ever pending. pause() keeps the remaining time, including
    the part of the current second already played, and resume() continues
    from it.
    """

    def __init__(self, scheduler: Scheduler, on_expire: Callable[[], None],
                 on_tick: Callable[[int], None] | None = None):
        self.scheduler = scheduler
        self.on_expire = on_expire
        self.on_tick = on_tick
        self.remaining = None
        self._pending = None
        self._armed_at = None
        self._until_tick = TICK_SECONDS

    @property
    def running(self) -> bool:
        return self._pending is not None

    def start(self, seconds: int) -> None:
        """Arm a fresh countdown. Zero seconds means untimed."""
        self.cancel()
        if seconds <= 0:
            return
        self.remaining = int(seconds)
        self._arm(TICK_SECONDS)

    def pause(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
            played = self.scheduler.now() - self._armed_at
            self._until_tick = max(0.0, self._until_tick - played)

    def resume(self) -> None:
        if self._pending is None and self.remaining:
            self._arm(self._until_tick)

    def cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self.remaining = None
        self._until_tick = TICK_SECONDS

    def _arm(self, delay: float) -> None:
        self._armed_at = self.scheduler.now()
        self._until_tick = delay
        self._pending = self.scheduler.call_later(delay, self._tick)

    def _tick(self) -> None:
        self._pending = None
        if self.remaining is None:
            return
        self.remaining -= 1
        if self.on_tick:
            self.on_tick(self.remaining)
        if self.remaining <= 0:
            self.remaining = 0
            logger.debug("Question timer expired")
            self.on_expire()
        else:
            self._arm(TICK_SECONDS)
