"""Tick sources for game sessions."""

import asyncio
import heapq
import itertools
from typing import Callable

from .interfaces import ScheduledCall, Scheduler


class _ManualCall(ScheduledCall):

    def __init__(self, when: float, callback: Callable[[], None]):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(Scheduler):
    """Virtual clock. Nothing runs until advance() is called."""

    def __init__(self, start: float = 0.0):
        self._now = start
        self._queue = []
        self._counter = itertools.count()

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = _ManualCall(self._now + max(0.0, delay), callback)
        heapq.heappush(self._queue, (call.when, next(self._counter), call))
        return call

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing due callbacks in time order.
        Callbacks scheduled while advancing fire too if they fall due.
        Returns the number of callbacks run."""
        target = self._now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            when, _, call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self._now = when
            call.callback()
            fired += 1
        self._now = target
        return fired

    @property
    def pending(self) -> int:
        """Number of callbacks still waiting to fire."""
        return sum(1 for _, _, call in self._queue if not call.cancelled)


class _AsyncioCall(ScheduledCall):

    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()


class AsyncioScheduler(Scheduler):
    """Runs session callbacks on an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        """Binds to loop, or to the running loop when called from a coroutine."""
        self.loop = loop or asyncio.get_running_loop()

    def now(self) -> float:
        return self.loop.time()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        return _AsyncioCall(self.loop.call_later(delay, callback))
