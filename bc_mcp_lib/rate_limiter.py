"""
Concurrency and sliding-window rate limiting for outbound API calls.
"""

import asyncio
import random
import time
from collections import deque
from typing import Awaitable, Callable, Deque, Optional, TypeVar

from .constants import (
    DEFAULT_MAX_CONCURRENT, DEFAULT_MAX_PER_WINDOW, DEFAULT_WINDOW_MS,
    BACKOFF_BASE_MS, BACKOFF_MAX_MS,
)

T = TypeVar("T")


def _now_ms() -> float:
    return time.monotonic() * 1000.0


class RateLimiter:
    """Bounds in-flight operations and operation starts per sliding window.

    Waiters are served FIFO. When an operation finishes, its slot is handed
    directly to the head waiter so a newcomer can never overtake it.
    """

    def __init__(self, max_concurrent: int = DEFAULT_MAX_CONCURRENT,
                 max_per_window: int = DEFAULT_MAX_PER_WINDOW,
                 window_ms: int = DEFAULT_WINDOW_MS):
        if max_concurrent < 1 or max_per_window < 1 or window_ms <= 0:
            raise ValueError("Rate limiter bounds must be positive")
        self.max_concurrent = max_concurrent
        self.max_per_window = max_per_window
        self.window_ms = window_ms
        self.concurrent = 0
        self._timestamps: Deque[float] = deque()
        self._waiters: Deque[asyncio.Future] = deque()

    @property
    def queue_length(self) -> int:
        return len(self._waiters)

    def _prune(self, now: float):
        cutoff = now - self.window_ms
        while self._timestamps and self._timestamps[0] <= cutoff:
            self._timestamps.popleft()

    async def _acquire_slot(self):
        if self.concurrent < self.max_concurrent and not self._waiters:
            self.concurrent += 1
            return

        waiter = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        try:
            await waiter
        except asyncio.CancelledError:
            if waiter.done() and not waiter.cancelled():
                # Slot was already handed to us, pass it on
                self._release()
            elif waiter in self._waiters:
                self._waiters.remove(waiter)
            raise

    async def _wait_for_window(self):
        while True:
            now = _now_ms()
            self._prune(now)
            if len(self._timestamps) < self.max_per_window:
                return
            wait_ms = self._timestamps[0] + self.window_ms - now
            await asyncio.sleep(max(wait_ms, 1.0) / 1000.0)

    def _release(self):
        self.concurrent -= 1
        while self._waiters:
            waiter = self._waiters.popleft()
            if waiter.cancelled():
                continue
            self.concurrent += 1
            waiter.set_result(None)
            return

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Run operation once the window and a slot allow it, and return (or raise) its outcome.

        The window is checked before a slot is reserved, so a caller held back
        by the window never occupies a slot.
        """
        await self._wait_for_window()
        await self._acquire_slot()
        self._timestamps.append(_now_ms())
        try:
            return await operation()
        finally:
            self._release()

    @staticmethod
    def calculate_backoff(attempt: int, max_delay_ms: int = BACKOFF_MAX_MS,
                          jitter: Optional[Callable[[], float]] = None) -> float:
        """Exponential backoff with up to one second of jitter, capped at max_delay_ms."""
        jitter = jitter or random.random
        delay = BACKOFF_BASE_MS * (2 ** attempt) + jitter() * BACKOFF_BASE_MS
        return min(delay, max_delay_ms)
