"""
Sequential, rate-limited task queue.

Scryfall enforces a request rate limit, so every call to it runs one at a
time with a minimum pause between the end of one call and the start of the
next. Tests construct the queue with interval 0.

Every Scryfall caller in the process shares the queue from
get_shared_queue(), so concurrent requests never call Scryfall in parallel.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import TypeVar

from pauperlist.config import settings

T = TypeVar("T")


class RateLimitedQueue:
    """
    Runs async tasks strictly one at a time with a minimum interval.

    Concurrency is 1: a second submit() waits for the first to finish.
    Tasks are not cancelled once started.
    """

    def __init__(self, min_interval: float = 0.1) -> None:
        """
        Args:
            min_interval: Seconds to wait between the end of one task and
                the start of the next
        """
        if min_interval < 0:
            raise ValueError(f"min_interval must be >= 0, got {min_interval}")
        self.min_interval = min_interval
        self._lock = asyncio.Lock()
        self._last_finished: float | None = None

    async def submit(self, func: Callable[..., Awaitable[T]], *args: object) -> T:
        """
        Run func(*args) once the queue is free and the interval has passed.

        Returns:
            Whatever the task returns; exceptions propagate unchanged
        """
        async with self._lock:
            await self._wait_for_slot()
            try:
                return await func(*args)
            finally:
                self._last_finished = time.monotonic()

    async def _wait_for_slot(self) -> None:
        if self._last_finished is None or self.min_interval == 0:
            return
        remaining = self.min_interval - (time.monotonic() - self._last_finished)
        if remaining > 0:
            await asyncio.sleep(remaining)


_shared_queue: RateLimitedQueue | None = None


def get_shared_queue() -> RateLimitedQueue:
    """Process-wide queue for every Scryfall call, created on first use."""
    global _shared_queue
    if _shared_queue is None:
        _shared_queue = RateLimitedQueue(settings.scryfall_request_interval)
    return _shared_queue
