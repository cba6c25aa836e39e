"""Concurrency limiter for outbound Riot API requests."""
from __future__ import annotations

import asyncio
from collections import deque
from typing import Deque
import logging

logger = logging.getLogger(__name__)


class ConcurrencyLimiter:
    """
    Counting semaphore with an explicit FIFO wait list.

    At most ``limit`` holders at any instant across every coroutine that
    shares this instance. Waiters are served strictly in arrival order;
    a released slot is handed straight to the oldest waiter so a newcomer
    cannot overtake it.

        async with limiter:
            ...
    """

    def __init__(self, limit: int = 5):
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self.limit = limit
        self._in_flight = 0
        self._waiters: Deque[asyncio.Future[None]] = deque()

    @property
    def in_flight(self) -> int:
        return self._in_flight

    @property
    def waiting(self) -> int:
        return sum(1 for w in self._waiters if not w.done())

    async def acquire(self) -> None:
        if self._in_flight < self.limit and not self.waiting:
            self._in_flight += 1
            return

        fut: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._waiters.append(fut)
        logger.debug(f"Concurrency limit reached ({self.limit}), queued, {self.waiting} waiting")
        try:
            await fut
        except asyncio.CancelledError:
            # The slot may have been handed over right before cancellation
            if fut.done() and not fut.cancelled():
                self.release()
            raise

    def release(self) -> None:
        while self._waiters:
            fut = self._waiters.popleft()
            if not fut.done():
                # Hand the slot over: in_flight stays the same
                fut.set_result(None)
                return
        if self._in_flight <= 0:
            raise RuntimeError("release() called more times than acquire()")
        self._in_flight -= 1

    async def __aenter__(self) -> "ConcurrencyLimiter":
        await self.acquire()
        return self

    async def __aexit__(self, *_) -> None:
        self.release()
