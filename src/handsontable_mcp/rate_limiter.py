"""Minimum-interval gate for outbound documentation requests.

The limiter delays callers, it never rejects them. In the default mode the
gate is a bare shared timestamp: concurrent callers each compare against the
same ``last_request_time`` and may wake at nearly the same instant. That race
is accepted for the low concurrency of a single MCP client. ``strict=True``
serialises callers behind an ``asyncio.Lock`` instead.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable

import structlog

log = structlog.get_logger()


class RateLimiter:
    """Enforces ``delay_seconds`` between consecutive fetch attempts."""

    def __init__(
        self,
        delay_seconds: float,
        *,
        strict: bool = False,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        self.delay_seconds = delay_seconds
        self.last_request_time: float | None = None
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock() if strict else None

    async def wait(self) -> None:
        """Suspend until the minimum interval has passed, then stamp the attempt."""
        if self._lock is None:
            await self._gate()
            return
        async with self._lock:
            await self._gate()

    async def _gate(self) -> None:
        if self.last_request_time is not None:
            elapsed = self._clock() - self.last_request_time
            if elapsed < self.delay_seconds:
                remaining = self.delay_seconds - elapsed
                log.debug("rate_limit_wait", delay_seconds=round(remaining, 4))
                await self._sleep(remaining)
        self.last_request_time = self._clock()
