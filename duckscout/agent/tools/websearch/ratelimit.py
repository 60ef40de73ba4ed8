"""Sliding-window rate limiting for outbound requests."""

import asyncio
import time
from collections import deque
from collections.abc import Awaitable, Callable

from loguru import logger


class ConfigurationError(ValueError):
    """Raised when a rate limiter is constructed with an invalid ceiling."""


class RateLimiter:
    """
    Admit at most ``requests_per_minute`` requests per rolling window.

    Callers sharing one instance serialize through an asyncio lock, so the
    purge/check/record sequence on the window is atomic and waiters are
    admitted in arrival order.
    """

    def __init__(
        self,
        requests_per_minute: int,
        *,
        window: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if (
            isinstance(requests_per_minute, bool)
            or not isinstance(requests_per_minute, int)
            or requests_per_minute <= 0
        ):
            raise ConfigurationError(
                f"requests_per_minute must be a positive integer, got {requests_per_minute!r}"
            )
        self.requests_per_minute = requests_per_minute
        self.window = window
        self._clock = clock
        self._sleep = sleep
        self._requests: deque[float] = deque()
        self._lock = asyncio.Lock()

    async def acquire(self, timeout: float | None = None) -> None:
        """Wait until a request slot is free, then claim it."""
        if timeout is None:
            await self._acquire()
            return
        try:
            await asyncio.wait_for(self._acquire(), timeout)
        except TimeoutError as e:
            raise TimeoutError(f"no rate-limit slot became free within {timeout}s") from e

    async def _acquire(self) -> None:
        async with self._lock:
            while True:
                now = self._clock()
                self._purge(now)
                if len(self._requests) < self.requests_per_minute:
                    self._requests.append(now)
                    return

                wait = self.window - (now - self._requests[0])
                logger.debug(
                    "Rate limit of {}/min reached, waiting {:.2f}s",
                    self.requests_per_minute,
                    wait,
                )
                await self._sleep(wait)

    def _purge(self, now: float) -> None:
        while self._requests and now - self._requests[0] >= self.window:
            self._requests.popleft()
