"""Rate limiter for GitHub API calls."""

import asyncio
import time
from typing import Optional

from ..config import DEFAULT_API_RATE_LIMIT


class RateLimiter:
    """Simple rate limiter for GitHub API calls."""

    def __init__(self, calls_per_second: float = DEFAULT_API_RATE_LIMIT):
        """
        Initialize rate limiter.

        Args:
            calls_per_second: Maximum number of API calls per second
        """
        if calls_per_second <= 0:
            raise ValueError("calls_per_second must be positive")
        self.min_interval = 1.0 / calls_per_second
        self.last_call_time: Optional[float] = None
        self._lock: Optional[asyncio.Lock] = None

    async def wait_if_needed(self) -> None:
        """Wait if necessary to respect rate limit."""
        # Created lazily so the lock binds to the running loop
        if self._lock is None:
            self._lock = asyncio.Lock()

        async with self._lock:
            if self.last_call_time is None:
                self.last_call_time = time.monotonic()
                return

            elapsed = time.monotonic() - self.last_call_time
            if elapsed < self.min_interval:
                await asyncio.sleep(self.min_interval - elapsed)

            self.last_call_time = time.monotonic()
