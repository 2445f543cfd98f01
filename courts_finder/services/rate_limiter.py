"""In-memory fixed-window rate limiting, keyed by client address."""
import logging
import math
import time
from typing import Callable, Dict, Tuple

from courts_finder.core.config import settings
from courts_finder.core.errors import RateLimitError

logger = logging.getLogger(__name__)


class FixedWindowRateLimiter:
    """Allow ``limit`` hits per key in each ``window_seconds`` window.

    A limit of 0 disables limiting. State lives in this process only.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: Dict[str, Tuple[int, float]] = {}  # key -> (count, reset_at)
        self._next_sweep = 0.0

    def hit(self, key: str) -> None:
        """
        Record a request for ``key``.

        Raises:
            RateLimitError: If the key has used up its window
        """
        if self.limit <= 0:
            return

        now = self._clock()
        if now >= self._next_sweep:
            self._sweep(now)

        count, reset_at = self._windows.get(key, (0, 0.0))

        if now >= reset_at:
            self._windows[key] = (1, now + self.window_seconds)
            return

        if count >= self.limit:
            retry_after = max(1, math.ceil(reset_at - now))
            logger.warning(f"Rate limit exceeded for client {key[:8]}...")
            raise RateLimitError(
                "Too many requests. Please try again later.",
                retry_after=retry_after,
                limit=self.limit,
            )

        self._windows[key] = (count + 1, reset_at)

    def _sweep(self, now: float) -> None:
        """Drop expired windows; runs at most once per window length."""
        expired = [key for key, (_, reset_at) in self._windows.items() if reset_at <= now]
        for key in expired:
            del self._windows[key]
        self._next_sweep = now + self.window_seconds

    def __len__(self) -> int:
        return len(self._windows)


# Singleton instance
chat_rate_limiter = FixedWindowRateLimiter(settings.CHAT_RATE_LIMIT_PER_MINUTE)


def get_chat_rate_limiter() -> FixedWindowRateLimiter:
    return chat_rate_limiter
