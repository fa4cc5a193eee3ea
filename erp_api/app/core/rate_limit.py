"""
Fixed-window rate limiting.

A ``RateLimiter`` counts hits per key (an e-mail address, a client
address) inside a window that starts with the first hit and resets once
it has elapsed.  State lives in process memory, so limits are per worker.
"""

import logging
import time
from typing import Dict, Tuple

from .config import settings
from .errors import rate_limited

logger = logging.getLogger(__name__)


class RateLimiter:
    """Allow at most ``max_requests`` hits per key every ``window_seconds``."""

    def __init__(self, max_requests: int, window_seconds: int) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        # key -> (hits, window reset timestamp)
        self._windows: Dict[str, Tuple[int, float]] = {}

    def hit(self, key: str) -> bool:
        """Count a hit for ``key`` and return whether it is allowed."""
        now = time.monotonic()
        count, reset_at = self._windows.get(key, (0, 0.0))
        if now >= reset_at:
            self._windows[key] = (1, now + self.window_seconds)
            return True
        if count >= self.max_requests:
            return False
        self._windows[key] = (count + 1, reset_at)
        return True

    def remaining(self, key: str) -> int:
        count, reset_at = self._windows.get(key, (0, 0.0))
        if time.monotonic() >= reset_at:
            return self.max_requests
        return max(0, self.max_requests - count)

    def retry_after(self, key: str) -> int:
        """Seconds until the window of ``key`` resets."""
        _, reset_at = self._windows.get(key, (0, 0.0))
        return max(0, int(reset_at - time.monotonic()) + 1)

    def check(self, key: str) -> None:
        """Count a hit and raise a 429 ``ApiError`` when over the limit."""
        if not self.hit(key):
            logger.warning("Rate limit exceeded for %s", key)
            raise rate_limited(f"Too many attempts; retry in {self.retry_after(key)} seconds")

    def reset(self, key: str) -> None:
        self._windows.pop(key, None)

    def clear(self) -> None:
        self._windows.clear()


login_limiter = RateLimiter(settings.login_max_attempts, settings.login_window_seconds)
