# This file implements per-client request rate limiting for the API.
# It exists so one caller cannot monopolise the quadratic store-location evaluator.
# Limits use fixed windows keyed by client address; counters live in process memory only.
# The limiter is consulted by the request middleware before any route runs.

from __future__ import annotations

import threading
import time
from dataclasses import dataclass

_EVICTION_THRESHOLD = 1024


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    reset_after_seconds: float


class FixedWindowRateLimiter:
    """Counts requests per client within fixed windows of `window_seconds`."""

    def __init__(self, *, max_requests: int, window_seconds: float) -> None:
        if max_requests <= 0:
            raise ValueError("max_requests must be greater than 0.")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be greater than 0.")
        self.max_requests = max_requests
        self.window_seconds = float(window_seconds)
        self._windows: dict[str, tuple[float, int]] = {}
        self._lock = threading.Lock()

    def hit(self, client_key: str, *, now: float | None = None) -> RateLimitDecision:
        current = time.monotonic() if now is None else now
        with self._lock:
            window_start, count = self._windows.get(client_key, (current, 0))
            if current - window_start >= self.window_seconds:
                window_start, count = current, 0

            allowed = count < self.max_requests
            if allowed:
                count += 1
            self._windows[client_key] = (window_start, count)
            if len(self._windows) > _EVICTION_THRESHOLD:
                self._evict_expired(current)

        return RateLimitDecision(
            allowed=allowed,
            limit=self.max_requests,
            remaining=max(self.max_requests - count, 0),
            reset_after_seconds=max(self.window_seconds - (current - window_start), 0.0),
        )

    @property
    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._windows)

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def _evict_expired(self, current: float) -> None:
        # Caller holds the lock.
        expired = [
            key
            for key, (window_start, _) in self._windows.items()
            if current - window_start >= self.window_seconds
        ]
        for key in expired:
            del self._windows[key]
