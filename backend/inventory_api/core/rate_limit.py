"""
Fixed-window request limiting per client address.

Every client gets a window of ``window_seconds`` starting at its first
request; once ``max_requests`` have been counted in that window further
requests are refused until the window expires.
"""
import logging
import math
import time
from typing import Callable, Dict, Tuple

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class FixedWindowRateLimiter:
    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        # {client_key: (window_start, count)}
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._last_sweep = clock()

    def _current_window(self, key: str, now: float) -> Tuple[float, int]:
        window_start, count = self._windows.get(key, (now, 0))
        if now - window_start >= self.window_seconds:
            return now, 0
        return window_start, count

    def hit(self, key: str) -> bool:
        """Count one request for ``key``. Returns False when it is over the limit."""
        now = self._clock()
        self._sweep_expired(now)
        window_start, count = self._current_window(key, now)
        if count >= self.max_requests:
            self._windows[key] = (window_start, count)
            return False
        self._windows[key] = (window_start, count + 1)
        return True

    def _sweep_expired(self, now: float) -> None:
        # At most once per window; every entry older than a window is stale
        if now - self._last_sweep < self.window_seconds:
            return
        self._windows = {
            key: (window_start, count)
            for key, (window_start, count) in self._windows.items()
            if now - window_start < self.window_seconds
        }
        self._last_sweep = now

    def retry_after(self, key: str) -> int:
        """Seconds until the window of ``key`` resets."""
        now = self._clock()
        window_start, _ = self._current_window(key, now)
        return max(0, math.ceil(window_start + self.window_seconds - now))

    def reset(self) -> None:
        self._windows.clear()


def _client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def add_rate_limiting(app: FastAPI, limiter: FixedWindowRateLimiter) -> None:
    """Install ``limiter`` as an HTTP middleware on ``app``."""
    minutes = max(1, round(limiter.window_seconds / 60))
    message = f"Too many requests, please try again after {minutes} minutes."

    @app.middleware("http")
    async def rate_limit_middleware(request: Request, call_next):
        key = _client_key(request)
        if not limiter.hit(key):
            logger.warning(f"Rate limit hit for client {key} on {request.method} {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"detail": message},
                headers={"Retry-After": str(limiter.retry_after(key))},
            )
        return await call_next(request)
