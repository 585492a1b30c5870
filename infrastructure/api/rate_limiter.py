"""Sliding-window request pacing matching Riot API's documented limits."""
import asyncio
import time
from collections import deque
from typing import Deque, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Sliding-window rate limiter with two windows:
      - Short : N requests per 1 second
      - Long  : N requests per 120 seconds (Riot's 2-minute window)

    ``cooldown`` blocks every caller until a deadline, used when the
    service answers 429 with a Retry-After.
    """

    SHORT_WINDOW_S = 1.0
    LONG_WINDOW_S = 120.0

    def __init__(
        self,
        requests_per_1_sec: int = 18,
        requests_per_2_min: int = 90,
    ):
        self.requests_per_1_sec = requests_per_1_sec
        self.requests_per_2_min = requests_per_2_min

        self._short: Deque[float] = deque()
        self._long:  Deque[float] = deque()
        self._blocked_until = 0.0
        self._lock = asyncio.Lock()

    def _evict(self, now: float) -> None:
        while self._short and now - self._short[0] > self.SHORT_WINDOW_S:
            self._short.popleft()
        while self._long and now - self._long[0] > self.LONG_WINDOW_S:
            self._long.popleft()

    async def acquire(self) -> None:
        async with self._lock:
            while True:
                now = time.monotonic()
                if self._blocked_until > now:
                    await asyncio.sleep(self._blocked_until - now)
                    continue

                self._evict(now)
                ok_short = len(self._short) < self.requests_per_1_sec
                ok_long  = len(self._long) < self.requests_per_2_min
                if ok_short and ok_long:
                    self._short.append(now)
                    self._long.append(now)
                    return

                wait = 0.05
                if not ok_short:
                    wait = max(wait, self.SHORT_WINDOW_S - (now - self._short[0]) + 0.01)
                if not ok_long:
                    wait = max(wait, self.LONG_WINDOW_S - (now - self._long[0]) + 0.01)

                logger.debug(f"Rate limit: waiting {wait:.2f}s")
                await asyncio.sleep(wait)

    def cooldown(self, seconds: float) -> None:
        """Hold back all callers for ``seconds`` from now."""
        until = time.monotonic() + max(0.0, seconds)
        if until > self._blocked_until:
            self._blocked_until = until


class EndpointRateLimiter:
    """Per-endpoint rate limiters with a shared default."""

    def __init__(self):
        self.limiters: Dict[str, RateLimiter] = {}
        self._default: Optional[RateLimiter] = None

    def set_default_limiter(self, requests_per_1_sec: int, requests_per_2_min: int) -> None:
        self._default = RateLimiter(requests_per_1_sec, requests_per_2_min)

    def add_endpoint_limiter(self, endpoint: str, requests_per_1_sec: int, requests_per_2_min: int) -> None:
        self.limiters[endpoint] = RateLimiter(requests_per_1_sec, requests_per_2_min)

    def _for(self, endpoint: str) -> Optional[RateLimiter]:
        return self.limiters.get(endpoint, self._default)

    async def acquire(self, endpoint: str = "default") -> None:
        limiter = self._for(endpoint)
        if limiter:
            await limiter.acquire()

    def cooldown(self, endpoint: str, seconds: float) -> None:
        limiter = self._for(endpoint)
        if limiter:
            limiter.cooldown(seconds)
