from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from config import settings
from core.logging.logger import StructuredLogger
from domain.errors import RateLimited


Supplier = Callable[[], Awaitable[Any]]
PauseHook = Callable[[float], None]


@dataclass(slots=True)
class RateLimitRetryPolicy:
    """Bounded exponential-backoff retry for 429 responses only.

    Every other error propagates on the first attempt. A Retry-After on the
    error raises the delay to at least that many seconds. ``on_rate_limited``
    is told the delay before sleeping so sibling requests can hold back too.
    """

    max_attempts: int
    backoff_base_ms: int
    backoff_factor: float = 2.0
    jitter_ms: int = 0

    @classmethod
    def from_settings(cls) -> "RateLimitRetryPolicy":
        return cls(
            max_attempts=max(1, settings.RATE_LIMIT_MAX_ATTEMPTS),
            backoff_base_ms=settings.RATE_LIMIT_BACKOFF_MS,
            backoff_factor=settings.RETRY_BACKOFF,
        )

    @classmethod
    def disabled(cls) -> "RateLimitRetryPolicy":
        return cls(max_attempts=1, backoff_base_ms=0)

    def delay_for(self, attempt: int, error: RateLimited) -> float:
        """Seconds to wait after the given failed attempt (1-based)."""
        backoff_ms = self.backoff_base_ms * math.pow(self.backoff_factor, attempt - 1) + self.jitter_ms
        if error.retry_after:
            backoff_ms = max(backoff_ms, error.retry_after * 1000.0)
        return backoff_ms / 1000.0

    async def run(
        self,
        supplier: Supplier,
        *,
        logger: StructuredLogger,
        on_rate_limited: Optional[PauseHook] = None,
        context: dict[str, Any] | None = None,
    ) -> Any:
        for attempt in range(1, self.max_attempts + 1):
            try:
                return await supplier()
            except RateLimited as e:
                if attempt >= self.max_attempts:
                    raise
                delay = self.delay_for(attempt, e)
                logger.warning(
                    lambda: f"rate-limited attempt {attempt}/{self.max_attempts}, backing off {delay:.2f}s",
                    extra={"retry": {**(context or {}), "attempt": attempt}},
                )
                if on_rate_limited:
                    on_rate_limited(delay)
                await asyncio.sleep(delay)
