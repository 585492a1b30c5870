"""Bounded-concurrency fan-out with slot-indexed results."""
from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple, TypeVar

from core.logging import get_logger

T = TypeVar("T")
R = TypeVar("R")

logger = get_logger(__name__, service="match-stats")


class Backpressure:
    """Shared pause gate for the workers of one fan-out.

    Any worker may push the resume time forward; every worker waits for it
    before starting its next item.
    """

    def __init__(self) -> None:
        self._resume_at = 0.0

    @property
    def paused(self) -> bool:
        return self._resume_at > time.monotonic()

    def pause(self, seconds: float) -> None:
        resume_at = time.monotonic() + max(0.0, seconds)
        if resume_at > self._resume_at:
            self._resume_at = resume_at

    async def wait(self) -> None:
        while True:
            delay = self._resume_at - time.monotonic()
            if delay <= 0:
                return
            await asyncio.sleep(delay)


class BoundedFanOut:
    """Run ``handler`` over a sequence with at most ``concurrency`` in flight.

    A fixed pool of worker tasks drains a queue of ``(index, item)`` pairs
    and writes each handler result into slot ``index`` of a pre-sized list,
    so the output order always equals the input order.

    The handler is expected to turn expected failures into values. Anything
    it raises cancels the remaining workers and propagates, as does
    cancelling ``run`` itself.
    """

    def __init__(self, concurrency: int, backpressure: Optional[Backpressure] = None) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        self.concurrency = concurrency
        self.backpressure = backpressure or Backpressure()

    async def run(
        self,
        items: Sequence[T],
        handler: Callable[[int, T], Awaitable[R]],
    ) -> List[R]:
        results: List[Optional[R]] = [None] * len(items)
        queue: asyncio.Queue[Tuple[int, T]] = asyncio.Queue()
        for pair in enumerate(items):
            queue.put_nowait(pair)

        async def worker() -> None:
            while True:
                try:
                    index, item = queue.get_nowait()
                except asyncio.QueueEmpty:
                    return
                if self.backpressure.paused:
                    logger.debug(lambda: f"item {index} held back by rate-limit pause")
                    await self.backpressure.wait()
                results[index] = await handler(index, item)

        workers = [asyncio.create_task(worker()) for _ in range(min(self.concurrency, len(items)))]
        try:
            await asyncio.gather(*workers)
        except BaseException:
            for w in workers:
                w.cancel()
            await asyncio.gather(*workers, return_exceptions=True)
            raise
        return results  # type: ignore[return-value]
