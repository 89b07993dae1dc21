"""Background scheduler that runs a collection cycle every few seconds.

A lightweight ``asyncio.Task`` awaits ``collector.gather()`` every
*interval* seconds under a deadline.  A failed or timed-out cycle is
logged and the loop carries on with the next tick; the collector itself
never retries.
"""

import asyncio

from odyssey_stats.core.collector import OdysseyCollector
from odyssey_stats.core.logging import logger


class CollectorSampler:
    """Periodically run an ``OdysseyCollector`` cycle.

    Args:
        collector: The collector whose ``gather()`` is awaited on each tick.
        interval: Seconds between cycles (default 10.0).
        timeout: Deadline for a single cycle (default 30.0).
    """

    def __init__(
        self,
        collector: OdysseyCollector,
        interval: float = 10.0,
        timeout: float = 30.0,
    ) -> None:
        self._collector = collector
        self._interval = interval
        self._timeout = timeout
        self._task: asyncio.Task[None] | None = None
        self.cycles = 0
        self.failures = 0
        self._logger = logger.with_context(context_base="sampler", operation="gather")

    async def start(self) -> None:
        """Create the background polling task."""
        if self._task is None:
            self._task = asyncio.create_task(self._loop())

    async def stop(self) -> None:
        """Cancel the background task and wait for it to finish."""
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

    async def tick(self) -> bool:
        """Run one cycle; return whether it succeeded."""
        self.cycles += 1
        try:
            await asyncio.wait_for(self._collector.gather(), timeout=self._timeout)
        except asyncio.TimeoutError:
            self.failures += 1
            self._logger.warning("Collection cycle timed out after %.1fs", self._timeout)
            return False
        except Exception:
            self.failures += 1
            self._logger.warning("Collection cycle failed", exc_info=True)
            return False
        return True

    async def _loop(self) -> None:
        while True:
            await self.tick()
            await asyncio.sleep(self._interval)
