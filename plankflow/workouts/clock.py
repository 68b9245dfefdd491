"""Clock driver.

Emits one tick per fixed wall-clock interval on the running asyncio loop. Tick
deadlines are computed from the start time (not from the previous tick) so a
slow tick handler does not push later ticks back.
"""

import asyncio
from collections.abc import Callable

from loguru import logger

TickHandler = Callable[[], None]


class ClockDriver:
    """Periodic tick source.

    Args:
        on_tick: Called synchronously once per interval
        interval_seconds: Wall-clock seconds between ticks
    """

    def __init__(self, on_tick: TickHandler, interval_seconds: float = 1.0) -> None:
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be greater than zero, got {interval_seconds}")
        self._on_tick = on_tick
        self._interval = interval_seconds
        self._task: asyncio.Task[None] | None = None
        self.ticks = 0

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking on the running event loop. No-op if already running."""
        if self.is_running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug(f"Clock started (interval={self._interval}s)")

    async def stop(self) -> None:
        """Stop ticking and wait for the tick task to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.debug(f"Clock stopped after {self.ticks} ticks")

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        started_at = loop.time()
        emitted = 0
        while True:
            deadline = started_at + (emitted + 1) * self._interval
            await asyncio.sleep(max(deadline - loop.time(), 0))
            emitted += 1
            self.ticks += 1
            try:
                self._on_tick()
            except Exception:
                logger.exception(f"Tick handler failed on tick {self.ticks}")
