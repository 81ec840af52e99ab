"""PhaseTicker — the once-per-second sampling loop behind the navbar.

Owns exactly one asyncio task.  ``start()`` while already running is a
no-op and ``stop()`` cancels and awaits the task, so a restart never
leaves a second timer behind.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from uwodb_clock.core.calculator import TimePhaseCalculator
from uwodb_clock.domain.phase import NavbarSnapshot

logger = logging.getLogger(__name__)

TickHandler = Callable[[NavbarSnapshot], Awaitable[None]]


class PhaseTicker:
    """Samples the calculator every *interval* seconds and hands off the result."""

    def __init__(
        self,
        calculator: TimePhaseCalculator,
        on_tick: TickHandler,
        interval: float = 1.0,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._calculator = calculator
        self._on_tick = on_tick
        self._interval = interval
        self._task: asyncio.Task | None = None
        self._ticks = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def ticks(self) -> int:
        return self._ticks

    def start(self) -> None:
        if self.running:
            logger.debug("Ticker already running, ignoring start()")
            return
        self._task = asyncio.create_task(self._run(), name="phase-ticker")
        logger.info("Phase ticker started (every %.2fs)", self._interval)

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Phase ticker stopped after %d tick(s)", self._ticks)

    async def tick(self) -> NavbarSnapshot:
        """Take one sample and deliver it.  Handler failures are logged, not raised."""
        snapshot = self._calculator.snapshot()
        self._ticks += 1
        try:
            await self._on_tick(snapshot)
        except Exception as exc:
            logger.error("Tick handler failed: %s", exc, exc_info=True)
        return snapshot

    async def _run(self) -> None:
        while True:
            await self.tick()
            await asyncio.sleep(self._interval)
