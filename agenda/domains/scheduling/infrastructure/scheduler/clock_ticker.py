"""Clock Ticker for the calendar view.

APScheduler-based async ticker that pushes the current local time to the
registered callbacks, used to redraw the current-time line.
"""

import inspect
import logging
from collections.abc import Callable
from datetime import datetime

from apscheduler.schedulers.asyncio import AsyncIOScheduler  # type: ignore[import-not-found]
from apscheduler.triggers.interval import IntervalTrigger  # type: ignore[import-not-found]

logger = logging.getLogger(__name__)

TickCallback = Callable[[datetime], object]


class ClockTicker:
    """Calls every registered callback with ``datetime.now()`` at a fixed interval."""

    def __init__(
        self,
        interval_seconds: int = 60,
        enabled: bool = True,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize ticker.

        Args:
            interval_seconds: Seconds between ticks.
            enabled: Whether the ticker is enabled.
            clock: Source of the current time.
        """
        self.interval_seconds = interval_seconds
        self.enabled = enabled
        self._clock = clock
        self._callbacks: list[TickCallback] = []

        self._scheduler: AsyncIOScheduler | None = None
        self._is_running = False
        self.last_tick: datetime | None = None

    @property
    def is_running(self) -> bool:
        return self._is_running

    def subscribe(self, callback: TickCallback) -> None:
        self._callbacks.append(callback)

    def unsubscribe(self, callback: TickCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    async def start(self) -> None:
        """Start the ticker."""
        if not self.enabled:
            logger.info("ClockTicker is disabled, skipping start")
            return

        if self._is_running:
            logger.warning("ClockTicker already running")
            return

        scheduler = AsyncIOScheduler()
        self._scheduler = scheduler
        scheduler.add_job(
            self.tick,
            IntervalTrigger(seconds=self.interval_seconds),
            id="clock_tick",
            replace_existing=True,
            name="Calendar Clock Tick",
        )
        scheduler.start()
        self._is_running = True
        logger.info(f"ClockTicker started (every {self.interval_seconds}s)")

    async def stop(self) -> None:
        """Stop the ticker."""
        if self._scheduler and self._is_running:
            self._scheduler.shutdown(wait=False)
            self._is_running = False
            logger.info("ClockTicker stopped")

    async def tick(self) -> datetime:
        """Push the current time to every callback."""
        now = self._clock()
        self.last_tick = now
        for callback in list(self._callbacks):
            try:
                result = callback(now)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(f"Clock tick callback failed: {e}", exc_info=True)
        return now
