"""
Application lifecycle management using modern FastAPI lifespan pattern.

This module follows SRP by handling only application startup/shutdown logic.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI

from agenda.config.settings import Settings, get_settings
from agenda.database import dispose_engine, init_models
from agenda.domains.scheduling.infrastructure.scheduler import ClockTicker

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Creates the database tables on startup and runs the clock ticker that
    keeps the current-time line up to date.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self.ticker = ClockTicker(
            interval_seconds=self._settings.CLOCK_TICK_SECONDS,
            enabled=self._settings.CLOCK_TICK_ENABLED,
        )
        self._initialized = False

    async def startup(self) -> None:
        """
        Execute startup tasks.

        Called when the application starts.
        """
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")

        await init_models()

        self.ticker.subscribe(self._on_tick)
        await self.ticker.start()

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        """
        Execute shutdown tasks.

        Called when the application stops.
        """
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")

        await self.ticker.stop()
        self.ticker.unsubscribe(self._on_tick)
        await dispose_engine()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")

    @staticmethod
    def _on_tick(now: datetime) -> None:
        logger.debug(f"Clock tick {now:%H:%M}")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Modern FastAPI lifespan context manager.

    Replaces deprecated @app.on_event("startup") and @app.on_event("shutdown").
    """
    manager = LifecycleManager()
    app.state.lifecycle = manager
    await manager.startup()
    try:
        yield
    finally:
        await manager.shutdown()
