import logging

from sqlalchemy.ext.asyncio import (  # type: ignore[attr-defined]
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from agenda.config.settings import get_settings
from agenda.models.db import Base

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def create_async_database_engine(database_url: str | None = None) -> AsyncEngine:
    """Crea l'engine asincrono del database"""
    settings = get_settings()
    url = database_url or settings.DATABASE_URL
    try:
        engine_config: dict = {"echo": settings.DB_ECHO, "future": True}

        if settings.DEBUG or url.startswith("sqlite"):
            # Sviluppo e SQLite: nessun pooling
            logger.info("Creating async database engine (NullPool)")
            engine_config["poolclass"] = NullPool
        else:
            logger.info("Creating async database engine (pooled)")
            engine_config["pool_pre_ping"] = True

        return create_async_engine(url, **engine_config)

    except Exception as e:
        logger.error(f"Failed to create async database engine: {e}")
        raise


def get_engine() -> AsyncEngine:
    """Engine condiviso, creato al primo uso."""
    global _engine
    if _engine is None:
        _engine = create_async_database_engine()
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


async def init_models(engine: AsyncEngine | None = None) -> None:
    """Crea le tabelle mancanti."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_factory = None

