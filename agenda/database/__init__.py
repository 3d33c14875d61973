from .async_db import (
    create_async_database_engine,
    dispose_engine,
    get_engine,
    get_session_factory,
    init_models,
)

__all__ = [
    "create_async_database_engine",
    "dispose_engine",
    "get_engine",
    "get_session_factory",
    "init_models",
]
