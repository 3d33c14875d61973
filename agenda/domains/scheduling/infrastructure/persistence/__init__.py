"""Record store adapters."""

from .in_memory_record_store import InMemoryRecordStore
from .sqlalchemy_record_store import SQLAlchemyRecordStore

__all__ = ["InMemoryRecordStore", "SQLAlchemyRecordStore"]
