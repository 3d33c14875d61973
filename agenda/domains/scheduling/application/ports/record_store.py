# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Record store port (DIP compliant).
# ============================================================================
"""Record Store Port.

Generic CRUD by table name and filter, the only persistence collaborator
of the scheduling engine.
"""

from dataclasses import dataclass
from typing import Any, Literal, Protocol, runtime_checkable

from .response import StoreResponse

FilterOp = Literal["eq", "neq", "gt", "gte", "lt", "lte", "in"]
FILTER_OPS: tuple[str, ...] = ("eq", "neq", "gt", "gte", "lt", "lte", "in")


@dataclass(frozen=True)
class Filter:
    """A single ``column <op> value`` condition; filters are AND-ed."""

    column: str
    op: FilterOp
    value: Any

    def __post_init__(self):
        if self.op not in FILTER_OPS:
            raise ValueError(f"Unsupported filter op: {self.op}")

    @classmethod
    def eq(cls, column: str, value: Any) -> "Filter":
        return cls(column, "eq", value)

    @classmethod
    def gte(cls, column: str, value: Any) -> "Filter":
        return cls(column, "gte", value)

    @classmethod
    def lt(cls, column: str, value: Any) -> "Filter":
        return cls(column, "lt", value)

    @classmethod
    def lte(cls, column: str, value: Any) -> "Filter":
        return cls(column, "lte", value)

    @classmethod
    def isin(cls, column: str, values: list[Any]) -> "Filter":
        return cls(column, "in", list(values))


OrderBy = tuple[str, bool]  # (column, ascending)


@runtime_checkable
class IRecordStore(Protocol):
    """Interface for the record store.

    Implementations: SQLAlchemyRecordStore, InMemoryRecordStore
    """

    async def select(
        self,
        table: str,
        filters: list[Filter] | None = None,
        order_by: OrderBy | None = None,
        limit: int | None = None,
    ) -> StoreResponse:
        """Select rows matching every filter.

        Returns:
            StoreResponse with a list of row dicts.
        """
        ...

    async def get(self, table: str, record_id: str) -> StoreResponse:
        """Get one row by id; ``data`` is None if it does not exist."""
        ...

    async def insert(self, table: str, row: dict[str, Any]) -> StoreResponse:
        """Insert a row and return it with its assigned id."""
        ...

    async def insert_many(self, table: str, rows: list[dict[str, Any]]) -> StoreResponse:
        """Insert all rows in one call, or none of them."""
        ...

    async def update(self, table: str, record_id: str, fields: dict[str, Any]) -> StoreResponse:
        """Update the given fields of one row and return the row."""
        ...

    async def delete(self, table: str, record_id: str) -> StoreResponse:
        """Delete one row."""
        ...
