"""In-memory record store.

Dict-backed implementation of ``IRecordStore`` for development and tests.
Appointment rows are joined with ``patients`` the same way the SQL store
does it.
"""

import copy
import logging
import operator
from collections.abc import Callable
from typing import Any

from agenda.models.db.base import new_id

from ...application.ports.record_store import Filter, OrderBy
from ...application.ports.response import StoreResponse

logger = logging.getLogger(__name__)

_OPS: dict[str, Callable[[Any, Any], bool]] = {
    "eq": operator.eq,
    "neq": operator.ne,
    "gt": operator.gt,
    "gte": operator.ge,
    "lt": operator.lt,
    "lte": operator.le,
    "in": lambda value, options: value in options,
}


def _matches(row: dict[str, Any], flt: Filter) -> bool:
    value = row.get(flt.column)
    if flt.op in ("eq", "neq", "in"):
        return _OPS[flt.op](value, flt.value)
    if value is None or flt.value is None:
        return False
    return _OPS[flt.op](value, flt.value)


class InMemoryRecordStore:
    """Record store kept in process memory."""

    def __init__(self, tables: dict[str, list[dict[str, Any]]] | None = None):
        self._tables: dict[str, dict[str, dict[str, Any]]] = {}
        for table, rows in (tables or {}).items():
            self.seed(table, rows)

    def seed(self, table: str, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Insert rows directly, keeping given ids."""
        stored = []
        for row in rows:
            record = dict(row)
            record["id"] = str(record.get("id") or new_id())
            self._tables.setdefault(table, {})[record["id"]] = record
            stored.append(record)
        return copy.deepcopy(stored)

    def rows(self, table: str) -> list[dict[str, Any]]:
        return copy.deepcopy(list(self._tables.get(table, {}).values()))

    def _view(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        result = copy.deepcopy(row)
        if table == "appointments":
            patient = self._tables.get("patients", {}).get(str(row.get("patient_id")), {})
            result["patient_first_name"] = patient.get("first_name")
            result["patient_last_name"] = patient.get("last_name")
            result["patient_phone"] = patient.get("phone")
        return result

    async def select(
        self,
        table: str,
        filters: list[Filter] | None = None,
        order_by: OrderBy | None = None,
        limit: int | None = None,
    ) -> StoreResponse:
        rows = [r for r in self._tables.get(table, {}).values() if all(_matches(r, f) for f in filters or [])]
        if order_by is not None:
            column, ascending = order_by
            present = [r for r in rows if r.get(column) is not None]
            missing = [r for r in rows if r.get(column) is None]
            rows = sorted(present, key=lambda r: r[column], reverse=not ascending) + missing
        if limit is not None:
            rows = rows[:limit]
        return StoreResponse.ok([self._view(table, r) for r in rows])

    async def get(self, table: str, record_id: str) -> StoreResponse:
        row = self._tables.get(table, {}).get(str(record_id))
        return StoreResponse.ok(self._view(table, row) if row is not None else None)

    async def insert(self, table: str, row: dict[str, Any]) -> StoreResponse:
        stored = self.seed(table, [row])
        logger.debug(f"Inserted row into {table}")
        return StoreResponse.ok(self._view(table, stored[0]))

    async def insert_many(self, table: str, rows: list[dict[str, Any]]) -> StoreResponse:
        stored = self.seed(table, rows)
        logger.debug(f"Inserted {len(stored)} rows into {table}")
        return StoreResponse.ok([self._view(table, r) for r in stored])

    async def update(self, table: str, record_id: str, fields: dict[str, Any]) -> StoreResponse:
        row = self._tables.get(table, {}).get(str(record_id))
        if row is None:
            return StoreResponse.error(f"Nessun record {record_id} in {table}")
        row.update(copy.deepcopy(fields))
        return StoreResponse.ok(self._view(table, row))

    async def delete(self, table: str, record_id: str) -> StoreResponse:
        removed = self._tables.get(table, {}).pop(str(record_id), None)
        if removed is None:
            return StoreResponse.error(f"Nessun record {record_id} in {table}")
        return StoreResponse.ok({"id": str(record_id)})
