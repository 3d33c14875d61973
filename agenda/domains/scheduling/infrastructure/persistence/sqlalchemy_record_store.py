"""SQLAlchemy record store.

Implements ``IRecordStore`` with SQLAlchemy Core statements over the
tables declared in ``agenda.models.db``. Store errors are returned as
``StoreResponse.error`` carrying the driver message.
"""

import logging
from typing import Any

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from agenda.models.db import Base, new_id

from ...application.ports.record_store import Filter, OrderBy
from ...application.ports.response import StoreResponse

logger = logging.getLogger(__name__)


class SQLAlchemyRecordStore:
    """Record store backed by an async SQLAlchemy session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory
        self.tables: dict[str, Table] = dict(Base.metadata.tables)

    def _table(self, name: str) -> Table:
        try:
            return self.tables[name]
        except KeyError as e:
            raise ValueError(f"Unknown table: {name}") from e

    def _base_query(self, name: str):
        table = self._table(name)
        if name != "appointments":
            return table, select(table)
        patients = self._table("patients")
        query = select(
            table,
            patients.c.first_name.label("patient_first_name"),
            patients.c.last_name.label("patient_last_name"),
            patients.c.phone.label("patient_phone"),
        ).select_from(table.outerjoin(patients, table.c.patient_id == patients.c.id))
        return table, query

    @staticmethod
    def _condition(table: Table, flt: Filter):
        column = table.c[flt.column]
        if flt.op == "eq":
            return column.is_(None) if flt.value is None else column == flt.value
        if flt.op == "neq":
            return column.is_not(None) if flt.value is None else column != flt.value
        if flt.op == "gt":
            return column > flt.value
        if flt.op == "gte":
            return column >= flt.value
        if flt.op == "lt":
            return column < flt.value
        if flt.op == "lte":
            return column <= flt.value
        return column.in_(list(flt.value))

    async def _fetch_one(self, session: AsyncSession, name: str, record_id: str) -> dict[str, Any] | None:
        table, query = self._base_query(name)
        result = await session.execute(query.where(table.c.id == str(record_id)))
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def select(
        self,
        table: str,
        filters: list[Filter] | None = None,
        order_by: OrderBy | None = None,
        limit: int | None = None,
    ) -> StoreResponse:
        try:
            sql_table, query = self._base_query(table)
            for flt in filters or []:
                query = query.where(self._condition(sql_table, flt))
            if order_by is not None:
                column, ascending = order_by
                query = query.order_by(sql_table.c[column].asc() if ascending else sql_table.c[column].desc())
            if limit is not None:
                query = query.limit(limit)
            async with self.session_factory() as session:
                result = await session.execute(query)
                return StoreResponse.ok([dict(row) for row in result.mappings().all()])
        except (SQLAlchemyError, KeyError, ValueError) as e:
            logger.error(f"Select on {table} failed: {e}")
            return StoreResponse.error(str(e))

    async def get(self, table: str, record_id: str) -> StoreResponse:
        try:
            async with self.session_factory() as session:
                return StoreResponse.ok(await self._fetch_one(session, table, record_id))
        except (SQLAlchemyError, ValueError) as e:
            logger.error(f"Get on {table} failed: {e}")
            return StoreResponse.error(str(e))

    async def insert(self, table: str, row: dict[str, Any]) -> StoreResponse:
        response = await self.insert_many(table, [row])
        if not response.success:
            return response
        return StoreResponse.ok(response.get_dict())

    async def insert_many(self, table: str, rows: list[dict[str, Any]]) -> StoreResponse:
        """Insert every row inside one transaction."""
        try:
            sql_table = self._table(table)
            values = [{**row, "id": str(row.get("id") or new_id())} for row in rows]
            async with self.session_factory() as session:
                async with session.begin():
                    for value in values:
                        await session.execute(insert(sql_table).values(**value))
                stored = [await self._fetch_one(session, table, value["id"]) for value in values]
            logger.debug(f"Inserted {len(stored)} rows into {table}")
            return StoreResponse.ok(stored)
        except (SQLAlchemyError, ValueError) as e:
            logger.error(f"Insert into {table} failed: {e}")
            return StoreResponse.error(str(e))

    async def update(self, table: str, record_id: str, fields: dict[str, Any]) -> StoreResponse:
        try:
            sql_table = self._table(table)
            async with self.session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        update(sql_table).where(sql_table.c.id == str(record_id)).values(**fields)
                    )
                if result.rowcount == 0:
                    return StoreResponse.error(f"Nessun record {record_id} in {table}")
                return StoreResponse.ok(await self._fetch_one(session, table, record_id))
        except (SQLAlchemyError, ValueError) as e:
            logger.error(f"Update on {table} failed: {e}")
            return StoreResponse.error(str(e))

    async def delete(self, table: str, record_id: str) -> StoreResponse:
        try:
            sql_table = self._table(table)
            async with self.session_factory() as session:
                async with session.begin():
                    result = await session.execute(delete(sql_table).where(sql_table.c.id == str(record_id)))
            if result.rowcount == 0:
                return StoreResponse.error(f"Nessun record {record_id} in {table}")
            return StoreResponse.ok({"id": str(record_id)})
        except (SQLAlchemyError, ValueError) as e:
            logger.error(f"Delete on {table} failed: {e}")
            return StoreResponse.error(str(e))
