"""
Integration tests for the SQLAlchemy record store on a SQLite file database.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from agenda.database import create_async_database_engine, init_models
from agenda.domains.scheduling.application.dto import CalendarWindowRequest, CreateAppointmentsRequest
from agenda.domains.scheduling.application.ports import Filter
from agenda.domains.scheduling.application.use_cases import CreateAppointmentsUseCase, LoadCalendarWindowUseCase
from agenda.domains.scheduling.infrastructure.persistence import SQLAlchemyRecordStore


def appointment_row(start: datetime, **overrides) -> dict:
    row = {
        "patient_id": "patient-1",
        "start_at": start,
        "end_at": start.replace(hour=start.hour + 1),
        "status": "booked",
        "is_paid": False,
        "location": "studio",
        "clinic_site": "Studio Pontecorvo",
        "treatment_type": "seduta",
        "price_type": "invoiced",
    }
    row.update(overrides)
    return row


@pytest_asyncio.fixture
async def sql_store(tmp_path):
    engine = create_async_database_engine(f"sqlite+aiosqlite:///{tmp_path / 'agenda.db'}")
    await init_models(engine)
    store = SQLAlchemyRecordStore(async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False))
    patient = {"id": "patient-1", "first_name": "Mario", "last_name": "Rossi", "phone": "0776 123456"}
    await store.insert("patients", patient)
    yield store
    await engine.dispose()


@pytest.mark.integration
class TestSQLAlchemyRecordStore:
    """Tests for SQLAlchemyRecordStore."""

    @pytest.mark.asyncio
    async def test_insert_returns_joined_row(self, sql_store) -> None:
        """Should assign an id and join the patient columns."""
        response = await sql_store.insert("appointments", appointment_row(datetime(2024, 1, 1, 9, 0)))

        assert response.success
        row = response.get_dict()
        assert row["id"]
        assert row["patient_first_name"] == "Mario"
        assert row["patient_phone"] == "0776 123456"
        assert row["start_at"] == datetime(2024, 1, 1, 9, 0)

    @pytest.mark.asyncio
    async def test_select_filters_and_order(self, sql_store) -> None:
        await sql_store.insert_many(
            "appointments",
            [
                appointment_row(datetime(2024, 1, 3, 9, 0)),
                appointment_row(datetime(2024, 1, 1, 9, 0), status="done"),
                appointment_row(datetime(2024, 1, 8, 9, 0)),
            ],
        )

        response = await sql_store.select(
            "appointments",
            [Filter.gte("start_at", datetime(2024, 1, 1)), Filter.lt("start_at", datetime(2024, 1, 8))],
            order_by=("start_at", False),
        )

        assert [r["start_at"].day for r in response.get_list()] == [3, 1]

        done = await sql_store.select("appointments", [Filter.isin("status", ["done", "not_paid"])])
        assert len(done.get_list()) == 1

    @pytest.mark.asyncio
    async def test_update_and_delete(self, sql_store) -> None:
        created = (await sql_store.insert("appointments", appointment_row(datetime(2024, 1, 1, 9, 0)))).get_dict()

        updated = await sql_store.update("appointments", created["id"], {"status": "done", "amount": Decimal("30")})
        assert updated.get_dict()["status"] == "done"
        assert updated.get_dict()["amount"] == Decimal("30")

        deleted = await sql_store.delete("appointments", created["id"])
        assert deleted.success
        assert (await sql_store.get("appointments", created["id"])).data is None

    @pytest.mark.asyncio
    async def test_missing_rows_are_errors(self, sql_store) -> None:
        """Should report updates and deletes of unknown ids as failures."""
        update = await sql_store.update("appointments", "missing", {"status": "done"})
        delete = await sql_store.delete("appointments", "missing")

        assert not update.success
        assert update.error_message == "Nessun record missing in appointments"
        assert not delete.success

    @pytest.mark.asyncio
    async def test_insert_many_is_atomic(self, sql_store) -> None:
        """Should store nothing when one row of the batch is rejected."""
        response = await sql_store.insert_many(
            "appointments",
            [appointment_row(datetime(2024, 1, 1, 9, 0)), appointment_row(datetime(2024, 1, 2, 9, 0), start_at=None)],
        )

        assert not response.success
        assert response.error_message
        assert (await sql_store.select("appointments")).get_list() == []

    @pytest.mark.asyncio
    async def test_unknown_table(self, sql_store) -> None:
        response = await sql_store.select("payments")

        assert not response.success
        assert response.error_message == "Unknown table: payments"

    @pytest.mark.asyncio
    async def test_use_cases_over_sql(self, sql_store, prices) -> None:
        """Should create a recurring series and read it back through the calendar loader."""
        request = CreateAppointmentsRequest(
            patient_id="patient-1",
            start=datetime(2024, 1, 1, 9, 0),
            duration_minutes=45,
            clinic_site="Studio Pontecorvo",
            recurrence_until=date(2024, 1, 14),
            recurrence_weekdays=frozenset({1, 3, 5}),
        )

        result = await CreateAppointmentsUseCase(sql_store, prices).execute(request)
        loaded = await LoadCalendarWindowUseCase(sql_store).execute(
            CalendarWindowRequest(datetime(2024, 1, 1), datetime(2024, 1, 8))
        )

        assert result.count == 6
        assert [a.start.day for a in loaded] == [1, 3, 5]
        assert all(a.duration_minutes == 45 for a in loaded)
        assert loaded[0].amount == Decimal("40")
        assert loaded[0].patient_name == "Mario Rossi"
