"""
Unit tests for the calendar view state.
"""

from datetime import date, datetime
from unittest.mock import AsyncMock

import pytest

from agenda.core.domain.exceptions import RecordStoreException
from agenda.domains.scheduling.application.services import CalendarView, ViewType
from agenda.domains.scheduling.application.use_cases import LoadCalendarWindowUseCase, MoveAppointmentUseCase

WEDNESDAY = date(2024, 1, 3)


@pytest.mark.unit
class TestNavigation:
    """Tests for period navigation."""

    def test_week_window_is_monday_to_next_monday(self) -> None:
        view = CalendarView(WEDNESDAY)

        assert view.window() == (datetime(2024, 1, 1), datetime(2024, 1, 8))
        assert view.visible_days() == [date(2024, 1, d) for d in range(1, 7)]

    def test_day_window(self) -> None:
        view = CalendarView(WEDNESDAY, ViewType.DAY)

        assert view.window() == (datetime(2024, 1, 3), datetime(2024, 1, 4))
        assert view.visible_days() == [WEDNESDAY]

    def test_next_and_previous_step_by_view(self) -> None:
        """Should move a week in week view and a day in day view."""
        view = CalendarView(WEDNESDAY)
        view.next()
        assert view.current_date == date(2024, 1, 10)

        view.set_view_type("day")
        view.previous()
        assert view.current_date == date(2024, 1, 9)

    def test_go_to_week_and_today(self) -> None:
        view = CalendarView(WEDNESDAY, now=datetime(2024, 2, 14, 8, 0))

        view.go_to_week(date(2024, 3, 7))
        assert view.current_date == date(2024, 3, 4)

        view.go_to_today()
        assert view.current_date == date(2024, 2, 14)


@pytest.mark.unit
@pytest.mark.use_case
class TestReload:
    """Tests for reload and mutations."""

    @pytest.mark.asyncio
    async def test_reload_loads_window(self, store, seed_appointment) -> None:
        seed_appointment(start=datetime(2024, 1, 2, 9, 0))
        seed_appointment(start=datetime(2024, 1, 9, 9, 0))
        view = CalendarView(WEDNESDAY)

        await view.reload(LoadCalendarWindowUseCase(store))

        assert [a.start for a in view.appointments] == [datetime(2024, 1, 2, 9, 0)]
        assert view.error is None
        assert view.loading is False

    @pytest.mark.asyncio
    async def test_failed_reload_keeps_previous_list(self, make_appointment) -> None:
        """Should keep the old list and show the error."""
        loader = AsyncMock()
        loader.execute.side_effect = RecordStoreException("connessione persa")
        view = CalendarView(WEDNESDAY)
        previous = [make_appointment()]
        view.appointments = previous

        await view.reload(loader)

        assert view.appointments is previous
        assert view.error == "Errore caricamento appuntamenti: connessione persa"
        assert view.loading is False

    @pytest.mark.asyncio
    async def test_drop_moves_and_reloads(self, store, seed_appointment) -> None:
        """Should persist the drop keeping the duration, then reload."""
        appointment_id = seed_appointment(start=datetime(2024, 1, 1, 9, 0), minutes=45)
        loader = LoadCalendarWindowUseCase(store)
        view = CalendarView(WEDNESDAY)
        await view.reload(loader)
        view.drag.start(view.find(appointment_id))

        moved = await view.drop(appointment_id, date(2024, 1, 4), 16, 30, MoveAppointmentUseCase(store), loader)

        assert moved is True
        assert not view.drag.is_active
        reloaded = view.find(appointment_id)
        assert (reloaded.start, reloaded.end) == (datetime(2024, 1, 4, 16, 30), datetime(2024, 1, 4, 17, 15))

    @pytest.mark.asyncio
    async def test_drop_with_wrong_payload_ends_drag(self, store, make_appointment) -> None:
        mover = AsyncMock()
        view = CalendarView(WEDNESDAY)
        view.drag.start(make_appointment())

        moved = await view.drop("other", date(2024, 1, 4), 10, 0, mover, LoadCalendarWindowUseCase(store))

        assert moved is False
        assert not view.drag.is_active
        mover.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_failed_drop_sets_error(self, store, make_appointment) -> None:
        """Should report the store failure and leave the list untouched."""
        view = CalendarView(WEDNESDAY)
        view.drag.start(make_appointment(id="missing"))

        loader = LoadCalendarWindowUseCase(store)

        moved = await view.drop("missing", date(2024, 1, 4), 10, 0, MoveAppointmentUseCase(store), loader)

        assert moved is False
        assert view.error.startswith("Errore spostamento: ")
        assert not view.drag.is_active
