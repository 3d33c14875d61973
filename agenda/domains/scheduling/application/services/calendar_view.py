# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: State of the day/week calendar view.
# ============================================================================
"""Calendar View State.

One explicit state record for the calendar screen: the visible period,
the loaded appointments, the clock and the drag session. Every mutation
is followed by a full reload of the visible window; the list is never
patched locally.
"""

import logging
from collections.abc import Awaitable
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, Any

from agenda.core.domain.exceptions import DomainException
from agenda.core.domain.value_objects import StatusEnum
from agenda.core.shared.dates import BUSINESS_DAYS, add_days, start_of_day, start_of_week

from ...domain.entities.appointment import Appointment
from ...domain.services.rescheduling import DragSession
from ..dto.appointment_dtos import CalendarWindowRequest, MoveAppointmentRequest

if TYPE_CHECKING:
    from ..use_cases.load_calendar_window import LoadCalendarWindowUseCase
    from ..use_cases.move_appointment import MoveAppointmentUseCase

logger = logging.getLogger(__name__)


class ViewType(StatusEnum):
    DAY = "day"
    WEEK = "week"


class CalendarView:
    """Day/week calendar state."""

    def __init__(self, current_date: date, view_type: ViewType = ViewType.WEEK, now: datetime | None = None):
        self.current_date = current_date
        self.view_type = view_type
        self.appointments: list[Appointment] = []
        self.loading = False
        self.error: str | None = None
        self.now = now or datetime.now()
        self.drag = DragSession()

    # Navigation
    def _step(self) -> timedelta:
        return timedelta(weeks=1) if self.view_type == ViewType.WEEK else timedelta(days=1)

    def next(self) -> None:
        self.current_date = self.current_date + self._step()

    def previous(self) -> None:
        self.current_date = self.current_date - self._step()

    def go_to_today(self, today: date | None = None) -> None:
        self.current_date = today or self.now.date()

    def go_to_week(self, week_start: date) -> None:
        self.current_date = start_of_week(week_start).date()

    def set_view_type(self, view_type: ViewType | str) -> None:
        self.view_type = view_type if isinstance(view_type, ViewType) else ViewType.from_string(view_type)

    def window(self) -> tuple[datetime, datetime]:
        """Half-open window of the visible period."""
        if self.view_type == ViewType.WEEK:
            monday = start_of_week(self.current_date)
            return monday, add_days(monday, 7)
        midnight = start_of_day(self.current_date)
        return midnight, add_days(midnight, 1)

    def visible_days(self) -> list[date]:
        """Grid columns: Monday..Saturday in week view, the day itself otherwise."""
        if self.view_type == ViewType.DAY:
            return [self.current_date]
        monday = start_of_week(self.current_date).date()
        return [monday + timedelta(days=i) for i in range(BUSINESS_DAYS)]

    def tick(self, now: datetime) -> None:
        self.now = now

    # Data
    async def reload(self, loader: "LoadCalendarWindowUseCase") -> None:
        """Replace the list with a fresh fetch; on failure keep the old one."""
        window_from, window_to = self.window()
        self.loading = True
        try:
            self.appointments = await loader.execute(CalendarWindowRequest(window_from, window_to))
            self.error = None
        except DomainException as e:
            logger.warning(f"Calendar reload failed: {e.message}")
            self.error = f"Errore caricamento appuntamenti: {e.message}"
        finally:
            self.loading = False

    async def run_mutation(
        self,
        mutation: Awaitable[Any],
        loader: "LoadCalendarWindowUseCase",
        error_prefix: str = "Errore",
    ) -> bool:
        """Await a mutation, then reload; on failure only the error text changes."""
        self.error = None
        try:
            await mutation
        except DomainException as e:
            self.error = f"{error_prefix}: {e.message}"
            return False
        await self.reload(loader)
        return True

    async def drop(
        self,
        payload_id: str,
        target_date: date,
        hour: int,
        minute: int,
        mover: "MoveAppointmentUseCase",
        loader: "LoadCalendarWindowUseCase",
    ) -> bool:
        """Finish a drag on the given cell; the drag is cleared either way."""
        try:
            target = self.drag.drop(payload_id, target_date, hour, minute)
            if target is None:
                return False
            request = MoveAppointmentRequest(target.appointment_id, target.new_start)
            return await self.run_mutation(mover.execute(request), loader, "Errore spostamento")
        finally:
            self.drag.end()

    def find(self, appointment_id: str) -> Appointment | None:
        return next((a for a in self.appointments if a.id == appointment_id), None)
