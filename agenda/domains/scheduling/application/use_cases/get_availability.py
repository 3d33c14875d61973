# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case for the slots and occupancy forecast of one day.
# ============================================================================
"""Get Availability Use Case.

Advisory information for the slot picker; it never blocks a booking.
"""

import logging
from datetime import date
from typing import TYPE_CHECKING

from agenda.core.shared.dates import add_days, start_of_day

from ...domain.services.availability import (
    DAY_END_HOUR,
    DAY_START_HOUR,
    SLOT_MINUTES,
    day_slots,
    occupancy_forecast,
)
from ..dto.appointment_dtos import AvailabilityResult, CalendarWindowRequest
from .load_calendar_window import LoadCalendarWindowUseCase

if TYPE_CHECKING:
    from ..ports import IRecordStore

logger = logging.getLogger(__name__)


class GetAvailabilityUseCase:
    """Use case for computing slot occupancy of a day."""

    def __init__(
        self,
        store: "IRecordStore",
        start_hour: int = DAY_START_HOUR,
        end_hour: int = DAY_END_HOUR,
        slot_minutes: int = SLOT_MINUTES,
    ) -> None:
        self._loader = LoadCalendarWindowUseCase(store)
        self._start_hour = start_hour
        self._end_hour = end_hour
        self._slot_minutes = slot_minutes

    async def execute(self, day: date) -> AvailabilityResult:
        logger.info(f"Computing availability for {day.isoformat()}")
        window_from = start_of_day(day)
        appointments = await self._loader.execute(CalendarWindowRequest(window_from, add_days(window_from, 1)))

        slots = day_slots(
            day,
            appointments,
            start_hour=self._start_hour,
            end_hour=self._end_hour,
            slot_minutes=self._slot_minutes,
        )
        forecast = occupancy_forecast(day, appointments, start_hour=self._start_hour, end_hour=self._end_hour)
        return AvailabilityResult(day=day, slots=slots, forecast=forecast)
