# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case for loading the appointments of a calendar window.
# ============================================================================
"""Load Calendar Window Use Case."""

import logging
from typing import TYPE_CHECKING

from ...domain.entities.appointment import Appointment
from ..dto.appointment_dtos import CalendarWindowRequest
from ..ports.record_store import Filter
from ..utils.row_mapper import APPOINTMENTS_TABLE, AppointmentRowMapper, require_success

if TYPE_CHECKING:
    from ..ports import IRecordStore

logger = logging.getLogger(__name__)


class LoadCalendarWindowUseCase:
    """Use case for fetching every appointment starting in ``[from, to)``, by start."""

    def __init__(self, store: "IRecordStore") -> None:
        self._store = store

    async def execute(self, request: CalendarWindowRequest) -> list[Appointment]:
        logger.debug(f"Loading appointments {request.window_from.isoformat()} - {request.window_to.isoformat()}")

        response = await self._store.select(
            APPOINTMENTS_TABLE,
            [Filter.gte("start_at", request.window_from), Filter.lt("start_at", request.window_to)],
            order_by=("start_at", True),
        )
        if not response.success:
            logger.warning(f"Calendar load failed: {response.error_message}")
        require_success(response, "select", APPOINTMENTS_TABLE)

        return [AppointmentRowMapper.to_entity(row) for row in response.get_list()]
