# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case for drag and drop rescheduling.
# ============================================================================
"""Move Appointment Use Case.

Persists the new start of a dropped appointment; the end follows from the
stored duration. There is no conflict check: overlapping appointments are
allowed.
"""

import logging
from typing import TYPE_CHECKING

from ...domain.entities.appointment import Appointment
from ..dto.appointment_dtos import MoveAppointmentRequest
from ..utils.row_mapper import APPOINTMENTS_TABLE, AppointmentRowMapper, load_appointment, require_success

if TYPE_CHECKING:
    from ..ports import IRecordStore

logger = logging.getLogger(__name__)


class MoveAppointmentUseCase:
    """Use case for moving an appointment to a new time."""

    def __init__(self, store: "IRecordStore") -> None:
        self._store = store

    async def execute(self, request: MoveAppointmentRequest) -> Appointment:
        """Move the appointment, keeping its duration.

        Raises:
            EntityNotFoundException: Unknown appointment.
            RecordStoreException: The store rejected the update.
        """
        logger.info(f"Moving appointment {request.appointment_id} to {request.new_start.isoformat()}")

        appointment = await load_appointment(self._store, request.appointment_id)
        appointment.relocate(request.new_start)

        response = await self._store.update(
            APPOINTMENTS_TABLE,
            request.appointment_id,
            AppointmentRowMapper.time_fields(appointment),
        )
        if not response.success:
            logger.warning(f"Move of {request.appointment_id} failed: {response.error_message}")
        require_success(response, "update", APPOINTMENTS_TABLE)

        moved = AppointmentRowMapper.to_entity(response.get_dict()) if response.get_dict() else appointment
        logger.info(f"Appointment {request.appointment_id} moved")
        return moved
