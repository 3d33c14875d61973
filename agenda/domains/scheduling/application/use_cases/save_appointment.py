# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case for the full appointment editor.
# ============================================================================
"""Save Appointment Use Case.

Applies the editor fields (status, note, amount, treatment, price type,
date, time and duration) and persists them in one update.
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from agenda.core.domain.exceptions import ValidationException

from ...domain.entities.appointment import Appointment
from ..dto.appointment_dtos import SaveAppointmentRequest
from ..utils.row_mapper import APPOINTMENTS_TABLE, AppointmentRowMapper, load_appointment, require_success

if TYPE_CHECKING:
    from ..ports import IRecordStore

logger = logging.getLogger(__name__)


class SaveAppointmentUseCase:
    """Use case for saving the appointment editor."""

    def __init__(self, store: "IRecordStore") -> None:
        self._store = store

    async def execute(self, request: SaveAppointmentRequest) -> Appointment:
        """Execute the save.

        Raises:
            EntityNotFoundException: Unknown appointment.
            InvalidOperationException: Illegal status transition.
            ValidationException: Negative amount or non-positive duration.
            RecordStoreException: The store rejected the update.
        """
        logger.info(f"Saving appointment {request.appointment_id}")

        appointment = await load_appointment(self._store, request.appointment_id)

        if request.new_date is not None and request.new_time is not None:
            duration = (
                request.duration_minutes if request.duration_minutes is not None else appointment.duration_minutes
            )
            appointment.reschedule(datetime.combine(request.new_date, request.new_time), duration)
        elif request.duration_minutes is not None:
            appointment.reschedule(appointment.start, request.duration_minutes)

        if request.amount is not None:
            if request.amount < 0:
                raise ValidationException("L'importo non può essere negativo.", field="amount")
            appointment.amount = request.amount
        if request.treatment_type is not None:
            appointment.treatment_type = request.treatment_type
        if request.price_type is not None:
            appointment.price_type = request.price_type
        if request.calendar_note is not None:
            appointment.calendar_note = request.calendar_note
        if request.status is not None:
            appointment.apply_requested_status(request.status)

        response = await self._store.update(
            APPOINTMENTS_TABLE,
            request.appointment_id,
            AppointmentRowMapper.editor_fields(appointment),
        )
        if not response.success:
            logger.warning(f"Save of {request.appointment_id} failed: {response.error_message}")
        require_success(response, "update", APPOINTMENTS_TABLE)

        for event in appointment.get_domain_events():
            logger.info(f"Appointment {event.appointment_id}: {event.old_status.value} -> {event.new_status.value}")
        appointment.clear_domain_events()

        logger.info(f"Appointment {request.appointment_id} saved")
        return appointment
