# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case for duplicating an appointment.
# ============================================================================
"""Duplicate Appointment Use Case.

Copies an appointment to a new date and time, keeping its duration.
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from ...domain.entities.appointment import Appointment
from ..dto.appointment_dtos import DuplicateAppointmentRequest
from ..utils.row_mapper import APPOINTMENTS_TABLE, AppointmentRowMapper, load_appointment, require_success

if TYPE_CHECKING:
    from ..ports import IRecordStore

logger = logging.getLogger(__name__)


class DuplicateAppointmentUseCase:
    """Use case for duplicating an appointment as a new ``booked`` one."""

    def __init__(self, store: "IRecordStore") -> None:
        self._store = store

    async def execute(self, request: DuplicateAppointmentRequest) -> Appointment:
        logger.info(f"Duplicating appointment {request.appointment_id}")

        source = await load_appointment(self._store, request.appointment_id)
        copy = Appointment.create(
            patient_id=source.patient_id,
            start=datetime.combine(request.new_date, request.new_time),
            duration_minutes=source.duration_minutes,
            location=source.location,
            clinic_site=source.clinic_site,
            domicile_address=source.domicile_address,
            treatment_type=source.treatment_type,
            price_type=source.price_type,
            amount=source.amount,
        )

        response = await self._store.insert(APPOINTMENTS_TABLE, AppointmentRowMapper.to_row(copy))
        if not response.success:
            logger.warning(f"Duplicate of {request.appointment_id} failed: {response.error_message}")
        require_success(response, "insert", APPOINTMENTS_TABLE)

        created = AppointmentRowMapper.to_entity(response.get_dict())
        logger.info(f"Appointment {request.appointment_id} duplicated as {created.id}")
        return created
