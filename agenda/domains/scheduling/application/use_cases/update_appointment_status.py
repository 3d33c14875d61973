# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use cases for status and payment changes.
# ============================================================================
"""Status Use Cases.

- UpdateAppointmentStatusUseCase: status editor (accepts ``not_paid``)
- ToggleDoneUseCase: done/confirmed quick toggle
- SetPaymentUseCase: payment flag of a done appointment

Each one loads the row, applies the domain transition and persists only
``status`` and ``is_paid``.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ...domain.entities.appointment import Appointment
from ...domain.services import status_machine
from ..dto.appointment_dtos import SetPaymentRequest, UpdateStatusRequest
from ..utils.row_mapper import APPOINTMENTS_TABLE, AppointmentRowMapper, load_appointment, require_success

if TYPE_CHECKING:
    from ..ports import IRecordStore

logger = logging.getLogger(__name__)


class _StatusChangeUseCase:
    def __init__(self, store: "IRecordStore") -> None:
        """Initialize use case.

        Args:
            store: Record store interface (DIP).
        """
        self._store = store

    async def _apply(self, appointment_id: str, change: Callable[[Appointment], Appointment]) -> Appointment:
        appointment = await load_appointment(self._store, appointment_id)
        change(appointment)

        response = await self._store.update(
            APPOINTMENTS_TABLE,
            appointment_id,
            AppointmentRowMapper.status_fields(appointment),
        )
        if not response.success:
            logger.warning(f"Status update of {appointment_id} failed: {response.error_message}")
        require_success(response, "update", APPOINTMENTS_TABLE)

        for event in appointment.get_domain_events():
            logger.info(f"Appointment {event.appointment_id}: {event.old_status.value} -> {event.new_status.value}")
        appointment.clear_domain_events()
        return appointment


class UpdateAppointmentStatusUseCase(_StatusChangeUseCase):
    """Use case for the status editor."""

    async def execute(self, request: UpdateStatusRequest) -> Appointment:
        """Execute the status change.

        Raises:
            InvalidOperationException: Transition not allowed from the current state.
            ValidationException: Unknown status value.
        """
        logger.info(f"Setting status of appointment {request.appointment_id} to {request.status}")
        appointment = await self._apply(
            request.appointment_id,
            lambda a: status_machine.transition(a, request.status),
        )
        logger.info(f"Appointment {request.appointment_id} is now {appointment.payment_label}")
        return appointment


class ToggleDoneUseCase(_StatusChangeUseCase):
    """Use case for the done/confirmed quick toggle."""

    async def execute(self, appointment_id: str) -> Appointment:
        logger.info(f"Toggling done for appointment {appointment_id}")
        return await self._apply(appointment_id, status_machine.toggle_done)


class SetPaymentUseCase(_StatusChangeUseCase):
    """Use case for marking a done appointment paid or unpaid."""

    async def execute(self, request: SetPaymentRequest) -> Appointment:
        """Execute the payment change.

        Raises:
            InvalidOperationException: The appointment is not done.
        """
        logger.info(f"Setting paid={request.paid} for appointment {request.appointment_id}")
        return await self._apply(
            request.appointment_id,
            lambda a: status_machine.set_paid(a, request.paid),
        )
