# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case for deleting an appointment.
# ============================================================================
"""Delete Appointment Use Case."""

import logging
from typing import TYPE_CHECKING

from ..utils.row_mapper import APPOINTMENTS_TABLE, require_success

if TYPE_CHECKING:
    from ..ports import IRecordStore

logger = logging.getLogger(__name__)


class DeleteAppointmentUseCase:
    """Use case for the explicit delete, the only way an appointment is removed."""

    def __init__(self, store: "IRecordStore") -> None:
        self._store = store

    async def execute(self, appointment_id: str) -> None:
        logger.info(f"Deleting appointment {appointment_id}")
        response = await self._store.delete(APPOINTMENTS_TABLE, appointment_id)
        if not response.success:
            logger.warning(f"Delete of {appointment_id} failed: {response.error_message}")
        require_success(response, "delete", APPOINTMENTS_TABLE)
        logger.info(f"Appointment {appointment_id} deleted")
