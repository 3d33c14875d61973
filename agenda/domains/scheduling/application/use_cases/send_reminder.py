# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use cases for WhatsApp reminders.
# ============================================================================
"""Send Reminder Use Cases.

The server never sends anything: ``SendReminderUseCase`` returns a
preview with the WhatsApp Web link, and ``MarkReminderSentUseCase``
stamps the appointment once the user has confirmed.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from ...domain.entities.appointment import Appointment
from ..dto.appointment_dtos import ReminderPreview, SendReminderRequest
from ..utils.row_mapper import APPOINTMENTS_TABLE, load_appointment, require_success

if TYPE_CHECKING:
    from ..ports import IRecordStore
    from ..services.reminder_messages import ReminderComposer

logger = logging.getLogger(__name__)


class SendReminderUseCase:
    """Use case for building a reminder or confirmation preview."""

    def __init__(self, store: "IRecordStore", composer: "ReminderComposer") -> None:
        self._store = store
        self._composer = composer

    async def execute(self, request: SendReminderRequest) -> ReminderPreview:
        """Build the preview.

        Raises:
            EntityNotFoundException: Unknown appointment.
            ReferenceException: The patient has no phone number.
        """
        kind = "confirmation" if request.is_confirmation else "reminder"
        logger.info(f"Preparing {kind} for appointment {request.appointment_id}")

        appointment = await load_appointment(self._store, request.appointment_id)
        preview = await self._composer.preview(appointment, request.is_confirmation, request.today)

        logger.info(f"{kind.capitalize()} ready for appointment {request.appointment_id}")
        return preview


class MarkReminderSentUseCase:
    """Use case for stamping ``whatsapp_sent`` after the user confirmed."""

    def __init__(self, store: "IRecordStore", clock: Callable[[], datetime] = datetime.now) -> None:
        self._store = store
        self._clock = clock

    async def execute(self, appointment_id: str) -> Appointment:
        appointment = Appointment(id=appointment_id)
        appointment.mark_whatsapp_sent(self._clock())

        response = await self._store.update(
            APPOINTMENTS_TABLE,
            appointment_id,
            {"whatsapp_sent": True, "whatsapp_sent_at": appointment.whatsapp_sent_at},
        )
        if not response.success:
            logger.warning(f"Marking reminder sent for {appointment_id} failed: {response.error_message}")
        require_success(response, "update", APPOINTMENTS_TABLE)

        logger.info(f"Reminder marked as sent for appointment {appointment_id}")
        return await load_appointment(self._store, appointment_id)
