# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case for creating single or recurring appointments.
# ============================================================================
"""Create Appointments Use Case.

Validates the template appointment, expands the recurrence if requested
and inserts every occurrence with a single store call.
"""

import logging
from datetime import timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from agenda.core.domain.exceptions import ReferenceException, ValidationException

from ...domain.entities.appointment import Appointment
from ...domain.services.recurrence import DEFAULT_MAX_OCCURRENCES, RecurrenceRequest, expand_recurrence
from ...domain.value_objects.pricing import PriceList
from ..dto.appointment_dtos import CreateAppointmentsRequest, CreateAppointmentsResult
from ..utils.row_mapper import APPOINTMENTS_TABLE, AppointmentRowMapper, load_appointment, require_success

if TYPE_CHECKING:
    from ..ports import IRecordStore
    from ..services.reminder_messages import ReminderComposer

logger = logging.getLogger(__name__)

RECURRING_WHATSAPP_NOTICE = (
    "Per appuntamenti ricorrenti, WhatsApp non viene inviato automaticamente per evitare troppi messaggi."
)


class CreateAppointmentsUseCase:
    """Use case for creating appointments.

    A recurring request becomes one ``insert_many`` call: either every
    occurrence is stored or none is.
    """

    def __init__(
        self,
        store: "IRecordStore",
        prices: PriceList,
        composer: "ReminderComposer | None" = None,
        auto_apply_prices: bool = True,
        max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
    ) -> None:
        """Initialize use case.

        Args:
            store: Record store interface (DIP).
            prices: Standard price list used when no custom amount is given.
            composer: Builds the optional WhatsApp confirmation.
            auto_apply_prices: Store the standard price instead of a null amount.
            max_occurrences: Cap on occurrences per insert.
        """
        self._store = store
        self._prices = prices
        self._composer = composer
        self._auto_apply_prices = auto_apply_prices
        self._max_occurrences = max_occurrences

    def resolve_amount(self, request: CreateAppointmentsRequest) -> Decimal | None:
        if request.custom_amount is not None and request.custom_amount >= 0:
            return request.custom_amount
        if self._auto_apply_prices:
            return self._prices.standard_price(request.treatment_type, request.price_type)
        return None

    async def execute(self, request: CreateAppointmentsRequest) -> CreateAppointmentsResult:
        """Execute the create appointments use case.

        Raises:
            ValidationException: Invalid template or recurrence, before any store call.
            RecurrenceCapacityException: Too many occurrences; nothing is inserted.
            RecordStoreException: The store rejected the insert.
        """
        template = Appointment.create(
            patient_id=request.patient_id,
            start=request.start,
            duration_minutes=request.duration_minutes,
            location=request.location,
            clinic_site=request.clinic_site,
            domicile_address=request.domicile_address,
            treatment_type=request.treatment_type,
            price_type=request.price_type,
            amount=self.resolve_amount(request),
        )

        if request.recurrence_weekdays and not request.is_recurring:
            raise ValidationException(
                "Indica la data di fine della ricorrenza.",
                field="recurrence_until",
            )

        if request.is_recurring:
            recurrence = RecurrenceRequest(
                first_start=request.start,
                until_date=request.recurrence_until,
                weekdays=frozenset(request.recurrence_weekdays),
            )
            starts = expand_recurrence(recurrence, self._max_occurrences)
        else:
            starts = [request.start]

        logger.info(f"Creating {len(starts)} appointment(s) for patient {request.patient_id}")

        duration = timedelta(minutes=request.duration_minutes)
        rows = []
        for start in starts:
            row = AppointmentRowMapper.to_row(template)
            row["start_at"] = start
            row["end_at"] = start + duration
            rows.append(row)

        if request.is_recurring:
            response = await self._store.insert_many(APPOINTMENTS_TABLE, rows)
            operation = "insert_many"
        else:
            response = await self._store.insert(APPOINTMENTS_TABLE, rows[0])
            operation = "insert"
        if not response.success:
            logger.warning(f"Appointment creation failed: {response.error_message}")
        require_success(response, operation, APPOINTMENTS_TABLE)

        created = [AppointmentRowMapper.to_entity(row) for row in response.get_list()]
        logger.info(f"Created {len(created)} appointment(s) for patient {request.patient_id}")

        result = CreateAppointmentsResult(appointments=created)
        if request.send_whatsapp:
            if request.is_recurring:
                result.notice = RECURRING_WHATSAPP_NOTICE
            elif self._composer is not None and created and created[0].id:
                result.confirmation, result.notice = await self._confirmation(created[0].id)
        return result

    async def _confirmation(self, appointment_id: str):
        # Reload to pick up the joined patient phone
        appointment = await load_appointment(self._store, appointment_id)
        try:
            preview = await self._composer.preview(appointment, is_confirmation=True)
        except ReferenceException as e:
            logger.warning(f"No confirmation for appointment {appointment_id}: {e.message}")
            return None, e.message
        return preview, None
