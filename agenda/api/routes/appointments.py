"""
API Routes for appointments: creation, editing, status, drag and drop and reminders.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status

from agenda.api.dependencies import (
    get_create_appointments_use_case,
    get_delete_appointment_use_case,
    get_duplicate_appointment_use_case,
    get_mark_reminder_sent_use_case,
    get_move_appointment_use_case,
    get_prices,
    get_save_appointment_use_case,
    get_send_reminder_use_case,
    get_set_payment_use_case,
    get_toggle_done_use_case,
    get_update_status_use_case,
)
from agenda.api.schemas import (
    AppointmentCreate,
    AppointmentDuplicate,
    AppointmentMove,
    AppointmentUpdate,
    PaymentUpdate,
    ReminderCreate,
    StatusUpdate,
)
from agenda.domains.scheduling.application.dto import SendReminderRequest, SetPaymentRequest, UpdateStatusRequest
from agenda.domains.scheduling.application.use_cases import (
    CreateAppointmentsUseCase,
    DeleteAppointmentUseCase,
    DuplicateAppointmentUseCase,
    MarkReminderSentUseCase,
    MoveAppointmentUseCase,
    SaveAppointmentUseCase,
    SendReminderUseCase,
    SetPaymentUseCase,
    ToggleDoneUseCase,
    UpdateAppointmentStatusUseCase,
)
from agenda.domains.scheduling.domain.value_objects import PriceList

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_appointments(
    body: AppointmentCreate,
    use_case: CreateAppointmentsUseCase = Depends(get_create_appointments_use_case),  # noqa: B008
    prices: PriceList = Depends(get_prices),  # noqa: B008
) -> dict[str, Any]:
    """
    Create a single appointment, or a weekly series when ``recurrence_until`` is set.

    All occurrences are inserted together; nothing is stored if the series
    is rejected.
    """
    result = await use_case.execute(body.to_request())
    return {
        "count": result.count,
        "appointments": [a.to_summary_dict(prices) for a in result.appointments],
        "confirmation": result.confirmation.to_dict() if result.confirmation else None,
        "notice": result.notice,
    }


@router.post("/{appointment_id}/duplicate", status_code=status.HTTP_201_CREATED)
async def duplicate_appointment(
    appointment_id: str,
    body: AppointmentDuplicate,
    use_case: DuplicateAppointmentUseCase = Depends(get_duplicate_appointment_use_case),  # noqa: B008
    prices: PriceList = Depends(get_prices),  # noqa: B008
) -> dict[str, Any]:
    appointment = await use_case.execute(body.to_request(appointment_id))
    return appointment.to_summary_dict(prices)


@router.patch("/{appointment_id}")
async def save_appointment(
    appointment_id: str,
    body: AppointmentUpdate,
    use_case: SaveAppointmentUseCase = Depends(get_save_appointment_use_case),  # noqa: B008
    prices: PriceList = Depends(get_prices),  # noqa: B008
) -> dict[str, Any]:
    """Save the editor form; omitted fields are left as they are."""
    appointment = await use_case.execute(body.to_request(appointment_id))
    return appointment.to_summary_dict(prices)


@router.post("/{appointment_id}/status")
async def update_status(
    appointment_id: str,
    body: StatusUpdate,
    use_case: UpdateAppointmentStatusUseCase = Depends(get_update_status_use_case),  # noqa: B008
    prices: PriceList = Depends(get_prices),  # noqa: B008
) -> dict[str, Any]:
    appointment = await use_case.execute(UpdateStatusRequest(appointment_id, body.status))
    return appointment.to_summary_dict(prices)


@router.post("/{appointment_id}/toggle-done")
async def toggle_done(
    appointment_id: str,
    use_case: ToggleDoneUseCase = Depends(get_toggle_done_use_case),  # noqa: B008
    prices: PriceList = Depends(get_prices),  # noqa: B008
) -> dict[str, Any]:
    appointment = await use_case.execute(appointment_id)
    return appointment.to_summary_dict(prices)


@router.post("/{appointment_id}/payment")
async def set_payment(
    appointment_id: str,
    body: PaymentUpdate,
    use_case: SetPaymentUseCase = Depends(get_set_payment_use_case),  # noqa: B008
    prices: PriceList = Depends(get_prices),  # noqa: B008
) -> dict[str, Any]:
    appointment = await use_case.execute(SetPaymentRequest(appointment_id, body.paid))
    return appointment.to_summary_dict(prices)


@router.post("/{appointment_id}/move")
async def move_appointment(
    appointment_id: str,
    body: AppointmentMove,
    use_case: MoveAppointmentUseCase = Depends(get_move_appointment_use_case),  # noqa: B008
    prices: PriceList = Depends(get_prices),  # noqa: B008
) -> dict[str, Any]:
    """Drop an appointment on a new start; the duration is kept."""
    appointment = await use_case.execute(body.to_request(appointment_id))
    return appointment.to_summary_dict(prices)


@router.delete("/{appointment_id}")
async def delete_appointment(
    appointment_id: str,
    use_case: DeleteAppointmentUseCase = Depends(get_delete_appointment_use_case),  # noqa: B008
) -> dict[str, Any]:
    await use_case.execute(appointment_id)
    return {"id": appointment_id, "deleted": True}


@router.post("/{appointment_id}/reminder")
async def reminder_preview(
    appointment_id: str,
    body: ReminderCreate | None = None,
    use_case: SendReminderUseCase = Depends(get_send_reminder_use_case),  # noqa: B008
) -> dict[str, Any]:
    """WhatsApp message and link for the appointment; nothing is sent from here."""
    is_confirmation = body.is_confirmation if body else False
    preview = await use_case.execute(SendReminderRequest(appointment_id, is_confirmation=is_confirmation))
    return preview.to_dict()


@router.post("/{appointment_id}/reminder/sent")
async def mark_reminder_sent(
    appointment_id: str,
    use_case: MarkReminderSentUseCase = Depends(get_mark_reminder_sent_use_case),  # noqa: B008
    prices: PriceList = Depends(get_prices),  # noqa: B008
) -> dict[str, Any]:
    appointment = await use_case.execute(appointment_id)
    return appointment.to_summary_dict(prices)
