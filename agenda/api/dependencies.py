# ============================================================================
# SCOPE: GLOBAL
# Description: Dipendenze FastAPI per l'iniezione degli use case.
# ============================================================================
import logging

from fastapi import Depends

from agenda.core.container import SchedulingContainer, get_container
from agenda.domains.scheduling.application.use_cases import (
    BuildFinancialReportUseCase,
    CreateAppointmentsUseCase,
    DeleteAppointmentUseCase,
    DuplicateAppointmentUseCase,
    ExportAppointmentsUseCase,
    GetAvailabilityUseCase,
    LoadCalendarWindowUseCase,
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


def get_di_container() -> SchedulingContainer:
    """Get Dependency Injection Container singleton."""
    return get_container()


def get_prices(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> PriceList:
    return container.get_prices()


# ============================================================
# CALENDAR USE CASES
# ============================================================


def get_load_calendar_window_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> LoadCalendarWindowUseCase:
    """Get LoadCalendarWindowUseCase instance"""
    return container.create_load_calendar_window_use_case()


def get_availability_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> GetAvailabilityUseCase:
    """Get GetAvailabilityUseCase instance"""
    return container.create_get_availability_use_case()


def get_export_appointments_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> ExportAppointmentsUseCase:
    """Get ExportAppointmentsUseCase instance"""
    return container.create_export_appointments_use_case()


# ============================================================
# APPOINTMENT USE CASES
# ============================================================


def get_create_appointments_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> CreateAppointmentsUseCase:
    """Get CreateAppointmentsUseCase instance"""
    return container.create_create_appointments_use_case()


def get_duplicate_appointment_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> DuplicateAppointmentUseCase:
    """Get DuplicateAppointmentUseCase instance"""
    return container.create_duplicate_appointment_use_case()


def get_save_appointment_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> SaveAppointmentUseCase:
    """Get SaveAppointmentUseCase instance"""
    return container.create_save_appointment_use_case()


def get_update_status_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> UpdateAppointmentStatusUseCase:
    """Get UpdateAppointmentStatusUseCase instance"""
    return container.create_update_status_use_case()


def get_toggle_done_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> ToggleDoneUseCase:
    """Get ToggleDoneUseCase instance"""
    return container.create_toggle_done_use_case()


def get_set_payment_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> SetPaymentUseCase:
    """Get SetPaymentUseCase instance"""
    return container.create_set_payment_use_case()


def get_move_appointment_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> MoveAppointmentUseCase:
    """Get MoveAppointmentUseCase instance"""
    return container.create_move_appointment_use_case()


def get_delete_appointment_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> DeleteAppointmentUseCase:
    """Get DeleteAppointmentUseCase instance"""
    return container.create_delete_appointment_use_case()


def get_send_reminder_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> SendReminderUseCase:
    """Get SendReminderUseCase instance"""
    return container.create_send_reminder_use_case()


def get_mark_reminder_sent_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> MarkReminderSentUseCase:
    """Get MarkReminderSentUseCase instance"""
    return container.create_mark_reminder_sent_use_case()


# ============================================================
# REPORT USE CASES
# ============================================================


def get_build_financial_report_use_case(
    container: SchedulingContainer = Depends(get_di_container),  # noqa: B008
) -> BuildFinancialReportUseCase:
    """Get BuildFinancialReportUseCase instance"""
    return container.create_build_financial_report_use_case()
