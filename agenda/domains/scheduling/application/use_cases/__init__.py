# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use cases, one per calendar action.
# ============================================================================
"""Scheduling Use Cases."""

from .build_financial_report import BuildFinancialReportUseCase
from .create_appointments import CreateAppointmentsUseCase
from .delete_appointment import DeleteAppointmentUseCase
from .duplicate_appointment import DuplicateAppointmentUseCase
from .export_appointments import ExportAppointmentsUseCase
from .get_availability import GetAvailabilityUseCase
from .load_calendar_window import LoadCalendarWindowUseCase
from .move_appointment import MoveAppointmentUseCase
from .save_appointment import SaveAppointmentUseCase
from .send_reminder import MarkReminderSentUseCase, SendReminderUseCase
from .update_appointment_status import SetPaymentUseCase, ToggleDoneUseCase, UpdateAppointmentStatusUseCase

__all__ = [
    "BuildFinancialReportUseCase",
    "CreateAppointmentsUseCase",
    "DeleteAppointmentUseCase",
    "DuplicateAppointmentUseCase",
    "ExportAppointmentsUseCase",
    "GetAvailabilityUseCase",
    "LoadCalendarWindowUseCase",
    "MarkReminderSentUseCase",
    "MoveAppointmentUseCase",
    "SaveAppointmentUseCase",
    "SendReminderUseCase",
    "SetPaymentUseCase",
    "ToggleDoneUseCase",
    "UpdateAppointmentStatusUseCase",
]
