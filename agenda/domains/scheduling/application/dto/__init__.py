# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Data Transfer Objects.
# ============================================================================
from .appointment_dtos import (
    AvailabilityResult,
    CalendarWindowRequest,
    CreateAppointmentsRequest,
    CreateAppointmentsResult,
    DuplicateAppointmentRequest,
    FinancialReportRequest,
    MoveAppointmentRequest,
    ReminderPreview,
    SaveAppointmentRequest,
    SendReminderRequest,
    SetPaymentRequest,
    UpdateStatusRequest,
)

__all__ = [
    "AvailabilityResult",
    "CalendarWindowRequest",
    "CreateAppointmentsRequest",
    "CreateAppointmentsResult",
    "DuplicateAppointmentRequest",
    "FinancialReportRequest",
    "MoveAppointmentRequest",
    "ReminderPreview",
    "SaveAppointmentRequest",
    "SendReminderRequest",
    "SetPaymentRequest",
    "UpdateStatusRequest",
]
