# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Data Transfer Objects for appointment-related operations.
# ============================================================================
"""Appointment DTOs.

Request and result objects for the calendar use cases: creation,
editing, status changes, drag and drop, reminders and reports.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from ...domain.entities.appointment import Appointment
from ...domain.services.availability import OccupancyForecast
from ...domain.services.reporting import PeriodKind
from ...domain.value_objects.care_setting import Location, PriceType, TreatmentType
from ...domain.value_objects.slot import Slot

# =============================================================================
# Request DTOs
# =============================================================================


@dataclass(frozen=True)
class CreateAppointmentsRequest:
    """Request DTO for creating one appointment or a recurring series."""

    patient_id: str
    start: datetime
    duration_minutes: int
    location: Location = Location.STUDIO
    clinic_site: str | None = None
    domicile_address: str | None = None
    treatment_type: TreatmentType = TreatmentType.SEDUTA
    price_type: PriceType = PriceType.INVOICED
    custom_amount: Decimal | None = None
    recurrence_until: date | None = None
    recurrence_weekdays: frozenset[int] = frozenset()
    send_whatsapp: bool = False

    @property
    def is_recurring(self) -> bool:
        return self.recurrence_until is not None


@dataclass(frozen=True)
class DuplicateAppointmentRequest:
    """Request DTO for copying an appointment to a new date and time."""

    appointment_id: str
    new_date: date
    new_time: time


@dataclass(frozen=True)
class SaveAppointmentRequest:
    """Request DTO for the appointment editor.

    ``None`` fields are left unchanged. Date, time and duration are applied
    together when ``new_date`` and ``new_time`` are both given.
    """

    appointment_id: str
    status: str | None = None
    calendar_note: str | None = None
    amount: Decimal | None = None
    treatment_type: TreatmentType | None = None
    price_type: PriceType | None = None
    new_date: date | None = None
    new_time: time | None = None
    duration_minutes: int | None = None


@dataclass(frozen=True)
class UpdateStatusRequest:
    """Request DTO for the status editor; ``status`` may be ``not_paid``."""

    appointment_id: str
    status: str


@dataclass(frozen=True)
class SetPaymentRequest:
    appointment_id: str
    paid: bool


@dataclass(frozen=True)
class MoveAppointmentRequest:
    """Request DTO for a drop; the stored duration is always kept."""

    appointment_id: str
    new_start: datetime


@dataclass(frozen=True)
class CalendarWindowRequest:
    """Half-open ``[window_from, window_to)`` window to load."""

    window_from: datetime
    window_to: datetime


@dataclass(frozen=True)
class FinancialReportRequest:
    kind: PeriodKind
    anchor: date
    today: date | None = None


@dataclass(frozen=True)
class SendReminderRequest:
    """Request DTO for a WhatsApp reminder or confirmation preview."""

    appointment_id: str
    is_confirmation: bool = False
    today: date | None = None


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass(frozen=True)
class ReminderPreview:
    """Message ready to send; ``confirm_text`` is shown before opening ``url``."""

    phone: str
    message: str
    url: str
    confirm_text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "phone": self.phone,
            "message": self.message,
            "url": self.url,
            "confirm_text": self.confirm_text,
        }


@dataclass
class CreateAppointmentsResult:
    """Result for appointment creation."""

    appointments: list[Appointment] = field(default_factory=list)
    confirmation: ReminderPreview | None = None
    notice: str | None = None

    @property
    def count(self) -> int:
        return len(self.appointments)


@dataclass
class AvailabilityResult:
    day: date
    slots: list[Slot]
    forecast: OccupancyForecast

    @property
    def free_slots(self) -> list[Slot]:
        return [s for s in self.slots if not s.is_occupied]
