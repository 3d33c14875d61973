# ============================================================================
# SCOPE: GLOBAL
# Description: Pydantic schemas for the calendar, appointment and report API.
# ============================================================================
"""Pydantic schemas for the agenda API."""

from datetime import date, datetime, time
from decimal import Decimal

from pydantic import BaseModel, Field

from agenda.domains.scheduling.application.dto import (
    CreateAppointmentsRequest,
    DuplicateAppointmentRequest,
    MoveAppointmentRequest,
    SaveAppointmentRequest,
)
from agenda.domains.scheduling.domain.value_objects import Location, PriceType, TreatmentType


class AppointmentCreate(BaseModel):
    """Schema for creating one appointment or a weekly series."""

    patient_id: str = Field(..., description="Patient id")
    start: datetime = Field(..., description="Local start date and time")
    duration_minutes: int = Field(60, description="Duration in minutes")

    # Place
    location: Location = Field(Location.STUDIO, description="studio or domicile")
    clinic_site: str | None = Field(None, max_length=200, description="Clinic site for studio appointments")
    domicile_address: str | None = Field(None, max_length=300, description="Address for home visits")

    # Price
    treatment_type: TreatmentType = TreatmentType.SEDUTA
    price_type: PriceType = PriceType.INVOICED
    custom_amount: Decimal | None = Field(None, description="Overrides the standard price")

    # Recurrence
    recurrence_until: date | None = Field(None, description="Last date of the series, inclusive")
    recurrence_weekdays: list[int] = Field(default_factory=list, description="ISO weekdays 1 (Mon) to 6 (Sat)")

    send_whatsapp: bool = Field(False, description="Prepare the WhatsApp confirmation")

    def to_request(self) -> CreateAppointmentsRequest:
        return CreateAppointmentsRequest(
            patient_id=self.patient_id,
            start=self.start.replace(tzinfo=None),
            duration_minutes=self.duration_minutes,
            location=self.location,
            clinic_site=self.clinic_site,
            domicile_address=self.domicile_address,
            treatment_type=self.treatment_type,
            price_type=self.price_type,
            custom_amount=self.custom_amount,
            recurrence_until=self.recurrence_until,
            recurrence_weekdays=frozenset(self.recurrence_weekdays),
            send_whatsapp=self.send_whatsapp,
        )


class AppointmentDuplicate(BaseModel):
    new_date: date
    new_time: time

    def to_request(self, appointment_id: str) -> DuplicateAppointmentRequest:
        return DuplicateAppointmentRequest(appointment_id, self.new_date, self.new_time)


class AppointmentUpdate(BaseModel):
    """Schema for the appointment editor (partial update)."""

    status: str | None = Field(None, description="booked, confirmed, done, cancelled or not_paid")
    calendar_note: str | None = None
    amount: Decimal | None = Field(None, ge=0)
    treatment_type: TreatmentType | None = None
    price_type: PriceType | None = None
    new_date: date | None = None
    new_time: time | None = None
    duration_minutes: int | None = Field(None, gt=0)

    def to_request(self, appointment_id: str) -> SaveAppointmentRequest:
        return SaveAppointmentRequest(
            appointment_id=appointment_id,
            status=self.status,
            calendar_note=self.calendar_note,
            amount=self.amount,
            treatment_type=self.treatment_type,
            price_type=self.price_type,
            new_date=self.new_date,
            new_time=self.new_time,
            duration_minutes=self.duration_minutes,
        )


class StatusUpdate(BaseModel):
    status: str = Field(..., description="booked, confirmed, done, cancelled or not_paid")


class PaymentUpdate(BaseModel):
    paid: bool


class AppointmentMove(BaseModel):
    """Drop target; the duration is kept."""

    new_start: datetime

    def to_request(self, appointment_id: str) -> MoveAppointmentRequest:
        return MoveAppointmentRequest(
            appointment_id=appointment_id,
            new_start=self.new_start.replace(tzinfo=None),
        )


class ReminderCreate(BaseModel):
    is_confirmation: bool = Field(False, description="Confirmation text instead of the reminder")
