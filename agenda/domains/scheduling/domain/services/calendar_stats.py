"""
Calendar statistics and filters for the day/week view.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from ..entities.appointment import Appointment
from ..value_objects.appointment_status import NOT_PAID, AppointmentStatus
from ..value_objects.care_setting import Location, PriceType, TreatmentType
from ..value_objects.pricing import PriceList


@dataclass(frozen=True)
class CalendarSummary:
    total: int
    done: int
    confirmed: int
    booked: int
    cancelled: int
    revenue: Decimal

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "done": self.done,
            "confirmed": self.confirmed,
            "booked": self.booked,
            "cancelled": self.cancelled,
            "revenue": float(self.revenue),
        }


@dataclass(frozen=True)
class AppointmentFilter:
    """Sidebar filters; ``None`` means "all".

    ``status`` also accepts the ``not_paid`` label.
    """

    status: str | None = None
    location: Location | None = None
    treatment_type: TreatmentType | None = None
    price_type: PriceType | None = None
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None


def summarize(appointments: Iterable[Appointment], prices: PriceList) -> CalendarSummary:
    """Counts per status and revenue of the appointments carried out."""
    items = list(appointments)

    def count(status: AppointmentStatus) -> int:
        return sum(1 for a in items if a.status == status)

    revenue = sum(
        (a.effective_price(prices) for a in items if a.status == AppointmentStatus.DONE),
        Decimal("0"),
    )
    return CalendarSummary(
        total=len(items),
        done=count(AppointmentStatus.DONE),
        confirmed=count(AppointmentStatus.CONFIRMED),
        booked=count(AppointmentStatus.BOOKED),
        cancelled=count(AppointmentStatus.CANCELLED),
        revenue=revenue,
    )


def expected_revenue(appointments: Iterable[Appointment], prices: PriceList) -> Decimal:
    """Sum of effective prices of every appointment that is not cancelled."""
    return sum(
        (a.effective_price(prices) for a in appointments if a.status != AppointmentStatus.CANCELLED),
        Decimal("0"),
    )


def _matches(appointment: Appointment, criteria: AppointmentFilter, prices: PriceList) -> bool:
    if criteria.status:
        if criteria.status == NOT_PAID:
            if appointment.payment_label != NOT_PAID:
                return False
        elif appointment.status.value != criteria.status:
            return False
    if criteria.location and appointment.location != criteria.location:
        return False
    if criteria.treatment_type and appointment.treatment_type != criteria.treatment_type:
        return False
    if criteria.price_type and appointment.price_type != criteria.price_type:
        return False
    if criteria.min_amount is not None or criteria.max_amount is not None:
        price = appointment.effective_price(prices)
        if criteria.min_amount is not None and price < criteria.min_amount:
            return False
        if criteria.max_amount is not None and price > criteria.max_amount:
            return False
    return True


def filter_appointments(
    appointments: Iterable[Appointment],
    criteria: AppointmentFilter,
    prices: PriceList,
) -> list[Appointment]:
    return [a for a in appointments if _matches(a, criteria, prices)]


def todays_appointments(appointments: Iterable[Appointment], today: date) -> list[Appointment]:
    """Non-cancelled appointments starting on ``today``, by start time."""
    todays = [
        a
        for a in appointments
        if a.start is not None and a.start.date() == today and a.status != AppointmentStatus.CANCELLED
    ]
    return sorted(todays, key=lambda a: a.start)


def upcoming(appointments: Iterable[Appointment], now: datetime, limit: int | None = None) -> list[Appointment]:
    """Appointments not yet over, by start time."""
    items = sorted((a for a in appointments if a.end is not None and a.end > now), key=lambda a: a.start)
    return items[:limit] if limit is not None else items
