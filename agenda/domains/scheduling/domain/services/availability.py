"""
Availability Calculator

Slot occupancy and daily occupancy forecast. Advisory only: nothing here
prevents over-booking.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from agenda.core.shared.dates import at_time

from ..entities.appointment import Appointment
from ..value_objects.slot import Slot

DAY_START_HOUR = 7
DAY_END_HOUR = 22
SLOT_MINUTES = 30

HIGH_OCCUPANCY = 80
MEDIUM_OCCUPANCY = 60


@dataclass(frozen=True)
class OccupancyForecast:
    total_events: int
    occupied_minutes: int
    available_minutes: int
    occupancy_rate: float
    available_hours: float
    recommendation: str

    def to_dict(self) -> dict:
        return {
            "total_events": self.total_events,
            "occupied_minutes": self.occupied_minutes,
            "available_minutes": self.available_minutes,
            "occupancy_rate": self.occupancy_rate,
            "available_hours": self.available_hours,
            "recommendation": self.recommendation,
        }


def _active(appointments: Iterable[Appointment]) -> list[Appointment]:
    return [a for a in appointments if a.occupies_time() and a.start is not None and a.end is not None]


def operating_minutes(start_hour: int = DAY_START_HOUR, end_hour: int = DAY_END_HOUR) -> int:
    return (end_hour - start_hour) * 60


def day_slots(
    day: date | datetime,
    appointments: Iterable[Appointment],
    start_hour: int = DAY_START_HOUR,
    end_hour: int = DAY_END_HOUR,
    slot_minutes: int = SLOT_MINUTES,
) -> list[Slot]:
    """Slots of the operating window, each flagged if any appointment overlaps it."""
    active = _active(appointments)
    slots: list[Slot] = []
    cursor = at_time(day, start_hour)
    close = at_time(day, end_hour)
    step = timedelta(minutes=slot_minutes)
    while cursor < close:
        slot_end = cursor + step
        occupied = any(a.start < slot_end and a.end > cursor for a in active)
        slots.append(Slot(start=cursor, end=slot_end, is_occupied=occupied))
        cursor = slot_end
    return slots


def free_slots(day: date | datetime, appointments: Iterable[Appointment], **kwargs) -> list[Slot]:
    return [s for s in day_slots(day, appointments, **kwargs) if not s.is_occupied]


def occupancy_forecast(
    day: date | datetime,
    appointments: Iterable[Appointment],
    start_hour: int = DAY_START_HOUR,
    end_hour: int = DAY_END_HOUR,
) -> OccupancyForecast:
    """Occupancy of one day, counting appointments that start on it."""
    target = day.date() if isinstance(day, datetime) else day
    todays = [a for a in _active(appointments) if a.start.date() == target]
    total = operating_minutes(start_hour, end_hour)
    occupied = sum(a.duration_minutes for a in todays)
    available = max(0, total - occupied)
    rate = round(occupied / total * 100, 1) if total else 0.0

    if rate > HIGH_OCCUPANCY:
        recommendation = "ALTA OCCUPAZIONE"
    elif rate > MEDIUM_OCCUPANCY:
        recommendation = "MEDIA OCCUPAZIONE"
    else:
        recommendation = "BASSA OCCUPAZIONE"

    return OccupancyForecast(
        total_events=len(todays),
        occupied_minutes=occupied,
        available_minutes=available,
        occupancy_rate=rate,
        available_hours=round(available / 60, 1),
        recommendation=recommendation,
    )
