"""
Shared Date Utilities

Calendar arithmetic and Italian formatting used by the scheduling engine.

All values are local wall-clock times: naive datetimes, no timezone
conversion anywhere. Every function is total for valid calendar dates,
except ``parse_iso_date`` which validates user input.
"""

import calendar
from datetime import date, datetime, time, timedelta

from agenda.core.domain.exceptions import ValidationException

DATE_ISO = "%Y-%m-%d"
DATE_IT = "%d/%m/%Y"
TIME_24H = "%H:%M"

# Monday = 0, as returned by date.weekday()
DAYS_IT = ["Lunedì", "Martedì", "Mercoledì", "Giovedì", "Venerdì", "Sabato", "Domenica"]
MONTHS_IT = [
    "Gennaio",
    "Febbraio",
    "Marzo",
    "Aprile",
    "Maggio",
    "Giugno",
    "Luglio",
    "Agosto",
    "Settembre",
    "Ottobre",
    "Novembre",
    "Dicembre",
]

BUSINESS_DAYS = 6  # Monday..Saturday


def _as_date(d: date | datetime) -> date:
    return d.date() if isinstance(d, datetime) else d


def start_of_day(d: date | datetime) -> datetime:
    """Midnight at the start of the given day."""
    return datetime.combine(_as_date(d), time.min)


def end_of_day(d: date | datetime) -> datetime:
    """Last representable instant of the given day."""
    return datetime.combine(_as_date(d), time.max)


def start_of_week(d: date | datetime) -> datetime:
    """Monday 00:00 of the week containing ``d``."""
    day = _as_date(d)
    return start_of_day(day - timedelta(days=day.weekday()))


def start_of_month(d: date | datetime) -> datetime:
    day = _as_date(d)
    return datetime(day.year, day.month, 1)


def days_in_month(d: date | datetime) -> int:
    day = _as_date(d)
    return calendar.monthrange(day.year, day.month)[1]


def end_of_month(d: date | datetime) -> datetime:
    day = _as_date(d)
    return end_of_day(date(day.year, day.month, days_in_month(day)))


def add_days(d: datetime, days: int) -> datetime:
    """Shift by whole calendar days, keeping the wall-clock time."""
    return d + timedelta(days=days)


def add_weeks(d: datetime, weeks: int) -> datetime:
    return add_days(d, weeks * 7)


def at_time(d: date | datetime, hour: int, minute: int = 0) -> datetime:
    """The given day at ``hour:minute:00``."""
    return datetime.combine(_as_date(d), time(hour, minute))


def to_iso_date(d: date | datetime) -> str:
    return _as_date(d).strftime(DATE_ISO)


def parse_iso_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string.

    Raises:
        ValidationException: If the value is not a valid calendar date.
    """
    try:
        return datetime.strptime((value or "").strip(), DATE_ISO).date()
    except ValueError as e:
        raise ValidationException(f"Data non valida: {value!r}", field="date") from e


def format_dmy(d: date | datetime) -> str:
    """Format as ``dd/mm/yyyy``."""
    return _as_date(d).strftime(DATE_IT)


def format_time(d: datetime | time) -> str:
    """Format as ``HH:MM``."""
    return d.strftime(TIME_24H)


def relative_day_label(d: date | datetime, today: date | None = None) -> str:
    """Label used in patient messages: 'Oggi', 'Domani' or 'Lunedì 8 Gennaio'."""
    day = _as_date(d)
    today = today or date.today()
    if day == today:
        return "Oggi"
    if day == today + timedelta(days=1):
        return "Domani"
    return f"{DAYS_IT[day.weekday()]} {day.day} {MONTHS_IT[day.month - 1]}"


def week_label(week_start: date | datetime) -> str:
    """Label of a business week, Monday to Saturday."""
    monday = start_of_week(week_start)
    saturday = add_days(monday, BUSINESS_DAYS - 1)
    return f"SETTIMANA {format_dmy(monday)} → {format_dmy(saturday)}"


def week_options(today: date | datetime, before: int = 12, after: int = 24) -> list[tuple[date, str]]:
    """Navigable weeks around ``today`` as ``(monday, label)`` pairs."""
    base = start_of_week(today)
    options = []
    for offset in range(-before, after + 1):
        monday = add_weeks(base, offset)
        options.append((monday.date(), week_label(monday)))
    return options
