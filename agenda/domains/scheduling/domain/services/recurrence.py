"""
Recurrence Generator

Expands a weekly recurrence into the ordered list of occurrence starts.
Only Monday..Saturday are bookable; Sunday is always skipped.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from agenda.core.domain.exceptions import RecurrenceCapacityException, ValidationException

DEFAULT_MAX_OCCURRENCES = 200
SUNDAY = 7  # isoweekday()
BOOKABLE_WEEKDAYS = frozenset(range(1, 7))


@dataclass(frozen=True)
class RecurrenceRequest:
    """Recurrence parameters.

    Attributes:
        first_start: Start of the first occurrence; its time of day is reused.
        until_date: Last day considered, inclusive.
        weekdays: ISO weekdays, Monday=1 .. Saturday=6.
    """

    first_start: datetime
    until_date: date
    weekdays: frozenset[int]

    def __post_init__(self):
        if not self.weekdays:
            raise ValidationException("Seleziona almeno un giorno per la ricorrenza.", field="weekdays")
        invalid = set(self.weekdays) - BOOKABLE_WEEKDAYS
        if invalid:
            raise ValidationException(
                f"Giorni non validi per la ricorrenza: {sorted(invalid)}",
                field="weekdays",
            )
        if self.until_date < self.first_start.date():
            raise ValidationException(
                "La data 'Ripeti fino a' non può essere precedente alla prima data.",
                field="until_date",
            )


def generate_starts(request: RecurrenceRequest) -> list[datetime]:
    """Every matching day from the first start's date to ``until_date``, in order."""
    first = request.first_start
    starts: list[datetime] = []
    day = first.date()
    while day <= request.until_date:
        weekday = day.isoweekday()
        if weekday != SUNDAY and weekday in request.weekdays:
            occurrence = datetime.combine(day, first.time())
            if occurrence >= first:
                starts.append(occurrence)
        day += timedelta(days=1)
    return starts


def expand_recurrence(request: RecurrenceRequest, max_occurrences: int = DEFAULT_MAX_OCCURRENCES) -> list[datetime]:
    """Generate the starts and enforce the per-insert cap.

    Raises:
        RecurrenceCapacityException: If more than ``max_occurrences`` starts result.
    """
    starts = generate_starts(request)
    if len(starts) > max_occurrences:
        raise RecurrenceCapacityException(len(starts), max_occurrences)
    return starts
