# Domain Services
from .availability import OccupancyForecast, day_slots, free_slots, occupancy_forecast
from .calendar_stats import (
    AppointmentFilter,
    CalendarSummary,
    expected_revenue,
    filter_appointments,
    summarize,
    todays_appointments,
    upcoming,
)
from .recurrence import RecurrenceRequest, expand_recurrence, generate_starts
from .reporting import (
    FinancialRecord,
    FinancialReport,
    PeriodKind,
    RecordSource,
    aggregate,
    bucket_details,
    bucket_index,
    period_labels,
    period_range,
)
from .rescheduling import DragSession, DropTarget

__all__ = [
    "OccupancyForecast",
    "day_slots",
    "free_slots",
    "occupancy_forecast",
    "AppointmentFilter",
    "CalendarSummary",
    "expected_revenue",
    "filter_appointments",
    "summarize",
    "todays_appointments",
    "upcoming",
    "RecurrenceRequest",
    "expand_recurrence",
    "generate_starts",
    "FinancialRecord",
    "FinancialReport",
    "PeriodKind",
    "RecordSource",
    "aggregate",
    "bucket_details",
    "bucket_index",
    "period_labels",
    "period_range",
    "DragSession",
    "DropTarget",
]
