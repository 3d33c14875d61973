# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Application services.
# ============================================================================
from .calendar_view import CalendarView, ViewType
from .reminder_messages import ReminderComposer

__all__ = ["CalendarView", "ViewType", "ReminderComposer"]
