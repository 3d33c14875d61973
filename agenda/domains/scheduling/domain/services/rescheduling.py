"""
Drag and drop rescheduling.

A ``DragSession`` tracks at most one appointment being dragged across the
calendar grid and turns a drop into a new ``[start, end)`` with the same
duration.
"""

from dataclasses import dataclass
from datetime import date, datetime

from agenda.core.domain.exceptions import InvalidOperationException
from agenda.core.shared.dates import at_time

from ..entities.appointment import Appointment


@dataclass(frozen=True)
class DropTarget:
    appointment_id: str
    new_start: datetime
    new_end: datetime


class DragSession:
    """Holds the single active drag, if any."""

    def __init__(self):
        self._dragging: Appointment | None = None

    @property
    def active(self) -> Appointment | None:
        return self._dragging

    @property
    def is_active(self) -> bool:
        return self._dragging is not None

    def start(self, appointment: Appointment) -> None:
        """Begin dragging ``appointment``.

        Raises:
            InvalidOperationException: If another drag is in progress.
        """
        if self._dragging is not None:
            raise InvalidOperationException(
                operation="drag_start",
                current_state=f"dragging:{self._dragging.id}",
                message="Un altro appuntamento è già in trascinamento",
            )
        self._dragging = appointment

    def end(self) -> None:
        """Abandon the drag without persisting anything."""
        self._dragging = None

    def drop(self, payload_id: str, target_date: date | datetime, hour: int, minute: int = 0) -> DropTarget | None:
        """Compute where the dragged appointment lands.

        Returns ``None`` when no drag is active or the payload id does not
        match the dragged appointment.
        """
        dragged = self._dragging
        if dragged is None or dragged.id != payload_id:
            return None
        new_start = at_time(target_date, hour, minute)
        return DropTarget(
            appointment_id=payload_id,
            new_start=new_start,
            new_end=new_start + dragged.duration,
        )
