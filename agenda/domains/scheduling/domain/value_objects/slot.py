"""Calendar slot value object."""

from dataclasses import dataclass
from datetime import datetime

from agenda.core.domain.value_objects import ValueObject


@dataclass(frozen=True)
class Slot(ValueObject):
    """Una cella della griglia operativa, ``[start, end)``."""

    start: datetime
    end: datetime
    is_occupied: bool = False

    def _validate(self) -> None:
        if self.end <= self.start:
            raise ValueError("Slot end must be after start")

    def overlaps(self, start: datetime, end: datetime) -> bool:
        """Half-open overlap: touching intervals do not overlap."""
        return start < self.end and end > self.start

    @property
    def label(self) -> str:
        return self.start.strftime("%H:%M")

    def to_dict(self) -> dict:
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "label": self.label,
            "is_occupied": self.is_occupied,
        }
