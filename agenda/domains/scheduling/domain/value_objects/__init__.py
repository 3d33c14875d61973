# Domain Value Objects
from .appointment_status import NOT_PAID, AppointmentStatus
from .care_setting import Location, PriceType, TreatmentType
from .pricing import PriceList
from .slot import Slot

__all__ = [
    "NOT_PAID",
    "AppointmentStatus",
    "Location",
    "PriceType",
    "TreatmentType",
    "PriceList",
    "Slot",
]
