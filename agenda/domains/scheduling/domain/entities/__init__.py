# Domain Entities
from .appointment import Appointment, AppointmentStatusChanged

__all__ = ["Appointment", "AppointmentStatusChanged"]
