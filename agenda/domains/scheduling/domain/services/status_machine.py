"""
Scheduling state machine.

Thin functional surface over the Appointment transition methods, used by
the use cases and the status editor.
"""

from ..entities.appointment import Appointment
from ..value_objects.appointment_status import NOT_PAID, AppointmentStatus


def transition(appointment: Appointment, new_status: AppointmentStatus | str) -> Appointment:
    """Apply a status change; ``not_paid`` is accepted only from ``done``."""
    if isinstance(new_status, AppointmentStatus):
        appointment.transition_to(new_status)
    else:
        appointment.apply_requested_status(new_status)
    return appointment


def toggle_done(appointment: Appointment) -> Appointment:
    appointment.toggle_done()
    return appointment


def set_paid(appointment: Appointment, paid: bool) -> Appointment:
    appointment.set_paid(paid)
    return appointment


def editor_options(current: AppointmentStatus) -> list[str]:
    """Values the status editor may offer for an appointment in ``current``."""
    options = [current.value] + [s.value for s in current.allowed_targets()]
    if current == AppointmentStatus.DONE:
        options.append(NOT_PAID)
    return options


def status_fields(appointment: Appointment) -> dict:
    """Partial row persisted after a status or payment change."""
    return {"status": appointment.status.value, "is_paid": appointment.is_paid}
