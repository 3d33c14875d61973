"""Appointment Status Value Object.

Stati dell'appuntamento e transizioni consentite.

``not_paid`` non è uno stato primario: è l'etichetta di pagamento di un
appuntamento ``done`` con ``is_paid = False``.
"""

from agenda.core.domain.value_objects import StatusEnum

NOT_PAID = "not_paid"


class AppointmentStatus(StatusEnum):
    """Stati dell'appuntamento con macchina a stati."""

    BOOKED = "booked"  # Prenotato
    CONFIRMED = "confirmed"  # Confermato dal paziente
    DONE = "done"  # Eseguito
    CANCELLED = "cancelled"  # Annullato

    @property
    def display_name(self) -> str:
        """Nome visualizzato in italiano."""
        names = {
            "booked": "Prenotato",
            "confirmed": "Confermato",
            "done": "Eseguito",
            "cancelled": "Annullato",
        }
        return names.get(self.value, self.value)

    def allowed_targets(self) -> list["AppointmentStatus"]:
        """Stati raggiungibili da questo stato.

        State machine:
        - booked -> confirmed, done, cancelled
        - confirmed -> booked, done, cancelled
        - done -> confirmed, cancelled
        - cancelled -> (stato finale)
        """
        transitions: dict[str, list[str]] = {
            "booked": ["confirmed", "done", "cancelled"],
            "confirmed": ["booked", "done", "cancelled"],
            "done": ["confirmed", "cancelled"],
            "cancelled": [],  # Stato finale
        }
        return [AppointmentStatus(v) for v in transitions.get(self.value, [])]

    def can_transition_to(self, new_status: "AppointmentStatus") -> bool:
        """Una transizione verso lo stesso stato è sempre consentita."""
        return new_status == self or new_status in self.allowed_targets()

    def is_final(self) -> bool:
        return self == AppointmentStatus.CANCELLED

    def occupies_time(self) -> bool:
        """Gli appuntamenti annullati non occupano slot."""
        return self != AppointmentStatus.CANCELLED

    @classmethod
    def from_stored(cls, value: str | None) -> tuple["AppointmentStatus", bool]:
        """Legge lo stato salvato nel record store.

        Returns:
            ``(status, legacy_unpaid)``; le righe storiche con ``not_paid``
            vengono lette come ``done`` non pagato.
        """
        if value == NOT_PAID:
            return cls.DONE, True
        if not value:
            return cls.BOOKED, False
        return cls.from_string(value), False
