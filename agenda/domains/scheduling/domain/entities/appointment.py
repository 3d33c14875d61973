"""Appointment Entity - Aggregate Root.

Rappresenta un appuntamento dello studio con le regole di validazione
del luogo, la macchina a stati e l'accoppiamento stato/pagamento.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any

from agenda.core.domain.entities import AggregateRoot
from agenda.core.domain.exceptions import InvalidOperationException, ValidationException

from ..value_objects.appointment_status import NOT_PAID, AppointmentStatus
from ..value_objects.care_setting import Location, PriceType, TreatmentType
from ..value_objects.pricing import PriceList

MIN_ADDRESS_LENGTH = 5


@dataclass(frozen=True)
class AppointmentStatusChanged:
    """Evento di dominio: lo stato di un appuntamento è cambiato."""

    appointment_id: str | None
    old_status: AppointmentStatus
    new_status: AppointmentStatus
    is_paid: bool


@dataclass
class Appointment(AggregateRoot[str]):
    """Appuntamento - Aggregate Root.

    Ogni cambio di stato passa da ``transition_to``: qualunque stato diverso
    da ``done`` azzera il flag di pagamento.
    """

    # Paziente (riferimento esterno)
    patient_id: str = ""
    patient_first_name: str | None = None
    patient_last_name: str | None = None
    patient_phone: str | None = None

    # Orario (ora locale, senza fuso)
    start: datetime | None = None
    end: datetime | None = None

    status: AppointmentStatus = AppointmentStatus.BOOKED

    # Luogo
    location: Location = Location.STUDIO
    clinic_site: str | None = None
    domicile_address: str | None = None

    # Trattamento e prezzo
    treatment_type: TreatmentType = TreatmentType.SEDUTA
    price_type: PriceType = PriceType.INVOICED
    amount: Decimal | None = None
    is_paid: bool = False

    calendar_note: str | None = None

    # Messaggi WhatsApp
    whatsapp_sent: bool = False
    whatsapp_sent_at: datetime | None = None

    # Validation
    def validate(self) -> None:
        """Verifica gli invarianti prima di ogni scrittura.

        Raises:
            ValidationException: Se un campo obbligatorio manca o è incoerente.
        """
        if not (self.patient_id or "").strip():
            raise ValidationException("Seleziona un paziente.", field="patient_id")
        if self.start is None or self.end is None:
            raise ValidationException("Orario dell'appuntamento mancante.", field="start")
        if self.end <= self.start:
            raise ValidationException("La fine deve essere successiva all'inizio.", field="end")
        if self.amount is not None and self.amount < 0:
            raise ValidationException("L'importo non può essere negativo.", field="amount")
        self.normalize_location()

    def normalize_location(self) -> None:
        """Tiene solo il campo di luogo pertinente, ripulito dagli spazi.

        Raises:
            ValidationException: Sede mancante per lo studio o indirizzo troppo corto per il domicilio.
        """
        if self.location == Location.STUDIO:
            site = (self.clinic_site or "").strip()
            if not site:
                raise ValidationException("Seleziona la sede dello studio.", field="clinic_site")
            self.clinic_site = site
            self.domicile_address = None
        else:
            address = (self.domicile_address or "").strip()
            if len(address) < MIN_ADDRESS_LENGTH:
                raise ValidationException(
                    "Inserisci un indirizzo di domicilio valido.", field="domicile_address"
                )
            self.domicile_address = address
            self.clinic_site = None

    # State machine
    def transition_to(self, new_status: AppointmentStatus) -> None:
        """Cambia stato.

        Raises:
            InvalidOperationException: Se la transizione non è consentita.
        """
        if not self.status.can_transition_to(new_status):
            raise InvalidOperationException(
                operation=f"transition_to:{new_status.value}",
                current_state=self.status.value,
                message=f"Impossibile passare da {self.status.display_name} a {new_status.display_name}",
            )
        old_status = self.status
        self.status = new_status
        if new_status != AppointmentStatus.DONE:
            self.is_paid = False
        if old_status != new_status:
            self._record_event(AppointmentStatusChanged(self.id, old_status, new_status, self.is_paid))
        self.touch()

    def apply_requested_status(self, requested: str) -> None:
        """Applica lo stato scelto nell'editor, compresa l'etichetta ``not_paid``.

        ``not_paid`` è accettato solo da ``done`` e lascia ``done`` non pagato.
        """
        if requested == NOT_PAID:
            if self.status != AppointmentStatus.DONE:
                raise InvalidOperationException(
                    operation=NOT_PAID,
                    current_state=self.status.value,
                    message="Solo un appuntamento eseguito può essere segnato come non pagato",
                )
            self.set_paid(False)
            return
        try:
            status = AppointmentStatus.from_string(requested)
        except ValueError as e:
            raise ValidationException(f"Stato non valido: {requested}", field="status") from e
        self.transition_to(status)

    def toggle_done(self) -> None:
        """Scorciatoia: ``done`` diventa ``confirmed``, altrimenti ``done``."""
        if self.status == AppointmentStatus.DONE:
            self.transition_to(AppointmentStatus.CONFIRMED)
        else:
            self.transition_to(AppointmentStatus.DONE)

    def set_paid(self, paid: bool) -> None:
        """Imposta il pagamento; consentito solo su appuntamenti eseguiti."""
        if self.status != AppointmentStatus.DONE:
            raise InvalidOperationException(
                operation="set_paid",
                current_state=self.status.value,
                message="Il pagamento si registra solo su appuntamenti eseguiti",
            )
        self.is_paid = paid
        self.touch()

    # Time
    @property
    def duration(self) -> timedelta:
        if self.start is None or self.end is None:
            return timedelta(0)
        return self.end - self.start

    @property
    def duration_minutes(self) -> int:
        return int(self.duration.total_seconds() // 60)

    def relocate(self, new_start: datetime) -> None:
        """Sposta l'appuntamento mantenendo la durata."""
        duration = self.duration
        self.start = new_start
        self.end = new_start + duration
        self.touch()

    def reschedule(self, new_start: datetime, duration_minutes: int) -> None:
        """Imposta inizio e durata dall'editor."""
        if duration_minutes <= 0:
            raise ValidationException("La durata deve essere positiva.", field="duration")
        self.start = new_start
        self.end = new_start + timedelta(minutes=duration_minutes)
        self.touch()

    def overlaps(self, start: datetime, end: datetime) -> bool:
        if self.start is None or self.end is None:
            return False
        return self.start < end and self.end > start

    def occupies_time(self) -> bool:
        return self.status.occupies_time()

    def mark_whatsapp_sent(self, sent_at: datetime) -> None:
        self.whatsapp_sent = True
        self.whatsapp_sent_at = sent_at
        self.touch()

    # Queries
    def effective_price(self, prices: PriceList) -> Decimal:
        return prices.effective_price(self.amount, self.treatment_type, self.price_type)

    @property
    def payment_label(self) -> str:
        """Stato mostrato all'utente, con ``not_paid`` derivato."""
        if self.status == AppointmentStatus.DONE and not self.is_paid:
            return NOT_PAID
        return self.status.value

    @property
    def patient_name(self) -> str:
        parts = [p.strip() for p in (self.patient_first_name, self.patient_last_name) if p and p.strip()]
        return " ".join(parts) or "Paziente"

    @property
    def place_label(self) -> str:
        if self.location == Location.DOMICILE:
            return f"Domicilio ({self.domicile_address or ''})"
        return self.clinic_site or ""

    # Factory methods
    @classmethod
    def create(
        cls,
        patient_id: str,
        start: datetime,
        duration_minutes: int,
        location: Location = Location.STUDIO,
        clinic_site: str | None = None,
        domicile_address: str | None = None,
        treatment_type: TreatmentType = TreatmentType.SEDUTA,
        price_type: PriceType = PriceType.INVOICED,
        amount: Decimal | None = None,
        calendar_note: str | None = None,
    ) -> "Appointment":
        """Factory method per un nuovo appuntamento, sempre in stato ``booked``.

        Raises:
            ValidationException: Se durata, luogo o paziente non sono validi.
        """
        if duration_minutes <= 0:
            raise ValidationException("La durata deve essere positiva.", field="duration")
        appointment = cls(
            patient_id=patient_id,
            start=start,
            end=start + timedelta(minutes=duration_minutes),
            status=AppointmentStatus.BOOKED,
            location=location,
            clinic_site=clinic_site,
            domicile_address=domicile_address,
            treatment_type=treatment_type,
            price_type=price_type,
            amount=amount,
            calendar_note=calendar_note,
            is_paid=False,
        )
        appointment.validate()
        return appointment

    # Serialization methods
    def to_summary_dict(self, prices: PriceList | None = None) -> dict[str, Any]:
        """Dizionario per le risposte API."""
        data: dict[str, Any] = {
            "id": self.id,
            "patient_id": self.patient_id,
            "patient_name": self.patient_name,
            "patient_phone": self.patient_phone,
            "start": self.start.isoformat() if self.start else None,
            "end": self.end.isoformat() if self.end else None,
            "duration_minutes": self.duration_minutes,
            "status": self.status.value,
            "status_name": self.status.display_name,
            "payment_label": self.payment_label,
            "is_paid": self.is_paid,
            "location": self.location.value,
            "clinic_site": self.clinic_site,
            "domicile_address": self.domicile_address,
            "treatment_type": self.treatment_type.value,
            "price_type": self.price_type.value,
            "amount": str(self.amount) if self.amount is not None else None,
            "calendar_note": self.calendar_note,
            "whatsapp_sent": self.whatsapp_sent,
            "whatsapp_sent_at": self.whatsapp_sent_at.isoformat() if self.whatsapp_sent_at else None,
        }
        if prices is not None:
            data["effective_price"] = str(self.effective_price(prices))
        return data
