# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Mapping between record store rows and domain entities
# ============================================================================
"""Row mapping utility.

Converts ``appointments`` rows from the record store into Appointment
entities and back, in one place, so use cases never touch column names.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from agenda.core.domain.exceptions import EntityNotFoundException, RecordStoreException

from ...domain.entities.appointment import Appointment
from ...domain.value_objects.appointment_status import AppointmentStatus
from ...domain.value_objects.care_setting import Location, PriceType, TreatmentType
from ..ports.response import StoreResponse

if TYPE_CHECKING:
    from ..ports.record_store import IRecordStore

APPOINTMENTS_TABLE = "appointments"
INVOICES_TABLE = "invoices"
PATIENTS_TABLE = "patients"
MESSAGE_TEMPLATES_TABLE = "message_templates"


def parse_timestamp(value: Any) -> datetime | None:
    """Accept datetimes or ISO strings; timezone info is dropped (local wall-clock)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime.fromisoformat(str(value)).replace(tzinfo=None)


def parse_amount(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


class AppointmentRowMapper:
    """Maps ``appointments`` rows to entities and entities to rows.

    Example:
        >>> appointment = AppointmentRowMapper.to_entity(row)
        >>> await store.update("appointments", appointment.id, AppointmentRowMapper.time_fields(appointment))
    """

    @staticmethod
    def to_entity(row: dict[str, Any]) -> Appointment:
        status, legacy_unpaid = AppointmentStatus.from_stored(row.get("status"))
        is_paid = bool(row.get("is_paid")) and not legacy_unpaid and status == AppointmentStatus.DONE
        return Appointment(
            id=str(row["id"]) if row.get("id") is not None else None,
            patient_id=str(row.get("patient_id") or ""),
            patient_first_name=row.get("patient_first_name"),
            patient_last_name=row.get("patient_last_name"),
            patient_phone=row.get("patient_phone"),
            start=parse_timestamp(row.get("start_at")),
            end=parse_timestamp(row.get("end_at")),
            status=status,
            location=Location.from_string(row.get("location") or Location.STUDIO.value),
            clinic_site=row.get("clinic_site"),
            domicile_address=row.get("domicile_address"),
            treatment_type=TreatmentType.from_string(row.get("treatment_type") or TreatmentType.SEDUTA.value),
            price_type=PriceType.from_string(row.get("price_type") or PriceType.INVOICED.value),
            amount=parse_amount(row.get("amount")),
            is_paid=is_paid,
            calendar_note=row.get("calendar_note"),
            whatsapp_sent=bool(row.get("whatsapp_sent")),
            whatsapp_sent_at=parse_timestamp(row.get("whatsapp_sent_at")),
        )

    @staticmethod
    def to_row(appointment: Appointment) -> dict[str, Any]:
        """Full row for insertion; the store assigns the id."""
        return {
            "patient_id": appointment.patient_id,
            "start_at": appointment.start,
            "end_at": appointment.end,
            "status": appointment.status.value,
            "is_paid": appointment.is_paid,
            "location": appointment.location.value,
            "clinic_site": appointment.clinic_site,
            "domicile_address": appointment.domicile_address,
            "treatment_type": appointment.treatment_type.value,
            "price_type": appointment.price_type.value,
            "amount": appointment.amount,
            "calendar_note": appointment.calendar_note,
            "whatsapp_sent": appointment.whatsapp_sent,
            "whatsapp_sent_at": appointment.whatsapp_sent_at,
        }

    @staticmethod
    def time_fields(appointment: Appointment) -> dict[str, Any]:
        return {"start_at": appointment.start, "end_at": appointment.end}

    @staticmethod
    def status_fields(appointment: Appointment) -> dict[str, Any]:
        return {"status": appointment.status.value, "is_paid": appointment.is_paid}

    @staticmethod
    def editor_fields(appointment: Appointment) -> dict[str, Any]:
        return {
            **AppointmentRowMapper.status_fields(appointment),
            **AppointmentRowMapper.time_fields(appointment),
            "calendar_note": appointment.calendar_note,
            "amount": appointment.amount,
            "treatment_type": appointment.treatment_type.value,
            "price_type": appointment.price_type.value,
        }


def require_success(response: StoreResponse, operation: str, table: str) -> StoreResponse:
    """Raise ``RecordStoreException`` with the store's message if the call failed."""
    if not response.success:
        raise RecordStoreException(
            response.error_message or f"Errore durante {operation} su {table}",
            operation=operation,
            table=table,
        )
    return response


async def load_appointment(store: "IRecordStore", appointment_id: str) -> Appointment:
    """Fetch one appointment.

    Raises:
        RecordStoreException: If the store call fails.
        EntityNotFoundException: If no row has this id.
    """
    response = require_success(await store.get(APPOINTMENTS_TABLE, appointment_id), "get", APPOINTMENTS_TABLE)
    row = response.get_dict()
    if not row:
        raise EntityNotFoundException("Appointment", appointment_id, message="Appuntamento non trovato")
    return AppointmentRowMapper.to_entity(row)
