# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: CSV and Google Calendar export of calendar appointments.
# ============================================================================
"""Export Appointments Use Case."""

import csv
import io
import logging
from collections.abc import Iterable
from urllib.parse import urlencode

from agenda.core.shared.dates import format_dmy, format_time

from ...domain.entities.appointment import Appointment
from ...domain.value_objects.appointment_status import NOT_PAID
from ...domain.value_objects.care_setting import Location, PriceType
from ...domain.value_objects.pricing import PriceList

logger = logging.getLogger(__name__)

CSV_HEADER = ["Data", "Ora Inizio", "Ora Fine", "Paziente", "Stato", "Trattamento", "Prezzo", "Sede", "Fatturato"]
GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"
CALENDAR_TIMEZONE = "Europe/Rome"


def status_label(appointment: Appointment) -> str:
    if appointment.payment_label == NOT_PAID:
        return "Non pagata"
    return appointment.status.display_name


class ExportAppointmentsUseCase:
    """Exports the loaded appointments for spreadsheets and calendars."""

    def __init__(self, prices: PriceList) -> None:
        self._prices = prices

    def to_csv(self, appointments: Iterable[Appointment]) -> str:
        """One row per appointment, in the given order."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        count = 0
        for a in appointments:
            writer.writerow(
                [
                    format_dmy(a.start),
                    format_time(a.start),
                    format_time(a.end),
                    a.patient_name,
                    status_label(a),
                    a.treatment_type.display_name,
                    f"€{a.effective_price(self._prices)}",
                    "DOMICILIO" if a.location == Location.DOMICILE else (a.clinic_site or ""),
                    "Sì" if a.price_type == PriceType.INVOICED else "No",
                ]
            )
            count += 1
        logger.info(f"Exported {count} appointments to CSV")
        return buffer.getvalue()

    def google_calendar_link(self, appointment: Appointment) -> str:
        """Google Calendar "TEMPLATE" link prefilled with the appointment."""
        home = appointment.location == Location.DOMICILE
        summary = f"{'🏠 ' if home else ''}{appointment.patient_name} - {status_label(appointment)}"
        details = (
            f"Trattamento: {appointment.treatment_type.display_name}\n"
            f"Prezzo: €{appointment.effective_price(self._prices)}\n"
            f"Note: {appointment.calendar_note or 'Nessuna nota'}"
        )
        dates = f"{appointment.start:%Y%m%dT%H%M%S}/{appointment.end:%Y%m%dT%H%M%S}"
        params = {
            "action": "TEMPLATE",
            "text": summary,
            "details": details,
            "location": (appointment.domicile_address if home else appointment.clinic_site) or "",
            "dates": dates,
            "ctz": CALENDAR_TIMEZONE,
        }
        return f"{GOOGLE_CALENDAR_URL}?{urlencode(params)}"
