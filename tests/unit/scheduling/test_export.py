"""
Unit tests for CSV export and Google Calendar links.
"""

from datetime import datetime
from decimal import Decimal
from urllib.parse import parse_qs, urlparse

import pytest

from agenda.domains.scheduling.application.use_cases import ExportAppointmentsUseCase
from agenda.domains.scheduling.application.use_cases.export_appointments import CSV_HEADER
from agenda.domains.scheduling.domain.value_objects import AppointmentStatus, Location, PriceType


@pytest.fixture
def exporter(prices) -> ExportAppointmentsUseCase:
    return ExportAppointmentsUseCase(prices)


@pytest.mark.unit
class TestCsvExport:
    def test_header_and_rows(self, exporter, make_appointment) -> None:
        """Should write one row per appointment with Italian labels."""
        appointments = [
            make_appointment(status=AppointmentStatus.DONE),
            make_appointment(
                id="appt-2",
                start=datetime(2024, 1, 2, 15, 0),
                minutes=30,
                location=Location.DOMICILE,
                clinic_site=None,
                domicile_address="Via Roma 1",
                price_type=PriceType.CASH,
                amount=Decimal("30"),
            ),
        ]

        lines = exporter.to_csv(appointments).splitlines()

        assert lines[0] == ",".join(CSV_HEADER)
        assert lines[1] == "01/01/2024,09:00,10:00,Mario Rossi,Non pagata,Seduta,€40,Studio Pontecorvo,Sì"
        assert lines[2] == "02/01/2024,15:00,15:30,Mario Rossi,Prenotato,Seduta,€30,DOMICILIO,No"

    def test_empty_export_has_header_only(self, exporter) -> None:
        assert exporter.to_csv([]).splitlines() == [",".join(CSV_HEADER)]


@pytest.mark.unit
class TestGoogleCalendarLink:
    def test_template_parameters(self, exporter, make_appointment) -> None:
        """Should prefill title, dates, place and time zone."""
        url = exporter.google_calendar_link(make_appointment(calendar_note="Portare referti"))

        parsed = urlparse(url)
        params = {k: v[0] for k, v in parse_qs(parsed.query).items()}
        assert parsed.netloc == "calendar.google.com"
        assert params["action"] == "TEMPLATE"
        assert params["text"] == "Mario Rossi - Prenotato"
        assert params["dates"] == "20240101T090000/20240101T100000"
        assert params["location"] == "Studio Pontecorvo"
        assert params["ctz"] == "Europe/Rome"
        assert "Note: Portare referti" in params["details"]
        assert "Prezzo: €40" in params["details"]

    def test_home_visit_title(self, exporter, make_appointment) -> None:
        appointment = make_appointment(location=Location.DOMICILE, clinic_site=None, domicile_address="Via Roma 1")

        params = parse_qs(urlparse(exporter.google_calendar_link(appointment)).query)

        assert params["text"][0].startswith("🏠 ")
        assert params["location"][0] == "Via Roma 1"
