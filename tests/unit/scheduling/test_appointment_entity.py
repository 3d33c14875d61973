"""
Unit tests for the Appointment aggregate: creation, place rules and pricing.
"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from agenda.core.domain.exceptions import ValidationException
from agenda.domains.scheduling.domain.entities import Appointment
from agenda.domains.scheduling.domain.value_objects import (
    AppointmentStatus,
    Location,
    PriceList,
    PriceType,
    TreatmentType,
)

START = datetime(2024, 1, 1, 9, 0)


@pytest.mark.unit
class TestCreate:
    """Tests for Appointment.create."""

    def test_new_appointment_is_booked_and_unpaid(self) -> None:
        """Should start booked, unpaid and with the requested duration."""
        appointment = Appointment.create("p1", START, 45, clinic_site=" Studio Pontecorvo ")

        assert appointment.status == AppointmentStatus.BOOKED
        assert appointment.is_paid is False
        assert appointment.end == START + timedelta(minutes=45)
        assert appointment.clinic_site == "Studio Pontecorvo"

    @pytest.mark.parametrize("minutes", [0, -30])
    def test_non_positive_duration_rejected(self, minutes: int) -> None:
        """Should reject a duration that is not positive."""
        with pytest.raises(ValidationException):
            Appointment.create("p1", START, minutes, clinic_site="Studio")

    def test_patient_required(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            Appointment.create(" ", START, 60, clinic_site="Studio")
        assert exc_info.value.field == "patient_id"

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(ValidationException):
            Appointment.create("p1", START, 60, clinic_site="Studio", amount=Decimal("-1"))


@pytest.mark.unit
class TestLocation:
    """Exactly one place field is kept."""

    def test_studio_requires_site(self) -> None:
        """Should reject a studio appointment without a site."""
        with pytest.raises(ValidationException) as exc_info:
            Appointment.create("p1", START, 60, location=Location.STUDIO, clinic_site="   ")
        assert exc_info.value.field == "clinic_site"

    def test_studio_drops_address(self) -> None:
        appointment = Appointment.create(
            "p1", START, 60, location=Location.STUDIO, clinic_site="Studio", domicile_address="Via Roma 1"
        )

        assert appointment.domicile_address is None

    def test_domicile_requires_real_address(self) -> None:
        """Should reject an address shorter than five characters."""
        with pytest.raises(ValidationException) as exc_info:
            Appointment.create("p1", START, 60, location=Location.DOMICILE, domicile_address="Via")
        assert exc_info.value.field == "domicile_address"

    def test_domicile_drops_site(self) -> None:
        appointment = Appointment.create(
            "p1", START, 60, location=Location.DOMICILE, clinic_site="Studio", domicile_address=" Via Roma 1 "
        )

        assert appointment.clinic_site is None
        assert appointment.domicile_address == "Via Roma 1"
        assert appointment.place_label == "Domicilio (Via Roma 1)"


@pytest.mark.unit
class TestPricing:
    """Effective price falls back to the standard price."""

    @pytest.mark.parametrize(
        ("treatment", "price_type", "expected"),
        [
            (TreatmentType.SEDUTA, PriceType.INVOICED, Decimal("40")),
            (TreatmentType.SEDUTA, PriceType.CASH, Decimal("35")),
            (TreatmentType.MACCHINARIO, PriceType.INVOICED, Decimal("25")),
            (TreatmentType.MACCHINARIO, PriceType.CASH, Decimal("20")),
        ],
    )
    def test_standard_price_when_amount_missing(self, make_appointment, prices, treatment, price_type, expected):
        """Should use the standard price of the treatment and payment type."""
        appointment = make_appointment(treatment_type=treatment, price_type=price_type, amount=None)

        assert appointment.effective_price(prices) == expected

    def test_recorded_amount_wins(self, make_appointment, prices) -> None:
        """Should use the stored amount, zero included."""
        assert make_appointment(amount=Decimal("50")).effective_price(prices) == Decimal("50")
        assert make_appointment(amount=Decimal("0")).effective_price(prices) == Decimal("0")

    def test_negative_price_list_rejected(self) -> None:
        with pytest.raises(ValueError):
            PriceList(seduta_cash=Decimal("-1"))


@pytest.mark.unit
class TestTime:
    def test_relocate_keeps_duration(self, make_appointment) -> None:
        """Should keep the duration when moved."""
        appointment = make_appointment(minutes=50)

        appointment.relocate(datetime(2024, 1, 3, 15, 0))

        assert appointment.start == datetime(2024, 1, 3, 15, 0)
        assert appointment.duration_minutes == 50

    def test_reschedule_sets_duration(self, make_appointment) -> None:
        appointment = make_appointment()

        appointment.reschedule(datetime(2024, 1, 2, 10, 0), 30)

        assert appointment.end == datetime(2024, 1, 2, 10, 30)

    def test_patient_name_fallback(self, make_appointment) -> None:
        """Should fall back to a generic name when the patient has none."""
        assert make_appointment().patient_name == "Mario Rossi"
        assert make_appointment(patient_first_name=None, patient_last_name=" ").patient_name == "Paziente"

    def test_summary_dict(self, make_appointment, prices) -> None:
        data = make_appointment(status=AppointmentStatus.DONE).to_summary_dict(prices)

        assert data["payment_label"] == "not_paid"
        assert data["effective_price"] == "40"
        assert data["duration_minutes"] == 60
