"""
Unit tests for the calendar sidebar statistics and filters.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from agenda.domains.scheduling.domain.services import (
    AppointmentFilter,
    expected_revenue,
    filter_appointments,
    summarize,
    todays_appointments,
    upcoming,
)
from agenda.domains.scheduling.domain.value_objects import AppointmentStatus, Location, PriceType, TreatmentType


@pytest.fixture
def week(make_appointment):
    return [
        make_appointment(id="a", status=AppointmentStatus.DONE, is_paid=True, amount=Decimal("50")),
        make_appointment(id="b", status=AppointmentStatus.DONE, price_type=PriceType.CASH),
        make_appointment(id="c", start=datetime(2024, 1, 2, 9), status=AppointmentStatus.CONFIRMED),
        make_appointment(
            id="d",
            start=datetime(2024, 1, 2, 11),
            location=Location.DOMICILE,
            clinic_site=None,
            domicile_address="Via Roma 1",
            treatment_type=TreatmentType.MACCHINARIO,
        ),
        make_appointment(id="e", start=datetime(2024, 1, 3, 9), status=AppointmentStatus.CANCELLED),
    ]


@pytest.mark.unit
class TestSummary:
    def test_counts_and_revenue(self, week, prices) -> None:
        """Should count per status and sum the effective price of done ones."""
        summary = summarize(week, prices)

        assert (summary.total, summary.done, summary.confirmed, summary.booked, summary.cancelled) == (5, 2, 1, 1, 1)
        assert summary.revenue == Decimal("85")

    def test_expected_revenue_skips_cancelled(self, week, prices) -> None:
        """Should sum every non-cancelled appointment at its effective price."""
        assert expected_revenue(week, prices) == Decimal("50") + Decimal("35") + Decimal("40") + Decimal("25")


@pytest.mark.unit
class TestFilters:
    def test_not_paid_filter(self, week, prices) -> None:
        """Should match done appointments that are not paid."""
        result = filter_appointments(week, AppointmentFilter(status="not_paid"), prices)

        assert [a.id for a in result] == ["b"]

    def test_combined_filters(self, week, prices) -> None:
        criteria = AppointmentFilter(location=Location.DOMICILE, treatment_type=TreatmentType.MACCHINARIO)

        assert [a.id for a in filter_appointments(week, criteria, prices)] == ["d"]

    def test_amount_range_uses_effective_price(self, week, prices) -> None:
        """Should compare the effective price, not the raw amount."""
        criteria = AppointmentFilter(min_amount=Decimal("36"), max_amount=Decimal("45"))

        assert [a.id for a in filter_appointments(week, criteria, prices)] == ["c", "e"]

    def test_empty_filter_matches_all(self, week, prices) -> None:
        assert len(filter_appointments(week, AppointmentFilter(), prices)) == 5


@pytest.mark.unit
class TestTodayAndUpcoming:
    def test_todays_appointments_exclude_cancelled(self, week) -> None:
        assert [a.id for a in todays_appointments(week, date(2024, 1, 3))] == []
        assert [a.id for a in todays_appointments(week, date(2024, 1, 2))] == ["c", "d"]

    def test_upcoming_limit(self, week) -> None:
        """Should list appointments not yet over, soonest first."""
        result = upcoming(week, datetime(2024, 1, 2, 9, 30), limit=2)

        assert [a.id for a in result] == ["c", "d"]
