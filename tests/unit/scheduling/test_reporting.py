"""
Unit tests for the financial report aggregator.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from agenda.domains.scheduling.domain.services.reporting import (
    FinancialRecord,
    PeriodKind,
    RecordSource,
    aggregate,
    appointment_record,
    bucket_details,
    invoice_record,
    period_labels,
    period_range,
)
from agenda.domains.scheduling.domain.value_objects import AppointmentStatus, PriceType

ANCHOR = date(2024, 1, 3)


def record(amount: str, ts: datetime, source=RecordSource.APPOINTMENT, paid: bool = True, **kwargs) -> FinancialRecord:
    return FinancialRecord(Decimal(amount), ts, source, paid, **kwargs)


@pytest.fixture
def paid_records() -> list[FinancialRecord]:
    return [
        record("40", datetime(2024, 1, 2, 10, 0), record_id="a1"),
        record("100", datetime(2024, 1, 5, 12, 0), source=RecordSource.INVOICE, record_id="i1"),
        record("70", datetime(2023, 12, 28, 9, 0), record_id="outside"),
    ]


@pytest.fixture
def unpaid_records() -> list[FinancialRecord]:
    return [
        record("35", datetime(2023, 12, 20, 9, 0), paid=False, record_id="a-old"),
        record("60", datetime(2024, 1, 3, 11, 0), source=RecordSource.INVOICE, paid=False, record_id="i2"),
    ]


@pytest.mark.unit
class TestPeriodGeometry:
    def test_week_runs_monday_to_sunday(self) -> None:
        """Should cover the whole week with seven buckets."""
        period_from, period_to = period_range(PeriodKind.WEEK, ANCHOR)

        assert period_from == datetime(2024, 1, 1)
        assert period_to.date() == date(2024, 1, 7)
        assert len(period_labels(PeriodKind.WEEK, ANCHOR)) == 7

    def test_day_and_month_labels(self) -> None:
        """Should give 24 hourly buckets and one bucket per day of month."""
        assert len(period_labels(PeriodKind.DAY, ANCHOR)) == 24
        assert len(period_labels(PeriodKind.MONTH, date(2024, 2, 1))) == 29


@pytest.mark.unit
class TestAggregate:
    """Tests for aggregate."""

    def test_series_and_statistics(self, paid_records, unpaid_records) -> None:
        """Should bucket in-period amounts and summarize them."""
        report = aggregate(PeriodKind.WEEK, ANCHOR, paid_records, unpaid_records, today=date(2024, 1, 10))

        assert report.paid_series[1] == Decimal("40")
        assert report.paid_series[4] == Decimal("100")
        assert sum(report.paid_series) == Decimal("140")
        assert report.unpaid_series[2] == Decimal("60")

        stats = report.statistics
        assert stats.total == Decimal("140")
        assert stats.count == 2
        assert stats.invoice_count == 1
        assert stats.appointment_count == 1
        assert stats.average == Decimal("70")
        assert stats.max == Decimal("100")
        assert stats.min == Decimal("40")
        assert stats.unpaid_total == Decimal("95")
        assert stats.unpaid_count == 2

    def test_arrears_before_period(self, paid_records, unpaid_records) -> None:
        """Should group unpaid amounts dated before the period by month."""
        report = aggregate(PeriodKind.WEEK, ANCHOR, paid_records, unpaid_records, today=date(2024, 1, 10))

        assert [(a.month, a.total, a.count) for a in report.arrears] == [("2023-12", Decimal("35"), 1)]
        assert [u.days_since for u in report.unpaid_items] == [21, 7]

    def test_idempotent(self, paid_records, unpaid_records) -> None:
        """Should give the same report for the same inputs."""
        first = aggregate(PeriodKind.WEEK, ANCHOR, paid_records, unpaid_records, today=date(2024, 1, 10))
        second = aggregate(PeriodKind.WEEK, ANCHOR, paid_records, unpaid_records, today=date(2024, 1, 10))

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_empty_period(self) -> None:
        """Should produce zero series and statistics."""
        report = aggregate(PeriodKind.MONTH, ANCHOR, [], [], today=ANCHOR)

        assert report.paid_series == [Decimal("0")] * 31
        assert report.statistics.count == 0
        assert report.statistics.average == Decimal("0")

    def test_non_positive_amounts_skipped(self) -> None:
        report = aggregate(PeriodKind.WEEK, ANCHOR, [record("0", datetime(2024, 1, 2, 9))], [], today=ANCHOR)

        assert report.statistics.count == 0


@pytest.mark.unit
class TestBucketDetails:
    def test_records_of_one_bucket(self, paid_records, unpaid_records) -> None:
        """Should return the in-period records of the bucket, paid first."""
        details = bucket_details(PeriodKind.WEEK, ANCHOR, paid_records, unpaid_records, 1)
        assert [r.record_id for r in details] == ["a1"]

        details = bucket_details(PeriodKind.WEEK, ANCHOR, paid_records, unpaid_records, 2)
        assert [r.record_id for r in details] == ["i2"]

    def test_out_of_period_records_excluded(self, paid_records, unpaid_records) -> None:
        """Should not list records outside the period in any bucket."""
        ids = {
            r.record_id
            for i in range(7)
            for r in bucket_details(PeriodKind.WEEK, ANCHOR, paid_records, unpaid_records, i)
        }
        assert "outside" not in ids
        assert "a-old" not in ids


@pytest.mark.unit
class TestRecordConstruction:
    def test_done_appointment_without_amount_uses_standard_price(self, make_appointment, prices) -> None:
        """Should value a seduta paid in cash at 35."""
        appointment = make_appointment(status=AppointmentStatus.DONE, price_type=PriceType.CASH, amount=None)

        result = appointment_record(appointment, prices)

        assert result.amount == Decimal("35")
        assert result.paid is False
        assert result.patient_name == "Rossi Mario"
        assert result.description == "Appuntamento - Seduta"

    def test_not_done_appointments_do_not_count(self, make_appointment, prices) -> None:
        assert appointment_record(make_appointment(status=AppointmentStatus.CONFIRMED), prices) is None

    def test_unpaid_invoice_dated_by_creation(self) -> None:
        """Should fall back to created_at for unpaid invoices."""
        row = {"id": 7, "amount": "80.00", "status": "not_paid", "paid_at": None, "created_at": datetime(2024, 1, 2)}

        result = invoice_record(row, {"first_name": "Anna", "last_name": "Bianchi"})

        assert result.timestamp == datetime(2024, 1, 2)
        assert result.paid is False
        assert result.patient_name == "Bianchi Anna"
        assert result.description == "Fattura #7"

    def test_paid_invoice_needs_paid_at(self) -> None:
        assert invoice_record({"amount": 10, "status": "paid", "created_at": datetime(2024, 1, 2)}) is None

    def test_other_invoice_statuses_ignored(self) -> None:
        assert invoice_record({"amount": 10, "status": "draft", "created_at": datetime(2024, 1, 2)}) is None
