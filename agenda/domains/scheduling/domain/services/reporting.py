"""
Reporting Aggregator

Buckets paid and unpaid amounts into a time series for a day, week or
month and computes the arrears that precede the period. Everything here
is a pure function of its inputs.
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from agenda.core.domain.value_objects import StatusEnum
from agenda.core.shared.dates import (
    DAYS_IT,
    add_days,
    days_in_month,
    end_of_day,
    end_of_month,
    start_of_day,
    start_of_month,
    start_of_week,
)

from ..entities.appointment import Appointment
from ..value_objects.appointment_status import AppointmentStatus
from ..value_objects.pricing import PriceList

ZERO = Decimal("0")


class PeriodKind(StatusEnum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class RecordSource(StatusEnum):
    APPOINTMENT = "appointment"
    INVOICE = "invoice"


@dataclass(frozen=True)
class FinancialRecord:
    """One amount that feeds the report, paid or unpaid."""

    amount: Decimal
    timestamp: datetime
    source: RecordSource
    paid: bool
    record_id: str | None = None
    description: str = ""
    patient_name: str | None = None
    patient_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.record_id,
            "amount": float(self.amount),
            "date": self.timestamp.isoformat(),
            "source": self.source.value,
            "paid": self.paid,
            "description": self.description,
            "patient_name": self.patient_name,
            "patient_id": self.patient_id,
        }


@dataclass(frozen=True)
class ReportStatistics:
    total: Decimal = ZERO
    count: int = 0
    invoice_count: int = 0
    appointment_count: int = 0
    average: Decimal = ZERO
    max: Decimal = ZERO
    min: Decimal = ZERO
    unpaid_total: Decimal = ZERO
    unpaid_count: int = 0
    unpaid_invoice_count: int = 0
    unpaid_appointment_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {k: float(v) if isinstance(v, Decimal) else v for k, v in self.__dict__.items()}


@dataclass(frozen=True)
class ArrearsMonth:
    month: str  # YYYY-MM
    total: Decimal
    count: int


@dataclass(frozen=True)
class UnpaidItem:
    record: FinancialRecord
    days_since: int

    def to_dict(self) -> dict[str, Any]:
        return {**self.record.to_dict(), "days_since": self.days_since}


@dataclass(frozen=True)
class FinancialReport:
    kind: PeriodKind
    period_from: datetime
    period_to: datetime
    labels: list[str]
    paid_series: list[Decimal]
    unpaid_series: list[Decimal]
    statistics: ReportStatistics
    arrears: list[ArrearsMonth] = field(default_factory=list)
    unpaid_items: list[UnpaidItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.kind.value,
            "from": self.period_from.isoformat(),
            "to": self.period_to.isoformat(),
            "labels": self.labels,
            "paid_series": [float(v) for v in self.paid_series],
            "unpaid_series": [float(v) for v in self.unpaid_series],
            "statistics": self.statistics.to_dict(),
            "arrears": [{"month": a.month, "total": float(a.total), "count": a.count} for a in self.arrears],
            "unpaid_items": [u.to_dict() for u in self.unpaid_items],
        }


# Period geometry


def period_range(kind: PeriodKind, anchor: date | datetime) -> tuple[datetime, datetime]:
    """Inclusive ``[from, to]`` bounds of the period containing ``anchor``."""
    if kind == PeriodKind.DAY:
        return start_of_day(anchor), end_of_day(anchor)
    if kind == PeriodKind.WEEK:
        monday = start_of_week(anchor)
        return monday, end_of_day(add_days(monday, 6))
    return start_of_month(anchor), end_of_month(anchor)


def period_labels(kind: PeriodKind, anchor: date | datetime) -> list[str]:
    if kind == PeriodKind.DAY:
        return [f"{h:02d}:00" for h in range(24)]
    if kind == PeriodKind.WEEK:
        return list(DAYS_IT)
    return [str(d) for d in range(1, days_in_month(anchor) + 1)]


def bucket_index(ts: datetime, kind: PeriodKind) -> int:
    if kind == PeriodKind.DAY:
        return ts.hour
    if kind == PeriodKind.WEEK:
        return ts.weekday()
    return ts.day - 1


# Record construction


def appointment_record(appointment: Appointment, prices: PriceList) -> FinancialRecord | None:
    """Turn a ``done`` appointment into a record; ``None`` if it does not count."""
    if appointment.status != AppointmentStatus.DONE or appointment.start is None:
        return None
    amount = appointment.effective_price(prices)
    if amount <= 0:
        return None
    return FinancialRecord(
        amount=amount,
        timestamp=appointment.start,
        source=RecordSource.APPOINTMENT,
        paid=appointment.is_paid,
        record_id=appointment.id,
        description=f"Appuntamento - {appointment.treatment_type.display_name}",
        patient_name=_report_name(appointment.patient_last_name, appointment.patient_first_name),
        patient_id=appointment.patient_id,
    )


def invoice_record(row: Mapping[str, Any], patient: Mapping[str, Any] | None = None) -> FinancialRecord | None:
    """Turn an invoice row into a record; only ``paid`` and ``not_paid`` invoices count."""
    status = row.get("status")
    if status not in ("paid", "not_paid"):
        return None
    amount = Decimal(str(row.get("amount") or 0))
    if amount <= 0:
        return None
    paid = status == "paid"
    timestamp = row.get("paid_at") if paid else (row.get("paid_at") or row.get("created_at"))
    if timestamp is None:
        return None
    if isinstance(timestamp, str):
        timestamp = datetime.fromisoformat(timestamp)
    name = _report_name(patient.get("last_name"), patient.get("first_name")) if patient else None
    return FinancialRecord(
        amount=amount,
        timestamp=timestamp,
        source=RecordSource.INVOICE,
        paid=paid,
        record_id=str(row.get("id")) if row.get("id") is not None else None,
        description=f"Fattura #{row.get('id')}",
        patient_name=name,
        patient_id=row.get("patient_id"),
    )


def _report_name(last_name: str | None, first_name: str | None) -> str | None:
    name = f"{last_name or ''} {first_name or ''}".strip()
    return name or None


# Aggregation


def _in_period(record: FinancialRecord, period_from: datetime, period_to: datetime) -> bool:
    return period_from <= record.timestamp <= period_to


def aggregate(
    kind: PeriodKind,
    anchor: date | datetime,
    paid: Iterable[FinancialRecord],
    unpaid: Iterable[FinancialRecord],
    today: date | None = None,
) -> FinancialReport:
    """Build the report for the period containing ``anchor``."""
    period_from, period_to = period_range(kind, anchor)
    labels = period_labels(kind, anchor)
    paid_series = [ZERO] * len(labels)
    unpaid_series = [ZERO] * len(labels)

    paid_in_period = [r for r in paid if r.amount > 0 and _in_period(r, period_from, period_to)]
    unpaid_all = sorted((r for r in unpaid if r.amount > 0), key=lambda r: r.timestamp)

    for record in paid_in_period:
        paid_series[bucket_index(record.timestamp, kind)] += record.amount
    for record in unpaid_all:
        if _in_period(record, period_from, period_to):
            unpaid_series[bucket_index(record.timestamp, kind)] += record.amount

    amounts = [r.amount for r in paid_in_period]
    total = sum(amounts, ZERO)
    statistics = ReportStatistics(
        total=total,
        count=len(amounts),
        invoice_count=sum(1 for r in paid_in_period if r.source == RecordSource.INVOICE),
        appointment_count=sum(1 for r in paid_in_period if r.source == RecordSource.APPOINTMENT),
        average=(total / len(amounts)) if amounts else ZERO,
        max=max(amounts) if amounts else ZERO,
        min=min(amounts) if amounts else ZERO,
        unpaid_total=sum((r.amount for r in unpaid_all), ZERO),
        unpaid_count=len(unpaid_all),
        unpaid_invoice_count=sum(1 for r in unpaid_all if r.source == RecordSource.INVOICE),
        unpaid_appointment_count=sum(1 for r in unpaid_all if r.source == RecordSource.APPOINTMENT),
    )

    today = today or date.today()
    return FinancialReport(
        kind=kind,
        period_from=period_from,
        period_to=period_to,
        labels=labels,
        paid_series=paid_series,
        unpaid_series=unpaid_series,
        statistics=statistics,
        arrears=arrears_by_month(unpaid_all, period_from),
        unpaid_items=[UnpaidItem(r, (today - r.timestamp.date()).days) for r in unpaid_all],
    )


def arrears_by_month(unpaid: Iterable[FinancialRecord], before: datetime) -> list[ArrearsMonth]:
    """Unpaid amounts dated before ``before``, summed per calendar month."""
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    counts: dict[str, int] = defaultdict(int)
    for record in unpaid:
        if record.amount <= 0 or record.timestamp >= before:
            continue
        month = record.timestamp.strftime("%Y-%m")
        totals[month] += record.amount
        counts[month] += 1
    return [ArrearsMonth(month, totals[m], counts[m]) for m in sorted(totals)]


def bucket_details(
    kind: PeriodKind,
    anchor: date | datetime,
    paid: Iterable[FinancialRecord],
    unpaid: Iterable[FinancialRecord],
    index: int,
) -> list[FinancialRecord]:
    """Every in-period record, paid first, that falls into bucket ``index``."""
    period_from, period_to = period_range(kind, anchor)
    details = []
    for records in (paid, unpaid):
        for record in sorted(records, key=lambda r: r.timestamp):
            if record.amount <= 0 or not _in_period(record, period_from, period_to):
                continue
            if bucket_index(record.timestamp, kind) == index:
                details.append(record)
    return details
