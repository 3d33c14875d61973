# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case for the financial report of a day, week or month.
# ============================================================================
"""Build Financial Report Use Case.

Collects paid and unpaid appointments and invoices, joins patient names
and hands them to the pure reporting aggregator.
"""

import logging
from typing import TYPE_CHECKING, Any

from ...domain.entities.appointment import Appointment
from ...domain.services.reporting import (
    FinancialRecord,
    FinancialReport,
    aggregate,
    appointment_record,
    bucket_details,
    invoice_record,
    period_range,
)
from ...domain.value_objects.appointment_status import NOT_PAID, AppointmentStatus
from ...domain.value_objects.pricing import PriceList
from ..dto.appointment_dtos import FinancialReportRequest
from ..ports.record_store import Filter
from ..utils.row_mapper import (
    APPOINTMENTS_TABLE,
    INVOICES_TABLE,
    PATIENTS_TABLE,
    AppointmentRowMapper,
    require_success,
)

if TYPE_CHECKING:
    from ..ports import IRecordStore

logger = logging.getLogger(__name__)


class BuildFinancialReportUseCase:
    """Use case for building the financial report.

    Paid records are read only inside the period; unpaid ones are read in
    full because the arrears need the whole backlog.
    """

    def __init__(self, store: "IRecordStore", prices: PriceList) -> None:
        """Initialize use case.

        Args:
            store: Record store interface (DIP).
            prices: Price list for appointments without an amount.
        """
        self._store = store
        self._prices = prices

    async def execute(self, request: FinancialReportRequest) -> FinancialReport:
        logger.info(f"Building {request.kind.value} report for {request.anchor.isoformat()}")
        paid, unpaid = await self.collect(request)
        report = aggregate(request.kind, request.anchor, paid, unpaid, today=request.today)
        logger.info(
            f"Report ready: paid {report.statistics.total} ({report.statistics.count}), "
            f"unpaid {report.statistics.unpaid_total} ({report.statistics.unpaid_count})"
        )
        return report

    async def details(self, request: FinancialReportRequest, index: int) -> list[FinancialRecord]:
        """Records of one bucket of the report."""
        paid, unpaid = await self.collect(request)
        return bucket_details(request.kind, request.anchor, paid, unpaid, index)

    async def collect(self, request: FinancialReportRequest) -> tuple[list[FinancialRecord], list[FinancialRecord]]:
        period_from, period_to = period_range(request.kind, request.anchor)

        paid_appointments = await self._appointments(
            [
                Filter.eq("status", AppointmentStatus.DONE.value),
                Filter.eq("is_paid", True),
                Filter.gte("start_at", period_from),
                Filter.lte("start_at", period_to),
            ]
        )
        # Legacy rows may still carry the 'not_paid' status
        unpaid_appointments = [
            a
            for a in await self._appointments([Filter.isin("status", [AppointmentStatus.DONE.value, NOT_PAID])])
            if not a.is_paid
        ]
        paid_invoices = await self._select(
            INVOICES_TABLE,
            [Filter.eq("status", "paid"), Filter.gte("paid_at", period_from), Filter.lte("paid_at", period_to)],
            order_by=("paid_at", True),
        )
        unpaid_invoices = await self._select(
            INVOICES_TABLE,
            [Filter.eq("status", "not_paid")],
            order_by=("created_at", True),
        )
        patients = await self._patients_by_id(paid_invoices + unpaid_invoices)

        paid = [r for r in (appointment_record(a, self._prices) for a in paid_appointments) if r]
        paid += [r for r in (invoice_record(i, patients.get(i.get("patient_id"))) for i in paid_invoices) if r]
        unpaid = [r for r in (appointment_record(a, self._prices) for a in unpaid_appointments) if r]
        unpaid += [r for r in (invoice_record(i, patients.get(i.get("patient_id"))) for i in unpaid_invoices) if r]
        return paid, unpaid

    async def _select(self, table: str, filters: list[Filter], order_by=None) -> list[dict[str, Any]]:
        response = await self._store.select(table, filters, order_by=order_by)
        if not response.success:
            logger.warning(f"Report query on {table} failed: {response.error_message}")
        require_success(response, "select", table)
        return response.get_list()

    async def _appointments(self, filters: list[Filter]) -> list[Appointment]:
        rows = await self._select(APPOINTMENTS_TABLE, filters, order_by=("start_at", True))
        return [AppointmentRowMapper.to_entity(row) for row in rows]

    async def _patients_by_id(self, invoices: list[dict[str, Any]]) -> dict[str, dict[str, Any]]:
        ids = sorted({str(i["patient_id"]) for i in invoices if i.get("patient_id")})
        if not ids:
            return {}
        rows = await self._select(PATIENTS_TABLE, [Filter.isin("id", ids)])
        return {str(row["id"]): row for row in rows}
