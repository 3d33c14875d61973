"""
API Routes for the financial report.
"""

import logging
from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, Query

from agenda.api.dependencies import get_build_financial_report_use_case
from agenda.domains.scheduling.application.dto import FinancialReportRequest
from agenda.domains.scheduling.application.use_cases import BuildFinancialReportUseCase
from agenda.domains.scheduling.domain.services import PeriodKind, period_labels

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def get_report(
    period: PeriodKind = Query(PeriodKind.WEEK, description="day, week or month"),
    anchor: date | None = Query(None, alias="date", description="Any date of the period, default today"),
    use_case: BuildFinancialReportUseCase = Depends(get_build_financial_report_use_case),  # noqa: B008
) -> dict[str, Any]:
    """Paid and unpaid series, statistics and arrears for the period."""
    today = date.today()
    report = await use_case.execute(FinancialReportRequest(period, anchor or today, today=today))
    return report.to_dict()


@router.get("/details")
async def get_bucket_details(
    bucket: int = Query(..., ge=0, description="Index into the report labels"),
    period: PeriodKind = Query(PeriodKind.WEEK),
    anchor: date | None = Query(None, alias="date"),
    use_case: BuildFinancialReportUseCase = Depends(get_build_financial_report_use_case),  # noqa: B008
) -> dict[str, Any]:
    """Records behind one bar of the chart, paid first."""
    anchor = anchor or date.today()
    labels = period_labels(period, anchor)
    records = await use_case.details(FinancialReportRequest(period, anchor), bucket)
    return {
        "bucket": bucket,
        "label": labels[bucket] if bucket < len(labels) else None,
        "records": [r.to_dict() for r in records],
    }
