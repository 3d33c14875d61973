"""
API Routes for the calendar view: visible window, availability and CSV export.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from agenda.api.dependencies import (
    get_availability_use_case,
    get_export_appointments_use_case,
    get_load_calendar_window_use_case,
    get_prices,
)
from agenda.core.shared.dates import (
    add_days,
    parse_iso_date,
    start_of_day,
    to_iso_date,
    week_label,
    week_options,
)
from agenda.domains.scheduling.application.dto import CalendarWindowRequest
from agenda.domains.scheduling.application.services import CalendarView, ViewType
from agenda.domains.scheduling.application.use_cases import (
    ExportAppointmentsUseCase,
    GetAvailabilityUseCase,
    LoadCalendarWindowUseCase,
)
from agenda.domains.scheduling.domain.services import (
    AppointmentFilter,
    expected_revenue,
    filter_appointments,
    summarize,
    todays_appointments,
)
from agenda.domains.scheduling.domain.value_objects import Location, PriceList, PriceType, TreatmentType

logger = logging.getLogger(__name__)

router = APIRouter()


def _view(day: date | None, view: ViewType) -> CalendarView:
    now = datetime.now()
    return CalendarView(current_date=day or now.date(), view_type=view, now=now)


@router.get("")
async def get_calendar(
    day: date | None = Query(None, alias="date", description="Any date of the period, default today"),
    view: ViewType = Query(ViewType.WEEK, description="day or week"),
    week: str | None = Query(None, description="Monday picked in the week selector, YYYY-MM-DD"),
    status: str | None = Query(None, description="Status filter, also accepts not_paid"),
    location: Location | None = None,
    treatment_type: TreatmentType | None = None,
    price_type: PriceType | None = None,
    min_amount: Decimal | None = None,
    max_amount: Decimal | None = None,
    loader: LoadCalendarWindowUseCase = Depends(get_load_calendar_window_use_case),  # noqa: B008
    exporter: ExportAppointmentsUseCase = Depends(get_export_appointments_use_case),  # noqa: B008
    prices: PriceList = Depends(get_prices),  # noqa: B008
) -> dict[str, Any]:
    """
    Appointments of the visible day or week with the sidebar figures.

    Statistics and expected revenue cover the whole window; filters only
    narrow the returned list.
    """
    calendar = _view(day, view)
    if week:
        calendar.go_to_week(parse_iso_date(week))
    window_from, window_to = calendar.window()
    appointments = await loader.execute(CalendarWindowRequest(window_from, window_to))

    today = calendar.now.date()
    if window_from <= start_of_day(today) < window_to:
        today_source = appointments
    else:
        today_source = await loader.execute(CalendarWindowRequest(start_of_day(today), add_days(start_of_day(today), 1)))

    criteria = AppointmentFilter(
        status=status,
        location=location,
        treatment_type=treatment_type,
        price_type=price_type,
        min_amount=min_amount,
        max_amount=max_amount,
    )
    visible = filter_appointments(appointments, criteria, prices)

    return {
        "view": calendar.view_type.value,
        "date": to_iso_date(calendar.current_date),
        "from": window_from.isoformat(),
        "to": window_to.isoformat(),
        "label": week_label(calendar.current_date) if calendar.view_type == ViewType.WEEK else None,
        "days": [d.isoformat() for d in calendar.visible_days()],
        "now": calendar.now.isoformat(),
        "appointments": [
            {**a.to_summary_dict(prices), "google_calendar_url": exporter.google_calendar_link(a)} for a in visible
        ],
        "summary": summarize(appointments, prices).to_dict(),
        "expected_revenue": float(expected_revenue(appointments, prices)),
        "today": [a.to_summary_dict(prices) for a in todays_appointments(today_source, today)],
    }


@router.get("/availability")
async def get_availability(
    day: date | None = Query(None, alias="date", description="Day to inspect, default today"),
    use_case: GetAvailabilityUseCase = Depends(get_availability_use_case),  # noqa: B008
) -> dict[str, Any]:
    """Slots of the operating window and the occupancy forecast."""
    result = await use_case.execute(day or date.today())
    return {
        "date": result.day.isoformat(),
        "slots": [s.to_dict() for s in result.slots],
        "free_slots": len(result.free_slots),
        "forecast": result.forecast.to_dict(),
    }


@router.get("/weeks")
async def list_weeks(day: date | None = Query(None, alias="date")) -> list[dict[str, str]]:
    """Week selector entries around the given date."""
    return [{"monday": to_iso_date(monday), "label": label} for monday, label in week_options(day or date.today())]


@router.get("/export.csv")
async def export_calendar(
    day: date | None = Query(None, alias="date"),
    view: ViewType = Query(ViewType.WEEK),
    loader: LoadCalendarWindowUseCase = Depends(get_load_calendar_window_use_case),  # noqa: B008
    exporter: ExportAppointmentsUseCase = Depends(get_export_appointments_use_case),  # noqa: B008
) -> Response:
    calendar = _view(day, view)
    window_from, window_to = calendar.window()
    appointments = await loader.execute(CalendarWindowRequest(window_from, window_to))
    filename = f"appuntamenti_{to_iso_date(window_from)}.csv"
    return Response(
        content=exporter.to_csv(appointments),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
