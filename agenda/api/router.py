from fastapi import APIRouter

from agenda.api.routes import appointments, calendar, reports

api_router = APIRouter()

# API routes (all have /api/v1 prefix from the app factory)
api_router.include_router(calendar.router, prefix="/calendar", tags=["calendar"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["appointments"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
