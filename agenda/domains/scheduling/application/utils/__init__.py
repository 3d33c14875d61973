# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Row mapping and store response helpers
# ============================================================================
from .row_mapper import (
    APPOINTMENTS_TABLE,
    INVOICES_TABLE,
    MESSAGE_TEMPLATES_TABLE,
    PATIENTS_TABLE,
    AppointmentRowMapper,
    load_appointment,
    parse_amount,
    parse_timestamp,
    require_success,
)

__all__ = [
    "APPOINTMENTS_TABLE",
    "INVOICES_TABLE",
    "MESSAGE_TEMPLATES_TABLE",
    "PATIENTS_TABLE",
    "AppointmentRowMapper",
    "load_appointment",
    "parse_amount",
    "parse_timestamp",
    "require_success",
]
