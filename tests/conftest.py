"""
Shared pytest fixtures for all tests.

This module provides the in-memory record store, sample appointments and
the price list shared by the unit, use case and API tests.
"""

import os
from datetime import datetime, timedelta
from typing import Any

import pytest

from agenda.domains.scheduling.domain.entities import Appointment
from agenda.domains.scheduling.domain.value_objects import AppointmentStatus, PriceList
from agenda.domains.scheduling.infrastructure.persistence import InMemoryRecordStore

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"

PATIENT_ID = "patient-1"
SITE = "Studio Pontecorvo"

# Monday
MONDAY = datetime(2024, 1, 1, 9, 0)


# ============================================================================
# DOMAIN FIXTURES
# ============================================================================


@pytest.fixture
def prices() -> PriceList:
    """Standard price list: 40/35 seduta, 25/20 macchinario."""
    return PriceList()


@pytest.fixture
def make_appointment():
    """Factory for Appointment entities with sensible defaults."""

    def _make(
        start: datetime = MONDAY,
        minutes: int = 60,
        status: AppointmentStatus = AppointmentStatus.BOOKED,
        **fields: Any,
    ) -> Appointment:
        values: dict[str, Any] = {
            "id": "appt-1",
            "patient_id": PATIENT_ID,
            "patient_first_name": "Mario",
            "patient_last_name": "Rossi",
            "patient_phone": "0776 123456",
            "clinic_site": SITE,
        }
        values.update(fields)
        return Appointment(start=start, end=start + timedelta(minutes=minutes), status=status, **values)

    return _make


# ============================================================================
# RECORD STORE FIXTURES
# ============================================================================


@pytest.fixture
def store() -> InMemoryRecordStore:
    """In-memory record store with one patient."""
    return InMemoryRecordStore(
        {
            "patients": [
                {"id": PATIENT_ID, "first_name": "Mario", "last_name": "Rossi", "phone": "0776 123456"},
                {"id": "patient-2", "first_name": "Anna", "last_name": "Bianchi", "phone": None},
            ]
        }
    )


@pytest.fixture
def seed_appointment(store: InMemoryRecordStore):
    """Insert an appointments row straight into the store and return its id."""

    def _seed(
        start: datetime = MONDAY,
        minutes: int = 60,
        status: str = "booked",
        is_paid: bool = False,
        **fields: Any,
    ) -> str:
        row = {
            "patient_id": PATIENT_ID,
            "start_at": start,
            "end_at": start + timedelta(minutes=minutes),
            "status": status,
            "is_paid": is_paid,
            "location": "studio",
            "clinic_site": SITE,
            "domicile_address": None,
            "treatment_type": "seduta",
            "price_type": "invoiced",
            "amount": None,
            "calendar_note": None,
            "whatsapp_sent": False,
            "whatsapp_sent_at": None,
        }
        row.update(fields)
        return store.seed("appointments", [row])[0]["id"]

    return _seed
