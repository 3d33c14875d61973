"""
Unit tests for slot occupancy and the occupancy forecast.
"""

from datetime import date, datetime

import pytest

from agenda.domains.scheduling.domain.services.availability import day_slots, free_slots, occupancy_forecast
from agenda.domains.scheduling.domain.value_objects import AppointmentStatus, Slot

DAY = date(2024, 1, 1)


@pytest.mark.unit
class TestDaySlots:
    """Tests for day_slots."""

    def test_operating_window_has_thirty_slots(self) -> None:
        """Should split 07:00-22:00 into 30-minute slots."""
        slots = day_slots(DAY, [])

        assert len(slots) == 30
        assert slots[0].start == datetime(2024, 1, 1, 7, 0)
        assert slots[-1].end == datetime(2024, 1, 1, 22, 0)
        assert not any(s.is_occupied for s in slots)

    def test_half_open_overlap(self, make_appointment) -> None:
        """Should mark only the slots the appointment actually covers."""
        appointment = make_appointment(start=datetime(2024, 1, 1, 9, 0), minutes=60)

        occupied = {s.label for s in day_slots(DAY, [appointment]) if s.is_occupied}

        assert occupied == {"09:00", "09:30"}

    def test_cancelled_appointments_free_their_slots(self, make_appointment) -> None:
        """Should ignore cancelled appointments."""
        appointment = make_appointment(status=AppointmentStatus.CANCELLED)

        assert all(not s.is_occupied for s in day_slots(DAY, [appointment]))

    def test_free_slots_excludes_partially_covered_slot(self, make_appointment) -> None:
        """Should treat a slot touched by a 9:15 appointment as occupied."""
        appointment = make_appointment(start=datetime(2024, 1, 1, 9, 15), minutes=30)

        labels = [s.label for s in free_slots(DAY, [appointment])]

        assert "09:00" not in labels
        assert "09:30" not in labels
        assert "10:00" in labels

    def test_custom_window(self) -> None:
        """Should honour custom hours and slot length."""
        slots = day_slots(DAY, [], start_hour=8, end_hour=10, slot_minutes=60)

        assert [s.label for s in slots] == ["08:00", "09:00"]


@pytest.mark.unit
class TestSlot:
    def test_touching_intervals_do_not_overlap(self) -> None:
        """Should use half-open comparison."""
        slot = Slot(datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 1, 9, 30))

        assert not slot.overlaps(datetime(2024, 1, 1, 9, 30), datetime(2024, 1, 1, 10, 0))
        assert not slot.overlaps(datetime(2024, 1, 1, 8, 30), datetime(2024, 1, 1, 9, 0))
        assert slot.overlaps(datetime(2024, 1, 1, 9, 29), datetime(2024, 1, 1, 10, 0))

    def test_end_must_follow_start(self) -> None:
        """Should reject empty slots."""
        with pytest.raises(ValueError):
            Slot(datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 1, 9, 0))


@pytest.mark.unit
class TestOccupancyForecast:
    """Tests for occupancy_forecast."""

    def test_low_occupancy(self, make_appointment) -> None:
        """Should report one hour out of fifteen as low occupancy."""
        forecast = occupancy_forecast(DAY, [make_appointment(minutes=60)])

        assert forecast.total_events == 1
        assert forecast.occupied_minutes == 60
        assert forecast.available_minutes == 840
        assert forecast.occupancy_rate == 6.7
        assert forecast.available_hours == 14.0
        assert forecast.recommendation == "BASSA OCCUPAZIONE"

    def test_medium_occupancy(self, make_appointment) -> None:
        """Should report 600 of 900 minutes as medium occupancy."""
        forecast = occupancy_forecast(DAY, [make_appointment(start=datetime(2024, 1, 1, 7, 0), minutes=600)])

        assert forecast.occupancy_rate == 66.7
        assert forecast.recommendation == "MEDIA OCCUPAZIONE"

    def test_high_occupancy(self, make_appointment) -> None:
        """Should report 780 of 900 minutes as high occupancy."""
        forecast = occupancy_forecast(DAY, [make_appointment(start=datetime(2024, 1, 1, 7, 0), minutes=780)])

        assert forecast.recommendation == "ALTA OCCUPAZIONE"

    def test_available_minutes_never_negative(self, make_appointment) -> None:
        """Should clamp available time at zero when over-booked."""
        forecast = occupancy_forecast(DAY, [make_appointment(start=datetime(2024, 1, 1, 7, 0), minutes=1000)])

        assert forecast.available_minutes == 0
        assert forecast.available_hours == 0.0

    def test_cancelled_and_other_days_ignored(self, make_appointment) -> None:
        """Should count only active appointments starting on the day."""
        appointments = [
            make_appointment(status=AppointmentStatus.CANCELLED),
            make_appointment(id="appt-2", start=datetime(2024, 1, 2, 9, 0)),
        ]

        forecast = occupancy_forecast(DAY, appointments)

        assert forecast.total_events == 0
        assert forecast.occupied_minutes == 0
