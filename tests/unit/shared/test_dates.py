"""
Unit tests for the shared date utilities.
"""

from datetime import date, datetime

import pytest

from agenda.core.shared.dates import (
    add_days,
    at_time,
    days_in_month,
    end_of_month,
    format_dmy,
    format_time,
    relative_day_label,
    start_of_week,
    week_label,
    week_options,
)


@pytest.mark.unit
class TestWeekArithmetic:
    """Tests for week and month boundaries."""

    def test_start_of_week_is_monday_midnight(self) -> None:
        """Should return Monday 00:00 for any day of the week."""
        assert start_of_week(date(2024, 1, 7)) == datetime(2024, 1, 1)
        assert start_of_week(datetime(2024, 1, 3, 15, 30)) == datetime(2024, 1, 1)

    def test_month_length_handles_leap_years(self) -> None:
        """Should count 29 days in February 2024."""
        assert days_in_month(date(2024, 2, 10)) == 29
        assert end_of_month(date(2024, 2, 10)).date() == date(2024, 2, 29)

    def test_add_days_keeps_wall_clock_time(self) -> None:
        """Should keep the hour when crossing the DST change."""
        assert add_days(datetime(2024, 3, 30, 9, 0), 1) == datetime(2024, 3, 31, 9, 0)

    def test_at_time(self) -> None:
        """Should place the day at the given hour and minute."""
        assert at_time(date(2024, 1, 1), 14, 30) == datetime(2024, 1, 1, 14, 30)


@pytest.mark.unit
class TestFormatting:
    """Tests for Italian formatting helpers."""

    def test_format_dmy_and_time(self) -> None:
        """Should format as dd/mm/yyyy and HH:MM."""
        assert format_dmy(datetime(2024, 1, 5, 9, 5)) == "05/01/2024"
        assert format_time(datetime(2024, 1, 5, 9, 5)) == "09:05"

    def test_relative_day_label(self) -> None:
        """Should say Oggi, Domani or the weekday and month."""
        today = date(2024, 1, 1)
        assert relative_day_label(date(2024, 1, 1), today) == "Oggi"
        assert relative_day_label(datetime(2024, 1, 2, 10), today) == "Domani"
        assert relative_day_label(date(2024, 1, 8), today) == "Lunedì 8 Gennaio"

    def test_week_label_spans_monday_to_saturday(self) -> None:
        """Should label the business week from Monday to Saturday."""
        assert week_label(date(2024, 1, 3)) == "SETTIMANA 01/01/2024 → 06/01/2024"

    def test_week_options_around_today(self) -> None:
        """Should list the requested weeks with the current one included."""
        options = week_options(date(2024, 1, 3), before=1, after=2)
        assert [monday for monday, _ in options] == [
            date(2023, 12, 25),
            date(2024, 1, 1),
            date(2024, 1, 8),
            date(2024, 1, 15),
        ]

