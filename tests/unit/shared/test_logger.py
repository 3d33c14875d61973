"""
Unit tests for the log formatters.
"""

import json
import logging

import pytest

from agenda.core.shared.logger import ColoredFormatter, JSONFormatter, build_formatter


def make_record(message: str = "Appointment appt-1 moved", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("agenda.test", level, __file__, 10, message, None, None)


@pytest.mark.unit
class TestFormatters:
    def test_build_formatter(self) -> None:
        assert isinstance(build_formatter("json"), JSONFormatter)
        assert isinstance(build_formatter("colored"), ColoredFormatter)
        assert type(build_formatter("plain")) is logging.Formatter

    def test_json_line(self) -> None:
        """Should emit one parseable JSON object per record."""
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "agenda.test"
        assert data["message"] == "Appointment appt-1 moved"

    def test_colored_keeps_original_record(self) -> None:
        """Should color the output without touching the record other handlers see."""
        record = make_record(level=logging.WARNING)

        output = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[33mWARNING\033[0m" in output
        assert record.levelname == "WARNING"
