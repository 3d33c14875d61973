"""
Unit tests for application settings.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from agenda.config.settings import Settings
from agenda.domains.scheduling.domain.value_objects import PriceList, PriceType, TreatmentType


@pytest.mark.unit
class TestSettings:
    def test_defaults(self) -> None:
        """Should ship the standard operating window and prices."""
        settings = Settings()

        assert (settings.DAY_START_HOUR, settings.DAY_END_HOUR, settings.SLOT_MINUTES) == (7, 22, 30)
        assert settings.RECURRENCE_MAX_OCCURRENCES == 200
        assert PriceList.from_settings(settings) == PriceList()

    def test_environment_overrides(self, monkeypatch) -> None:
        """Should read prices and clinic addresses from the environment."""
        monkeypatch.setenv("PRICE_SEDUTA_CASH", "30")
        monkeypatch.setenv("CLINIC_ADDRESSES", '{"Studio Cassino": "Cassino, Via Roma 1"}')

        settings = Settings()

        prices = PriceList.from_settings(settings)
        assert prices.standard_price(TreatmentType.SEDUTA, PriceType.CASH) == Decimal("30")
        assert settings.CLINIC_ADDRESSES == {"Studio Cassino": "Cassino, Via Roma 1"}

    def test_day_end_must_follow_start(self) -> None:
        with pytest.raises(ValidationError):
            Settings(DAY_START_HOUR=9, DAY_END_HOUR=8)

    def test_slot_must_divide_hour(self) -> None:
        with pytest.raises(ValidationError):
            Settings(SLOT_MINUTES=25)

    def test_development_flag(self) -> None:
        assert Settings(ENVIRONMENT="development").is_development
        assert not Settings(ENVIRONMENT="production", DEBUG=False).is_development
