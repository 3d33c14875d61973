"""
Unit tests for the WhatsApp Web link sender.
"""

from urllib.parse import unquote

import pytest

from agenda.core.domain.exceptions import ReferenceException
from agenda.domains.scheduling.application.ports import INotificationSender
from agenda.domains.scheduling.infrastructure.notification import WhatsAppWebLinkSender


@pytest.mark.unit
class TestWhatsAppWebLinkSender:
    """Tests for WhatsAppWebLinkSender."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("0776 123.456", "+39776123456"),
            ("(0776) 12-34-56", "+39776123456"),
            ("+39 333 1234567", "+393331234567"),
            ("393331234567", "+393331234567"),
        ],
    )
    def test_normalize_phone(self, raw: str, expected: str) -> None:
        """Should strip separators, expand a leading zero and add the plus."""
        assert WhatsAppWebLinkSender().normalize_phone(raw) == expected

    def test_empty_phone_raises_reference_error(self) -> None:
        with pytest.raises(ReferenceException):
            WhatsAppWebLinkSender().normalize_phone(" - ")

    def test_build_link_encodes_like_uri_component(self) -> None:
        """Should percent-encode spaces, newlines and reserved characters."""
        link = WhatsAppWebLinkSender().build_link("0776 123456", "Ciao Mario,\nore 09:00 & grazie!")

        assert link.startswith("https://web.whatsapp.com/send?phone=+39776123456&text=")
        text = link.split("&text=", 1)[1]
        assert "%20" in text
        assert "%0A" in text
        assert "%26" in text
        assert text.endswith("!")
        assert unquote(text) == "Ciao Mario,\nore 09:00 & grazie!"

    def test_custom_prefix_and_base_url(self) -> None:
        sender = WhatsAppWebLinkSender(base_url="https://wa.example/send", country_prefix="41")

        assert sender.build_link("044 123", "x") == "https://wa.example/send?phone=+4144123&text=x"

    def test_implements_port(self) -> None:
        assert isinstance(WhatsAppWebLinkSender(), INotificationSender)
