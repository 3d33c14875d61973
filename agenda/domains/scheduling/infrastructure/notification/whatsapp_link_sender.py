"""WhatsApp Web link sender.

Implements ``INotificationSender`` by building ``web.whatsapp.com/send``
links; the message is sent by the user from the opened chat.
"""

import logging
from urllib.parse import quote

from agenda.core.domain.exceptions import ReferenceException
from agenda.core.domain.value_objects import PhoneNumber

logger = logging.getLogger(__name__)

DEFAULT_WHATSAPP_WEB_URL = "https://web.whatsapp.com/send"
# Characters left unescaped in a URI component
URI_COMPONENT_SAFE = "-_.!~*'()"


class WhatsAppWebLinkSender:
    """Builds WhatsApp Web deep links."""

    def __init__(self, base_url: str = DEFAULT_WHATSAPP_WEB_URL, country_prefix: str = "39"):
        self.base_url = base_url
        self.country_prefix = country_prefix

    def normalize_phone(self, phone: str) -> str:
        """``0776 123.456`` becomes ``+39776123456``.

        Raises:
            ReferenceException: If nothing is left after stripping separators.
        """
        try:
            return PhoneNumber(phone, country_code=self.country_prefix).get_formatted()
        except ValueError as e:
            raise ReferenceException("patient_phone", "Nessun telefono registrato per questo paziente") from e

    def build_link(self, phone: str, body: str) -> str:
        number = self.normalize_phone(phone)
        text = quote(body, safe=URI_COMPONENT_SAFE)
        link = f"{self.base_url}?phone={number}&text={text}"
        logger.debug(f"Built WhatsApp link for {number}")
        return link
