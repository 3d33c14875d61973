# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Notification sender port (DIP compliant).
# ============================================================================
"""Notification Sender Port.

Formats a message for a phone number as a deep link the user opens to
send it. Nothing is sent by the server itself.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class INotificationSender(Protocol):
    """Interface for notification senders.

    Implementations: WhatsAppWebLinkSender
    """

    def build_link(self, phone: str, body: str) -> str:
        """Build the deep link that opens a chat with ``body`` prefilled.

        Args:
            phone: Recipient phone number, in any common notation.
            body: Message text.

        Returns:
            Link URL.
        """
        ...
