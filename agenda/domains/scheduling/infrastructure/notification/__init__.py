"""Notification infrastructure."""

from .whatsapp_link_sender import WhatsAppWebLinkSender

__all__ = ["WhatsAppWebLinkSender"]
