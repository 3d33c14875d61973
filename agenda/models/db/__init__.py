"""
Database models package
"""

from .appointments import AppointmentRecord
from .base import Base, TimestampMixin, new_id
from .invoices import Invoice
from .message_templates import MessageTemplate
from .patients import Patient

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "new_id",
    # Tables
    "AppointmentRecord",
    "Invoice",
    "MessageTemplate",
    "Patient",
]
