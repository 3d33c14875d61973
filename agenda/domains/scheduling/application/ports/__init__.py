# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Ports (interfaces) for external collaborators.
# ============================================================================
"""Scheduling Application Ports.

- IRecordStore: generic CRUD by table name and filter
- INotificationSender: message deep links
"""

from .notification_port import INotificationSender
from .record_store import FILTER_OPS, Filter, IRecordStore, OrderBy
from .response import StoreResponse

__all__ = [
    "StoreResponse",
    "Filter",
    "FILTER_OPS",
    "OrderBy",
    "IRecordStore",
    "INotificationSender",
]
