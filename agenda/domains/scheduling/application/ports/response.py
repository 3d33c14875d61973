# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Record store response type.
# ============================================================================
"""Store Response Type.

Contains the StoreResponse dataclass returned by every record store call.
This is in a separate file to avoid circular imports.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class StoreResponse:
    """Structured response from the record store.

    Store failures are reported through ``success=False`` and the store's
    own ``error_message``; adapters never raise for them.
    """

    success: bool
    data: dict[str, Any] | list[Any] | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls, data: dict[str, Any] | list[Any] | None = None) -> "StoreResponse":
        """Factory for successful response."""
        return cls(success=True, data=data)

    @classmethod
    def error(cls, message: str) -> "StoreResponse":
        """Factory for error response."""
        return cls(success=False, error_message=message)

    def get_dict(self) -> dict[str, Any]:
        """Get data as dict (first row for list responses), or empty dict."""
        if isinstance(self.data, dict):
            return self.data
        if isinstance(self.data, list) and len(self.data) > 0:
            first = self.data[0]
            if isinstance(first, dict):
                return first
        return {}

    def get_list(self) -> list[Any]:
        """Get data as list, wrapping a single row if needed."""
        if isinstance(self.data, list):
            return self.data
        if isinstance(self.data, dict):
            return [self.data]
        return []
