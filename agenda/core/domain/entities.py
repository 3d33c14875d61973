"""
Base Entity Classes for Domain-Driven Design

Entities are domain objects with identity and lifecycle.
They maintain their identity regardless of their attributes.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

# Type variable for entity ID (int, str, UUID, etc.)
TId = TypeVar("TId")


@dataclass
class Entity(ABC, Generic[TId]):
    """
    Base class for all domain entities.

    An entity is a domain object that has a distinct identity
    that runs through time and different states.

    Type Parameters:
        TId: Type of entity identifier (the record store hands out strings)
    """

    id: TId | None = field(default=None)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID."""
        if not isinstance(other, Entity):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id) if self.id is not None else id(self)

    def is_new(self) -> bool:
        """Check if entity is new (not yet persisted)."""
        return self.id is None

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = datetime.now(UTC)


@dataclass
class AggregateRoot(Entity[TId], Generic[TId]):
    """
    Base class for aggregate roots.

    An aggregate root is the entry point to an aggregate.
    It controls access to all members of the aggregate
    and ensures invariants are maintained.

    Example:
        ```python
        @dataclass
        class Appointment(AggregateRoot[str]):
            status: AppointmentStatus = AppointmentStatus.BOOKED

            def confirm(self) -> None:
                self.status = AppointmentStatus.CONFIRMED
                self._record_event(StatusChanged(self.id, "confirmed"))
        ```
    """

    _domain_events: list[Any] = field(default_factory=list, repr=False, compare=False)

    def _record_event(self, event: Any) -> None:
        """Record a domain event to be published later."""
        self._domain_events.append(event)

    def get_domain_events(self) -> list[Any]:
        """Get all recorded domain events."""
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        """Clear all recorded domain events (after publishing)."""
        self._domain_events.clear()
