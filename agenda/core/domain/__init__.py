"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from agenda.core.domain.entities import AggregateRoot, Entity
from agenda.core.domain.exceptions import (
    DomainException,
    EntityNotFoundException,
    InvalidOperationException,
    RecordStoreException,
    RecurrenceCapacityException,
    ReferenceException,
    ValidationException,
)
from agenda.core.domain.value_objects import PhoneNumber, StatusEnum, ValueObject

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    # Value Objects
    "ValueObject",
    "PhoneNumber",
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationException",
    "RecurrenceCapacityException",
    "EntityNotFoundException",
    "InvalidOperationException",
    "RecordStoreException",
    "ReferenceException",
]
