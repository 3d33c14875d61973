"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

import re
from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Self


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity
    """

    def __post_init__(self):
        """Override to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


_PHONE_SEPARATORS = re.compile(r"[\s()\-.]")


@dataclass(frozen=True)
class PhoneNumber(ValueObject):
    """
    Phone number value object.

    Strips separators and turns a national number (leading 0) into an
    international one using the configured country prefix.
    """

    number: str
    country_code: str = "39"  # Italy default

    def _validate(self) -> None:
        cleaned = _PHONE_SEPARATORS.sub("", self.number or "")
        if not cleaned:
            raise ValueError("Phone number is empty")
        object.__setattr__(self, "number", cleaned)

    def get_formatted(self) -> str:
        """Get the number in international '+<digits>' form."""
        number = self.number
        if number.startswith("0"):
            number = self.country_code + number[1:]
        if not number.startswith("+"):
            number = "+" + number
        return number

    def __str__(self) -> str:
        return self.get_formatted()


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Provides common functionality for all status value objects.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        for member in cls:
            if member.value.lower() == str(value).lower():
                return member
        raise ValueError(f"Invalid {cls.__name__}: {value}")
