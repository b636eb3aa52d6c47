"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from math import ceil
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CategoryId:
    """Unique identifier for a Category."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def from_minor_units(cls, cents: int) -> Self:
        return cls(amount=Decimal(cents) / Decimal(100))


@dataclass(frozen=True)
class PageRequest:
    """A 1-based page number and a positive page size."""

    page: int
    limit: int

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be 1 or greater")
        if self.limit <= 0:
            raise ValueError("Limit must be greater than zero")

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, count: int) -> int:
        return ceil(count / self.limit)
