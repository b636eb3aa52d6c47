"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Generic, TypeVar

from events.domain.value_objects import CategoryId, EventId, Money

T = TypeVar("T")


@dataclass(frozen=True)
class Category:
    """Domain representation of a Category."""

    id: CategoryId
    name: str


@dataclass(frozen=True)
class OrganizerSummary:
    """The slice of a user joined onto an event."""

    id: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    ``organizer`` and ``category`` are None when the reference no longer
    resolves.
    """

    id: EventId
    title: str
    description: str
    location: str
    image_url: str | None
    start_date_time: datetime | None
    end_date_time: datetime | None
    price: Money
    is_free: bool
    url: str | None
    category: Category | None
    organizer: OrganizerSummary | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class EventInput:
    """Mutable fields of an event, as supplied on create and update."""

    title: str
    description: str = ""
    location: str = ""
    image_url: str | None = None
    start_date_time: datetime | None = None
    end_date_time: datetime | None = None
    price: Money = Money(amount=Decimal("0"))
    is_free: bool = False
    url: str | None = None
    category_id: CategoryId | None = None


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the total number of pages."""

    data: tuple[T, ...]
    total_pages: int
