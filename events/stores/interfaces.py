"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Category, CategoryId, Event, EventId, EventInput
from events.domain.predicates import Predicate


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def find_events(self, predicate: Predicate, skip: int, limit: int) -> list[Event]:
        """Return matching events ordered by created_at descending, then id."""
        ...

    @abstractmethod
    def count_events(self, predicate: Predicate) -> int:
        """Return the number of events matching the predicate."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID with organizer and category joined, or None."""
        ...

    @abstractmethod
    def create_event(self, data: EventInput, organizer_id: str) -> Event:
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, data: EventInput) -> Event | None:
        """Replace the mutable fields of an event. Returns None if it vanished."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event. Returns True if a row was removed."""
        ...


class CategoryStore(ABC):
    """Interface for category lookups."""

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """Return all categories ordered by name."""
        ...

    @abstractmethod
    def category_exists(self, category_id: CategoryId) -> bool:
        ...

    @abstractmethod
    def find_by_name(self, name: str) -> Category | None:
        """Return the category matching ``name`` case-insensitively.

        An exact match wins; otherwise the first substring match by name.
        """
        ...

    @abstractmethod
    def get_or_create(self, name: str) -> tuple[Category, bool]:
        ...


class UserDirectory(ABC):
    """Read-only view on the users that organize events."""

    @abstractmethod
    def user_exists(self, user_id: str) -> bool:
        ...
