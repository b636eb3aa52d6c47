"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Callable

from events.domain import CategoryId, Event, EventId, EventInput, Page, PageRequest
from events.domain.errors import (
    CategoryNotFoundError,
    EventNotFoundError,
    InvalidCategoryIdError,
    InvalidEventIdError,
    InvalidPaginationError,
    OrganizerNotFoundError,
)
from events.domain.policies import ensure_organizer
from events.domain.predicates import CategoryEquals, ExcludeEvent, OrganizerEquals, Predicate, all_of
from events.services.query_builder import build_event_predicate
from events.signals import invalidate_path
from events.stores.interfaces import CategoryStore, EventStore, UserDirectory

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 6
RELATED_PAGE_SIZE = 3


def parse_event_id(event_id: str | EventId) -> EventId:
    if isinstance(event_id, EventId):
        return event_id
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError):
        raise InvalidEventIdError()


def parse_category_id(category_id: str | CategoryId) -> CategoryId:
    if isinstance(category_id, CategoryId):
        return category_id
    try:
        return CategoryId.from_string(category_id)
    except (TypeError, ValueError, AttributeError):
        raise InvalidCategoryIdError()


def page_request(page: int, limit: int) -> PageRequest:
    try:
        return PageRequest(page=int(page), limit=int(limit))
    except (TypeError, ValueError) as exc:
        raise InvalidPaginationError(str(exc))


class EventService:
    """Service for event catalog operations."""

    def __init__(
        self,
        store: EventStore,
        categories: CategoryStore,
        users: UserDirectory,
        on_path_invalidated: Callable[[str | None], None] = invalidate_path,
    ) -> None:
        self._store = store
        self._categories = categories
        self._users = users
        self._on_path_invalidated = on_path_invalidated

    def _page(self, predicate: Predicate, page: int, limit: int) -> Page[Event]:
        request = page_request(page, limit)
        events = self._store.find_events(predicate, skip=request.skip, limit=request.limit)
        count = self._store.count_events(predicate)
        return Page(data=tuple(events), total_pages=request.total_pages(count))

    def list_events(
        self,
        query: str | None = None,
        category: str | None = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> Page[Event]:
        """Return a page of events filtered by title text and category name."""
        request = page_request(page, limit)
        predicate = build_event_predicate(query, category, self._categories)
        return self._page(predicate, request.page, request.limit)

    def list_events_by_organizer(
        self, organizer_id: str, page: int = 1, limit: int = DEFAULT_PAGE_SIZE
    ) -> Page[Event]:
        """Return a page of the events organized by a user."""
        return self._page(OrganizerEquals(organizer_id=str(organizer_id)), page, limit)

    def list_related_events(
        self,
        category_id: str | CategoryId,
        exclude_event_id: str | EventId,
        page: int = 1,
        limit: int = RELATED_PAGE_SIZE,
    ) -> Page[Event]:
        """Return other events of the same category.

        Raises:
            InvalidCategoryIdError: If category_id is not a valid UUID.
            InvalidEventIdError: If exclude_event_id is not a valid UUID.
        """
        predicate = all_of(
            CategoryEquals(category_id=parse_category_id(category_id)),
            ExcludeEvent(event_id=parse_event_id(exclude_event_id)),
        )
        return self._page(predicate, page, limit)

    def get_event(self, event_id: str | EventId) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(str(parsed))
        return event

    def _ensure_category(self, data: EventInput) -> None:
        if data.category_id is not None and not self._categories.category_exists(data.category_id):
            raise CategoryNotFoundError(str(data.category_id))

    def create_event(self, data: EventInput, organizer_id: str) -> Event:
        """Create an event organized by ``organizer_id``.

        Raises:
            OrganizerNotFoundError: If the user does not exist.
            CategoryNotFoundError: If the referenced category does not exist.
        """
        if not self._users.user_exists(str(organizer_id)):
            raise OrganizerNotFoundError(str(organizer_id))
        self._ensure_category(data)
        event = self._store.create_event(data, str(organizer_id))
        logger.info("Event %s created by user %s", event.id, organizer_id)
        return event

    def update_event(
        self,
        event_id: str | EventId,
        data: EventInput,
        requesting_user_id: str,
        path: str | None = None,
    ) -> Event:
        """Replace the mutable fields of an event owned by the requesting user.

        Raises:
            EventNotFoundError: If the event does not exist.
            NotEventOrganizerError: If the requesting user is not the organizer.
            CategoryNotFoundError: If the referenced category does not exist.
        """
        existing = self.get_event(event_id)
        ensure_organizer(existing, requesting_user_id)
        self._ensure_category(data)
        updated = self._store.update_event(existing.id, data)
        if updated is None:
            raise EventNotFoundError(str(existing.id))
        self._on_path_invalidated(path)
        return updated

    def delete_event(
        self,
        event_id: str | EventId,
        requesting_user_id: str,
        path: str | None = None,
    ) -> bool:
        """Delete an event owned by the requesting user.

        Deleting an event that does not exist is a no-op and returns False.

        Raises:
            NotEventOrganizerError: If the event exists and the requesting
                user is not its organizer.
        """
        parsed = parse_event_id(event_id)
        existing = self._store.get_event(parsed)
        if existing is None:
            return False
        ensure_organizer(existing, requesting_user_id)
        deleted = self._store.delete_event(parsed)
        if deleted:
            logger.info("Event %s deleted by user %s", parsed, requesting_user_id)
            self._on_path_invalidated(path)
        return deleted
