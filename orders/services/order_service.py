"""Order service - creating and listing purchases."""

import logging

from events.domain import Page
from events.domain.errors import ForbiddenError, InvalidInputError
from events.domain.policies import ensure_organizer
from events.services.event_service import DEFAULT_PAGE_SIZE, EventService, page_request
from orders.domain import CheckoutOrder, Order
from orders.stores.interfaces import OrderStore

logger = logging.getLogger(__name__)


class OrderService:
    """Service for order operations."""

    def __init__(self, store: OrderStore, events: EventService) -> None:
        self._store = store
        self._events = events

    def create_order(self, checkout: CheckoutOrder) -> tuple[Order, bool]:
        """Store the order for a checkout, at most once per stripe_id.

        Raises:
            InvalidInputError: If the checkout carries no transaction id.
        """
        if not checkout.stripe_id:
            raise InvalidInputError("Checkout session id is required")
        order, created = self._store.get_or_create(checkout)
        if created:
            logger.info("Order %s created for checkout %s", order.id, order.stripe_id)
        else:
            logger.info("Checkout %s already recorded as order %s", order.stripe_id, order.id)
        return order, created

    def list_orders_by_buyer(
        self,
        buyer_id: str,
        requesting_user_id: str,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> Page[Order]:
        """Return a page of the requesting user's own orders.

        Raises:
            ForbiddenError: If buyer_id is not the requesting user.
        """
        if str(buyer_id) != str(requesting_user_id):
            raise ForbiddenError()
        request = page_request(page, limit)
        orders = self._store.find_by_buyer(str(buyer_id), skip=request.skip, limit=request.limit)
        count = self._store.count_by_buyer(str(buyer_id))
        return Page(data=tuple(orders), total_pages=request.total_pages(count))

    def list_orders_by_event(self, event_id: str, requesting_user_id: str) -> list[Order]:
        """Return every order placed for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            NotEventOrganizerError: If the requesting user is not the organizer.
        """
        event = self._events.get_event(event_id)
        ensure_organizer(event, requesting_user_id)
        return self._store.find_by_event(str(event.id))
