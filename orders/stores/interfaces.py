"""Store interfaces for orders."""

from abc import ABC, abstractmethod

from orders.domain import CheckoutOrder, Order


class OrderStore(ABC):
    """Interface for order persistence operations."""

    @abstractmethod
    def get_or_create(self, checkout: CheckoutOrder) -> tuple[Order, bool]:
        """Persist the order unless one with the same stripe_id exists.

        Returns the stored order and whether it was created by this call.
        """
        ...

    @abstractmethod
    def find_by_buyer(self, buyer_id: str, skip: int, limit: int) -> list[Order]:
        """Return a buyer's orders, newest first."""
        ...

    @abstractmethod
    def count_by_buyer(self, buyer_id: str) -> int:
        ...

    @abstractmethod
    def find_by_event(self, event_id: str) -> list[Order]:
        """Return all orders for an event, newest first."""
        ...
