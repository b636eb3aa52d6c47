"""Django ORM implementation of the OrderStore."""

from orders import models
from orders.domain import CheckoutOrder, Order
from orders.stores.interfaces import OrderStore


def order_to_domain(row: models.Order) -> Order:
    return Order(
        id=row.id,
        stripe_id=row.stripe_id,
        event_id=row.event_id,
        buyer_id=row.buyer_id,
        total_amount=row.total_amount,
        created_at=row.created_at,
    )


class DjangoOrderStore(OrderStore):
    """Relational order store using Django ORM.

    The unique index on ``stripe_id`` settles concurrent deliveries of the
    same checkout; ``get_or_create`` re-reads after losing that race.
    """

    def get_or_create(self, checkout: CheckoutOrder) -> tuple[Order, bool]:
        row, created = models.Order.objects.get_or_create(
            stripe_id=checkout.stripe_id,
            defaults={
                "event_id": checkout.event_id,
                "buyer_id": checkout.buyer_id,
                "total_amount": checkout.total_amount,
                "created_at": checkout.created_at,
            },
        )
        return order_to_domain(row), created

    def find_by_buyer(self, buyer_id: str, skip: int, limit: int) -> list[Order]:
        rows = models.Order.objects.filter(buyer_id=buyer_id).order_by("-created_at", "id")[skip : skip + limit]
        return [order_to_domain(row) for row in rows]

    def count_by_buyer(self, buyer_id: str) -> int:
        return models.Order.objects.filter(buyer_id=buyer_id).count()

    def find_by_event(self, event_id: str) -> list[Order]:
        rows = models.Order.objects.filter(event_id=event_id).order_by("-created_at", "id")
        return [order_to_domain(row) for row in rows]
