"""Django ORM models (persistence layer) for orders."""

import uuid

from django.db import models


class Order(models.Model):
    """Persistence model for orders.

    ``event_id`` and ``buyer_id`` are copied from the checkout metadata as
    plain strings and may be empty.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    stripe_id = models.CharField(max_length=255, unique=True)
    event_id = models.CharField(max_length=64, blank=True, default="")
    buyer_id = models.CharField(max_length=64, blank=True, default="")
    total_amount = models.CharField(max_length=32, default="0")
    created_at = models.DateTimeField()

    class Meta:
        ordering = ["-created_at", "id"]
        indexes = [
            models.Index(fields=["buyer_id", "-created_at"], name="order_buyer_created_idx"),
            models.Index(fields=["event_id"], name="order_event_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.stripe_id} - {self.total_amount}"
