"""Turns payment provider notifications into orders.

A notification is first verified against its signature. Rejected
notifications never reach storage. Verified ones are acknowledged, and only
completed checkouts create an order.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from django.utils import timezone

from events.domain.errors import InvalidInputError, VerificationError
from orders.domain import CheckoutOrder, Order, minor_units_to_amount
from orders.services.order_service import OrderService
from orders.services.payments import SignatureVerifier

logger = logging.getLogger(__name__)

CHECKOUT_COMPLETED = "checkout.session.completed"


class IntakeStatus(Enum):
    PROCESSED = "processed"
    IGNORED = "ignored"
    REJECTED = "rejected"


@dataclass(frozen=True)
class IntakeOutcome:
    status: IntakeStatus
    order: Order | None = None
    created: bool = False
    error: str | None = None


def parse_notification(payload: bytes) -> dict:
    try:
        notification = json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidInputError("Notification body is not valid JSON") from exc
    if not isinstance(notification, dict):
        raise InvalidInputError("Notification body must be a JSON object")
    return notification


def checkout_from_session(session: dict, created_at: datetime) -> CheckoutOrder:
    """Extract order fields from a checkout session object.

    Missing metadata fields become empty strings, as does metadata that is
    not an object.
    """
    metadata = session.get("metadata")
    if not isinstance(metadata, dict):
        metadata = {}
    return CheckoutOrder(
        stripe_id=str(session.get("id") or ""),
        event_id=str(metadata.get("eventId") or ""),
        buyer_id=str(metadata.get("buyerId") or ""),
        total_amount=minor_units_to_amount(session.get("amount_total")),
        created_at=created_at,
    )


class OrderIntakePipeline:
    """Verifies a notification and records the order it describes."""

    def __init__(
        self,
        verifier: SignatureVerifier,
        orders: OrderService,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._verifier = verifier
        self._orders = orders
        self._clock = clock

    def process(self, payload: bytes, signature: str | None) -> IntakeOutcome:
        """Handle one delivery.

        Raises:
            InvalidInputError: If a verified payload is not a usable notification.
        """
        try:
            self._verifier.verify(payload, signature)
        except VerificationError as exc:
            logger.warning("Rejected webhook: %s", exc.reason)
            return IntakeOutcome(status=IntakeStatus.REJECTED, error=exc.reason)

        notification = parse_notification(payload)
        event_type = notification.get("type")
        if event_type != CHECKOUT_COMPLETED:
            logger.info("Ignoring webhook of type %s", event_type)
            return IntakeOutcome(status=IntakeStatus.IGNORED)

        data = notification.get("data") or {}
        session = data.get("object") if isinstance(data, dict) else None
        if not isinstance(session, dict):
            raise InvalidInputError("Checkout notification carries no session object")
        checkout = checkout_from_session(session, created_at=self._clock())
        order, created = self._orders.create_order(checkout)
        return IntakeOutcome(status=IntakeStatus.PROCESSED, order=order, created=created)
