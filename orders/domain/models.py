"""Domain models for purchases."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from events.domain import Money
from events.domain.errors import InvalidInputError


def minor_units_to_amount(minor_units: int | None) -> str:
    """Render an amount in cents as a plain decimal string.

    5000 becomes "50", 5050 becomes "50.5" and a missing or zero amount "0".

    Raises:
        InvalidInputError: If the amount is not a non-negative whole number.
    """
    if not minor_units:
        return "0"
    if isinstance(minor_units, bool) or not isinstance(minor_units, int):
        raise InvalidInputError(f"Invalid amount: {minor_units!r}")
    try:
        return str(Money.from_minor_units(minor_units).amount)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid amount: {minor_units!r}") from exc


@dataclass(frozen=True)
class Order:
    """Domain representation of an Order."""

    id: UUID
    stripe_id: str
    event_id: str
    buyer_id: str
    total_amount: str
    created_at: datetime


@dataclass(frozen=True)
class CheckoutOrder:
    """Order fields extracted from a completed checkout."""

    stripe_id: str
    event_id: str
    buyer_id: str
    total_amount: str
    created_at: datetime
