from django.conf import settings

from events.services import get_event_service
from orders.services.intake import IntakeOutcome, IntakeStatus, OrderIntakePipeline
from orders.services.order_service import OrderService
from orders.services.payments import StripeSignatureVerifier
from orders.stores.django_store import DjangoOrderStore


def get_order_service() -> OrderService:
    return OrderService(store=DjangoOrderStore(), events=get_event_service())


def get_intake_pipeline() -> OrderIntakePipeline:
    verifier = StripeSignatureVerifier(
        secret=settings.STRIPE_WEBHOOK_SECRET,
        tolerance=settings.STRIPE_WEBHOOK_TOLERANCE,
    )
    return OrderIntakePipeline(verifier=verifier, orders=get_order_service())


__all__ = [
    "IntakeOutcome",
    "IntakeStatus",
    "OrderIntakePipeline",
    "OrderService",
    "get_intake_pipeline",
    "get_order_service",
]
