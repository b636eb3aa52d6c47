"""HTTP handlers for orders and the payment webhook."""

import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import ValidationError
from events.handlers.serializers import PaginationQuerySerializer, page_payload
from orders.handlers.serializers import OrderSerializer
from orders.services import IntakeStatus, get_intake_pipeline, get_order_service

logger = logging.getLogger(__name__)


def webhook_error(error: str, status_code: int) -> Response:
    return Response({"message": "Webhook error", "error": error}, status=status_code)


class StripeWebhookView(APIView):
    """Handler for POST /api/webhook/stripe

    Always answers with an HTTP response. Only a storage failure asks the
    provider to redeliver.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        try:
            outcome = get_intake_pipeline().process(request.body, request.META.get("HTTP_STRIPE_SIGNATURE"))
        except ValidationError as exc:
            logger.warning("Unusable webhook payload: %s", exc)
            return webhook_error(exc.message, status.HTTP_400_BAD_REQUEST)
        except DatabaseError:
            logger.exception("Could not store order from webhook")
            return webhook_error("Order could not be stored", status.HTTP_500_INTERNAL_SERVER_ERROR)

        if outcome.status is IntakeStatus.REJECTED:
            return webhook_error(outcome.error or "Invalid signature", status.HTTP_400_BAD_REQUEST)
        if outcome.status is IntakeStatus.IGNORED:
            return Response(status=status.HTTP_200_OK)
        return Response({"message": "OK", "order": OrderSerializer(outcome.order).data})


class UserOrderListView(APIView):
    """Handler for GET /api/users/{user_id}/orders"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, user_id: str) -> Response:
        params = PaginationQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        page = get_order_service().list_orders_by_buyer(
            user_id,
            requesting_user_id=str(request.user.pk),
            page=params.validated_data["page"],
            limit=params.validated_data["limit"],
        )
        return Response(page_payload(page, OrderSerializer))


class EventOrderListView(APIView):
    """Handler for GET /api/events/{event_id}/orders"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, event_id: str) -> Response:
        orders = get_order_service().list_orders_by_event(event_id, requesting_user_id=str(request.user.pk))
        return Response(OrderSerializer(orders, many=True).data)
