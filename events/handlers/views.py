"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import Page
from events.handlers.serializers import (
    CategoryInputSerializer,
    CategorySerializer,
    EventInputSerializer,
    EventListQuerySerializer,
    EventSerializer,
    EventUpdateSerializer,
    PaginationQuerySerializer,
    RelatedEventsQuerySerializer,
    page_payload,
)
from events.services import get_category_service, get_event_service
from events.services.event_service import parse_event_id
from events.signals import event_detail_key


def _query(serializer_class, request: Request) -> dict:
    serializer = serializer_class(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request: Request) -> Response:
        params = _query(EventListQuerySerializer, request)
        page = get_event_service().list_events(
            query=params["query"],
            category=params["category"],
            page=params["page"],
            limit=params["limit"],
        )
        return Response(page_payload(page, EventSerializer))

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().create_event(serializer.to_domain(), organizer_id=str(request.user.pk))
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request: Request, event_id: str) -> Response:
        key = event_detail_key(parse_event_id(event_id))
        data = cache.get(key)
        if data is None:
            event = get_event_service().get_event(event_id)
            data = dict(EventSerializer(event).data)
            cache.set(key, data, timeout=settings.EVENTS_DETAIL_CACHE_TIMEOUT)
        return Response(data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().update_event(
            event_id,
            serializer.to_domain(),
            requesting_user_id=str(request.user.pk),
            path=serializer.validated_data["path"],
        )
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        get_event_service().delete_event(
            event_id,
            requesting_user_id=str(request.user.pk),
            path=request.query_params.get("path"),
        )
        return Response(status=status.HTTP_204_NO_CONTENT)


class RelatedEventListView(APIView):
    """Handler for GET /api/events/{event_id}/related

    Without ``category_id`` the event's own category is used.
    """

    def get(self, request: Request, event_id: str) -> Response:
        params = _query(RelatedEventsQuerySerializer, request)
        service = get_event_service()
        category_id = params["category_id"]
        if not category_id:
            event = service.get_event(event_id)
            if event.category is None:
                return Response(page_payload(Page(data=(), total_pages=0), EventSerializer))
            category_id = event.category.id
        page = service.list_related_events(
            category_id,
            event_id,
            page=params["page"],
            limit=params["limit"],
        )
        return Response(page_payload(page, EventSerializer))


class UserEventListView(APIView):
    """Handler for GET /api/users/{user_id}/events"""

    def get(self, request: Request, user_id: str) -> Response:
        params = _query(PaginationQuerySerializer, request)
        page = get_event_service().list_events_by_organizer(user_id, page=params["page"], limit=params["limit"])
        return Response(page_payload(page, EventSerializer))


class CategoryListView(APIView):
    """Handler for GET/POST /api/categories"""

    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request: Request) -> Response:
        categories = get_category_service().list_categories()
        return Response(CategorySerializer(categories, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = CategoryInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        category, created = get_category_service().create_category(serializer.validated_data["name"])
        return Response(
            CategorySerializer(category).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )
