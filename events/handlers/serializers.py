"""Serializers for transforming domain models to API responses and back."""

from decimal import Decimal

from rest_framework import serializers

from events.domain import CategoryId, EventInput, Money


class CategorySerializer(serializers.Serializer):
    """Serializer for Category domain model."""

    id = serializers.CharField()
    name = serializers.CharField()


class OrganizerSerializer(serializers.Serializer):
    """Serializer for the organizer summary joined onto an event."""

    id = serializers.CharField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    location = serializers.CharField()
    image_url = serializers.CharField(allow_null=True)
    start_date_time = serializers.DateTimeField(allow_null=True)
    end_date_time = serializers.DateTimeField(allow_null=True)
    price = serializers.DecimalField(source="price.amount", max_digits=10, decimal_places=2)
    is_free = serializers.BooleanField()
    url = serializers.CharField(allow_null=True)
    category = CategorySerializer(allow_null=True)
    organizer = OrganizerSerializer(allow_null=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


def page_payload(page, item_serializer) -> dict:
    """Render a domain Page as ``{"data": [...], "total_pages": n}``."""
    return {
        "data": item_serializer(page.data, many=True).data,
        "total_pages": page.total_pages,
    }


class EventInputSerializer(serializers.Serializer):
    """Validates the mutable fields of an event."""

    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    location = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    image_url = serializers.URLField(max_length=500, required=False, allow_null=True, default=None)
    start_date_time = serializers.DateTimeField(required=False, allow_null=True, default=None)
    end_date_time = serializers.DateTimeField(required=False, allow_null=True, default=None)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"), required=False, default=Decimal("0"))
    is_free = serializers.BooleanField(required=False, default=False)
    url = serializers.URLField(max_length=500, required=False, allow_null=True, default=None)
    category_id = serializers.UUIDField(required=False, allow_null=True, default=None)

    def validate(self, attrs):
        start, end = attrs.get("start_date_time"), attrs.get("end_date_time")
        if start and end and end < start:
            raise serializers.ValidationError({"end_date_time": "End must not be before start."})
        return attrs

    def to_domain(self) -> EventInput:
        data = self.validated_data
        category_id = data.get("category_id")
        return EventInput(
            title=data["title"],
            description=data["description"],
            location=data["location"],
            image_url=data["image_url"],
            start_date_time=data["start_date_time"],
            end_date_time=data["end_date_time"],
            price=Money(amount=data["price"]),
            is_free=data["is_free"],
            url=data["url"],
            category_id=CategoryId(value=category_id) if category_id else None,
        )


class EventUpdateSerializer(EventInputSerializer):
    """Event fields plus the display path to invalidate afterwards."""

    path = serializers.CharField(required=False, allow_blank=True, default="")


class EventListQuerySerializer(serializers.Serializer):
    query = serializers.CharField(required=False, allow_blank=True, default="")
    category = serializers.CharField(required=False, allow_blank=True, default="")
    page = serializers.IntegerField(required=False, default=1)
    limit = serializers.IntegerField(required=False, default=6)


class PaginationQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(required=False, default=1)
    limit = serializers.IntegerField(required=False, default=6)


class RelatedEventsQuerySerializer(serializers.Serializer):
    category_id = serializers.CharField(required=False, allow_blank=True, default="")
    page = serializers.IntegerField(required=False, default=1)
    limit = serializers.IntegerField(required=False, default=3)


class CategoryInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
