"""Serializers for order responses."""

from rest_framework import serializers


class OrderSerializer(serializers.Serializer):
    """Serializer for Order domain model."""

    id = serializers.CharField()
    stripe_id = serializers.CharField()
    event_id = serializers.CharField(allow_blank=True)
    buyer_id = serializers.CharField(allow_blank=True)
    total_amount = serializers.CharField()
    created_at = serializers.DateTimeField()
