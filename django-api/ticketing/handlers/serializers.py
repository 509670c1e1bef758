"""Serializers for transforming domain models to API responses.

Field names are camelCase to match the frontend contract. Money goes out as a
two-place decimal string so cents are never rounded through a float.
"""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    startsOn = serializers.DateTimeField(source="starts_on")
    endsOn = serializers.DateTimeField(source="ends_on")
    location = serializers.CharField()


class EventSalesSerializer(serializers.Serializer):
    """Serializer for EventSalesSummary, an event plus its ranking metrics."""

    id = serializers.CharField(source="event.id.value")
    name = serializers.CharField(source="event.name")
    startsOn = serializers.DateTimeField(source="event.starts_on")
    endsOn = serializers.DateTimeField(source="event.ends_on")
    location = serializers.CharField(source="event.location")
    ticketCount = serializers.IntegerField(source="ticket_count")
    totalRevenue = serializers.DecimalField(
        source="revenue.amount", max_digits=None, decimal_places=2, coerce_to_string=True
    )


class TicketSaleSerializer(serializers.Serializer):
    """Serializer for TicketSale domain model."""

    id = serializers.CharField(source="id.value")
    eventId = serializers.CharField(source="event_id.value")
    userId = serializers.CharField(source="user_id")
    purchaseDate = serializers.DateTimeField(source="purchase_date")
    price = serializers.DecimalField(
        source="price.amount", max_digits=None, decimal_places=2, coerce_to_string=True
    )
    eventName = serializers.CharField(source="event_name")
