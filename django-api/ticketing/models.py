"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
Identifiers are assigned by the creator, never generated by the database.
"""

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.CharField(primary_key=True, max_length=64)
    name = models.CharField(max_length=255)
    starts_on = models.DateTimeField()
    ends_on = models.DateTimeField()
    location = models.CharField(max_length=255)

    class Meta:
        db_table = "events"
        ordering = ["starts_on", "id"]
        indexes = [
            models.Index(fields=["starts_on"], name="events_starts_on_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class TicketSale(models.Model):
    """Persistence model for ticket sales."""

    id = models.CharField(primary_key=True, max_length=64)
    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name="sales")
    user_id = models.CharField(max_length=64)
    purchase_date = models.DateTimeField()
    price_in_cents = models.PositiveIntegerField()

    class Meta:
        db_table = "ticket_sales"
        indexes = [
            models.Index(
                fields=["event", "purchase_date"], name="ticket_sales_event_date_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.id} - {self.price_in_cents}c"
