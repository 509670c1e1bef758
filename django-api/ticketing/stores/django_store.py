"""Django ORM implementation of the ticketing stores.

Parent events are resolved with an explicit batch query rather than lazy
relation access, so every method runs a fixed number of queries.
"""

import logging
from datetime import datetime

from django.db.models import Count, QuerySet, Sum

from ticketing import models as orm
from ticketing.domain import Event, EventId, EventSalesSummary, TicketSale, TicketSaleId
from ticketing.domain.errors import DataIntegrityError
from ticketing.stores.interfaces import EventStore, TicketSaleStore

logger = logging.getLogger(__name__)


def _to_event(row: orm.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        starts_on=row.starts_on,
        ends_on=row.ends_on,
        location=row.location,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        rows = orm.Event.objects.order_by("starts_on", "id")
        return [_to_event(row) for row in rows]

    def get_event(self, event_id: EventId) -> Event | None:
        row = orm.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row is not None else None

    def get_events_starting_in_range(self, start: datetime, end: datetime) -> list[Event]:
        logger.debug("Querying events starting between %s and %s", start, end)
        rows = orm.Event.objects.filter(
            starts_on__gte=start, starts_on__lte=end
        ).order_by("starts_on", "id")
        return [_to_event(row) for row in rows]


class DjangoTicketSaleStore(TicketSaleStore):
    """Relational ticket sale store using Django ORM."""

    def get_sales_for_event(self, event_id: EventId) -> list[TicketSale]:
        rows = list(
            orm.TicketSale.objects.filter(event_id=event_id.value).order_by(
                "purchase_date", "id"
            )
        )
        if not rows:
            return []

        parent = orm.Event.objects.filter(pk=event_id.value).first()
        if parent is None:
            raise DataIntegrityError([event_id.value])

        return [
            TicketSale(
                id=TicketSaleId(row.id),
                event_id=EventId(parent.id),
                event_name=parent.name,
                user_id=row.user_id,
                purchase_date=row.purchase_date,
                price_in_cents=row.price_in_cents,
            )
            for row in rows
        ]

    def get_top_events_by_count(self, limit: int) -> list[EventSalesSummary]:
        return self._top_events(rank_by="ticket_count", limit=limit)

    def get_top_events_by_revenue(self, limit: int) -> list[EventSalesSummary]:
        return self._top_events(rank_by="revenue_in_cents", limit=limit)

    def _sales_by_event(self) -> QuerySet:
        # Driven from sales, so events without any sale never form a group.
        return orm.TicketSale.objects.values("event_id").annotate(
            ticket_count=Count("id"),
            revenue_in_cents=Sum("price_in_cents"),
        )

    def _top_events(self, rank_by: str, limit: int) -> list[EventSalesSummary]:
        logger.debug("Ranking top %d events by %s", limit, rank_by)
        groups = list(self._sales_by_event().order_by(f"-{rank_by}", "event_id")[:limit])
        if not groups:
            return []

        event_ids = [group["event_id"] for group in groups]
        events = orm.Event.objects.in_bulk(event_ids)
        missing = [event_id for event_id in event_ids if event_id not in events]
        if missing:
            logger.error("Sales reference missing events: %s", missing)
            raise DataIntegrityError(missing)

        return [
            EventSalesSummary(
                event=_to_event(events[group["event_id"]]),
                ticket_count=group["ticket_count"],
                revenue_in_cents=group["revenue_in_cents"],
            )
            for group in groups
        ]
