"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from ticketing import models as orm
from ticketing.domain import Event, EventId, EventSalesSummary, TicketSale
from ticketing.stores.interfaces import EventStore, TicketSaleStore

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


class InMemoryEventStore(EventStore):
    """EventStore over a list, recording every call it receives."""

    def __init__(self, events: list[Event] | None = None) -> None:
        self.events = list(events or [])
        self.calls: list[tuple] = []

    def list_events(self) -> list[Event]:
        self.calls.append(("list_events",))
        return sorted(self.events, key=lambda e: (e.starts_on, e.id.value))

    def get_event(self, event_id: EventId) -> Event | None:
        self.calls.append(("get_event", event_id))
        return next((e for e in self.events if e.id == event_id), None)

    def get_events_starting_in_range(self, start: datetime, end: datetime) -> list[Event]:
        self.calls.append(("get_events_starting_in_range", start, end))
        ordered = sorted(self.events, key=lambda e: (e.starts_on, e.id.value))
        return [e for e in ordered if start <= e.starts_on <= end]


class InMemoryTicketSaleStore(TicketSaleStore):
    """TicketSaleStore returning canned results, recording every call it receives."""

    def __init__(
        self,
        sales: list[TicketSale] | None = None,
        ranking: list[EventSalesSummary] | None = None,
    ) -> None:
        self.sales = list(sales or [])
        self.ranking = list(ranking or [])
        self.calls: list[tuple] = []

    def get_sales_for_event(self, event_id: EventId) -> list[TicketSale]:
        self.calls.append(("get_sales_for_event", event_id))
        return [s for s in self.sales if s.event_id == event_id]

    def get_top_events_by_count(self, limit: int) -> list[EventSalesSummary]:
        self.calls.append(("get_top_events_by_count", limit))
        return self.ranking[:limit]

    def get_top_events_by_revenue(self, limit: int) -> list[EventSalesSummary]:
        self.calls.append(("get_top_events_by_revenue", limit))
        return self.ranking[:limit]


def make_event(event_id: str, starts_in: timedelta = timedelta(days=10), name: str = "") -> Event:
    return Event(
        id=EventId(event_id),
        name=name or f"Event {event_id}",
        starts_on=NOW + starts_in,
        ends_on=NOW + starts_in + timedelta(hours=3),
        location="Main Hall",
    )


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def create_event():
    """Persist an Event row starting `starts_in` after `base`."""

    def _create(event_id, starts_in=timedelta(days=10), base=NOW, name=None, location="Main Hall"):
        return orm.Event.objects.create(
            id=event_id,
            name=name or f"Event {event_id}",
            starts_on=base + starts_in,
            ends_on=base + starts_in + timedelta(hours=3),
            location=location,
        )

    return _create


@pytest.fixture
def create_sale():
    """Persist a TicketSale row for an existing event."""
    counter = iter(range(1, 10_000))

    def _create(event, price_in_cents, sale_id=None, purchased_at=None, user_id="USR-1"):
        return orm.TicketSale.objects.create(
            id=sale_id or f"TS-{next(counter):04d}",
            event=event,
            user_id=user_id,
            purchase_date=purchased_at or NOW - timedelta(days=1),
            price_in_cents=price_in_cents,
        )

    return _create
