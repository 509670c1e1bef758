"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in ticketing/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from ticketing.domain.value_objects import EventId, Money, TicketSaleId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    starts_on: datetime
    ends_on: datetime
    location: str


@dataclass(frozen=True)
class TicketSale:
    """Domain representation of a TicketSale with its parent event resolved."""

    id: TicketSaleId
    event_id: EventId
    event_name: str
    user_id: str
    purchase_date: datetime
    price_in_cents: int

    @property
    def price(self) -> Money:
        return Money.from_cents(self.price_in_cents)


@dataclass(frozen=True)
class EventSalesSummary:
    """An event together with the sales metrics it was ranked by."""

    event: Event
    ticket_count: int
    revenue_in_cents: int

    @property
    def revenue(self) -> Money:
        return Money.from_cents(self.revenue_in_cents)
