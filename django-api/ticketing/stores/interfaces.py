"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from ticketing.domain import Event, EventId, EventSalesSummary, TicketSale


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by starts_on, then id, ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_events_starting_in_range(self, start: datetime, end: datetime) -> list[Event]:
        """Return events with start <= starts_on <= end, ordered by starts_on, then id."""
        ...


class TicketSaleStore(ABC):
    """Interface for ticket sale queries and sales aggregations."""

    @abstractmethod
    def get_sales_for_event(self, event_id: EventId) -> list[TicketSale]:
        """Return all sales for an event, ordered by purchase_date, then id.

        Raises:
            DataIntegrityError: If the sales' parent event cannot be resolved.
        """
        ...

    @abstractmethod
    def get_top_events_by_count(self, limit: int) -> list[EventSalesSummary]:
        """Return up to `limit` events with sales, by ticket count descending, then id.

        Raises:
            DataIntegrityError: If a grouped event cannot be resolved.
        """
        ...

    @abstractmethod
    def get_top_events_by_revenue(self, limit: int) -> list[EventSalesSummary]:
        """Return up to `limit` events with sales, by summed cents descending, then id.

        Raises:
            DataIntegrityError: If a grouped event cannot be resolved.
        """
        ...
