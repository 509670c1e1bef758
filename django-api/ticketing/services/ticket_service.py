"""Ticket sale service: per-event ticket listing and sales rankings."""

from ticketing.domain.errors import InvalidCountError
from ticketing.domain.models import EventSalesSummary, TicketSale
from ticketing.services.event_service import parse_event_id
from ticketing.services.query_policy import DEFAULT_TOP_COUNT
from ticketing.stores.interfaces import TicketSaleStore


class TicketService:
    """Service for ticket sales queries."""

    def __init__(self, store: TicketSaleStore) -> None:
        self._store = store

    def get_tickets_for_event(self, event_id: str | None) -> list[TicketSale]:
        """Return all ticket sales for an event.

        Raises:
            InvalidEventIdError: If the event_id is empty.
            DataIntegrityError: If the sales' event cannot be resolved.
        """
        return self._store.get_sales_for_event(parse_event_id(event_id))

    def get_top_events_by_count(self, count: int = DEFAULT_TOP_COUNT) -> list[EventSalesSummary]:
        """Return the best-selling events by number of tickets sold.

        Raises:
            InvalidCountError: If count is not positive.
        """
        if count <= 0:
            raise InvalidCountError(count)
        return self._store.get_top_events_by_count(count)

    def get_top_events_by_revenue(self, count: int = DEFAULT_TOP_COUNT) -> list[EventSalesSummary]:
        """Return the best-selling events by total revenue.

        Raises:
            InvalidCountError: If count is not positive.
        """
        if count <= 0:
            raise InvalidCountError(count)
        return self._store.get_top_events_by_revenue(count)
