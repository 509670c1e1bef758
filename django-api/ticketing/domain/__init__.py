from ticketing.domain.models import Event, EventSalesSummary, TicketSale
from ticketing.domain.value_objects import EventId, Money, TicketSaleId

__all__ = [
    "Event",
    "EventSalesSummary",
    "TicketSale",
    "EventId",
    "TicketSaleId",
    "Money",
]
