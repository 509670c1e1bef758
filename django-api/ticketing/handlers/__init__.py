from ticketing.handlers.views import (
    EventDetailView,
    EventTicketListView,
    TopEventsByCountView,
    TopEventsByRevenueView,
    UpcomingEventListView,
)

__all__ = [
    "EventDetailView",
    "EventTicketListView",
    "TopEventsByCountView",
    "TopEventsByRevenueView",
    "UpcomingEventListView",
]
