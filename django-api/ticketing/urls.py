from django.urls import path

from ticketing.handlers import (
    EventDetailView,
    EventTicketListView,
    TopEventsByCountView,
    TopEventsByRevenueView,
    UpcomingEventListView,
)

urlpatterns = [
    path("events", UpcomingEventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("sales/top-by-count", TopEventsByCountView.as_view(), name="sales-top-by-count"),
    path(
        "sales/top-by-revenue",
        TopEventsByRevenueView.as_view(),
        name="sales-top-by-revenue",
    ),
    path(
        "tickets/event/<str:event_id>",
        EventTicketListView.as_view(),
        name="event-ticket-list",
    ),
]
