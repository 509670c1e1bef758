"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses (see handlers/exceptions.py)
- Never contain business logic
- Never expose internal error details
"""

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ticketing.domain.errors import EventNotFoundError, InvalidParameterError
from ticketing.handlers.exceptions import error_response
from ticketing.handlers.serializers import (
    EventSalesSerializer,
    EventSerializer,
    TicketSaleSerializer,
)
from ticketing.services.event_service import EventService
from ticketing.services.query_policy import (
    DEFAULT_DAY_WINDOW,
    DEFAULT_TOP_COUNT,
    clamp_count,
    normalize_days,
)
from ticketing.services.ticket_service import TicketService
from ticketing.stores.django_store import DjangoEventStore, DjangoTicketSaleStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def get_ticket_service() -> TicketService:
    return TicketService(DjangoTicketSaleStore())


def int_query_param(request: Request, name: str, default: int) -> int:
    raw = request.query_params.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidParameterError(name) from None


class UpcomingEventListView(APIView):
    """Handler for GET /api/events?days={30|60|180}"""

    def get(self, request: Request) -> Response:
        days = normalize_days(int_query_param(request, "days", DEFAULT_DAY_WINDOW))
        events = get_event_service().get_upcoming_events(days)
        return Response(EventSerializer(events, many=True).data)


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = get_event_service().get_event_by_id(event_id)
        if event is None:
            return error_response(EventNotFoundError(event_id))
        return Response(EventSerializer(event).data)


class TopEventsByCountView(APIView):
    """Handler for GET /api/sales/top-by-count?count={1..100}"""

    def get(self, request: Request) -> Response:
        count = clamp_count(int_query_param(request, "count", DEFAULT_TOP_COUNT))
        summaries = get_ticket_service().get_top_events_by_count(count)
        return Response(EventSalesSerializer(summaries, many=True).data)


class TopEventsByRevenueView(APIView):
    """Handler for GET /api/sales/top-by-revenue?count={1..100}"""

    def get(self, request: Request) -> Response:
        count = clamp_count(int_query_param(request, "count", DEFAULT_TOP_COUNT))
        summaries = get_ticket_service().get_top_events_by_revenue(count)
        return Response(EventSalesSerializer(summaries, many=True).data)


class EventTicketListView(APIView):
    """Handler for GET /api/tickets/event/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        tickets = get_ticket_service().get_tickets_for_event(event_id)
        return Response(TicketSaleSerializer(tickets, many=True).data)
