"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from collections.abc import Callable
from datetime import datetime, timedelta

from django.utils import timezone

from ticketing.domain.errors import InvalidDaysError, InvalidEventIdError
from ticketing.domain.models import Event
from ticketing.domain.value_objects import EventId
from ticketing.services.query_policy import normalize_days
from ticketing.stores.interfaces import EventStore


def parse_event_id(event_id: str | None) -> EventId:
    try:
        return EventId.from_string(event_id)
    except ValueError:
        raise InvalidEventIdError() from None


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore, clock: Callable[[], datetime] = timezone.now) -> None:
        self._store = store
        self._clock = clock

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event_by_id(self, event_id: str | None) -> Event | None:
        """Return an event by ID, or None if no such event exists.

        Raises:
            InvalidEventIdError: If the event_id is empty.
        """
        return self._store.get_event(parse_event_id(event_id))

    def get_upcoming_events(self, days: int) -> list[Event]:
        """Return events starting within the next `days` days, soonest first.

        Windows other than 30, 60 or 180 days fall back to 30.

        Raises:
            InvalidDaysError: If days is not positive.
        """
        if days <= 0:
            raise InvalidDaysError(days)

        days = normalize_days(days)
        now = self._clock()
        return self._store.get_events_starting_in_range(now, now + timedelta(days=days))
