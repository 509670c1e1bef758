"""Domain error codes for the ticketing module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_DAYS = "INVALID_DAYS"
    INVALID_COUNT = "INVALID_COUNT"
    INVALID_PARAMETER = "INVALID_PARAMETER"
    DATA_INTEGRITY = "DATA_INTEGRITY"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message=f"Event with ID {event_id} not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is missing or blank."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Event ID cannot be null or empty",
        )


class InvalidDaysError(DomainError):
    """Raised when the days-ahead window is not positive."""

    def __init__(self, days: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DAYS,
            message="Days must be greater than zero",
        )
        self.days = days


class InvalidCountError(DomainError):
    """Raised when a top-N count is not positive."""

    def __init__(self, count: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_COUNT,
            message="Count must be greater than zero",
        )
        self.count = count


class DataIntegrityError(DomainError):
    """Raised when a ticket sale references an event that cannot be resolved."""

    def __init__(self, event_ids: list[str]) -> None:
        super().__init__(
            code=ErrorCode.DATA_INTEGRITY,
            message="Ticket sales reference missing events",
        )
        self.event_ids = event_ids


class InvalidParameterError(DomainError):
    """Raised when a query parameter cannot be parsed."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PARAMETER,
            message=f"Query parameter '{name}' must be an integer",
        )
        self.name = name
