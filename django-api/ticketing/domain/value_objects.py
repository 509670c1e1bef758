"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self

CENTS_PER_UNIT = Decimal(100)


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event. Assigned by whoever creates the event."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("EventId cannot be empty")

    @classmethod
    def from_string(cls, value: str | None) -> Self:
        if value is None:
            raise ValueError("EventId cannot be empty")
        return cls(value=value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TicketSaleId:
    """Unique identifier for a TicketSale."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("TicketSaleId cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def from_cents(cls, cents: int) -> Self:
        """Convert integer minor units to major units with exact decimal division."""
        return cls(amount=Decimal(cents) / CENTS_PER_UNIT)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
