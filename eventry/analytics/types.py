"""Read-only projections the analytics reducers operate on.

The store converts ORM rows into these at the query boundary, so every
reducer works on a known shape and can be fed plain fixtures in tests.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID


def _as_money(value) -> Decimal | None:
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class PeriodType(str, Enum):
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


@dataclass(frozen=True)
class GuestProfile:
    """Longitudinal guest identity as seen at report time."""

    id: UUID
    birth_date: date | None = None
    city: str | None = None
    gender: str | None = None
    total_events: int = 0

    @property
    def is_new(self) -> bool:
        return self.total_events == 1


@dataclass(frozen=True)
class ListRef:
    id: UUID
    name: str


@dataclass(frozen=True)
class TicketContext:
    """A ticket with the guest and list it resolves to, if any."""

    id: UUID
    event_id: UUID
    type: str
    price: Decimal | None = None
    guest: GuestProfile | None = None
    guest_list: ListRef | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "price", _as_money(self.price))


@dataclass(frozen=True)
class CheckInWithTicketContext:
    id: UUID
    scanned_at: datetime
    ticket: TicketContext
    group_size: int = 1
    gate: str | None = None
    success: bool = True


@dataclass(frozen=True)
class ConsumptionRecord:
    id: UUID
    event_id: UUID
    amount: Decimal
    category: str
    created_at: datetime | None = None
    items: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _as_money(self.amount) or Decimal("0"))


@dataclass(frozen=True)
class EventSummary:
    id: UUID
    title: str
    date_start: datetime
    venue_name: str
    venue_city: str | None = None
    status: str | None = None


@dataclass(frozen=True)
class ResolvedPeriod:
    """Inclusive calendar bounds for a cross-event report."""

    type: PeriodType
    month: int | None
    year: int
    start: datetime
    end: datetime
