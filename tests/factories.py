"""Builders for analytics projections and an in-memory store."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional, Sequence
from uuid import UUID, uuid4

from jose import jwt

from eventry.analytics.types import (
    CheckInWithTicketContext,
    ConsumptionRecord,
    EventSummary,
    GuestProfile,
    ListRef,
    TicketContext,
)
from eventry.core.config import settings
from eventry.core.security import ALGORITHM
from eventry.stores.interfaces import AnalyticsStore

EVENT_ID = UUID("6f1c3a52-2d0e-4c1b-9d55-0b7f2f9a1e01")


def guest(
    total_events: int = 1,
    city: Optional[str] = None,
    birth_year: Optional[int] = None,
    gender: Optional[str] = None,
) -> GuestProfile:
    return GuestProfile(
        id=uuid4(),
        birth_date=date(birth_year, 6, 15) if birth_year else None,
        city=city,
        gender=gender,
        total_events=total_events,
    )


def check_in(
    at: datetime,
    price=None,
    ticket_type: str = "LIST",
    guest_profile: Optional[GuestProfile] = None,
    guest_list: Optional[ListRef] = None,
    group_size: int = 1,
    event_id: UUID = EVENT_ID,
) -> CheckInWithTicketContext:
    return CheckInWithTicketContext(
        id=uuid4(),
        scanned_at=at,
        ticket=TicketContext(
            id=uuid4(),
            event_id=event_id,
            type=ticket_type,
            price=price,
            guest=guest_profile,
            guest_list=guest_list,
        ),
        group_size=group_size,
    )


def consumption(amount, category: str = "drink", event_id: UUID = EVENT_ID) -> ConsumptionRecord:
    return ConsumptionRecord(
        id=uuid4(),
        event_id=event_id,
        amount=Decimal(str(amount)),
        category=category,
        created_at=datetime(2026, 3, 14, 23, 0),
    )


def event(
    event_id: UUID = EVENT_ID,
    title: str = "Saturday Night",
    date_start: datetime = datetime(2026, 3, 14, 22, 0),
    venue_name: str = "Club Aurora",
    venue_city: Optional[str] = "Milano",
) -> EventSummary:
    return EventSummary(
        id=event_id,
        title=title,
        date_start=date_start,
        venue_name=venue_name,
        venue_city=venue_city,
        status="PUBLISHED",
    )


def access_token(user_id, expires_in: timedelta = timedelta(hours=1)) -> str:
    """Bearer token as the platform's auth service would issue it."""
    claims = {"sub": str(user_id), "exp": datetime.now(timezone.utc) + expires_in}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=ALGORITHM)


def night(hour: int, minute: int, day: int = 14) -> datetime:
    """A scan time on the night of 14 March 2026; hours < 12 fall on the 15th."""
    if hour < 12:
        day += 1
    return datetime(2026, 3, day, hour, minute)


class InMemoryAnalyticsStore(AnalyticsStore):
    """Fixture-backed store; records calls so tests can check load order."""

    def __init__(
        self,
        events: Sequence[EventSummary] = (),
        check_ins: Sequence[CheckInWithTicketContext] = (),
        consumptions: Sequence[ConsumptionRecord] = (),
    ) -> None:
        self.events = list(events)
        self.check_ins = list(check_ins)
        self.consumptions = list(consumptions)
        self.calls: list[str] = []

    def get_event(self, event_id: UUID) -> EventSummary | None:
        self.calls.append("get_event")
        return next((e for e in self.events if e.id == event_id), None)

    def find_events_between(self, start: datetime, end: datetime) -> list[EventSummary]:
        self.calls.append("find_events_between")
        return sorted(
            (e for e in self.events if start <= e.date_start <= end),
            key=lambda e: e.date_start,
        )

    def find_check_ins(self, event_ids: Sequence[UUID]) -> list[CheckInWithTicketContext]:
        self.calls.append("find_check_ins")
        wanted = set(event_ids)
        return sorted(
            (c for c in self.check_ins if c.ticket.event_id in wanted),
            key=lambda c: c.scanned_at,
        )

    def find_consumptions(self, event_ids: Sequence[UUID]) -> list[ConsumptionRecord]:
        self.calls.append("find_consumptions")
        wanted = set(event_ids)
        return [c for c in self.consumptions if c.event_id in wanted]
