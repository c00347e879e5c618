"""SQLAlchemy implementation of the AnalyticsStore.

Every query is read-only. ORM rows are converted into analytics
projections before they leave this module.
"""

import logging
from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy.orm import Session, joinedload, selectinload

from eventry.analytics.types import (
    CheckInWithTicketContext,
    ConsumptionRecord,
    EventSummary,
    GuestProfile,
    ListRef,
    TicketContext,
)
from eventry.models.check_in import CheckIn
from eventry.models.consumption import Consumption
from eventry.models.event import Event
from eventry.models.guest import Guest
from eventry.models.guest_list import ListEntry
from eventry.models.ticket import Ticket
from eventry.stores.interfaces import AnalyticsStore

logger = logging.getLogger(__name__)


def _event_summary(event: Event) -> EventSummary:
    status = event.status.value if hasattr(event.status, "value") else event.status
    return EventSummary(
        id=event.id,
        title=event.title,
        date_start=event.date_start,
        venue_name=event.venue.name if event.venue else "",
        venue_city=event.venue.city if event.venue else None,
        status=status,
    )


def _guest_profile(guest: Guest | None) -> GuestProfile | None:
    if guest is None:
        return None
    return GuestProfile(
        id=guest.id,
        birth_date=guest.birth_date,
        city=guest.city,
        gender=guest.gender,
        total_events=guest.total_events or 0,
    )


def _ticket_context(ticket: Ticket) -> TicketContext:
    entry = ticket.list_entry
    # A list ticket may only know its guest through the list entry
    guest = ticket.guest or (entry.guest if entry is not None else None)
    guest_list = None
    if entry is not None and entry.list is not None:
        guest_list = ListRef(id=entry.list.id, name=entry.list.name)

    return TicketContext(
        id=ticket.id,
        event_id=ticket.event_id,
        type=ticket.type,
        price=ticket.price,
        guest=_guest_profile(guest),
        guest_list=guest_list,
    )


class SqlAlchemyAnalyticsStore(AnalyticsStore):
    """PostgreSQL-backed analytics store using the SQLAlchemy ORM."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def get_event(self, event_id: UUID) -> EventSummary | None:
        event = (
            self._db.query(Event)
            .options(joinedload(Event.venue))
            .filter(Event.id == event_id)
            .first()
        )
        return _event_summary(event) if event else None

    def find_events_between(self, start: datetime, end: datetime) -> list[EventSummary]:
        events = (
            self._db.query(Event)
            .options(joinedload(Event.venue))
            .filter(Event.date_start >= start, Event.date_start <= end)
            .order_by(Event.date_start.asc())
            .all()
        )
        return [_event_summary(e) for e in events]

    def find_check_ins(self, event_ids: Sequence[UUID]) -> list[CheckInWithTicketContext]:
        if not event_ids:
            return []

        rows = (
            self._db.query(CheckIn)
            .join(Ticket, Ticket.id == CheckIn.ticket_id)
            .options(
                joinedload(CheckIn.ticket).selectinload(Ticket.guest),
                joinedload(CheckIn.ticket)
                .selectinload(Ticket.list_entry)
                .selectinload(ListEntry.list),
                joinedload(CheckIn.ticket)
                .selectinload(Ticket.list_entry)
                .selectinload(ListEntry.guest),
            )
            .filter(Ticket.event_id.in_(list(event_ids)))
            .order_by(CheckIn.scanned_at.asc(), CheckIn.id.asc())
            .all()
        )
        logger.debug("Loaded %d check-in(s) for %d event(s).", len(rows), len(event_ids))

        return [
            CheckInWithTicketContext(
                id=row.id,
                scanned_at=row.scanned_at,
                ticket=_ticket_context(row.ticket),
                group_size=row.group_size if row.group_size is not None else 1,
                gate=row.gate,
                success=bool(row.success) if row.success is not None else True,
            )
            for row in rows
        ]

    def find_consumptions(self, event_ids: Sequence[UUID]) -> list[ConsumptionRecord]:
        if not event_ids:
            return []

        rows = (
            self._db.query(Consumption)
            .filter(Consumption.event_id.in_(list(event_ids)))
            .order_by(Consumption.created_at.asc(), Consumption.id.asc())
            .all()
        )
        logger.debug("Loaded %d consumption(s) for %d event(s).", len(rows), len(event_ids))

        return [
            ConsumptionRecord(
                id=row.id,
                event_id=row.event_id,
                amount=row.amount,
                category=row.category,
                created_at=row.created_at,
                items=tuple(row.items or ()),
            )
            for row in rows
        ]
