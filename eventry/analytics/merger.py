"""Cross-event merging: per-event breakdown, top events, trends."""

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Sequence
from uuid import UUID

from eventry.analytics.revenue import ZERO
from eventry.analytics.types import (
    CheckInWithTicketContext,
    EventSummary,
    PeriodType,
    ResolvedPeriod,
)
from eventry.utils.timeslots import to_local


@dataclass(frozen=True)
class EventBreakdown:
    event_id: UUID
    title: str
    date: datetime
    entries: int
    revenue: Decimal
    new_customers: int


@dataclass(frozen=True)
class TrendPoint:
    label: str
    entries: int
    revenue: Decimal = ZERO


def breakdown_by_event(
    events: Sequence[EventSummary],
    check_ins: Sequence[CheckInWithTicketContext],
) -> list[EventBreakdown]:
    """
    Entries, ticket revenue and new customers per event.

    Every event of the period is listed, including nights with no scans.
    Rows are ordered by entries (most first), then by event date.
    """
    entries: Counter = Counter()
    new_customers: Counter = Counter()
    revenue: dict[UUID, Decimal] = {}

    for check_in in check_ins:
        event_id = check_in.ticket.event_id
        entries[event_id] += 1
        revenue[event_id] = revenue.get(event_id, ZERO) + (check_in.ticket.price or ZERO)
        guest = check_in.ticket.guest
        if guest is not None and guest.is_new:
            new_customers[event_id] += 1

    rows = [
        EventBreakdown(
            event_id=event.id,
            title=event.title,
            date=event.date_start,
            entries=entries[event.id],
            revenue=revenue.get(event.id, ZERO),
            new_customers=new_customers[event.id],
        )
        for event in sorted(events, key=lambda e: e.date_start)
    ]
    rows.sort(key=lambda row: row.entries, reverse=True)
    return rows


def top_events(breakdown: Sequence[EventBreakdown], limit: int = 5) -> list[EventBreakdown]:
    return list(breakdown[:limit])


def monthly_trend(
    check_ins: Sequence[CheckInWithTicketContext],
    year: int,
) -> list[TrendPoint]:
    """Twelve buckets (Jan-Dec of `year`) of entries and ticket revenue."""
    entries = [0] * 12
    revenue = [ZERO] * 12

    for check_in in check_ins:
        scanned = to_local(check_in.scanned_at)
        if scanned.year != year:
            continue
        entries[scanned.month - 1] += 1
        revenue[scanned.month - 1] += check_in.ticket.price or ZERO

    return [
        TrendPoint(label=f"{m + 1}/{year}", entries=entries[m], revenue=revenue[m])
        for m in range(12)
    ]


def period_timeline(
    check_ins: Sequence[CheckInWithTicketContext],
    period: ResolvedPeriod,
) -> list[TrendPoint]:
    """
    Entries over the period: per day ("D/M") for a month, per month
    ("M/YYYY") otherwise. Only buckets with entries are listed, in
    calendar order.
    """
    counts: Counter = Counter()
    for check_in in check_ins:
        scanned = to_local(check_in.scanned_at)
        if period.type is PeriodType.MONTH:
            counts[(scanned.year, scanned.month, scanned.day)] += 1
        else:
            counts[(scanned.year, scanned.month)] += 1

    points = []
    for key in sorted(counts):
        if period.type is PeriodType.MONTH:
            _, month, day = key
            label = f"{day}/{month}"
        else:
            year, month = key
            label = f"{month}/{year}"
        points.append(TrendPoint(label=label, entries=counts[key]))
    return points
