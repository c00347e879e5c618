from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Sequence
from uuid import UUID

from eventry.analytics.revenue import ZERO, ticket_category
from eventry.analytics.types import CheckInWithTicketContext

# Per-PR ticket mix; vip tickets are not sold through promoter lists
PR_TICKET_CATEGORIES = ("lista", "tavolo", "prevendita", "omaggio")


@dataclass(frozen=True)
class ListPerformance:
    list_id: UUID
    name: str
    entries: int
    revenue: Decimal
    group_size_total: int
    tickets: dict[str, int]

    @property
    def avg_group_size(self) -> float:
        return self.group_size_total / self.entries if self.entries else 0.0


@dataclass(frozen=True)
class TopPerformer:
    name: str
    entries: int
    percentage: int


def rank_lists(check_ins: Sequence[CheckInWithTicketContext]) -> list[ListPerformance]:
    """
    Attribute check-ins to the guest list their ticket came through.

    Check-ins without a list are skipped rather than grouped as unknown.
    Lists are ranked by entries, most first; equal counts keep the order
    in which the list was first seen.
    """
    order: list[UUID] = []
    names: dict[UUID, str] = {}
    entries: dict[UUID, int] = {}
    revenue: dict[UUID, Decimal] = {}
    group_sizes: dict[UUID, int] = {}
    tickets: dict[UUID, dict[str, int]] = {}

    for check_in in check_ins:
        guest_list = check_in.ticket.guest_list
        if guest_list is None:
            continue

        key = guest_list.id
        if key not in entries:
            order.append(key)
            names[key] = guest_list.name
            entries[key] = 0
            revenue[key] = ZERO
            group_sizes[key] = 0
            tickets[key] = dict.fromkeys(PR_TICKET_CATEGORIES, 0)

        entries[key] += 1
        revenue[key] += check_in.ticket.price or ZERO
        group_sizes[key] += check_in.group_size or 0
        category = ticket_category(check_in.ticket.type)
        if category in tickets[key]:
            tickets[key][category] += 1

    ranked = [
        ListPerformance(
            list_id=key,
            name=names[key],
            entries=entries[key],
            revenue=revenue[key],
            group_size_total=group_sizes[key],
            tickets=tickets[key],
        )
        for key in order
    ]
    ranked.sort(key=lambda row: row.entries, reverse=True)
    return ranked


def top_performer(ranked: Sequence[ListPerformance], total_entries: int) -> Optional[TopPerformer]:
    if not ranked:
        return None
    best = ranked[0]
    share = Decimal(0)
    if total_entries:
        share = (Decimal(best.entries) * 100 / Decimal(total_entries)).quantize(
            Decimal(1), rounding=ROUND_HALF_UP
        )
    return TopPerformer(name=best.name, entries=best.entries, percentage=int(share))
