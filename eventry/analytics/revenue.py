from collections import Counter
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence

from eventry.analytics.types import CheckInWithTicketContext, ConsumptionRecord

# Canonical monetization buckets, in report order
CANONICAL_CATEGORIES = ("lista", "tavolo", "prevendita", "omaggio", "vip")

# Upstream ticket type (lower-cased) -> canonical bucket.
# Types missing here (door-only, full, paid, ...) still count in totals but
# are kept out of every per-category breakdown.
CATEGORY_BY_TICKET_TYPE = {
    "list": "lista",
    "table": "tavolo",
    "presale": "prevendita",
    "free": "omaggio",
    "vip": "vip",
}

ZERO = Decimal("0")


def ticket_category(ticket_type: Optional[str]) -> Optional[str]:
    if not ticket_type:
        return None
    return CATEGORY_BY_TICKET_TYPE.get(ticket_type.strip().lower())


def percentage(part, whole) -> float:
    if not whole:
        return 0.0
    return round(float(part) / float(whole) * 100, 2)


@dataclass(frozen=True)
class RevenueBreakdown:
    total_entries: int
    ticket_revenue: Decimal
    consumption_revenue: Decimal
    ticket_type_distribution: dict[str, int]
    revenue_by_type: dict[str, Decimal]

    @property
    def total_revenue(self) -> Decimal:
        return self.ticket_revenue + self.consumption_revenue

    @property
    def ticket_type_percentages(self) -> dict[str, float]:
        return {
            category: percentage(count, self.total_entries)
            for category, count in self.ticket_type_distribution.items()
        }


@dataclass(frozen=True)
class ConsumptionSummary:
    total: int
    revenue: Decimal
    by_category: dict[str, int]
    revenue_by_category: dict[str, Decimal]

    @property
    def avg_per_consumption(self) -> Decimal:
        return self.revenue / self.total if self.total else ZERO


def aggregate_revenue(
    check_ins: Sequence[CheckInWithTicketContext],
    consumptions: Sequence[ConsumptionRecord],
) -> RevenueBreakdown:
    """
    Reconcile ticket and point-of-sale revenue.

    Ticket revenue follows the (already filtered) check-ins: one ticket
    price per scan, missing prices count as zero. Consumption revenue takes
    every consumption passed in. Callers hand over the event's full
    consumption set, since consumptions are not linked to a scan and so
    are not narrowed by the clock or list filter.
    """
    distribution = dict.fromkeys(CANONICAL_CATEGORIES, 0)
    by_type = dict.fromkeys(CANONICAL_CATEGORIES, ZERO)
    ticket_revenue = ZERO

    for check_in in check_ins:
        price = check_in.ticket.price or ZERO
        ticket_revenue += price
        category = ticket_category(check_in.ticket.type)
        if category is not None:
            distribution[category] += 1
            by_type[category] += price

    consumption_revenue = sum((c.amount for c in consumptions), ZERO)

    return RevenueBreakdown(
        total_entries=len(check_ins),
        ticket_revenue=ticket_revenue,
        consumption_revenue=consumption_revenue,
        ticket_type_distribution=distribution,
        revenue_by_type=by_type,
    )


def summarize_consumptions(consumptions: Sequence[ConsumptionRecord]) -> ConsumptionSummary:
    by_category: Counter = Counter()
    revenue_by_category: dict[str, Decimal] = {}
    revenue = ZERO

    for consumption in consumptions:
        by_category[consumption.category] += 1
        revenue_by_category[consumption.category] = (
            revenue_by_category.get(consumption.category, ZERO) + consumption.amount
        )
        revenue += consumption.amount

    return ConsumptionSummary(
        total=len(consumptions),
        revenue=revenue,
        by_category=dict(by_category),
        revenue_by_category=revenue_by_category,
    )
