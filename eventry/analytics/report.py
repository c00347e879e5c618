"""Report assembly for the single-event and cross-event dashboards.

Each builder runs the reducers over an already loaded record snapshot and
maps their results onto the response schemas. Nothing here touches the
store, so identical snapshots always produce identical reports.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Sequence
from uuid import UUID

from eventry.analytics.audience import (
    AudienceProfile,
    out_of_town_vs_top_city,
    out_of_town_vs_venue,
    segment_audience,
)
from eventry.analytics.filters import filter_check_ins
from eventry.analytics.merger import (
    breakdown_by_event,
    monthly_trend,
    period_timeline,
    top_events,
)
from eventry.analytics.performance import rank_lists, top_performer
from eventry.analytics.revenue import (
    RevenueBreakdown,
    aggregate_revenue,
    summarize_consumptions,
)
from eventry.analytics.timeline import bucket_check_ins
from eventry.analytics.types import (
    CheckInWithTicketContext,
    ConsumptionRecord,
    EventSummary,
    PeriodType,
    ResolvedPeriod,
)
from eventry.schemas.dashboard import (
    Audience,
    CityCount,
    ConsumptionsSummary,
    DateEntries,
    EventBreakdownItem,
    EventInfo,
    EventOverview,
    EventReport,
    Monetization,
    MonthlyTrendPoint,
    PeriodInfo,
    PeriodOverview,
    PeriodReport,
    PrPerformance,
    PrTicketMix,
    TimelineEntry,
    TopEvent,
    TopPr,
)

CENT = Decimal("0.01")


@dataclass(frozen=True)
class ReportOptions:
    timeline_start: str = "22:00"
    timeline_end: str = "05:00"
    slot_minutes: int = 30
    event_top_cities: int = 5
    period_top_cities: int = 10
    top_events_limit: int = 5
    today: Optional[date] = None


def money(value) -> float:
    return float(Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))


def ratio(part, whole, digits: int = 2) -> float:
    if not whole:
        return 0.0
    return round(float(part) / float(whole), digits)


def _avg_group_size(check_ins: Sequence[CheckInWithTicketContext]) -> float:
    return ratio(sum(c.group_size or 0 for c in check_ins), len(check_ins))


def _audience(profile: AudienceProfile, top_n: int, out_of_town: float) -> Audience:
    return Audience(
        age_distribution=profile.age_distribution,
        avg_age=round(profile.avg_age, 1) if profile.avg_age is not None else None,
        gender_distribution=profile.gender_distribution,
        top_cities=[CityCount(city=city, count=count) for city, count in profile.top_cities(top_n)],
        out_of_town_percentage=out_of_town,
    )


def _monetization(revenue: RevenueBreakdown) -> Monetization:
    return Monetization(
        total_revenue=money(revenue.total_revenue),
        ticket_revenue=money(revenue.ticket_revenue),
        consumptions_revenue=money(revenue.consumption_revenue),
        ticket_type_distribution=revenue.ticket_type_distribution,
        ticket_type_percentages=revenue.ticket_type_percentages,
        revenue_by_type={k: money(v) for k, v in revenue.revenue_by_type.items()},
    )


def _consumptions(consumptions: Sequence[ConsumptionRecord]) -> ConsumptionsSummary:
    summary = summarize_consumptions(consumptions)
    return ConsumptionsSummary(
        total=summary.total,
        revenue=money(summary.revenue),
        avg_per_consumption=money(summary.avg_per_consumption),
        by_category=summary.by_category,
        revenue_by_category={k: money(v) for k, v in summary.revenue_by_category.items()},
    )


# ---------------------------------------------------------------------------
# Single event
# ---------------------------------------------------------------------------


def build_event_report(
    event: EventSummary,
    check_ins: Sequence[CheckInWithTicketContext],
    consumptions: Sequence[ConsumptionRecord],
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
    list_id: Optional[UUID] = None,
    options: ReportOptions = ReportOptions(),
) -> EventReport:
    """
    Assemble the dashboard of one event night.

    `check_ins` and `consumptions` must be the event's complete sets. The
    clock/list filter narrows check-ins only; consumption revenue always
    covers the whole event.
    """
    filtered = filter_check_ins(check_ins, start_time, end_time, list_id)
    total_entries = len(filtered)

    timeline = bucket_check_ins(
        filtered, options.timeline_start, options.timeline_end, options.slot_minutes
    )
    revenue = aggregate_revenue(filtered, consumptions)
    profile = segment_audience(filtered, today=options.today)
    ranked = rank_lists(filtered)
    best = top_performer(ranked, total_entries)

    overview = EventOverview(
        total_entries=total_entries,
        new_customers=profile.new_customers,
        returning_customers=profile.returning_customers,
        total_revenue=money(revenue.total_revenue),
        total_ticket_revenue=money(revenue.ticket_revenue),
        total_consumptions_revenue=money(revenue.consumption_revenue),
        avg_revenue_per_person=money(revenue.total_revenue / total_entries) if total_entries else 0.0,
        avg_group_size=_avg_group_size(filtered),
        peak_time_slot=timeline.peak_slot,
        peak_count=timeline.peak_count,
    )

    return EventReport(
        event=EventInfo(
            id=event.id,
            title=event.title,
            date=event.date_start,
            venue=event.venue_name,
        ),
        overview=overview,
        timeline=[
            TimelineEntry(time=s.time, entries=s.entries, cumulative=s.cumulative)
            for s in timeline.slots
        ],
        audience=_audience(
            profile,
            options.event_top_cities,
            out_of_town_vs_venue(profile, event.venue_city),
        ),
        pr_performance=[
            PrPerformance(
                pr_name=row.name,
                entries=row.entries,
                revenue=money(row.revenue),
                avg_group_size=round(row.avg_group_size, 2),
                tickets=PrTicketMix(**row.tickets),
            )
            for row in ranked
        ],
        top_pr=TopPr(name=best.name, entries=best.entries, percentage=best.percentage) if best else None,
        monetization=_monetization(revenue),
        consumptions=_consumptions(consumptions),
    )


# ---------------------------------------------------------------------------
# Cross event
# ---------------------------------------------------------------------------


def _period_info(period: ResolvedPeriod) -> PeriodInfo:
    return PeriodInfo(
        type=period.type.value,
        month=period.month,
        year=period.year,
        start_date=period.start,
        end_date=period.end,
    )


def empty_period_report(period: ResolvedPeriod) -> PeriodReport:
    """Zeroed report for a period without events."""
    return PeriodReport(
        period=_period_info(period),
        overview=PeriodOverview(
            total_events=0,
            total_entries=0,
            total_revenue=0,
            total_ticket_revenue=0,
            total_consumptions_revenue=0,
            avg_entries_per_event=0,
            avg_revenue_per_event=0,
            avg_revenue_per_person=0,
            total_new_customers=0,
            total_returning_customers=0,
            avg_group_size=0,
        ),
        events_breakdown=[],
        timeline=[],
        audience=Audience(
            age_distribution={},
            avg_age=None,
            gender_distribution={},
            top_cities=[],
            out_of_town_percentage=0,
        ),
        monetization=Monetization(
            total_revenue=0,
            ticket_revenue=0,
            consumptions_revenue=0,
            ticket_type_distribution={},
            ticket_type_percentages={},
            revenue_by_type={},
        ),
        consumptions=ConsumptionsSummary(
            total=0,
            revenue=0,
            avg_per_consumption=0,
            by_category={},
            revenue_by_category={},
        ),
        top_events=[],
        monthly_trend=[],
    )


def build_period_report(
    period: ResolvedPeriod,
    events: Sequence[EventSummary],
    check_ins: Sequence[CheckInWithTicketContext],
    consumptions: Sequence[ConsumptionRecord],
    options: ReportOptions = ReportOptions(),
) -> PeriodReport:
    """
    Assemble the cross-event dashboard over a resolved period.

    No clock/list filter applies here; every check-in of every event in
    the period counts. An empty event set short-circuits to the zeroed
    report.
    """
    if not events:
        return empty_period_report(period)

    total_events = len(events)
    total_entries = len(check_ins)

    revenue = aggregate_revenue(check_ins, consumptions)
    profile = segment_audience(check_ins, today=options.today)
    breakdown = breakdown_by_event(events, check_ins)

    overview = PeriodOverview(
        total_events=total_events,
        total_entries=total_entries,
        total_revenue=money(revenue.total_revenue),
        total_ticket_revenue=money(revenue.ticket_revenue),
        total_consumptions_revenue=money(revenue.consumption_revenue),
        avg_entries_per_event=ratio(total_entries, total_events),
        avg_revenue_per_event=money(revenue.total_revenue / total_events),
        avg_revenue_per_person=money(revenue.total_revenue / total_entries) if total_entries else 0.0,
        total_new_customers=profile.new_customers,
        total_returning_customers=profile.returning_customers,
        avg_group_size=_avg_group_size(check_ins),
    )

    trend = []
    if period.type in (PeriodType.YEAR, PeriodType.ALL):
        trend = [
            MonthlyTrendPoint(month=p.label, entries=p.entries, revenue=money(p.revenue))
            for p in monthly_trend(check_ins, period.year)
        ]

    return PeriodReport(
        period=_period_info(period),
        overview=overview,
        events_breakdown=[
            EventBreakdownItem(
                event_id=row.event_id,
                event_title=row.title,
                event_date=row.date,
                entries=row.entries,
                revenue=money(row.revenue),
                new_customers=row.new_customers,
            )
            for row in breakdown
        ],
        timeline=[
            DateEntries(date=p.label, entries=p.entries)
            for p in period_timeline(check_ins, period)
        ],
        audience=_audience(profile, options.period_top_cities, out_of_town_vs_top_city(profile)),
        monetization=_monetization(revenue),
        consumptions=_consumptions(consumptions),
        top_events=[
            TopEvent(
                id=row.event_id,
                title=row.title,
                date=row.date,
                entries=row.entries,
                revenue=money(row.revenue),
            )
            for row in top_events(breakdown, options.top_events_limit)
        ],
        monthly_trend=trend,
    )
