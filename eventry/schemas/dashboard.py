from typing import Optional, List, Dict
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime


# Dashboard payloads are consumed by the JS frontend, so keys go out camelCase
class DashboardModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Shared sections
# ---------------------------------------------------------------------------


class CityCount(DashboardModel):
    city: str
    count: int


class Audience(DashboardModel):
    age_distribution: Dict[str, int]
    avg_age: Optional[float] = None
    gender_distribution: Dict[str, int]
    top_cities: List[CityCount]
    out_of_town_percentage: float


class Monetization(DashboardModel):
    total_revenue: float
    ticket_revenue: float
    consumptions_revenue: float
    ticket_type_distribution: Dict[str, int]
    ticket_type_percentages: Dict[str, float]
    revenue_by_type: Dict[str, float]


class ConsumptionsSummary(DashboardModel):
    total: int
    revenue: float
    avg_per_consumption: float
    by_category: Dict[str, int]
    revenue_by_category: Dict[str, float]


# ---------------------------------------------------------------------------
# Single-event report: GET /dashboard/events/{event_id}
# ---------------------------------------------------------------------------


class EventInfo(DashboardModel):
    id: UUID
    title: str
    date: datetime
    venue: str


class EventOverview(DashboardModel):
    total_entries: int
    new_customers: int
    returning_customers: int
    total_revenue: float
    total_ticket_revenue: float
    total_consumptions_revenue: float
    avg_revenue_per_person: float
    avg_group_size: float
    peak_time_slot: str   # "HH:MM"
    peak_count: int


class TimelineEntry(DashboardModel):
    time: str             # "HH:MM", night order
    entries: int
    cumulative: int


class PrTicketMix(DashboardModel):
    lista: int = 0
    tavolo: int = 0
    prevendita: int = 0
    omaggio: int = 0


class PrPerformance(DashboardModel):
    pr_name: str
    entries: int
    revenue: float
    avg_group_size: float
    tickets: PrTicketMix


class TopPr(DashboardModel):
    name: str
    entries: int
    percentage: int


class EventReport(DashboardModel):
    event: EventInfo
    overview: EventOverview
    timeline: List[TimelineEntry]
    audience: Audience
    pr_performance: List[PrPerformance]
    top_pr: Optional[TopPr] = None
    monetization: Monetization
    consumptions: ConsumptionsSummary


# ---------------------------------------------------------------------------
# Cross-event report: GET /dashboard/general
# ---------------------------------------------------------------------------


class PeriodInfo(DashboardModel):
    type: str             # "month" | "year" | "all"
    month: Optional[int] = None
    year: int
    start_date: datetime
    end_date: datetime


class PeriodOverview(DashboardModel):
    total_events: int
    total_entries: int
    total_revenue: float
    total_ticket_revenue: float
    total_consumptions_revenue: float
    avg_entries_per_event: float
    avg_revenue_per_event: float
    avg_revenue_per_person: float
    total_new_customers: int
    total_returning_customers: int
    avg_group_size: float


class EventBreakdownItem(DashboardModel):
    event_id: UUID
    event_title: str
    event_date: datetime
    entries: int
    revenue: float
    new_customers: int


class DateEntries(DashboardModel):
    date: str             # "D/M" for a month, "M/YYYY" otherwise
    entries: int


class TopEvent(DashboardModel):
    id: UUID
    title: str
    date: datetime
    entries: int
    revenue: float


class MonthlyTrendPoint(DashboardModel):
    month: str            # "M/YYYY"
    entries: int
    revenue: float


class PeriodReport(DashboardModel):
    period: PeriodInfo
    overview: PeriodOverview
    events_breakdown: List[EventBreakdownItem]
    timeline: List[DateEntries]
    audience: Audience
    monetization: Monetization
    consumptions: ConsumptionsSummary
    top_events: List[TopEvent]
    monthly_trend: List[MonthlyTrendPoint]
