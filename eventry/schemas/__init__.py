
from eventry.schemas.dashboard import (
    DashboardModel, CityCount, Audience, Monetization, ConsumptionsSummary,
)
from eventry.schemas.dashboard import (
    EventInfo, EventOverview, TimelineEntry, PrTicketMix, PrPerformance, TopPr,
    EventReport,
)
from eventry.schemas.dashboard import (
    PeriodInfo, PeriodOverview, EventBreakdownItem, DateEntries, TopEvent,
    MonthlyTrendPoint, PeriodReport,
)
