from eventry.analytics.errors import (
    AnalyticsError,
    ErrorCode,
    EventNotFoundError,
    InvalidPeriodError,
    InvalidTimeWindowError,
)
from eventry.analytics.period import resolve_period
from eventry.analytics.report import (
    ReportOptions,
    build_event_report,
    build_period_report,
    empty_period_report,
)
from eventry.analytics.types import (
    CheckInWithTicketContext,
    ConsumptionRecord,
    EventSummary,
    GuestProfile,
    ListRef,
    PeriodType,
    ResolvedPeriod,
    TicketContext,
)

__all__ = [
    "AnalyticsError",
    "ErrorCode",
    "EventNotFoundError",
    "InvalidPeriodError",
    "InvalidTimeWindowError",
    "resolve_period",
    "ReportOptions",
    "build_event_report",
    "build_period_report",
    "empty_period_report",
    "CheckInWithTicketContext",
    "ConsumptionRecord",
    "EventSummary",
    "GuestProfile",
    "ListRef",
    "PeriodType",
    "ResolvedPeriod",
    "TicketContext",
]
