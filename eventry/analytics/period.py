from calendar import monthrange
from datetime import datetime
from typing import Optional

from eventry.analytics.errors import InvalidPeriodError
from eventry.analytics.types import PeriodType, ResolvedPeriod


def resolve_period(
    period_type: PeriodType | str,
    month: Optional[int] = None,
    year: Optional[int] = None,
    *,
    now: Optional[datetime] = None,
    all_start: datetime = datetime(2000, 1, 1),
    all_end: datetime = datetime(2099, 12, 31, 23, 59, 59),
) -> ResolvedPeriod:
    """
    Turn a period selector into inclusive calendar bounds.

    - month: first day 00:00:00 through last day 23:59:59 of `month`/`year`
    - year:  Jan 1 00:00:00 through Dec 31 23:59:59 of `year`
    - all:   the configured sentinel range

    Missing `month` / `year` default to the current ones (server local time).
    `year` is still resolved for `all`; it anchors the monthly trend.
    """
    try:
        period_type = PeriodType(period_type)
    except ValueError:
        raise InvalidPeriodError(f"Unknown period '{period_type}'")

    now = now or datetime.now()
    year = year or now.year
    month = month or now.month

    if not 1 <= month <= 12:
        raise InvalidPeriodError("Month must be between 1 and 12")

    if period_type is PeriodType.MONTH:
        last_day = monthrange(year, month)[1]
        start = datetime(year, month, 1)
        end = datetime(year, month, last_day, 23, 59, 59)
        return ResolvedPeriod(type=period_type, month=month, year=year, start=start, end=end)

    if period_type is PeriodType.YEAR:
        start = datetime(year, 1, 1)
        end = datetime(year, 12, 31, 23, 59, 59)
    else:
        start, end = all_start, all_end

    return ResolvedPeriod(type=period_type, month=None, year=year, start=start, end=end)
