import logging
from uuid import UUID
from typing import Optional

from fastapi import APIRouter, Depends, Query, HTTPException, status

from eventry.api.deps import get_analytics_service, get_current_organizer_user
from eventry.analytics.errors import (
    EventNotFoundError,
    InvalidPeriodError,
    InvalidTimeWindowError,
)
from eventry.models.user import User
from eventry.schemas.dashboard import EventReport, PeriodReport
from eventry.services.analytics_service import AnalyticsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["Admin - Dashboard"])

CLOCK_PATTERN = r"^\d{2}:\d{2}$"


def _internal_error() -> HTTPException:
    # Reports are pure reads, so the client may simply retry
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


# ---------------------------------------------------------------------------
# Single event
# ---------------------------------------------------------------------------


@router.get("/events/{event_id}", response_model=EventReport)
def get_event_dashboard(
    event_id: str,
    start_time: Optional[str] = Query(None, alias="startTime", pattern=CLOCK_PATTERN, description="Earliest scan time (HH:MM)"),
    end_time: Optional[str] = Query(None, alias="endTime", pattern=CLOCK_PATTERN, description="Latest scan time (HH:MM)"),
    list_id: Optional[UUID] = Query(None, alias="listId", description="Only check-ins from this guest list"),
    service: AnalyticsService = Depends(get_analytics_service),
    current_user: User = Depends(get_current_organizer_user),
):
    """
    Organizer dashboard for one event night.

    **Filters** (check-ins only):
    - `startTime` / `endTime`: local clock range, inclusive, compared as
      `HH:MM` strings. A range does not wrap midnight, so `22:00`-`03:00`
      matches nothing.
    - `listId`: keep only entries that came through one guest list.

    Consumption revenue is never filtered: it always covers the whole event.

    **Response includes:** `event`, `overview`, `timeline` (30-minute slots,
    22:00 to 05:00), `audience`, `prPerformance`, `topPr`, `monetization`,
    `consumptions`.
    """
    try:
        return service.get_event_report(
            event_id, start_time=start_time, end_time=end_time, list_id=list_id
        )
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    except InvalidTimeWindowError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception:
        logger.exception(
            "Event dashboard failed (event=%s, startTime=%s, endTime=%s, listId=%s, user=%s)",
            event_id, start_time, end_time, list_id, current_user.id,
        )
        raise _internal_error()


# ---------------------------------------------------------------------------
# Cross event
# ---------------------------------------------------------------------------


@router.get("/general", response_model=PeriodReport)
def get_general_dashboard(
    period: str = Query("month", pattern="^(month|year|all)$", description="month | year | all"),
    month: Optional[int] = Query(None, ge=1, le=12, description="Month (1-12), defaults to the current one"),
    year: Optional[int] = Query(None, ge=2000, le=2100, description="Year, defaults to the current one"),
    service: AnalyticsService = Depends(get_analytics_service),
    current_user: User = Depends(get_current_organizer_user),
):
    """
    Aggregated dashboard over every event in a calendar period.

    - `period=month`: one month (`month` + `year`), timeline per day.
    - `period=year`: one calendar year, timeline per month plus `monthlyTrend`.
    - `period=all`: every event; `monthlyTrend` covers `year`.

    A period without events returns a zeroed report, not an error.
    """
    try:
        return service.get_period_report(period, month=month, year=year)
    except InvalidPeriodError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception:
        logger.exception(
            "General dashboard failed (period=%s, month=%s, year=%s, user=%s)",
            period, month, year, current_user.id,
        )
        raise _internal_error()
