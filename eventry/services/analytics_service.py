"""Analytics service - orchestrates loading and report assembly.

Services:
- Depend only on interfaces (stores)
- Resolve scopes and validate request parameters
- Return response schemas or raise domain errors
"""

import logging
from typing import Optional
from uuid import UUID

from eventry.analytics.errors import EventNotFoundError
from eventry.analytics.period import resolve_period
from eventry.analytics.report import (
    ReportOptions,
    build_event_report,
    build_period_report,
    empty_period_report,
)
from eventry.analytics.types import PeriodType
from eventry.core.config import Settings, settings
from eventry.schemas.dashboard import EventReport, PeriodReport
from eventry.stores.interfaces import AnalyticsStore

logger = logging.getLogger(__name__)


def options_from_settings(config: Settings = settings) -> ReportOptions:
    return ReportOptions(
        timeline_start=config.TIMELINE_START,
        timeline_end=config.TIMELINE_END,
        slot_minutes=config.TIMELINE_SLOT_MINUTES,
        event_top_cities=config.EVENT_TOP_CITIES,
        period_top_cities=config.PERIOD_TOP_CITIES,
        top_events_limit=config.TOP_EVENTS_LIMIT,
    )


class AnalyticsService:
    """Builds dashboard reports from a record snapshot per request."""

    def __init__(
        self,
        store: AnalyticsStore,
        options: Optional[ReportOptions] = None,
        config: Settings = settings,
    ) -> None:
        self._store = store
        self._options = options or options_from_settings(config)
        self._config = config

    def get_event_report(
        self,
        event_id: str,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        list_id: Optional[UUID] = None,
    ) -> EventReport:
        """Return the single-event dashboard.

        Raises:
            EventNotFoundError: If event_id is malformed or unknown.
            InvalidTimeWindowError: If a clock bound is not HH:MM.
        """
        try:
            parsed_id = UUID(str(event_id))
        except ValueError:
            raise EventNotFoundError(event_id)

        event = self._store.get_event(parsed_id)
        if event is None:
            raise EventNotFoundError(event_id)

        # Both sets are loaded before any figure is computed
        check_ins = self._store.find_check_ins([event.id])
        consumptions = self._store.find_consumptions([event.id])

        logger.info(
            "Event report %s: %d check-in(s), %d consumption(s), window=%s-%s list=%s",
            event.id,
            len(check_ins),
            len(consumptions),
            start_time or "*",
            end_time or "*",
            list_id or "*",
        )
        return build_event_report(
            event,
            check_ins,
            consumptions,
            start_time=start_time,
            end_time=end_time,
            list_id=list_id,
            options=self._options,
        )

    def get_period_report(
        self,
        period: PeriodType | str = PeriodType.MONTH,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> PeriodReport:
        """Return the cross-event dashboard for a calendar period.

        Raises:
            InvalidPeriodError: If the period selector cannot be resolved.
        """
        resolved = resolve_period(
            period,
            month,
            year,
            all_start=self._config.ALL_PERIOD_START,
            all_end=self._config.ALL_PERIOD_END,
        )

        events = self._store.find_events_between(resolved.start, resolved.end)
        if not events:
            logger.info("Period report %s %s: no events.", resolved.type.value, resolved.year)
            return empty_period_report(resolved)

        event_ids = [e.id for e in events]
        check_ins = self._store.find_check_ins(event_ids)
        consumptions = self._store.find_consumptions(event_ids)

        logger.info(
            "Period report %s %s: %d event(s), %d check-in(s), %d consumption(s)",
            resolved.type.value,
            resolved.year,
            len(events),
            len(check_ins),
            len(consumptions),
        )
        return build_period_report(resolved, events, check_ins, consumptions, options=self._options)
