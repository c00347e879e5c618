"""Store interfaces (repository pattern).

Stores are swappable and return read-only analytics projections.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Sequence
from uuid import UUID

from eventry.analytics.types import (
    CheckInWithTicketContext,
    ConsumptionRecord,
    EventSummary,
)


class AnalyticsStore(ABC):
    """Read access to the records a report is computed from."""

    @abstractmethod
    def get_event(self, event_id: UUID) -> EventSummary | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def find_events_between(self, start: datetime, end: datetime) -> list[EventSummary]:
        """Return events starting within [start, end], ordered by date_start ascending."""
        ...

    @abstractmethod
    def find_check_ins(self, event_ids: Sequence[UUID]) -> list[CheckInWithTicketContext]:
        """Return check-ins of the given events with ticket context, ordered by scanned_at."""
        ...

    @abstractmethod
    def find_consumptions(self, event_ids: Sequence[UUID]) -> list[ConsumptionRecord]:
        """Return every consumption recorded for the given events."""
        ...
