from typing import Optional, Sequence
from uuid import UUID

from eventry.analytics.errors import InvalidTimeWindowError
from eventry.analytics.types import CheckInWithTicketContext
from eventry.utils.timeslots import clock_label, parse_clock


def _validated(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        parse_clock(value)
    except ValueError:
        raise InvalidTimeWindowError(value)
    return value


def _in_clock_range(label: str, start: Optional[str], end: Optional[str]) -> bool:
    # Plain string bounds; a start later than the end matches nothing
    if start and end:
        return start <= label <= end
    if start:
        return label >= start
    if end:
        return label <= end
    return True


def filter_check_ins(
    check_ins: Sequence[CheckInWithTicketContext],
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
    list_id: Optional[UUID] = None,
) -> list[CheckInWithTicketContext]:
    """
    Narrow check-ins by local clock range and/or originating guest list.

    Bounds are inclusive "HH:MM" strings compared lexicographically against
    each scan's local wall clock. Order of the input is preserved.
    """
    start_time = _validated(start_time)
    end_time = _validated(end_time)

    kept = []
    for check_in in check_ins:
        if (start_time or end_time) and not _in_clock_range(
            clock_label(check_in.scanned_at), start_time, end_time
        ):
            continue
        if list_id is not None:
            guest_list = check_in.ticket.guest_list
            if guest_list is None or guest_list.id != list_id:
                continue
        kept.append(check_in)
    return kept
