from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from eventry.analytics.types import CheckInWithTicketContext
from eventry.utils.timeslots import slot_label, window_labels


@dataclass(frozen=True)
class TimelineSlot:
    time: str
    entries: int
    cumulative: int


@dataclass(frozen=True)
class Timeline:
    slots: tuple[TimelineSlot, ...]
    peak_slot: str
    peak_count: int


def bucket_check_ins(
    check_ins: Sequence[CheckInWithTicketContext],
    window_start: str = "22:00",
    window_end: str = "05:00",
    slot_minutes: int = 30,
) -> Timeline:
    """
    Group check-ins into fixed-width slots along the night's window.

    Slots follow the window's own order (22:00 ... 23:30, 00:00 ... 05:00),
    never string order. Scans outside the window are left out of the
    timeline only; totals elsewhere still include them.

    The peak is the earliest slot in that order holding the maximum count.
    With nothing in the window the peak is the first slot at zero.
    """
    labels = window_labels(window_start, window_end, slot_minutes)
    counts = Counter(slot_label(c.scanned_at, slot_minutes) for c in check_ins)

    slots = []
    cumulative = 0
    peak_slot, peak_count = labels[0], 0
    for label in labels:
        entries = counts.get(label, 0)
        cumulative += entries
        slots.append(TimelineSlot(time=label, entries=entries, cumulative=cumulative))
        if entries > peak_count:
            peak_slot, peak_count = label, entries

    return Timeline(slots=tuple(slots), peak_slot=peak_slot, peak_count=peak_count)
