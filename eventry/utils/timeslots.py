from datetime import datetime

MINUTES_PER_DAY = 24 * 60


def to_local(moment: datetime) -> datetime:
    """
    Convert a timestamp to the server's local wall clock.

    Naive values are assumed to already be local (that is how the scanner
    writes them); aware values are shifted into the local zone.
    """
    if moment.tzinfo is not None:
        return moment.astimezone()
    return moment


def format_clock(minute_of_day: int) -> str:
    minute_of_day %= MINUTES_PER_DAY
    return f"{minute_of_day // 60:02d}:{minute_of_day % 60:02d}"


def parse_clock(value: str) -> int:
    """Parse a zero-padded "HH:MM" string into minutes since midnight."""
    hours, sep, minutes = value.partition(":")
    if (
        not sep
        or len(hours) != 2
        or len(minutes) != 2
        or not hours.isdigit()
        or not minutes.isdigit()
    ):
        raise ValueError(f"Invalid clock value: {value!r}")
    h, m = int(hours), int(minutes)
    if h > 23 or m > 59:
        raise ValueError(f"Invalid clock value: {value!r}")
    return h * 60 + m


def clock_label(moment: datetime) -> str:
    """Local "HH:MM" of a timestamp, used by the clock-range filter."""
    local = to_local(moment)
    return f"{local.hour:02d}:{local.minute:02d}"


def slot_label(moment: datetime, slot_minutes: int = 30) -> str:
    """Label of the fixed-width slot a timestamp falls into (22:47 -> "22:30")."""
    local = to_local(moment)
    minute_of_day = local.hour * 60 + local.minute
    return format_clock(minute_of_day - minute_of_day % slot_minutes)


def window_labels(start: str, end: str, slot_minutes: int = 30) -> tuple[str, ...]:
    """
    Ordered slot labels from `start` to `end` inclusive, night-relative.

    When `end` is earlier than `start` the sequence runs through midnight:
      window_labels("22:00", "01:00") -> 22:00, 22:30, 23:00, 23:30, 00:00, 00:30, 01:00

    Bounds are floored to the slot width. Equal bounds give a single slot.
    """
    if slot_minutes <= 0 or MINUTES_PER_DAY % slot_minutes:
        raise ValueError("slot_minutes must evenly divide a day")

    first = parse_clock(start)
    last = parse_clock(end)
    first -= first % slot_minutes
    last -= last % slot_minutes

    span = (last - first) % MINUTES_PER_DAY
    steps = span // slot_minutes
    return tuple(
        format_clock(first + i * slot_minutes) for i in range(steps + 1)
    )
