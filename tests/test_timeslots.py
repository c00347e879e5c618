"""Unit tests for clock and slot helpers.

Run with: pytest tests/test_timeslots.py -v
"""

from datetime import datetime

import pytest

from eventry.utils.timeslots import (
    clock_label,
    parse_clock,
    slot_label,
    window_labels,
)


class TestParseClock:
    """Tests for parse_clock."""

    def test_parses_zero_padded_value(self):
        """"03:45" is 225 minutes after midnight."""
        assert parse_clock("03:45") == 225

    @pytest.mark.parametrize("value", ["3:45", "24:00", "12:60", "ab:cd", "1200", ""])
    def test_rejects_malformed_value(self, value):
        """Anything but a valid zero-padded HH:MM raises ValueError."""
        with pytest.raises(ValueError):
            parse_clock(value)


class TestSlotLabel:
    """Tests for slot_label and clock_label."""

    def test_floors_to_half_hour(self):
        """22:47 falls in the 22:30 slot."""
        assert slot_label(datetime(2026, 3, 14, 22, 47)) == "22:30"

    def test_floors_to_custom_width(self):
        """With 15-minute slots 00:14 falls in 00:00."""
        assert slot_label(datetime(2026, 3, 15, 0, 14), slot_minutes=15) == "00:00"

    def test_clock_label_is_zero_padded(self):
        """Single-digit hours and minutes are padded."""
        assert clock_label(datetime(2026, 3, 15, 1, 5)) == "01:05"


class TestWindowLabels:
    """Tests for window_labels."""

    def test_default_night_window_crosses_midnight(self):
        """22:00 -> 05:00 gives 15 half-hour slots in night order."""
        labels = window_labels("22:00", "05:00", 30)
        assert len(labels) == 15
        assert labels[0] == "22:00"
        assert labels[3] == "23:30"
        assert labels[4] == "00:00"
        assert labels[-1] == "05:00"

    def test_same_day_window(self):
        """A window that does not wrap is a plain ascending run."""
        assert window_labels("18:00", "19:00", 30) == ("18:00", "18:30", "19:00")

    def test_equal_bounds_give_single_slot(self):
        """Equal start and end produce one slot."""
        assert window_labels("23:00", "23:00", 30) == ("23:00",)

    def test_rejects_slot_width_not_dividing_a_day(self):
        """Slot widths must divide 24h evenly."""
        with pytest.raises(ValueError):
            window_labels("22:00", "05:00", 7)
