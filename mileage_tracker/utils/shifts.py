# mileage_tracker/utils/shifts.py
"""
Shift classification from wall-clock time.
first  = FIRST_SHIFT_START_HOUR .. SECOND_SHIFT_START_HOUR (05:00–16:59 by default)
second = everything else (overnight)
"""

from datetime import datetime
from typing import Optional

from mileage_tracker.config import settings

FIRST = "first"
SECOND = "second"
SHIFT_TYPES = (FIRST, SECOND)


def current_shift(now: Optional[datetime] = None) -> str:
    """Return 'first' or 'second' for the given local time (defaults to now)."""
    hour = (now or datetime.now()).hour
    if settings.FIRST_SHIFT_START_HOUR <= hour < settings.SECOND_SHIFT_START_HOUR:
        return FIRST
    return SECOND


def _hour_label(hour: int) -> str:
    suffix = "AM" if hour < 12 else "PM"
    return f"{hour % 12 or 12}{suffix}"


def shift_label(shift: str) -> str:
    """e.g. 'First Shift (5AM - 5PM)'."""
    first = _hour_label(settings.FIRST_SHIFT_START_HOUR)
    second = _hour_label(settings.SECOND_SHIFT_START_HOUR)
    if shift == FIRST:
        return f"First Shift ({first} - {second})"
    if shift == SECOND:
        return f"Second Shift ({second} - {first})"
    return shift
