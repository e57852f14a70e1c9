"""Pure helpers for the text and timing arithmetic of the status loop.

Everything here works on whole seconds and plain integers.  Division
is integer (floor) division; the clocks never report negative seconds
so floor and truncation agree.
"""

from __future__ import annotations

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

# One second of slack past the minute boundary so a sleep that wakes a
# little early does not render the same minute twice.
MINUTE_BOUNDARY_SLACK = 61


def two_digits(value: int) -> str:
    """Render *value* as exactly two zero-padded decimal digits.

    Only the two-digit case is supported (hours and minutes).

    Raises:
        ValueError: *value* is outside ``[0, 100)``.
    """
    if not 0 <= value < 100:
        raise ValueError(f"{value} does not fit in two digits")
    return f"{value:02d}"


def clock_text(wall_seconds: int, timezone_offset: int) -> str:
    """Render the local time of day as ``HH:MM``.

    Args:
        wall_seconds: Seconds since the Unix epoch.
        timezone_offset: Fixed offset from UTC in hours.
    """
    total_minutes = wall_seconds // SECONDS_PER_MINUTE
    hours = (total_minutes // MINUTES_PER_HOUR + timezone_offset) % HOURS_PER_DAY
    minutes = total_minutes % MINUTES_PER_HOUR
    return f"{two_digits(hours)}:{two_digits(minutes)}"


def battery_percentage(energy_now: int, energy_full: int) -> int:
    """Return ``floor(energy_now * 100 / energy_full)``."""
    return energy_now * 100 // energy_full


def minute_sleep_bound(wall_seconds: int) -> int:
    """Seconds to sleep so the next wake-up lands past the minute boundary."""
    return MINUTE_BOUNDARY_SLACK - wall_seconds % SECONDS_PER_MINUTE


def battery_sleep_bound(now: int, last_read: int, interval: int) -> int:
    """Seconds left until the battery poll interval elapses."""
    return interval - (now - last_read)
