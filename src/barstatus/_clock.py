"""Clock ports and system adapters.

Provides :class:`ClockPort` (Protocol) plus two production adapters:

* :class:`SystemClock` wraps ``time.monotonic()`` and drives the
  battery poll interval.
* :class:`WallClock` wraps ``time.time()`` and drives the displayed
  time of day.

**Why two clocks?** time.monotonic() is immune to NTP adjustments and
manual system-clock changes, making it suitable for measuring elapsed
durations. The epoch is arbitrary, only *differences* between now()
calls are meaningful (PEP 418). The wall clock is the only source that
knows the calendar time, so both are needed.

The emitter works in whole seconds; :func:`read_seconds` truncates a
clock reading and turns ``OSError`` into :class:`ClockError`.
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

from barstatus._errors import ClockError


@runtime_checkable
class ClockPort(Protocol):
    """Clock returning seconds as a float.

    Used by the status emitter for both interval timing (monotonic)
    and the time of day (wall). Tests inject a deterministic fake
    clock for reproducible timing.
    """

    def now(self) -> float:
        """Return the current time in seconds."""
        ...


class SystemClock:
    """Production monotonic clock wrapping ``time.monotonic()``.

    Satisfies :class:`ClockPort` via structural subtyping, no
    base-class inheritance required (PEP 544).
    """

    def now(self) -> float:
        """Return monotonic time in seconds."""
        return time.monotonic()


class WallClock:
    """Production wall clock wrapping ``time.time()``.

    Returns seconds since the Unix epoch.
    """

    def now(self) -> float:
        """Return wall-clock time in seconds since the epoch."""
        return time.time()


def read_seconds(clock: ClockPort, *, name: str) -> int:
    """Read *clock* and truncate to whole seconds.

    Args:
        clock: The clock to read.
        name: Clock name used in the error message (``"monotonic"``
            or ``"wall"``).

    Raises:
        ClockError: The clock could not be read.
    """
    try:
        return int(clock.now())
    except OSError as exc:
        raise ClockError(f"failed to read {name} clock: {exc}") from exc
