"""Error taxonomy for barstatus.

Two tiers, mirroring how the status loop treats failures:

* :class:`FatalError` and its subclasses (clock, output, sleep) end the
  process.  They propagate out of the loop to the CLI, which logs a
  single line and exits with :data:`~barstatus._cli.EXIT_RUNTIME_ERROR`.
* :class:`BatteryReadError` is degraded telemetry.  The loop logs it,
  marks the battery reading as unavailable and keeps running; the
  battery block is omitted until a refresh succeeds again.

No error ever reaches the bar protocol stream.
"""

from __future__ import annotations


class BarstatusError(Exception):
    """Base class for all barstatus errors."""


class FatalError(BarstatusError):
    """An I/O failure the status loop cannot recover from."""


class ClockError(FatalError):
    """Reading the monotonic or wall clock failed."""


class OutputError(FatalError):
    """Writing to or flushing the protocol stream failed."""


class SleepError(FatalError):
    """The sleep primitive failed for a reason other than interruption."""


class BatteryReadError(BarstatusError):
    """A battery source could not be opened, read or parsed.

    Attributes:
        path: The source that failed, when known.
    """

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
