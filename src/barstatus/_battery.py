"""Battery telemetry read from the kernel's power_supply sysfs class.

Reads two numeric attributes of one fixed battery (``BAT0`` by
default)::

    /sys/class/power_supply/BAT0/energy_now
    /sys/class/power_supply/BAT0/energy_full

Battery telemetry is best-effort: every failure surfaces as
:class:`~barstatus._errors.BatteryReadError`, and :func:`refresh`
turns it into an "unavailable" :class:`BatteryReading` instead of
stopping the status loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from barstatus._errors import BatteryReadError
from barstatus._format import battery_percentage

logger = logging.getLogger(__name__)

POWER_SUPPLY_ROOT = Path("/sys/class/power_supply")
DEFAULT_BATTERY = "BAT0"

# sysfs attributes are tiny; anything past this is not a number
_MAX_READ = 256


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class BatteryReading:
    """Most recent battery sample and when it was attempted.

    ``energy_now`` and ``energy_full`` are both set or both ``None``
    (unavailable).  ``last_read`` is the monotonic second of the last
    refresh attempt, successful or not; ``None`` before the first one.
    """

    energy_now: int | None = None
    energy_full: int | None = None
    last_read: int | None = None

    @property
    def available(self) -> bool:
        return self.energy_now is not None and self.energy_full is not None

    @property
    def percentage(self) -> int | None:
        """Charge in whole percent, or ``None`` when unavailable."""
        if self.energy_now is None or self.energy_full is None:
            return None
        return battery_percentage(self.energy_now, self.energy_full)

    def is_due(self, now: int, interval: int) -> bool:
        """Whether the sources must be read again at monotonic second *now*."""
        return self.last_read is None or now - self.last_read >= interval


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_energy(data: bytes) -> int:
    """Parse a sysfs numeric attribute.

    Accepts ASCII decimal digits optionally followed by a line break;
    anything after the first line break is ignored.

    Raises:
        BatteryReadError: *data* is empty, has no digits before the
            line break, or contains a non-digit before it.
    """
    digits, _, _ = data.partition(b"\n")
    if not digits:
        raise BatteryReadError("failed to parse number: no digits")
    # bytes.isdigit() only accepts ASCII 0-9
    if not digits.isdigit():
        raise BatteryReadError(f"failed to parse number: {digits[:32]!r}")
    return int(digits)


def read_energy(path: Path) -> int:
    """Read and parse one numeric sysfs attribute.

    Raises:
        BatteryReadError: The file could not be opened, read or parsed.
    """
    try:
        with path.open("rb") as fh:
            data = fh.read(_MAX_READ)
    except OSError as exc:
        raise BatteryReadError(f"failed to read {path}: {exc}", path=str(path)) from exc
    try:
        return parse_energy(data)
    except BatteryReadError as exc:
        raise BatteryReadError(f"{path}: {exc}", path=str(path)) from exc


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


@runtime_checkable
class BatterySource(Protocol):
    """Anything that can report ``(energy_now, energy_full)``."""

    def read(self) -> tuple[int, int]:
        """Return the current and full-capacity energy.

        Raises:
            BatteryReadError: The values are unavailable.
        """
        ...


class SysfsBattery:
    """A single battery exposed under ``/sys/class/power_supply``.

    Args:
        root: The power_supply class directory.  Tests point this at a
            temporary directory.
        name: The battery directory name.
    """

    def __init__(self, root: Path = POWER_SUPPLY_ROOT, name: str = DEFAULT_BATTERY) -> None:
        self._dir = Path(root) / name

    @property
    def energy_now_path(self) -> Path:
        return self._dir / "energy_now"

    @property
    def energy_full_path(self) -> Path:
        return self._dir / "energy_full"

    def read(self) -> tuple[int, int]:
        energy_now = read_energy(self.energy_now_path)
        energy_full = read_energy(self.energy_full_path)
        if energy_full == 0:
            raise BatteryReadError(
                f"{self.energy_full_path}: full capacity is zero",
                path=str(self.energy_full_path),
            )
        return energy_now, energy_full

    def __repr__(self) -> str:
        return f"SysfsBattery({str(self._dir)!r})"


# ---------------------------------------------------------------------------
# Refresh
# ---------------------------------------------------------------------------


def refresh(reading: BatteryReading, source: BatterySource, now: int) -> BatteryReading:
    """Read *source* again and return the new reading.

    On failure both energy values become ``None`` rather than keeping
    stale data; they stay ``None`` until a later refresh succeeds.
    ``last_read`` is set to *now* either way, so a failing source is
    retried no faster than the poll interval.
    """
    try:
        energy_now, energy_full = source.read()
    except BatteryReadError as exc:
        logger.warning("Battery unavailable: %s", exc)
        return BatteryReading(last_read=now)

    if reading.last_read is not None and not reading.available:
        logger.info("Battery readings recovered")
    logger.debug("Battery energy %d/%d", energy_now, energy_full)
    return BatteryReading(energy_now=energy_now, energy_full=energy_full, last_read=now)
