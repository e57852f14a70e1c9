"""The status loop: poll, render, sleep, repeat.

:class:`StatusEmitter` owns the only mutable state of the program, the
cached :class:`~barstatus._battery.BatteryReading`, and talks to the
outside world exclusively through ports (clocks, battery source,
output, sleeper).  Each iteration:

1. reads the monotonic clock and refreshes the battery reading when
   it is due,
2. reads the wall clock and writes one entry-set,
3. sleeps until the next minute boundary or the next battery poll,
   whichever comes first.

Fatal errors (:class:`~barstatus._errors.FatalError`) propagate out of
:meth:`StatusEmitter.run`; battery failures never do.
"""

from __future__ import annotations

import logging

from barstatus._battery import BatteryReading, BatterySource, refresh
from barstatus._clock import ClockPort, read_seconds
from barstatus._format import battery_sleep_bound, clock_text, minute_sleep_bound
from barstatus._output import OutputPort
from barstatus._protocol import battery_block, block, preamble, render_entry_set
from barstatus._sleep import SleeperPort, sleep_fully

logger = logging.getLogger(__name__)


class StatusEmitter:
    """Produces the status stream forever.

    Args:
        battery: Source of ``(energy_now, energy_full)``.
        output: Protocol stream sink.
        sleeper: Interruptible sleep primitive.
        monotonic: Clock for the battery poll interval.
        wall: Clock for the displayed time of day.
        battery_read_interval: Seconds between battery reads.
        timezone_offset: Fixed offset from UTC in hours.
    """

    def __init__(
        self,
        *,
        battery: BatterySource,
        output: OutputPort,
        sleeper: SleeperPort,
        monotonic: ClockPort,
        wall: ClockPort,
        battery_read_interval: int = 60,
        timezone_offset: int = 2,
    ) -> None:
        self._battery = battery
        self._output = output
        self._sleeper = sleeper
        self._monotonic = monotonic
        self._wall = wall
        self._interval = battery_read_interval
        self._timezone_offset = timezone_offset
        self._reading = BatteryReading()

    @property
    def reading(self) -> BatteryReading:
        """The cached battery reading."""
        return self._reading

    @property
    def sleeper(self) -> SleeperPort:
        return self._sleeper

    def emit_preamble(self) -> None:
        """Write the protocol header and open the endless array."""
        self._output.write(preamble())
        self._output.flush()

    def tick(self) -> int:
        """Run one iteration up to (not including) the sleep.

        Returns:
            Whole seconds to sleep before the next iteration.

        Raises:
            ClockError: A clock could not be read.
            OutputError: The entry-set could not be written.
        """
        now = read_seconds(self._monotonic, name="monotonic")
        if self._reading.is_due(now, self._interval):
            self._reading = refresh(self._reading, self._battery, now)

        wall_seconds = read_seconds(self._wall, name="wall")

        blocks = []
        percentage = self._reading.percentage
        if percentage is not None:
            blocks.append(battery_block(percentage))
        blocks.append(block(clock_text(wall_seconds, self._timezone_offset)))

        self._output.write(render_entry_set(blocks))
        self._output.flush()

        assert self._reading.last_read is not None  # set by the first refresh()
        return min(
            minute_sleep_bound(wall_seconds),
            battery_sleep_bound(now, self._reading.last_read, self._interval),
        )

    async def run(self) -> None:
        """Emit the preamble, then iterate forever.

        Raises:
            FatalError: Any irrecoverable I/O failure.
        """
        logger.info(
            "Starting status loop (battery interval %ds, UTC%+d)",
            self._interval,
            self._timezone_offset,
        )
        self.emit_preamble()
        while True:
            seconds = self.tick()
            logger.debug("Sleeping %ds", seconds)
            await sleep_fully(self._sleeper, seconds)
