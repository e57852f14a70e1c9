"""Composition root for the barstatus status generator.

:class:`App` resolves settings, configures logging, builds the
production adapters (sysfs battery, stdout, asyncio sleeper, system
clocks) and hands them to :class:`~barstatus._emitter.StatusEmitter`.

Typical usage::

    from barstatus import App

    App(name="barstatus", version="1.0.0").run()

Every adapter can be overridden through :meth:`App._run_async`, which
is how the tests drive the full lifecycle without real I/O.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import signal
import sys

from barstatus._battery import BatterySource, SysfsBattery
from barstatus._clock import ClockPort, SystemClock, WallClock
from barstatus._emitter import StatusEmitter
from barstatus._logging import configure_logging
from barstatus._output import OutputPort, StreamOutput
from barstatus._settings import Settings
from barstatus._sleep import SleeperPort, SystemSleeper

logger = logging.getLogger(__name__)


class App:
    """Application object tying settings and adapters to the status loop.

    Args:
        name: Application name (log correlation, ``--version`` output).
        version: Application version.
        description: One-line description shown in ``--help``.
        settings_class: Settings model instantiated when no settings
            are passed explicitly.
    """

    def __init__(
        self,
        name: str,
        version: str = "0.0.0",
        *,
        description: str = "i3bar status generator",
        settings_class: type[Settings] = Settings,
    ) -> None:
        self._name = name
        self._version = version
        self._description = description
        self._settings_class = settings_class

    def run(self, *, settings: Settings | None = None) -> None:
        """Start the status loop (blocking, synchronous entrypoint).

        Wraps :meth:`_run_async` in :func:`asyncio.run`, handling
        ``KeyboardInterrupt`` for a clean Ctrl-C exit.  Fatal errors
        propagate to the caller.

        See Also:
            :meth:`cli` — CLI entrypoint with Typer argument parsing.
        """
        with contextlib.suppress(KeyboardInterrupt):
            asyncio.run(self._run_async(settings=settings))

    def cli(self) -> None:
        """Start the application with CLI argument parsing."""
        from barstatus._cli import build_cli

        cli = build_cli(self)
        cli(standalone_mode=True)

    def build_emitter(
        self,
        settings: Settings,
        *,
        battery: BatterySource | None = None,
        output: OutputPort | None = None,
        sleeper: SleeperPort | None = None,
        monotonic: ClockPort | None = None,
        wall: ClockPort | None = None,
    ) -> StatusEmitter:
        """Wire a :class:`StatusEmitter`, defaulting to production adapters."""
        resolved_monotonic = monotonic if monotonic is not None else SystemClock()
        return StatusEmitter(
            battery=battery if battery is not None else SysfsBattery(),
            output=output if output is not None else StreamOutput(sys.stdout),
            sleeper=sleeper if sleeper is not None else SystemSleeper(resolved_monotonic),
            monotonic=resolved_monotonic,
            wall=wall if wall is not None else WallClock(),
            battery_read_interval=settings.battery_read_interval,
            timezone_offset=settings.timezone_offset,
        )

    async def _run_async(
        self,
        *,
        settings: Settings | None = None,
        battery: BatterySource | None = None,
        output: OutputPort | None = None,
        sleeper: SleeperPort | None = None,
        monotonic: ClockPort | None = None,
        wall: ClockPort | None = None,
    ) -> None:
        """Bootstrap logging and adapters, then run the loop forever.

        Parameters are provided for testability; production calls pass
        only *settings* (or nothing).
        """
        resolved_settings = settings if settings is not None else self._settings_class()
        configure_logging(
            resolved_settings.logging,
            service=self._name,
            version=self._version,
        )

        emitter = self.build_emitter(
            resolved_settings,
            battery=battery,
            output=output,
            sleeper=sleeper,
            monotonic=monotonic,
            wall=wall,
        )
        if sleeper is None:
            self._install_signal_handlers(emitter)

        await emitter.run()

    @staticmethod
    def _install_signal_handlers(emitter: StatusEmitter) -> None:
        """Route SIGCONT to the sleeper so a continued process resumes its sleep."""
        sleeper = emitter.sleeper
        if not isinstance(sleeper, SystemSleeper):
            return
        loop = asyncio.get_running_loop()
        loop.add_signal_handler(signal.SIGCONT, sleeper.interrupt)
        logger.debug("SIGCONT handler installed")
