"""Interruptible sleep port, its asyncio adapter and the resume loop.

The status loop's only suspension point is a sleep.  A sleep may be
cut short by an interruption; when that happens the loop keeps
sleeping for exactly the time that was left instead of starting over.

:class:`SleeperPort` models the primitive: ``sleep(seconds)`` returns
the seconds that were *not* slept (``0.0`` on completion) and raises
``OSError`` on failure.  :func:`sleep_fully` is the resume loop on top
of it.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Protocol, runtime_checkable

from barstatus._clock import ClockPort, SystemClock
from barstatus._errors import SleepError

logger = logging.getLogger(__name__)


@runtime_checkable
class SleeperPort(Protocol):
    """Timed wait that reports the unslept remainder when interrupted."""

    async def sleep(self, seconds: float) -> float:
        """Sleep for up to *seconds*.

        Returns:
            ``0.0`` when the full duration elapsed, otherwise the
            remaining seconds at the moment of interruption.

        Raises:
            OSError: The wait failed for a reason other than
                interruption.
        """
        ...


class SystemSleeper:
    """asyncio sleeper that can be interrupted via :meth:`interrupt`.

    The CLI wires ``SIGCONT`` to :meth:`interrupt`, so a stop/continue
    cycle from the bar host interrupts the current sleep.

    Args:
        clock: Monotonic clock used to measure the remainder.
    """

    def __init__(self, clock: ClockPort | None = None) -> None:
        self._clock = clock if clock is not None else SystemClock()
        self._interrupted = asyncio.Event()

    def interrupt(self) -> None:
        """Cut the current sleep short.  No-op when not sleeping."""
        self._interrupted.set()

    async def sleep(self, seconds: float) -> float:
        self._interrupted.clear()
        start = self._clock.now()

        sleep_task = asyncio.ensure_future(asyncio.sleep(seconds))
        interrupt_task = asyncio.ensure_future(self._interrupted.wait())

        done, pending = await asyncio.wait(
            {sleep_task, interrupt_task},
            return_when=asyncio.FIRST_COMPLETED,
        )

        for task in pending:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

        if sleep_task in done:
            return 0.0
        return max(seconds - (self._clock.now() - start), 0.0)


async def sleep_fully(sleeper: SleeperPort, seconds: float) -> None:
    """Sleep for *seconds*, resuming with the remainder after interruptions.

    Durations of zero or less return immediately.

    Raises:
        SleepError: The sleeper failed with ``OSError``.
    """
    remaining = seconds
    while remaining > 0:
        try:
            remaining = await sleeper.sleep(remaining)
        except OSError as exc:
            raise SleepError(f"sleep failed: {exc}") from exc
        if remaining > 0:
            logger.debug("Sleep interrupted, %.3fs remaining", remaining)
