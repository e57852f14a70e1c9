"""Unit tests for barstatus._sleep — interruptible sleep and resumption.

Test Techniques Used:
    - Specification-based Testing: remainder semantics of SleeperPort
    - State-based Testing: recorded sleep durations across interruptions
    - Error Condition Testing: OSError mapped to SleepError
    - Concurrency Testing: interrupting a real asyncio sleep
"""

from __future__ import annotations

import asyncio
from collections import deque

import pytest

from barstatus._errors import FatalError, SleepError
from barstatus._sleep import SleeperPort, SystemSleeper, sleep_fully
from barstatus.testing import FakeClock, FakeSleeper


class TestSleepFully:
    """Technique: State-based Testing with FakeSleeper."""

    async def test_uninterrupted_sleep_is_one_call(self) -> None:
        sleeper = FakeSleeper()
        await sleep_fully(sleeper, 42)
        assert sleeper.calls == [42]

    async def test_resumes_with_exact_remainder(self) -> None:
        clock = FakeClock(0.0)
        sleeper = FakeSleeper(clocks=[clock], interruptions=deque([30.0, 12.5]))

        await sleep_fully(sleeper, 42)

        assert sleeper.calls == [42, 30.0, 12.5]
        assert clock.now() == 42

    @pytest.mark.parametrize("seconds", [0, -3])
    async def test_non_positive_duration_skips_sleep(self, seconds: int) -> None:
        sleeper = FakeSleeper()
        await sleep_fully(sleeper, seconds)
        assert sleeper.calls == []

    async def test_oserror_becomes_sleep_error(self) -> None:
        sleeper = FakeSleeper(error=OSError(22, "Invalid argument"))
        with pytest.raises(SleepError, match="sleep failed"):
            await sleep_fully(sleeper, 10)

    def test_sleep_error_is_fatal(self) -> None:
        assert issubclass(SleepError, FatalError)


class TestSystemSleeper:
    """Technique: Concurrency Testing with real (short) sleeps."""

    def test_satisfies_sleeper_port(self) -> None:
        assert isinstance(SystemSleeper(), SleeperPort)

    async def test_completes_with_zero_remainder(self) -> None:
        remaining = await SystemSleeper().sleep(0.01)
        assert remaining == 0.0

    async def test_interrupt_returns_remainder(self) -> None:
        sleeper = SystemSleeper()
        task = asyncio.create_task(sleeper.sleep(5.0))
        await asyncio.sleep(0.01)

        sleeper.interrupt()
        remaining = await asyncio.wait_for(task, timeout=1.0)

        assert 0.0 < remaining < 5.0

    async def test_remainder_measured_on_injected_clock(self) -> None:
        clock = FakeClock(100.0)
        sleeper = SystemSleeper(clock)
        task = asyncio.create_task(sleeper.sleep(10.0))
        await asyncio.sleep(0)

        clock.advance(4.0)
        sleeper.interrupt()

        assert await asyncio.wait_for(task, timeout=1.0) == 6.0

    async def test_stale_interrupt_is_ignored(self) -> None:
        sleeper = SystemSleeper()
        sleeper.interrupt()
        assert await sleeper.sleep(0.01) == 0.0

    async def test_sleep_fully_resumes_after_interrupt(self) -> None:
        sleeper = SystemSleeper()
        task = asyncio.create_task(sleep_fully(sleeper, 0.2))
        await asyncio.sleep(0.02)

        sleeper.interrupt()
        await asyncio.sleep(0)

        assert not task.done()
        await asyncio.wait_for(task, timeout=2.0)
