"""Public test-support utilities for barstatus.

Re-exports test doubles and factories so that test suites can import
everything from a single ``barstatus.testing`` namespace instead of
reaching into private modules.

Provided symbols:

- :class:`FakeClock` — deterministic clock for timing tests.
- :class:`FakeSleeper` — sleeper double that advances fake clocks.
- :class:`MemoryOutput` — in-memory protocol stream.
- :class:`StaticBattery` — battery source with settable values.
- :class:`SleeperExhausted` — raised to stop a bounded run.
- :func:`make_settings` — factory for ``Settings`` without the environment.
"""

from barstatus.testing._clock import FakeClock
from barstatus.testing._doubles import (
    FakeSleeper,
    MemoryOutput,
    SleeperExhausted,
    StaticBattery,
)
from barstatus.testing._settings import make_settings

__all__ = [
    "FakeClock",
    "FakeSleeper",
    "MemoryOutput",
    "SleeperExhausted",
    "StaticBattery",
    "make_settings",
]
