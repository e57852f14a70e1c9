"""barstatus.

A minimal status generator for the i3bar/swaybar JSON protocol:
battery charge and the time of day, refreshed on the minute.
"""

from importlib.metadata import PackageNotFoundError, version

from barstatus._app import App
from barstatus._battery import BatteryReading, BatterySource, SysfsBattery
from barstatus._clock import ClockPort, SystemClock, WallClock
from barstatus._emitter import StatusEmitter
from barstatus._errors import (
    BarstatusError,
    BatteryReadError,
    ClockError,
    FatalError,
    OutputError,
    SleepError,
)
from barstatus._logging import JsonFormatter, configure_logging
from barstatus._output import OutputPort, StreamOutput
from barstatus._settings import LoggingSettings, Settings
from barstatus._sleep import SleeperPort, SystemSleeper

try:
    __version__ = version("barstatus")
except PackageNotFoundError:
    # Editable installs without metadata
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # App
    "App",
    "StatusEmitter",
    # Battery
    "BatteryReading",
    "BatterySource",
    "SysfsBattery",
    # Clock
    "ClockPort",
    "SystemClock",
    "WallClock",
    # Errors
    "BarstatusError",
    "BatteryReadError",
    "ClockError",
    "FatalError",
    "OutputError",
    "SleepError",
    # Logging
    "JsonFormatter",
    "configure_logging",
    # Output
    "OutputPort",
    "StreamOutput",
    # Settings
    "LoggingSettings",
    "Settings",
    # Sleep
    "SleeperPort",
    "SystemSleeper",
]
