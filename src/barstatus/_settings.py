"""Application configuration via pydantic-settings.

Configuration is loaded from environment variables only, there is no
configuration file.  All variables carry the ``BARSTATUS_`` prefix and
nested models use ``__`` as the delimiter, e.g.
``BARSTATUS_LOGGING__LEVEL=DEBUG``.

The schema covers two concerns:

* **Scheduling** — the battery poll interval and the fixed timezone
  offset used to render the clock.
* **Logging** — level, format, optional file sink, rotation.

All durations are in **seconds**.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# -------------------------------------------------------------------
# Sub-models (BaseModel, NOT BaseSettings, nested via composition)
# -------------------------------------------------------------------


class LoggingSettings(BaseModel):
    """Logging configuration.

    Diagnostics always go to stderr; stdout carries the bar protocol
    and must never receive log lines.  When ``file`` is set, logs are
    also written to a rotating file (size-based rotation,
    ``backup_count`` generations kept).

    The ``format`` field selects the output format:

    - ``"text"`` (default) — human-readable timestamped lines.  The
      bar host usually forwards stderr to a terminal or the session
      journal, where plain lines read best.
    - ``"json"`` — structured JSON lines for log aggregators.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level.",
    )
    format: Literal["json", "text"] = Field(
        default="text",
        description=(
            "Log output format. "
            "'json' emits structured JSON lines; "
            "'text' emits human-readable timestamped lines."
        ),
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    max_file_size_mb: Annotated[int, Field(ge=1)] = Field(
        default=10,
        description=(
            "Maximum log file size in megabytes before rotation. "
            "Only applies when ``file`` is set."
        ),
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


# -------------------------------------------------------------------
# Root settings
# -------------------------------------------------------------------


class Settings(BaseSettings):
    """Root settings for barstatus.

    Example environment::

        BARSTATUS_BATTERY_READ_INTERVAL=30
        BARSTATUS_TIMEZONE_OFFSET=1
        BARSTATUS_LOGGING__LEVEL=DEBUG
        BARSTATUS_LOGGING__FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="BARSTATUS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    battery_read_interval: Annotated[int, Field(ge=1)] = Field(
        default=60,
        description="Seconds between two reads of the battery sources.",
    )
    timezone_offset: Annotated[int, Field(ge=-23, le=23)] = Field(
        default=2,
        description=(
            "Fixed offset from UTC in hours used to render the clock. "
            "Not DST-aware."
        ),
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )
