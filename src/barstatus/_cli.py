"""CLI scaffolding for barstatus (Typer-based).

Provides :func:`build_cli` which constructs a Typer app that parses
the options (``--version``, ``--log-level``, ``--log-format``,
``--battery-interval``, ``--timezone-offset``) and hands off to the
application's async lifecycle.

This is the single place where the process exit status is decided:
configuration errors exit with :data:`EXIT_CONFIG_ERROR`, fatal I/O
errors from the status loop with :data:`EXIT_RUNTIME_ERROR`.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import sys
from typing import TYPE_CHECKING, Annotated, get_args

import typer
from pydantic import ValidationError

from barstatus._errors import FatalError
from barstatus._settings import LoggingSettings

if TYPE_CHECKING:
    from barstatus._app import App
    from barstatus._settings import Settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_RUNTIME_ERROR = 3

# ---------------------------------------------------------------------------
# Allowed values (extracted from LoggingSettings Literal types)
# ---------------------------------------------------------------------------

_VALID_LOG_LEVELS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["level"].annotation,
)
_VALID_LOG_FORMATS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["format"].annotation,
)


def build_cli(app: App) -> typer.Typer:
    """Construct a Typer CLI from an :class:`App` instance.

    The returned Typer app exposes a single default command.  When
    invoked it builds settings from the environment, applies CLI
    overrides, and delegates to :meth:`App._run_async`.

    Args:
        app: The application to wrap.

    Returns:
        A configured :class:`typer.Typer` ready to invoke.
    """
    name = app._name
    version = app._version
    description = app._description

    cli = typer.Typer(
        help=f"{name} v{version} — {description}",
    )

    @cli.callback(invoke_without_command=True)
    def main(
        version_flag: Annotated[
            bool | None,
            typer.Option(
                "--version",
                is_eager=True,
                help="Show version and exit.",
            ),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Override log level."),
        ] = None,
        log_format: Annotated[
            str | None,
            typer.Option("--log-format", help="Override log format."),
        ] = None,
        battery_interval: Annotated[
            int | None,
            typer.Option(
                "--battery-interval",
                help="Seconds between battery reads.",
            ),
        ] = None,
        timezone_offset: Annotated[
            int | None,
            typer.Option(
                "--timezone-offset",
                help="Hours to add to UTC for the clock.",
            ),
        ] = None,
    ) -> None:
        # -- version ---------------------------------------------------------
        if version_flag:
            typer.echo(f"{name} v{version}")
            raise typer.Exit()

        # -- validate enum-like options -------------------------------------
        if log_level is not None and log_level.upper() not in _VALID_LOG_LEVELS:
            raise typer.BadParameter(
                f"Invalid log level '{log_level}'. "
                f"Choose from: {', '.join(_VALID_LOG_LEVELS)}",
                param_hint="'--log-level'",
            )

        if log_format is not None and log_format.lower() not in _VALID_LOG_FORMATS:
            raise typer.BadParameter(
                f"Invalid log format '{log_format}'. "
                f"Choose from: {', '.join(_VALID_LOG_FORMATS)}",
                param_hint="'--log-format'",
            )

        # -- build settings (env + CLI overrides, validated together) --------
        overrides: dict[str, object] = {}
        if battery_interval is not None:
            overrides["battery_read_interval"] = battery_interval
        if timezone_offset is not None:
            overrides["timezone_offset"] = timezone_offset

        try:
            settings: Settings = app._settings_class(**overrides)
        except ValidationError as exc:
            logger.error("Configuration error: %s", exc)
            raise SystemExit(EXIT_CONFIG_ERROR) from exc

        if log_level is not None:
            settings.logging = settings.logging.model_copy(
                update={"level": log_level.upper()},
            )

        if log_format is not None:
            settings.logging = settings.logging.model_copy(
                update={"format": log_format.lower()},
            )

        # -- run the async lifecycle ----------------------------------------
        try:
            with contextlib.suppress(KeyboardInterrupt):
                asyncio.run(app._run_async(settings=settings))
        except SystemExit:
            raise
        except FatalError as exc:
            logger.error("Fatal: %s", exc)
            sys.exit(EXIT_RUNTIME_ERROR)
        except Exception as exc:
            logger.error("Runtime error: %s", exc)
            sys.exit(EXIT_RUNTIME_ERROR)

    return cli
