"""Test factory for Settings.

Provides :func:`make_settings` — a convenience factory that creates
:class:`~barstatus._settings.Settings` instances without depending on
real environment variables.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from barstatus._settings import Settings


class _IsolatedSettings(Settings):
    """Settings subclass that ignores all ambient configuration sources.

    Overrides :meth:`settings_customise_sources` to return only
    ``init_settings``, stripping the environment, dotenv and secrets
    sources so tests are deterministic regardless of the host.
    """

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],  # noqa: ARG003
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)


def make_settings(**overrides: Any) -> Settings:
    """Create a ``Settings`` instance with model defaults plus *overrides*.

    Example::

        settings = make_settings()
        assert settings.battery_read_interval == 60

        custom = make_settings(timezone_offset=0)
        assert custom.timezone_offset == 0
    """
    return _IsolatedSettings(**overrides)
