"""Pytest configuration and shared fixtures."""

import pytest

# The barstatus testing plugin is registered via a ``pytest11`` entry
# point (pyproject.toml) for external consumers.  In our own test
# suite we disable it (``-p no:barstatus``) and load explicitly here
# instead, so the barstatus import chain is measured by coverage.
pytest_plugins = ["barstatus.testing._plugin"]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (full lifecycle with test doubles)"
    )
