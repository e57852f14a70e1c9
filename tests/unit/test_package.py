"""Smoke tests for barstatus package structure.

Test Techniques Used:
- Specification-based: Verify package imports and version metadata exist.
"""

import barstatus


class TestPackageStructure:
    """Verify the barstatus package is properly installed and importable."""

    def test_package_importable(self) -> None:
        """Package can be imported without error.

        Technique: Specification-based — verifying the package contract.
        """
        assert barstatus is not None

    def test_version_is_string(self) -> None:
        """Package exposes a version string.

        Technique: Specification-based — verifying version metadata contract.
        """
        assert isinstance(barstatus.__version__, str)
        assert len(barstatus.__version__) > 0

    def test_main_module_exposes_entrypoint(self) -> None:
        """``python -m barstatus`` has a callable ``main``."""
        from barstatus.__main__ import main

        assert callable(main)
