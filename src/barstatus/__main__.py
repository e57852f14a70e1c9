"""``python -m barstatus`` and the ``barstatus`` console script."""

from __future__ import annotations

import barstatus


def main() -> None:
    app = barstatus.App(name="barstatus", version=barstatus.__version__)
    app.cli()


if __name__ == "__main__":
    main()
