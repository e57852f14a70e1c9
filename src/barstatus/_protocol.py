"""Serialisation of the i3bar JSON stream.

The stream opens with a header object and an opening bracket that is
never closed::

    {"version":1}
    [

after which every refresh appends one array of blocks followed by a
comma, e.g. ``[{"full_text":"Battery: 25%"},{"full_text":"13:47"}],``.

Blocks are serialised with :func:`json.dumps` using compact separators
so that the output carries no whitespace.
"""

from __future__ import annotations

import json
from collections.abc import Iterable

PROTOCOL_VERSION = 1

_SEPARATORS = (",", ":")


def _dumps(obj: object) -> str:
    return json.dumps(obj, separators=_SEPARATORS)


def preamble() -> str:
    """Return the header line plus the opening bracket of the stream."""
    return _dumps({"version": PROTOCOL_VERSION}) + "\n["


def block(full_text: str) -> dict[str, str]:
    """Build a single status block."""
    return {"full_text": full_text}


def battery_block(percentage: int) -> dict[str, str]:
    return block(f"Battery: {percentage}%")


def render_entry_set(blocks: Iterable[dict[str, str]]) -> str:
    """Render one entry-set: a JSON array of *blocks* plus a trailing comma."""
    return _dumps(list(blocks)) + ","
