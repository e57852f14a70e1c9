"""Output port for the protocol stream and its stream adapter."""

from __future__ import annotations

from typing import Protocol, TextIO, runtime_checkable

from barstatus._errors import OutputError


@runtime_checkable
class OutputPort(Protocol):
    """Forward-only text sink the bar host reads from."""

    def write(self, text: str) -> None:
        """Append *text* to the stream."""
        ...

    def flush(self) -> None:
        """Push buffered text to the reader."""
        ...


class StreamOutput:
    """Production adapter writing to a text stream (normally stdout).

    ``OSError`` from the stream, including ``BrokenPipeError`` once the
    bar host has gone away, is raised as :class:`OutputError`.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def write(self, text: str) -> None:
        try:
            self._stream.write(text)
        except OSError as exc:
            raise OutputError(f"failed to write output: {exc}") from exc

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as exc:
            raise OutputError(f"failed to flush output: {exc}") from exc
