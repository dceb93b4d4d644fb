"""
Helmsman output sinks: where rendered help text goes.

A sink only has to append text and keep the order it was given. Two are
provided:
- BufferSink: in-memory, for tests and for hosts that post-process help.
- ConsoleSink: a rich console's stream (stdout, or stderr on request).
"""
import io
from typing import Protocol, runtime_checkable

from rich.console import Console

from .utils import Unset


@runtime_checkable
class Sink(Protocol):
    def append(self, text, /): ...


class BufferSink:
    """
    Append-only in-memory text buffer.
    """

    def __init__(self):
        self._buffer = io.StringIO()

    def append(self, text, /):
        if not isinstance(text, str):
            raise TypeError(f"append() argument must be a string, not {type(text).__name__}")
        self._buffer.write(text)

    def getvalue(self):
        return self._buffer.getvalue()

    def clear(self):
        self._buffer.seek(0)
        self._buffer.truncate()

    def __str__(self):
        return self.getvalue()

    def __repr__(self):
        return f"buffer-sink(size={len(self.getvalue())})"


class ConsoleSink:
    """
    Writes help text to the stream behind a rich console.

    The text goes to console.file untouched: no markup, highlighting, soft
    wrapping or tab expansion, which would break the column layout.
    """

    def __init__(self, console=Unset, /, *, stderr=False):
        if console is Unset:
            console = Console(stderr=stderr)
        elif not isinstance(console, Console):
            raise TypeError(f"console-sink 'console' must be a rich console, not {type(console).__name__}")
        self.console = console

    def append(self, text, /):
        if not isinstance(text, str):
            raise TypeError(f"append() argument must be a string, not {type(text).__name__}")
        file = self.console.file
        file.write(text)
        file.flush()

    def __repr__(self):
        return f"console-sink(console={self.console!r})"


__all__ = (
    "Sink",
    "BufferSink",
    "ConsoleSink",
)
