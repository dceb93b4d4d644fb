"""
Helmsman layout policies: turn one text block into physical lines.

Layout is a closed enumeration of two strategies, picked once when a help
builder is configured:

- RAW   split at explicit line breaks only. Nothing else changes: runs of
        spaces, tabs and trailing whitespace survive verbatim, and an empty
        text still yields one (empty) line.
- WRAP  split like RAW, then fold every line wider than the room left
        after the starting column, at whitespace boundaries. Widths are
        terminal cells (rich), so wide glyphs count double.

Both return a non-empty list of strings, so the column formatter never
needs to know which policy produced its rows.
"""
import itertools
import re
from enum import Enum

from rich._wrap import divide_line
from rich.cells import cell_len

from .faults import ConfigurationError, FaultCode

_BREAKS = re.compile(r"\r\n|\r|\n")


def _fold(line, room, /):
    # Break indices come from rich's cell-aware splitter; words wider than
    # room stay whole and tabs are left as they are.
    offsets = (0, *divide_line(line, room, fold=False), len(line))
    return [line[start:end].rstrip() for start, end in itertools.pairwise(offsets)]


class Layout(Enum):
    RAW = "raw"
    WRAP = "wrap"

    @classmethod
    def resolve(cls, layout, /):
        """
        Accept a Layout member or its string value ("raw", "wrap").

        Raises
        - ConfigurationError for anything else.
        """
        try:
            return cls(layout)
        except ValueError:
            raise ConfigurationError(
                f"unknown layout {layout!r}",
                code=FaultCode.UNKNOWN_LAYOUT,
                title="unknown layout",
                hint=f"use one of {', '.join(repr(member.value) for member in cls)}",
            ) from None

    def validate(self, width, /):
        """
        Check that width makes sense for this policy (RAW accepts anything).
        """
        if self is Layout.WRAP and (not isinstance(width, int) or isinstance(width, bool) or width <= 0):
            raise ConfigurationError(
                f"wrapping needs a positive width, got {width!r}",
                code=FaultCode.INVALID_WIDTH,
                title="invalid width",
                hint="pass width=<positive integer> or use the raw layout",
            )
        return width

    def layout(self, text, indentation, width, /):
        """
        Lay text out starting at column indentation, within width columns.

        Returns
        - list[str]: one entry per physical line, never empty.
        """
        lines = _BREAKS.split(text)
        if self is Layout.RAW:
            return lines

        room = max(self.validate(width) - indentation, 1)
        folded = []
        for line in lines:
            if cell_len(line) <= room:
                folded.append(line)
            else:
                folded.extend(_fold(line, room))
        return folded


__all__ = (
    "Layout",
)
