"""
Helmsman column tables: the two-column rows under Commands/Arguments/Options.

Layout of one row, for a section whose widest token is W cells wide:

    <indent><token padded to W><gutter><first description line>
    <indent><W spaces         ><gutter><next description line>
    ...

W is measured once per section, so every description in a section starts
at the same column whatever the length of its own token. Rows keep their
order; nothing is sorted, merged or dropped, and a row whose description is
a single empty line still prints its padded token and gutter.
"""
from rich.cells import cell_len

from .faults import ConfigurationError, FaultCode


def _spacing(value, name, code, /):
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigurationError(
            f"{name} width must be an integer, got {value!r}",
            code=code,
            title=f"invalid {name}",
            hint=f"pass {name}=<non-negative integer>",
        )
    if value < 0:
        raise ConfigurationError(
            f"{name} width must be non-negative, got {value}",
            code=code,
            title=f"negative {name}",
            hint=f"pass {name}=0 or more",
        )
    return value


class ColumnTable:
    """
    Aligns (token, description lines) rows into a two-column table.

    Parameters
    - indentation: left margin (spaces) of every line.
    - gutter: spaces between the token column and the descriptions.

    Both are validated here, so a bad value fails when the builder is made,
    not half-way through rendering.
    """

    def __init__(self, indentation, gutter):
        self.indentation = _spacing(indentation, "indentation", FaultCode.NEGATIVE_INDENTATION)
        self.gutter = _spacing(gutter, "gutter", FaultCode.NEGATIVE_GUTTER)

    def measure(self, tokens, /):
        """
        Width of the token column: the widest token, in terminal cells.
        """
        return max(map(cell_len, tokens), default=0)

    def offset(self, tokens, /):
        """
        Column at which the descriptions of a section start.
        """
        return self.indentation + self.measure(tokens) + self.gutter

    def format(self, rows, /):
        """
        Render rows, each (token, description_lines), into physical lines.
        """
        rows = [(token, list(lines) or [""]) for token, lines in rows]
        width = self.measure(token for token, _ in rows)
        indent = " " * self.indentation
        gutter = " " * self.gutter
        blank = " " * width

        output = []
        for token, (first, *rest) in rows:
            output.append(indent + token + " " * (width - cell_len(token)) + gutter + first)
            output.extend(indent + blank + gutter + line for line in rest)
        return output

    def __repr__(self):
        return f"column-table(indentation={self.indentation!r}, gutter={self.gutter!r})"


__all__ = (
    "ColumnTable",
)
