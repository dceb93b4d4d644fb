"""
Helmsman help renderer.

HelpBuilder turns one CommandNode into the full help text, in a single
stateless pass:

    <name>:
      <description>

    Usage:
      <program> <ancestry...> [options] [command]

    Commands:
      <child>    <description>

    Arguments:
      <arg>      <description>

    Options:
      -a, --aaa  <description>

Blocks are separated by exactly one blank line and the text ends with one.
The three tables are left out when the node has nothing to list in them.
Arguments are listed for every command from the root down to the node,
in the same order the usage line names them. A node without a description
gets a bare "name:" heading.
Descriptions go through the configured layout policy (see layouts.Layout);
the columns are aligned by columns.ColumnTable.

Configuration (validated on construction, fail fast)
- name: program name shown for the root. Defaults to __main__.__prog__,
  then to the basename of sys.argv[0].
- gutter: spaces between the two table columns (default 4).
- indentation: left margin of every block body (default 2).
- width: line width for the wrapping layout (default 80; raw ignores it).
- layout: Layout.RAW (default) or Layout.WRAP, or their string values.
- newline: line separator (default os.linesep).

Quick example:
    >>> tree = CommandTree("test  description")
    >>> HelpBuilder("testhost").render(tree.root)
    'testhost:\\n  test  description\\n\\nUsage:\\n  testhost\\n\\n'
"""
import logging
import os.path
import sys

from .columns import ColumnTable
from .faults import ConfigurationError, FaultCode
from .layouts import Layout
from .sinks import ConsoleSink, Sink
from .tree import CommandNode, CommandTree
from .usage import synopsize
from .utils import *

logger = logging.getLogger(__name__)


def _default_program():
    return getattr(sys.modules["__main__"], "__prog__", os.path.basename(sys.argv[0]))


class HelpBuilder:
    """
    Renders help text for the nodes of a command tree.

    The builder holds configuration only; render() keeps no state between
    calls, so one builder can serve every node of every tree.
    """

    def __init__(
            self,
            name=Unset,
            /,
            gutter=4,
            indentation=2,
            width=80,
            layout=Layout.RAW,
            *,
            newline=os.linesep
    ):
        if not isinstance(name, str | Unset):
            raise ConfigurationError(
                f"program name must be a string, got {type(name).__name__}",
                code=FaultCode.INVALID_NAME,
                title="invalid name",
                hint="pass the executable or display name as a string",
            )
        if not isinstance(newline, str) or newline not in ("\n", "\r\n", "\r"):
            raise ConfigurationError(
                f"newline must be a line separator, got {newline!r}",
                code=FaultCode.INVALID_NEWLINE,
                title="invalid newline",
                hint=r"use '\n', '\r\n' or '\r'",
            )

        self._name = name
        self._table = ColumnTable(indentation, gutter)
        self._layout = Layout.resolve(layout)
        self._width = self._layout.validate(width)
        self._newline = newline

    @property
    def name(self):
        return coalesce(self._name, _default_program())

    @property
    def gutter(self):
        return self._table.gutter

    @property
    def indentation(self):
        return self._table.indentation

    @property
    def width(self):
        return self._width

    @property
    def layout(self):
        return self._layout

    @property
    def newline(self):
        return self._newline

    def _program(self, root):
        return coalesce(self._name, root.name or _default_program())

    def _indented(self, text):
        indent = " " * self.indentation
        return [indent + line for line in self._layout.layout(text, self.indentation, self._width)]

    def _synopsis(self, node, program):
        # An empty description leaves the heading alone rather than emitting one
        # indented blank line.
        lines = [f"{program if node.parent is None else node.name}:"]
        if node.descr:
            lines.extend(self._indented(node.descr))
        return lines

    def _usage(self, node, program):
        return ["Usage:", *self._indented(synopsize(node, program))]

    def _tabulate(self, heading, rows):
        offset = self._table.offset(token for token, _ in rows)
        return [heading, *self._table.format(
            (token, self._layout.layout(descr, offset, self._width)) for token, descr in rows
        )]

    def render(self, node, /):
        """
        Return the complete help text of node (a CommandNode, or a CommandTree for its root).
        """
        if isinstance(node, CommandTree):
            node = node.root
        if not isinstance(node, CommandNode):
            raise TypeError(f"render() argument must be a command-node, not {type(node).__name__}")

        program = self._program(node.root)
        blocks = [self._synopsis(node, program), self._usage(node, program)]

        for heading, rows in (
                ("Commands:", [(child.name, child.descr) for child in node.children]),
                ("Arguments:", [(argument.token, argument.descr) for step in node.path for argument in step.arguments]),
                ("Options:", [(option.token, option.descr) for option in node.options]),
        ):
            if rows:
                blocks.append(self._tabulate(heading, rows))

        logger.debug("rendered %r: %s", node.name or program, ", ".join(block[0] for block in blocks))
        return "".join(line + self._newline for block in blocks for line in (*block, ""))

    def write(self, node, sink=Unset, /):
        """
        Render node and append the whole text to sink in one call.

        The text is complete before the sink is touched, so a failure never
        leaves partial help behind. The default sink is the console (stdout).
        """
        text = self.render(node)
        if sink is Unset:
            sink = ConsoleSink()
        elif not isinstance(sink, Sink):
            raise TypeError(f"write() sink must provide append(), not {type(sink).__name__}")
        sink.append(text)
        logger.debug("wrote %d characters to %r", len(text), sink)
        return text

    def __repr__(self):
        return (
            f"help-builder(name={self._name!r}, gutter={self.gutter!r}, indentation={self.indentation!r}, "
            f"width={self._width!r}, layout={self._layout.value!r})"
        )


__all__ = (
    "HelpBuilder",
)
