"""
Helmsman usage lines: how to invoke a command, synthesized from its ancestry.

For every command on the path root → target, in order:
- its display name (the program name for the root),
- its arguments, shaped by arity (<a>, [<a>], [<a>...]),
- "[options]" when that command declares options.

"[command]" closes the line when the target itself has subcommands.

    testhost outer-command [<outer-args>...] inner-command [<inner-args>] [options]
"""
from .tree import CommandNode

OPTIONS = "[options]"
COMMAND = "[command]"


def synopsize(node, name, /):
    """
    Build the usage string of node; name stands in for the root's name.
    """
    if not isinstance(node, CommandNode):
        raise TypeError(f"synopsize() argument must be a command-node, not {type(node).__name__}")

    tokens = []
    for step in node.path:
        tokens.append(name if step.parent is None else step.name)
        tokens.extend(argument.usage for argument in step.arguments)
        if step.options:
            tokens.append(OPTIONS)
    if node.children:
        tokens.append(COMMAND)
    return " ".join(token for token in tokens if token)


__all__ = (
    "synopsize",
)
