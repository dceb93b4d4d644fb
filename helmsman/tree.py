"""
Helmsman command definition tree.

Overview
- Specs
  • ArgumentSpec: positional argument shown as <name>, with an arity.
  • OptionSpec: named option with one or more ordered aliases (e.g., -a, --aaa).
- Tree
  • CommandNode: name, description, arguments, options and ordered children.
  • CommandTree: the arena owning every node. Nodes are addressed by index; the
    parent relation is a lookup in the arena's parent table, never a reference
    held by the child.

Metadata (sanitized on construction)
- name: non-empty string (only the root may be unnamed).
- descr: opaque text stored verbatim. Tabs, newlines and runs of spaces are
  never trimmed or collapsed here; only the layout policy looks at them.
- arity: Arity member or its string value ("exactly-one", ...).
- aliases: non-empty, unique within the owning command.

Quick example:
    >>> tree = CommandTree("test  description")
    >>> outer = tree.command(tree.root, "outer", "outer help", arguments=[ArgumentSpec("path")])
    >>> outer.command("inner", options=[OptionSpec("-v", "--verbosity", descr="noisier")])
    ...

Public API
- Enumerations: Arity
- Classes: ArgumentSpec, OptionSpec, CommandNode, CommandTree
"""
import difflib
import functools
import operator
import re
from enum import Enum

from .faults import FaultCode, UnknownCommandError
from .utils import *


class Arity(Enum):
    """
    how many values a positional argument takes, and how usage shows it.
    """
    EXACTLY_ONE = "exactly-one"
    ZERO_OR_ONE = "zero-or-one"
    ZERO_OR_MORE = "zero-or-more"

    def decorate(self, token, /):
        """
        Shape an argument token for the usage line.

        - EXACTLY_ONE  → <name>
        - ZERO_OR_ONE  → [<name>]
        - ZERO_OR_MORE → [<name>...]
        """
        match self:
            case Arity.ZERO_OR_ONE:
                return f"[{token}]"
            case Arity.ZERO_OR_MORE:
                return f"[{token}...]"
            case _:
                return token


class SpecType(type):
    """
    Metaclass giving definition types introspectable, read-only state.

    Responsibilities
    - Expose every name listed in __introspectable__ as a read-only property
      backed by the private field "_{name}" (see mirror()).
    - Provide stable __repr__/__rich_repr__ for diagnostics and rich pretty printing.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in every validation message.
    - __displayable__ (if set) narrows which properties __rich_repr__ yields.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_name(cls, metadata, /, *, required=True):
    """
    Validate 'name': a string that is non-empty after trimming (trimmed on store).

    When required is False, Unset is accepted and left in place for the caller.
    """
    if not isinstance(name := metadata["name"], str if required else str | Unset):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    if isinstance(name, str):
        if not (name := name.strip()):
            raise ValueError(f"{cls.__typename__} 'name' cannot be empty")
        metadata["name"] = name


def _sanitize_descr(cls, metadata, /):
    """
    Validate 'descr' without touching its content; Unset becomes "".
    """
    if not isinstance(descr := metadata["descr"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    metadata["descr"] = coalesce(descr, "")


class ArgumentSpec(metaclass=SpecType):
    """
    Positional argument specification.

    Properties
    - name: display name ("argument" when not given).
    - descr: verbatim description ("" when not given).
    - arity: Arity member.
    - token: "<name>", the first column of the Arguments table.
    - usage: token shaped by arity for the usage line.
    """

    __introspectable__ = (
        "name",
        "descr",
        "arity",
    )

    def __new__(cls, name=Unset, /, descr=Unset, arity=Arity.EXACTLY_ONE):
        metadata = {
            "name": name,
            "descr": descr,
            "arity": arity,
        }
        _sanitize_name(cls, metadata, required=False)
        _sanitize_descr(cls, metadata)

        if not isinstance(arity, Arity | str):
            raise TypeError(f"{cls.__typename__} 'arity' must be an arity or a string")
        try:
            metadata["arity"] = Arity(arity)
        except ValueError:
            raise ValueError(f"{cls.__typename__} 'arity' must be one of {', '.join(map(repr, (member.value for member in Arity)))}") from None

        metadata["name"] = coalesce(metadata["name"], "argument")

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    @property
    def token(self):
        return f"<{self.name}>"

    @property
    def usage(self):
        return self.arity.decorate(self.token)


class OptionSpec(metaclass=SpecType):
    """
    Named option specification with ordered aliases.

    Aliases keep their declaration order; token joins them with ", "
    (e.g., "-a, --aaa").
    """

    __introspectable__ = (
        "names",
        "descr",
    )

    def __new__(cls, *names, descr=Unset):
        metadata = {
            "names": names,
            "descr": descr,
        }
        if not names:
            raise TypeError(f"{cls.__typename__} must specify at least one name")

        sanitized = []
        for name in names:
            if not isinstance(name, str):
                raise TypeError(f"{cls.__typename__} names must be strings")
            elif not (name := name.strip()):
                raise ValueError(f"{cls.__typename__} names cannot be empty-strings")
            elif name in sanitized:
                raise ValueError(f"{cls.__typename__} names cannot contain duplicates")
            sanitized.append(name)
        metadata["names"] = sanitized
        _sanitize_descr(cls, metadata)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    @property
    def token(self):
        return ", ".join(self._names)


class CommandNode(metaclass=SpecType):
    """
    One command in a CommandTree.

    Nodes are created by CommandTree (root) and CommandTree.command (children);
    they hold their own metadata and their children, while the way back up is
    resolved through the tree: parent, root and path are arena lookups.
    """

    __introspectable__ = (
        "index",
        "name",
        "descr",
        "arguments",
        "options",
        "children",
    )

    __displayable__ = (
        "name",
        "descr",
        "arguments",
        "options",
        "children",
    )

    def __new__(cls, tree, index, /, name, descr=Unset, arguments=(), options=()):
        if not isinstance(tree, CommandTree):
            raise TypeError(f"{cls.__typename__} 'tree' must be a command-tree")

        metadata = {
            "index": index,
            "name": name,
            "descr": descr,
            "arguments": list(arguments),
            "options": list(options),
            "children": [],
        }
        # Only the root (index 0) may go unnamed.
        if index or name:
            _sanitize_name(cls, metadata)
        elif not isinstance(name, str):
            raise TypeError(f"{cls.__typename__} 'name' must be a string")
        _sanitize_descr(cls, metadata)

        if not all(isinstance(argument, ArgumentSpec) for argument in metadata["arguments"]):
            raise TypeError(f"{cls.__typename__} 'arguments' must contain argument-specs")
        if not all(isinstance(option, OptionSpec) for option in metadata["options"]):
            raise TypeError(f"{cls.__typename__} 'options' must contain option-specs")

        aliases = set()
        for option in metadata["options"]:
            for alias in option.names:
                if alias in aliases:
                    raise ValueError(f"{cls.__typename__} option name {alias!r} is already in use")
                aliases.add(alias)

        self = super().__new__(cls)
        self._tree = tree
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    @property
    def parent(self):
        return self._tree.parent(self)

    @property
    def root(self):
        return self._tree.root

    @property
    def path(self):
        """
        Return the ancestry from root to this node as a tuple.
        """
        return self._tree.path(self)

    def command(self, name, /, descr=Unset, arguments=(), options=()):
        """
        Create a child of this node (see CommandTree.command).
        """
        return self._tree.command(self, name, descr, arguments, options)

    def subcommand(self, name, /):
        return self._tree.subcommand(self, name)


class CommandTree(metaclass=SpecType):
    """
    Arena of CommandNode objects.

    Ownership goes strictly parent → children (each node keeps its ordered
    children); the reverse relation is the _parents table, indexed by node
    index, holding the parent's index or None for the root.

    The tree is built once, then treated as read-only while help is rendered.
    """

    __introspectable__ = (
        "nodes",
    )

    __displayable__ = (
        "root",
    )

    def __init__(self, descr=Unset, /, arguments=(), options=(), *, name=""):
        self._nodes = []
        self._parents = []
        self._attach(None, name, descr, arguments, options)

    def _attach(self, parent, name, descr, arguments, options):
        node = CommandNode(self, len(self._nodes), name, descr, arguments, options)
        if parent is not None:
            if any(child.name == node.name for child in parent._children):
                typeof = "subcommand" if self.parent(parent) else "command"
                raise ValueError(f"{type(node).__typename__} {typeof} name {node.name!r} is already in use")
            parent._children.append(node)
        self._nodes.append(node)
        self._parents.append(None if parent is None else parent.index)
        return node

    def _own(self, node):
        if not isinstance(node, CommandNode):
            raise TypeError(f"{type(self).__typename__} expected a command-node, got {type(node).__name__}")
        if node._tree is not self:
            raise ValueError(f"{type(self).__typename__} command {node.name!r} belongs to another tree")
        return node

    @property
    def root(self):
        return self._nodes[0]

    def command(self, parent, name, /, descr=Unset, arguments=(), options=()):
        """
        Append a child command under parent and return it.

        Raises
        - TypeError/ValueError on invalid metadata, foreign parents, duplicate
          sibling names, or duplicate option aliases.
        """
        return self._attach(self._own(parent), name, descr, arguments, options)

    def parent(self, node, /):
        if (index := self._parents[self._own(node).index]) is None:
            return None
        return self._nodes[index]

    def path(self, node, /):
        path = [node := self._own(node)]
        while (node := self.parent(node)) is not None:
            path.append(node)
        return tuple(reversed(path))

    def subcommand(self, node, name, /):
        """
        Return the child of node called name.

        Raises
        - UnknownCommandError with the closest sibling names as hint.
        """
        for child in self._own(node)._children:
            if child.name == name:
                return child
        names = [child.name for child in node._children]
        matches = difflib.get_close_matches(name, names, n=3)
        raise UnknownCommandError(
            f"no command named {name!r} under {' '.join(step.name for step in self.path(node) if step.name) or 'root'}",
            code=FaultCode.UNKNOWN_COMMAND,
            title="unknown command",
            hint=f"did you mean {' or '.join(map(repr, matches))}?" if matches else f"available: {', '.join(names) or 'none'}",
        )

    def find(self, *route):
        """
        Follow route (command names) from the root; find() returns the root.
        """
        node = self.root
        for name in route:
            node = self.subcommand(node, name)
        return node

    def walk(self):
        """
        Yield every node depth-first (pre-order), children in declaration order.
        """
        stack = [self.root]
        while stack:
            yield (node := stack.pop())
            stack.extend(reversed(node._children))

    def __iter__(self):
        return self.walk()

    def __len__(self):
        return len(self._nodes)


__all__ = (
    "Arity",
    "ArgumentSpec",
    "OptionSpec",
    "CommandNode",
    "CommandTree",
)
