from rich.pretty import pprint

from helmsman import *

__prog__ = "testhost"


tree = CommandTree("test  description\tfor synopsis")
outer = tree.command(
    tree.root,
    "outer-command",
    "outer command help",
    arguments=[ArgumentSpec("outer-args", arity=Arity.ZERO_OR_MORE)],
)
inner = outer.command(
    "inner-command",
    "inner    command\t help  with whitespace",
    arguments=[ArgumentSpec("inner-args", arity="zero-or-one")],
    options=[OptionSpec("-v", "--verbosity", descr="Inner    command    option \twith spaces")],
)


if __name__ == '__main__':
    verbose()
    pprint(tree)
    builder = HelpBuilder(gutter=4, indentation=2)
    for node in tree:
        builder.write(node)
