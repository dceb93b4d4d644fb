"""
Helmsman faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every fault the help
  layer can raise. Codes are grouped by domain to keep logs/searches predictable.
- HelpException: base type that carries message + options and knows how to
  render itself through rich in a short, lowercased and actionable way.
- ConfigurationError / UnknownCommandError: the concrete faults.

Integration
- Faults are raised, never printed by the library; a host that wants the
  friendly rendering can print the exception on a rich console:
      console.print(fault)
- Description text is never a fault: whatever a command carries is rendered
  as-is.
"""
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.text import Text

from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes used across the help layer (stable identifiers).

    grouping (by high-level domain)
    - configuration (2110x)
      • INVALID_WIDTH, NEGATIVE_GUTTER, NEGATIVE_INDENTATION, UNKNOWN_LAYOUT,
        INVALID_NAME, INVALID_NEWLINE
    - lookup (2120x)
      • UNKNOWN_COMMAND
    """
    # --- configuration errors (2110x) ---
    INVALID_WIDTH        = 21101
    NEGATIVE_GUTTER      = 21102
    NEGATIVE_INDENTATION = 21103
    UNKNOWN_LAYOUT       = 21104
    INVALID_NAME         = 21105
    INVALID_NEWLINE      = 21106

    # --- lookup errors (2120x) ---
    UNKNOWN_COMMAND      = 21201

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(sys.modules["__main__"], "__codes__", {}).get(self, self.value))


class HelpException(Exception):
    """
    base fault: a one-sentence message plus rendering options.

    options
    - code: FaultCode of the fault (shown in the header).
    - title: short title (shown in the header, title-cased).
    - hint: single actionable hint (shown after an arrow).
    - colorful: style the rich rendering (default False).
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __rich__(self):
        main = sys.modules["__main__"]

        styles = defaultdict(str, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if self.options.get("colorful", False) else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            return Text(str(fragment), style)

        header = Text.assemble(
            "[ ",
            text(getattr(main, "__prog__", "helmsman"), styler("prog-name")),
            " — ",
            text(self.code.normalize() if self.code else "", styler("code")),
            " | ",
            text(self.options.get("title", "").title(), styler("error-title")),
            " ]"
        )
        renders = [header, text(self.message, styler("error-message"))]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))
        return Group(*renders)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class ConfigurationError(HelpException, ValueError): ...
class UnknownCommandError(HelpException, LookupError): ...


__all__ = (
    "FaultCode",
    "HelpException",
    "ConfigurationError",
    "UnknownCommandError",
)
