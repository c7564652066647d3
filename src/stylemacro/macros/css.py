"""Macro expander with CSS builtins and the expand -> lex -> denest pipeline."""

from __future__ import annotations

import logging
from typing import Callable

from stylemacro.color import (
    Color,
    darken,
    desaturate,
    lighten,
    read_css_color,
    read_css_number,
    rotate_hue,
    saturate,
)
from stylemacro.config import ExpanderConfig
from stylemacro.css import css_to_string, denest_css, lex_css
from stylemacro.errors import WrongArgumentCountError
from stylemacro.macros.expander import BuiltinFunction, MacroExpander

__all__ = ["CssMacroExpander"]

logger = logging.getLogger(__name__)

_COLOR_FUNCTIONS: dict[str, Callable[[Color, float], Color]] = {
    "lighten": lighten,
    "darken": darken,
    "rotateHue": rotate_hue,
    "saturate": saturate,
    "desaturate": desaturate,
}


class CssMacroExpander(MacroExpander):
    """MacroExpander for stylesheets.

    Adds ``prefixed`` and the color builtins, e.g.::

        ¤set(fg, #336699)
        a { color: ¤darken(¤fg, 10%); ¤prefixed(border-radius: 4px); }
    """

    def __init__(self, config: ExpanderConfig | None = None) -> None:
        super().__init__(config)
        self.define_function("prefixed", self._prefixed)
        for name, fn in _COLOR_FUNCTIONS.items():
            self.define_function(name, self._color_function(name, fn))

    def _prefixed(self, args: list[str]) -> str:
        if not args:
            raise WrongArgumentCountError("prefixed", "1", 0)
        # Commas in the value split it into several arguments; put them back.
        declaration = ", ".join(args)
        return "".join(f"{prefix}{declaration};" for prefix in self.config.vendor_prefixes)

    @staticmethod
    def _color_function(name: str, fn: Callable[[Color, float], Color]) -> BuiltinFunction:
        def builtin(args: list[str]) -> str:
            if len(args) != 2:
                raise WrongArgumentCountError(name, "2", len(args))
            color = read_css_color(args[0])
            amount = read_css_number(args[1])
            return fn(color, amount).to_css()

        return builtin

    def expand_and_denest(self, source: str) -> str:
        """Expand macros, then flatten nested rule sets into plain CSS."""
        nodes = denest_css(lex_css(self.expand(source)))
        logger.debug("denested stylesheet into %d node(s)", len(nodes))
        return css_to_string(nodes)
