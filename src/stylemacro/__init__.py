"""stylemacro: macro expansion and nested-CSS flattening for stylesheets."""

__version__ = "0.1.0"

from stylemacro.config import ExpanderConfig  # noqa: E402
from stylemacro.errors import StyleMacroError  # noqa: E402
from stylemacro.macros import (  # noqa: E402
    CssMacroExpander,
    JavascriptMacroExpander,
    MacroExpander,
)

__all__ = [
    "__version__",
    "ExpanderConfig",
    "StyleMacroError",
    "MacroExpander",
    "CssMacroExpander",
    "JavascriptMacroExpander",
]
