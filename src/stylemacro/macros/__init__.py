from stylemacro.macros.css import CssMacroExpander
from stylemacro.macros.expander import BuiltinFunction, MacroDefinition, MacroExpander
from stylemacro.macros.javascript import JavascriptMacroExpander
from stylemacro.macros.scanner import Invocation

__all__ = [
    "MacroExpander",
    "MacroDefinition",
    "BuiltinFunction",
    "CssMacroExpander",
    "JavascriptMacroExpander",
    "Invocation",
]
