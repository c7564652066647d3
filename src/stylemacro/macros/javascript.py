"""Macro expander for inline scripts."""

from __future__ import annotations

from stylemacro.config import ExpanderConfig
from stylemacro.errors import WrongArgumentCountError
from stylemacro.macros.expander import MacroExpander

__all__ = ["JavascriptMacroExpander"]

_FOREACH_TEMPLATE = """
var {temporary} = {array};
if({temporary} != null)
for(var {counter} = 0; {counter} < {temporary}.length; {counter}++) {{
\tvar {variable} = {temporary}[{counter}];
\t{code}
}}"""


class JavascriptMacroExpander(MacroExpander):
    """MacroExpander with a ``foreach`` loop builtin::

        ¤foreach(item; items) {
            console.log(item);
        }
    """

    def __init__(self, config: ExpanderConfig | None = None) -> None:
        super().__init__(config)
        self._foreach_counter = 0
        self.define_function("foreach", self._foreach)

    def _next_name(self, prefix: str) -> str:
        self._foreach_counter += 1
        return f"{prefix}_{self._foreach_counter}"

    def _foreach(self, args: list[str]) -> str:
        if len(args) < 2:
            raise WrongArgumentCountError("foreach", "a loop head and code", len(args))
        head = ", ".join(args[:-1])
        if ";" not in head:
            raise WrongArgumentCountError("foreach", "'variable; array'", len(args) - 1)
        variable, array = (part.strip() for part in head.split(";", 1))
        return _FOREACH_TEMPLATE.format(
            counter=self._next_name("foreach_loop_counter"),
            temporary=self._next_name("foreach_loop_temporary"),
            variable=variable,
            array=array,
            code=args[-1],
        )
