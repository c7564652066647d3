"""Generic recursive text-rewriting macro engine.

Names resolve through an ordered chain of plain dicts: the current macro's
parameters, builtin functions, global variables, user macros.  Anything
else expands to the empty string so optional slots can be left unset.

``set`` is itself a macro and does not expand its arguments.  To force
expansion, wrap the value in ``echo``.  This does not understand comments.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from stylemacro.config import ExpanderConfig
from stylemacro.errors import (
    InvalidDefinitionError,
    RecursionLimitError,
    UndefinedMacroError,
    WrongArgumentCountError,
)
from stylemacro.macros.scanner import Invocation, find_invocation, parse_invocation

__all__ = ["BuiltinFunction", "MacroDefinition", "MacroExpander"]

logger = logging.getLogger(__name__)

BuiltinFunction = Callable[[list[str]], str]

_QUOTE_PAIRS = ('"', "'", "`")


@dataclass(frozen=True)
class MacroDefinition:
    """A user macro registered with ``define``."""

    name: str
    parameters: tuple[str, ...]
    body: str


def _unwrap(argument: str) -> str:
    argument = argument.strip()
    if len(argument) >= 2 and argument[0] == argument[-1] and argument[0] in _QUOTE_PAIRS:
        return argument[1:-1]
    return argument


class MacroExpander:
    """Expand marker-prefixed invocations in text.

    Each instance owns its variable, function and macro registries; use one
    instance per document (or per thread).
    """

    def __init__(self, config: ExpanderConfig | None = None) -> None:
        self.config = config or ExpanderConfig()
        self.functions: dict[str, BuiltinFunction] = {}
        self.variables: dict[str, str] = {}
        self.macros: dict[str, MacroDefinition] = {}
        self._depth = 0

        self.define_function("get", self._get)
        self.define_function("set", self._set)
        self.define_function("define", self._define)
        self.define_function("loop", self._loop)
        self.define_function("echo", lambda args: ", ".join(args))

    # --- registries -----------------------------------------------------------

    def define_variable(self, name: str, value: str) -> None:
        self.variables[name] = value

    def define_function(self, name: str, fn: BuiltinFunction) -> None:
        self.functions[name] = fn

    # --- builtins -------------------------------------------------------------

    def _get(self, args: list[str]) -> str:
        if len(args) != 1:
            raise WrongArgumentCountError("get", "1", len(args))
        return self.variables.get(args[0], "")

    def _set(self, args: list[str]) -> str:
        if len(args) != 2:
            raise WrongArgumentCountError("set", "2", len(args))
        self.variables[args[0]] = args[1]
        return ""

    def _define(self, args: list[str]) -> str:
        if len(args) < 2:
            raise InvalidDefinitionError(
                f"define requires at least a macro name and definition, got {args!r}"
            )
        definition = MacroDefinition(name=args[0], parameters=tuple(args[1:-1]), body=args[-1])
        self.macros[definition.name] = definition
        logger.debug("defined macro %s%r", definition.name, definition.parameters)
        return ""

    def _loop(self, args: list[str]) -> str:
        """Call a macro as many times as its parameter count allows.

        A short final chunk binds only the parameters it has.
        """
        if len(args) < 2:
            raise WrongArgumentCountError("loop", "at least 2", len(args))
        definition = self.macros.get(args[0])
        if definition is None:
            raise UndefinedMacroError(args[0])
        remaining = args[1:]
        step = len(definition.parameters) or 1
        return "".join(
            self.expand_macro(definition, remaining[i : i + step])
            for i in range(0, len(remaining), step)
        )

    # --- expansion ------------------------------------------------------------

    def expand(self, source: str) -> str:
        """Expand every invocation in *source*.

        Raises RecursionLimitError when expansion nests too deeply and
        MalformedInvocationError for an unterminated argument list.
        """
        return self._expand(source, {})

    def expand_macro(self, definition: MacroDefinition, arguments: list[str]) -> str:
        """Expand a macro body with its parameters bound to *arguments*.

        Missing arguments leave their parameters unbound.
        """
        local_variables = dict(zip(definition.parameters, arguments))
        return self._expand(definition.body, local_variables)

    def _expand(self, source: str, local_variables: dict[str, str]) -> str:
        self._depth += 1
        try:
            if self._depth > self.config.max_depth:
                raise RecursionLimitError(self.config.max_depth)
            return self._rewrite(source, local_variables)
        finally:
            self._depth -= 1

    def _rewrite(self, source: str, local_variables: dict[str, str]) -> str:
        marker = self.config.marker
        # Every set runs first so the last assignment applies document-wide.
        only_sets = True
        position = 0
        while True:
            index = find_invocation(source, marker, position, "set" if only_sets else None)
            if index == -1:
                if not only_sets:
                    return source
                only_sets = False
                position = 0
                continue

            invocation = parse_invocation(source, index, marker)
            if invocation is None:
                # A marker with no name is literal text.
                position = index + len(marker)
                continue

            replacement = self._evaluate(invocation, local_variables)
            source = source[: invocation.start] + replacement + source[invocation.end :]
            position = invocation.start + len(replacement)

    def _evaluate(self, invocation: Invocation, local_variables: dict[str, str]) -> str:
        name = invocation.name
        arguments = [_unwrap(argument) for argument in invocation.arguments]
        if name not in self.config.raw_argument_functions:
            arguments = [self._expand(argument, local_variables) for argument in arguments]

        settled = name in self.config.raw_argument_functions
        if name in local_variables:
            replacement = local_variables[name]
            settled = False
        elif name in self.functions:
            replacement = self.functions[name](arguments)
        elif name in self.variables:
            replacement = self.variables[name]
        elif name in self.macros:
            replacement = self.expand_macro(self.macros[name], arguments)
            settled = True
        else:
            replacement = ""

        # Stored raw text expands on use, one level deeper than its reference.
        if not settled and self.config.marker in replacement:
            replacement = self._expand(replacement, local_variables)

        if invocation.terminated and replacement and not replacement.endswith(";"):
            replacement += ";"
        return replacement
