"""Error hierarchy for stylemacro."""

from __future__ import annotations


class StyleMacroError(Exception):
    """Base error for all stylemacro errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Macro expansion
# ---------------------------------------------------------------------------


class MacroError(StyleMacroError):
    """Raised when macro expansion cannot complete."""


class MalformedInvocationError(MacroError):
    """An argument list opened with ``(`` or ``{`` is never closed."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class RecursionLimitError(MacroError):
    """Expansion nested deeper than the configured maximum."""

    def __init__(self, depth: int) -> None:
        super().__init__(f"too much recursion depth in macro expansion (limit {depth})")
        self.depth = depth


class InvalidDefinitionError(MacroError):
    """``define`` was called without a name and a body."""


class UndefinedMacroError(MacroError):
    """A builtin required a registered macro that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"undefined macro: {name!r}")
        self.name = name


class WrongArgumentCountError(MacroError):
    """A builtin was invoked with an unsupported number of arguments."""

    def __init__(self, function: str, expected: str, got: int) -> None:
        super().__init__(f"{function} requires {expected} argument(s), got {got}")
        self.function = function
        self.expected = expected
        self.got = got


# ---------------------------------------------------------------------------
# CSS structure
# ---------------------------------------------------------------------------


class CssSyntaxError(StyleMacroError):
    """Raised when CSS text cannot be lexed into nodes."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class UnbalancedBracesError(CssSyntaxError):
    """A ``}`` without a matching ``{``, or a block left open."""


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


class ColorError(StyleMacroError):
    """Raised when a color or amount literal cannot be read."""


class UnsupportedColorFormatError(ColorError):
    """Named colors, functional notations and odd hex lengths."""

    def __init__(self, value: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"unsupported color: {value!r}", cause=cause)
        self.value = value


class InvalidHexDigitError(ColorError):
    def __init__(self, digit: str) -> None:
        super().__init__(f"invalid hex character: {digit!r}")
        self.digit = digit


class InvalidAmountError(ColorError):
    """The amount argument is neither a number nor a percentage."""

    def __init__(self, value: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"invalid amount: {value!r}", cause=cause)
        self.value = value
