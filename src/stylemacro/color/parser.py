"""Lark grammar and transformer for CSS color and amount literals."""

from __future__ import annotations

from functools import cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from stylemacro.color.model import Color
from stylemacro.errors import (
    ColorError,
    InvalidAmountError,
    InvalidHexDigitError,
    UnsupportedColorFormatError,
)

__all__ = ["read_css_color", "read_css_number"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_HEX = "0123456789abcdef"


@cache
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start=["color", "amount"],
    )


def _from_hex(digits: str) -> int:
    value = 0
    for char in digits:
        index = _HEX.find(char)
        if index == -1:
            raise InvalidHexDigitError(char)
        value = value * 16 + index
    return value


class ColorTransformer(Transformer):  # type: ignore[type-arg]
    """Turn a color or amount parse tree into a Color or float."""

    def hex_color(self, items: list[Token]) -> Color:
        digits = str(items[0]).lower()
        # Validate every digit before looking at the length.
        _from_hex(digits)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) == 6:
            digits += "ff"
        if len(digits) != 8:
            raise UnsupportedColorFormatError("#" + digits)
        return Color(*(_from_hex(digits[i : i + 2]) for i in range(0, 8, 2)))

    def named_color(self, items: list[Token]) -> Color:
        # Named colors and rgb()/rgba()/hsl() are not implemented.
        raise UnsupportedColorFormatError("".join(str(t) for t in items))

    def amount(self, items: list[Token]) -> float:
        value = float(items[0])
        if len(items) > 1:
            value /= 100
        return value


def _parse(text: str, start: str) -> object:
    tree = _parser().parse(text, start=start)
    try:
        return ColorTransformer().transform(tree)
    except VisitError as exc:
        if isinstance(exc.orig_exc, ColorError):
            raise exc.orig_exc from None
        raise


def read_css_color(text: str) -> Color:
    """Parse ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` into a Color."""
    text = text.strip()
    try:
        return _parse(text, "color")  # type: ignore[return-value]
    except LarkError as exc:
        raise UnsupportedColorFormatError(text, cause=exc) from exc


def read_css_number(text: str) -> float:
    """Parse a real number or a percentage (``N%`` is ``N / 100``).

    Blank text reads as zero.
    """
    text = text.replace(" ", "")
    if not text:
        return 0.0
    try:
        return _parse(text, "amount")  # type: ignore[return-value]
    except LarkError as exc:
        raise InvalidAmountError(text, cause=exc) from exc
