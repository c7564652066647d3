"""Locate macro invocations and split their arguments.

Forms recognised (with the default marker)::

    ¤var
    ¤lighten(¤foreground, 0.5)
    ¤lighten(¤foreground, 0.5);     exactly one semicolon shows up at the end
    ¤name(something, something_else) {
        final argument
    }
    ¤function {
        argument
    }
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cache

from stylemacro.errors import MalformedInvocationError

__all__ = ["Invocation", "find_invocation", "parse_invocation", "split_arguments", "read_block"]

_IDENTIFIER_RE = re.compile(r"[A-Za-z0-9_]+")
_WHITESPACE = " \t\n\r"
_QUOTES = "\"'`"


@dataclass(frozen=True)
class Invocation:
    """One invocation found in the source.

    ``source[start:end]`` is the text to replace.  ``terminated`` is set when
    a trailing ``;`` was swallowed into that span.
    """

    name: str
    arguments: tuple[str, ...]
    start: int
    end: int
    terminated: bool = False


@cache
def _named_pattern(marker: str, name: str) -> re.Pattern[str]:
    return re.compile(re.escape(marker) + re.escape(name) + r"(?![A-Za-z0-9_])")


def find_invocation(source: str, marker: str, start: int = 0, name: str | None = None) -> int:
    """Index of the next *marker* at or after *start*, or -1.

    With *name*, only invocations of exactly that name are found.
    """
    if name is None:
        return source.find(marker, start)
    match = _named_pattern(marker, name).search(source, start)
    return match.start() if match else -1


def _skip_whitespace(source: str, pos: int) -> int:
    while pos < len(source) and source[pos] in _WHITESPACE:
        pos += 1
    return pos


def split_arguments(source: str, open_index: int) -> tuple[list[str], int]:
    """Split the parenthesized list opening at *open_index* on top-level commas.

    Commas inside nested parentheses or quoted spans do not split; a
    backslash keeps the next character from toggling a quote and has no
    other effect.  Returns the raw arguments and the index just past the
    closing ``)``.  ``()`` yields no arguments.
    """
    arguments: list[str] = []
    depth = 0
    quote = ""
    escaped = False
    begin = open_index + 1
    for i in range(open_index, len(source)):
        c = source[i]
        protected = escaped
        escaped = c == "\\" and not protected
        if quote:
            if c == quote and not protected:
                quote = ""
            continue
        if c in _QUOTES:
            if not protected:
                quote = c
        elif c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth == 0:
                arguments.append(source[begin:i])
                if len(arguments) == 1 and not arguments[0].strip():
                    arguments = []
                return arguments, i + 1
        elif c == "," and depth == 1:
            arguments.append(source[begin:i])
            begin = i + 1
    raise MalformedInvocationError("unterminated ( in macro invocation", open_index)


def read_block(source: str, open_index: int) -> tuple[str, int]:
    """Return the text inside the ``{...}`` opening at *open_index* and the index past it."""
    depth = 0
    for i in range(open_index, len(source)):
        if source[i] == "{":
            depth += 1
        elif source[i] == "}":
            depth -= 1
            if depth == 0:
                return source[open_index + 1 : i], i + 1
    raise MalformedInvocationError("unterminated { in macro invocation", open_index)


def parse_invocation(source: str, start: int, marker: str) -> Invocation | None:
    """Parse the invocation whose marker sits at *start*.

    Returns None when the marker is not followed by an identifier.
    """
    match = _IDENTIFIER_RE.match(source, start + len(marker))
    if match is None:
        return None

    arguments: list[str] = []
    end = match.end()
    look = _skip_whitespace(source, end)
    if look < len(source) and source[look] == "(":
        parsed, end = split_arguments(source, look)
        arguments.extend(parsed)
        look = _skip_whitespace(source, end)
    if look < len(source) and source[look] == "{":
        block, end = read_block(source, look)
        arguments.append(block)
    elif look == len(source):
        end = look

    terminated = end < len(source) and source[end] == ";"
    if terminated:
        end += 1
    return Invocation(
        name=match.group(),
        arguments=tuple(arguments),
        start=start,
        end=end,
        terminated=terminated,
    )
