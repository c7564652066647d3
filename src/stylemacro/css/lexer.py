"""Hand-written structural lexer for (macro-expanded) CSS.

The lexer only recognises the three node kinds of :mod:`stylemacro.css.model`:

    @media screen { ... }          -> AtRule (kept verbatim)
    color: red;                    -> Rule
    .a, .b { color: red; .c {} }   -> RuleSet (contents lexed recursively)

"Top level" below means outside quoted strings and parentheses, so
``url(data:a;b)`` and ``:is(.a, .b)`` are never split.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from stylemacro.css.model import AtRule, CssNode, Rule, RuleSet
from stylemacro.errors import UnbalancedBracesError

__all__ = ["lex_css", "strip_comments"]

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*[^*]*\*+(?:[^/*][^*]*\*+)*/")


def strip_comments(css: str) -> str:
    return _COMMENT_RE.sub("", css)


def _unquoted(css: str, start: int = 0) -> Iterator[tuple[int, str]]:
    """Yield ``(index, char)`` for every character outside a quoted string."""
    quote = ""
    escaped = False
    for i in range(start, len(css)):
        c = css[i]
        if quote:
            if escaped:
                escaped = False
            elif c == "\\":
                escaped = True
            elif c == quote:
                quote = ""
            continue
        if c in "\"'":
            quote = c
            continue
        yield i, c


def _skip_whitespace(css: str, pos: int) -> int:
    while pos < len(css) and css[pos].isspace():
        pos += 1
    return pos


def _find_statement_end(css: str, start: int) -> tuple[int, str]:
    """Return the index and character of the first top-level ``;``, ``{`` or ``}``.

    Returns ``(len(css), "")`` when there is none.
    """
    parens = 0
    for i, c in _unquoted(css, start):
        if c == "(":
            parens += 1
        elif c == ")":
            parens = max(0, parens - 1)
        elif parens == 0 and c in ";{}":
            return i, c
    return len(css), ""


def _find_closing_brace(css: str, open_index: int, offset: int) -> int:
    depth = 0
    for i, c in _unquoted(css, open_index):
        if c == "{":
            depth += 1
        elif c == "}":
            depth -= 1
            if depth == 0:
                return i
    raise UnbalancedBracesError("Bad CSS: block is never closed", offset + open_index)


def _split_selectors(text: str) -> tuple[str, ...]:
    selectors: list[str] = []
    depth = 0
    begin = 0
    for i, c in _unquoted(text):
        if c in "([":
            depth += 1
        elif c in ")]":
            depth = max(0, depth - 1)
        elif c == "," and depth == 0:
            selectors.append(text[begin:i])
            begin = i + 1
    selectors.append(text[begin:])
    return tuple(s.strip() for s in selectors if s.strip())


def _lex_at_rule(css: str, start: int, offset: int) -> tuple[AtRule, int]:
    depth = 0
    for i, c in _unquoted(css, start):
        if c == ";" and depth == 0:
            return AtRule(css[start : i + 1]), i + 1
        if c == "{":
            depth += 1
        elif c == "}":
            depth -= 1
            if depth < 0:
                raise UnbalancedBracesError("Bad CSS: mismatched }", offset + i)
            if depth == 0:
                return AtRule(css[start : i + 1]), i + 1
    if depth:
        raise UnbalancedBracesError("Bad CSS: at-rule block is never closed", offset + start)
    return AtRule(css[start:].rstrip()), len(css)


def _lex(css: str, offset: int) -> tuple[CssNode, ...]:
    nodes: list[CssNode] = []
    pos = _skip_whitespace(css, 0)
    while pos < len(css):
        if css[pos] == "@":
            node, pos = _lex_at_rule(css, pos, offset)
            nodes.append(node)
        else:
            end, kind = _find_statement_end(css, pos)
            if kind == "}":
                raise UnbalancedBracesError("Bad CSS: mismatched }", offset + end)
            if kind == "{":
                close = _find_closing_brace(css, end, offset)
                nodes.append(
                    RuleSet(
                        selectors=_split_selectors(css[pos:end]),
                        contents=_lex(css[end + 1 : close], offset + end + 1),
                    )
                )
                pos = close + 1
            else:
                nodes.append(Rule(css[pos:end].rstrip()))
                pos = end + 1
        pos = _skip_whitespace(css, pos)
    return tuple(nodes)


def lex_css(css: str) -> tuple[CssNode, ...]:
    """Lex CSS text into an ordered tuple of nodes.

    Comments are removed first.  Raises UnbalancedBracesError when a ``}``
    has no matching ``{`` or a block is left open.
    """
    nodes = _lex(strip_comments(css), 0)
    logger.debug("lexed %d top-level css node(s)", len(nodes))
    return nodes
