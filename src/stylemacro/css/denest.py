"""Denesting: flatten nested rule sets into selector-qualified flat ones."""

from __future__ import annotations

from stylemacro.css.model import CssNode, RuleSet

__all__ = ["combine_selectors", "denest", "denest_css"]


def combine_selectors(outer: str, inner: str) -> str:
    """Qualify *inner* by *outer*.

    Pseudo-classes and pseudo-elements (``:hover``, ``::before``) attach
    directly to the outer selector; anything else becomes a descendant.
    Use ``*:hover`` for a descendant pseudo-class.
    """
    if not inner:
        return outer
    if not outer:
        return inner
    if inner.startswith(":"):
        return outer + inner
    return outer + " " + inner


def denest(rule_set: RuleSet, outer: RuleSet | None = None) -> tuple[RuleSet, ...]:
    """Flatten *rule_set* (and everything nested in it) against *outer*.

    The first element is the rule set's own level; flattened nested rule
    sets follow in source order.
    """
    if outer is None:
        selectors = rule_set.selectors
    else:
        selectors = tuple(
            combine_selectors(outer_selector, inner_selector)
            for outer_selector in outer.selectors or ("",)
            for inner_selector in rule_set.selectors or ("",)
        )

    contents: list[CssNode] = []
    nested: list[RuleSet] = []
    for node in rule_set.contents:
        if isinstance(node, RuleSet):
            nested.append(node)
        else:
            contents.append(node)

    level = RuleSet(selectors=selectors, contents=tuple(contents))
    flattened: list[RuleSet] = []
    # A level holding nothing but nested rule sets is only a container.
    if contents or not nested:
        flattened.append(level)
    for child in nested:
        flattened.extend(denest(child, level))
    return tuple(flattened)


def denest_css(nodes: tuple[CssNode, ...] | list[CssNode]) -> tuple[CssNode, ...]:
    """Denest every top-level rule set; other nodes pass through unchanged."""
    result: list[CssNode] = []
    for node in nodes:
        if isinstance(node, RuleSet):
            result.extend(denest(node))
        else:
            result.append(node)
    return tuple(result)
