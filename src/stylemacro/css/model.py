"""CSS structure model: AtRule, Rule and RuleSet nodes plus serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class AtRule:
    """An ``@`` construct kept verbatim, terminator included."""

    content: str

    def __str__(self) -> str:
        return self.content


@dataclass(frozen=True)
class Rule:
    """A single declaration such as ``color: red``.

    ``content`` does not include the ending semicolon.
    """

    content: str

    def __str__(self) -> str:
        if not self.content.strip():
            return ""
        return self.content + ";"


@dataclass(frozen=True)
class RuleSet:
    """A selector list with a block of nodes, possibly nested rule sets."""

    selectors: tuple[str, ...] = ()
    contents: tuple[CssNode, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        lines = [", ".join(self.selectors) + " {\n"]
        for node in self.contents:
            text = str(node)
            if text:
                lines.append("\t" + text.replace("\n", "\n\t") + "\n")
        lines.append("}")
        return "".join(lines)


CssNode = Union[AtRule, Rule, RuleSet]


def css_to_string(nodes: tuple[CssNode, ...] | list[CssNode]) -> str:
    """Serialize nodes, with a blank line after each closing brace."""
    out = ""
    for node in nodes:
        if out:
            out += "\n\n" if out.endswith("}") else "\n"
        out += str(node)
    return out
