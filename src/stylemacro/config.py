from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExpanderConfig:
    marker: str = "¤"
    max_depth: int = 10
    # These builtins receive their arguments unexpanded.
    raw_argument_functions: frozenset[str] = field(
        default_factory=lambda: frozenset({"define", "quote", "set"})
    )
    vendor_prefixes: tuple[str, ...] = ("-moz-", "-webkit-", "-o-", "-ms-", "-khtml-", "")
