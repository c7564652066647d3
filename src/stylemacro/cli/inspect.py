"""CLI command: stylemacro inspect -- display the lexed node tree."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylemacro.css import AtRule, CssNode, Rule, RuleSet, lex_css
from stylemacro.errors import StyleMacroError
from stylemacro.macros import CssMacroExpander


def _echo_nodes(nodes: tuple[CssNode, ...], indent: int = 0) -> None:
    pad = "  " * indent
    for node in nodes:
        if isinstance(node, RuleSet):
            click.echo(f"{pad}RuleSet [{', '.join(node.selectors)}] ({len(node.contents)} item(s))")
            _echo_nodes(node.contents, indent + 1)
        elif isinstance(node, AtRule):
            first_line = node.content.splitlines()[0] if node.content else ""
            click.echo(f"{pad}AtRule {first_line}")
        elif isinstance(node, Rule):
            click.echo(f"{pad}Rule {node.content}")


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option("--raw", is_flag=True, help="Lex without expanding macros first")
def inspect(stylesheet: str, raw: bool) -> None:
    """Expand and lex STYLESHEET, then display its node tree."""
    text = Path(stylesheet).read_text(encoding="utf-8")
    try:
        if not raw:
            text = CssMacroExpander().expand(text)
        nodes = lex_css(text)
    except StyleMacroError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Nodes: {len(nodes)}")
    _echo_nodes(nodes)
