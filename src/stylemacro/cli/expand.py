"""CLI command: stylemacro expand -- expand macros in a stylesheet or script."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylemacro.config import ExpanderConfig
from stylemacro.errors import StyleMacroError
from stylemacro.macros import CssMacroExpander, JavascriptMacroExpander, MacroExpander


def _parse_definitions(definitions: tuple[str, ...]) -> dict[str, str]:
    variables: dict[str, str] = {}
    for item in definitions:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"expected NAME=VALUE, got {item!r}", param_hint="--define")
        variables[name.strip()] = value
    return variables


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--language",
    type=click.Choice(["css", "js"]),
    default="css",
    show_default=True,
    help="Builtin set to expand with",
)
@click.option("--denest/--no-denest", default=True, help="Flatten nested CSS rule sets")
@click.option("--define", "-D", "definitions", multiple=True, help="Global variable as NAME=VALUE")
@click.option("--max-depth", type=int, default=None, help="Macro recursion limit")
def expand(
    source: str,
    language: str,
    denest: bool,
    definitions: tuple[str, ...],
    max_depth: int | None,
) -> None:
    """Expand macros in SOURCE and print the result.

    CSS output is denested into flat rule sets unless --no-denest is given.
    """
    config = ExpanderConfig() if max_depth is None else ExpanderConfig(max_depth=max_depth)
    expander: MacroExpander
    if language == "js":
        expander = JavascriptMacroExpander(config)
    else:
        expander = CssMacroExpander(config)
    for name, value in _parse_definitions(definitions).items():
        expander.define_variable(name, value)

    text = Path(source).read_text(encoding="utf-8")
    try:
        if isinstance(expander, CssMacroExpander) and denest:
            output = expander.expand_and_denest(text)
        else:
            output = expander.expand(text)
    except StyleMacroError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(output)
