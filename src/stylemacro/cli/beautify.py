"""CLI command: stylemacro beautify -- reformat compact CSS."""

from __future__ import annotations

from pathlib import Path

import click

from stylemacro.css import beautify_css


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
def beautify(stylesheet: str) -> None:
    """Print STYLESHEET with one declaration per line."""
    click.echo(beautify_css(Path(stylesheet).read_text(encoding="utf-8")))
