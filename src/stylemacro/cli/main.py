"""stylemacro CLI entry point: Click group with subcommands."""

import logging

import click

from stylemacro import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylemacro")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """stylemacro - macro expansion and nested-CSS flattening."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from stylemacro.cli.expand import expand  # noqa: E402
from stylemacro.cli.inspect import inspect  # noqa: E402
from stylemacro.cli.beautify import beautify  # noqa: E402

cli.add_command(expand)
cli.add_command(inspect)
cli.add_command(beautify)
