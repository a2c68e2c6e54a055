"""breeze CLI entry point: Click group with subcommands."""

import click

from breeze import __version__


@click.group()
@click.version_option(version=__version__, prog_name="breeze")
def cli() -> None:
    """breeze - incremental utility-first stylesheet compiler."""


# Import and register subcommands
from breeze.cli.build import build  # noqa: E402
from breeze.cli.inspect import inspect  # noqa: E402

cli.add_command(build)
cli.add_command(inspect)
