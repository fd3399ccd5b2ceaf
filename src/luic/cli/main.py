"""luic CLI entry point: Click group with subcommands."""

import logging

import click

from luic import __version__


@click.group()
@click.version_option(version=__version__, prog_name="luic")
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline details to stderr")
def cli(verbose: bool) -> None:
    """luic - compile LUI stylesheets to plain CSS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from luic.cli.compile import compile_command  # noqa: E402
from luic.cli.tokens import tokens  # noqa: E402

cli.add_command(compile_command)
cli.add_command(tokens)
