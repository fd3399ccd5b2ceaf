"""CLI command: luic tokens -- print the token stream of a resolved file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from luic.errors import CompileError
from luic.resolver import ImportResolver
from luic.tokenizer import tokenize


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--templates-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Root for TEMPLATE imports [default: ./assets]",
)
def tokens(input_file: str, templates_dir: str | None) -> None:
    """Resolve INPUT_FILE's imports and print one token per line."""
    try:
        resolved = ImportResolver(templates_dir=templates_dir).resolve(Path(input_file))
        stream = tokenize(resolved.text)
    except CompileError as exc:
        click.echo(f"{exc.kind.value.capitalize()} error: {exc}", err=True)
        sys.exit(1)

    for token in stream:
        click.echo(f"{token.kind.value:<20} {token!r}")
