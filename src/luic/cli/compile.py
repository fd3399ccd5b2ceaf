"""CLI command: luic compile -- compile a .lui file to CSS."""

from __future__ import annotations

import sys
import time
from pathlib import Path

import click

from luic.compiler import compile_file
from luic.config import CLASS_NAME_FORMATS, RENDER_MODES, CompileOptions
from luic.errors import CompileError


def _fail(exc: CompileError) -> None:
    click.echo(f"{exc.kind.value.capitalize()} error: {exc}", err=True)
    sys.exit(1)


@click.command("compile")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_file", required=False, type=click.Path(dir_okay=False))
@click.option(
    "--class-format",
    type=click.Choice(CLASS_NAME_FORMATS),
    default="minimalistic",
    show_default=True,
    help="How class names are built",
)
@click.option(
    "--mode",
    type=click.Choice(RENDER_MODES),
    default="standard",
    show_default=True,
    help="Output layout",
)
@click.option("--layers/--no-layers", default=False, help="Wrap each source file in @layer")
@click.option("--mobile-first", is_flag=True, help="Emit min-width instead of max-width media queries")
@click.option(
    "--templates-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Root for TEMPLATE imports [default: ./assets]",
)
@click.option("--show-variables", is_flag=True, help="Print the variables defined by the sources")
@click.option("--show-files", is_flag=True, help="Print every source file that was used")
def compile_command(
    input_file: str,
    output_file: str | None,
    class_format: str,
    mode: str,
    layers: bool,
    mobile_first: bool,
    templates_dir: str | None,
    show_variables: bool,
    show_files: bool,
) -> None:
    """Compile INPUT_FILE and its imports into one CSS file.

    OUTPUT_FILE defaults to INPUT_FILE with a .css suffix.
    """
    started = time.monotonic()
    input_path = Path(input_file)
    output_path = Path(output_file) if output_file else input_path.with_suffix(".css")

    options = CompileOptions(
        class_name_format=class_format,
        mode=mode,
        layers=layers,
        mobile_first=mobile_first,
        templates_dir=templates_dir or str(Path.cwd() / "assets"),
    )

    try:
        result = compile_file(input_path, options, output_name=str(output_path))
    except CompileError as exc:
        _fail(exc)
        return

    try:
        output_path.write_text(result.css, encoding="utf-8")
    except OSError as exc:
        click.echo(f"Could not write {output_path}: {exc}", err=True)
        sys.exit(1)

    if show_files:
        click.echo("Used files:")
        for path in result.source_files:
            click.echo(f"  {path}")
    if show_variables:
        click.echo("Variables:")
        for name, value in result.variables.items():
            click.echo(f"  {name} = {value}")

    click.echo(f"CSS content written to {output_path}")
    click.echo(f"Generated CSS classes: {result.rule_count}")
    click.echo(f"Execution time: {time.monotonic() - started:.3f} seconds")
