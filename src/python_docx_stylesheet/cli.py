"""Command-line interface for python-docx-stylesheet.

Provides commands for inspecting and exporting paragraph style sheets from the terminal.
"""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .errors import StylesheetError, ValidationError
from .loader import load_stylesheet
from .ooxml import build_styles_part
from .stylesheet import Stylesheet

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="docx-stylesheet",
    help="Resolve and export cascading paragraph style sheets.",
    no_args_is_help=True,
)

SheetArgument = Annotated[
    Path, typer.Argument(help="Path to the style sheet (.yaml, .yml or .json)")
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"docx-stylesheet version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Resolve and export cascading paragraph style sheets."""
    pass


def _load(sheet: Path, validate: bool = True) -> Stylesheet:
    try:
        return load_stylesheet(sheet, validate=validate)
    except (StylesheetError, FileNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def resolve(
    sheet: SheetArgument,
    style: Annotated[str, typer.Argument(help="Name of the paragraph style")],
    as_json: Annotated[bool, typer.Option("--json", help="Print as JSON")] = False,
) -> None:
    """Print every resolved attribute of a paragraph style."""
    stylesheet = _load(sheet)
    try:
        resolved = stylesheet.resolve(style)
    except StylesheetError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(resolved.to_dict(), indent=2))
        return

    font = resolved.font
    typer.echo(f"Style: {resolved.name}")
    typer.echo(f"  font:              {font.name} {font.size:g}pt (bold={font.bold}, italic={font.italic})")
    typer.echo(f"  leading:           {resolved.leading:g}pt")
    typer.echo(f"  alignment:         {resolved.alignment.render()}")
    typer.echo(f"  spacing before:    {resolved.spacing_before:g}pt")
    typer.echo(f"  spacing after:     {resolved.spacing_after:g}pt")
    typer.echo(f"  left indent:       {resolved.left_indent:g}pt")
    typer.echo(f"  first line indent: {resolved.first_line_indent:g}pt")


@app.command()
def check(sheet: SheetArgument) -> None:
    """Validate a style sheet and resolve every paragraph style in it."""
    stylesheet = _load(sheet, validate=False)

    failures = []
    try:
        stylesheet.validate()
    except ValidationError as e:
        failures.extend(e.errors)

    for style in stylesheet:
        try:
            style.resolve()
        except StylesheetError as e:
            failures.append(f"{style.name}: {e}")

    if failures:
        for failure in failures:
            typer.echo(failure, err=True)
        logger.warning(f"{len(failures)} problem(s) in {sheet}")
        raise typer.Exit(1)

    typer.echo(f"OK: {len(stylesheet)} paragraph style(s) resolved")


@app.command(name="list")
def list_styles(sheet: SheetArgument) -> None:
    """List the paragraph styles of a style sheet with their base styles."""
    stylesheet = _load(sheet, validate=False)
    for style in stylesheet:
        if style.base_style:
            typer.echo(f"{style.name} <- {style.base_style}")
        else:
            typer.echo(style.name)


@app.command()
def export(
    sheet: SheetArgument,
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Output styles.xml path")
    ] = Path("styles.xml"),
) -> None:
    """Export the resolved styles as a WordprocessingML styles part."""
    stylesheet = _load(sheet)
    try:
        data = build_styles_part(stylesheet)
    except StylesheetError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    output.write_bytes(data)
    typer.echo(f"Exported {len(stylesheet)} paragraph style(s) to {output}")


if __name__ == "__main__":
    app()
