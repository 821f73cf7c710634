"""Commands for checking globs and durations without generating a manifest."""

from __future__ import annotations

import re

import typer

from swmanifest.cli.formatting import _echo_error
from swmanifest.cli.main import app
from swmanifest.core.duration import parse_duration_ms
from swmanifest.core.exceptions import MalformedDurationError
from swmanifest.core.glob_utils import glob_to_regex


@app.command()
def match(
    glob: str = typer.Argument(..., help="Glob pattern, e.g. '/assets/**/*.png'."),
    path: str = typer.Argument(..., help="Path or URL to test."),
    literal_question_mark: bool = typer.Option(
        False,
        "--literal-question-mark",
        "-q",
        help="Treat '?' literally, as in data group URL patterns.",
    ),
) -> None:
    """Show the compiled regex for GLOB and whether PATH matches it."""
    regex = f"^{glob_to_regex(glob, literal_question_mark)}$"
    typer.echo(f"Regex: {regex}")

    try:
        compiled = re.compile(regex)
    except re.error as e:
        typer.echo(f"Error: Glob '{glob}' compiles to an invalid regex: {e}", err=True)
        typer.echo(
            "Hint: Escape or remove regex metacharacters such as '[', '(' or '{'",
            err=True,
        )
        raise typer.Exit(1) from None

    if compiled.search(path) is None:
        typer.echo(f"{path}: no match")
        raise typer.Exit(1)
    typer.echo(f"{path}: match")


@app.command()
def duration(
    value: str = typer.Argument(..., help="Duration such as '3d12h'."),
) -> None:
    """Convert a duration string to milliseconds."""
    try:
        typer.echo(str(parse_duration_ms(value)))
    except MalformedDurationError as e:
        _echo_error(e)
        raise typer.Exit(1) from None
