"""CLI commands for swmanifest."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from swmanifest.cli.formatting import _build_summary_table, _echo_error
from swmanifest.core.exceptions import SwManifestError


app = typer.Typer(
    name="swmanifest",
    help="Generate offline-caching manifests from a build output directory.",
    no_args_is_help=True,
)

DEFAULT_OUTPUT = "sw-manifest.json"


def _resolve_config_path(config: Path | None) -> Path:
    """Return the explicit config path or discover it from the project root.

    Raises:
        typer.Exit: If no configuration file can be found.
    """
    from swmanifest.config import CONFIG_FILENAME, find_config, find_project_root

    if config is not None:
        return config

    root = find_project_root()
    found = find_config(root)
    if found is None:
        typer.echo(f"Error: No {CONFIG_FILENAME} found in {root}", err=True)
        typer.echo("Hint: Pass the configuration path explicitly.", err=True)
        raise typer.Exit(1)
    return found


@app.command()
def generate(
    dist: Path = typer.Argument(
        ...,
        help="Build output directory to snapshot.",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    config: Path | None = typer.Argument(
        None,
        help="Configuration file. Defaults to sw-config.json in the project root.",
    ),
    base_href: str = typer.Option(
        "/",
        "--base-href",
        "-b",
        help="URL prefix the application is served under.",
    ),
    output: str = typer.Option(
        DEFAULT_OUTPUT,
        "--output",
        "-o",
        help="Manifest file name, relative to DIST.",
    ),
    stdout: bool = typer.Option(
        False,
        "--stdout",
        help="Print the manifest instead of writing it.",
    ),
    workers: int = typer.Option(
        1,
        "--workers",
        "-w",
        min=1,
        help="Parallel directory listings across asset groups.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug output.",
    ),
) -> None:
    """Generate the manifest for a build output directory."""
    from swmanifest.adapters.executor import create_executor
    from swmanifest.adapters.filesystem import LocalFilesystem
    from swmanifest.config import load_config
    from swmanifest.core.services import Generator, publish_manifest
    from swmanifest.diagnostics import RichDiagnosticReporter
    from swmanifest.logging import configure_logging

    configure_logging(verbose=verbose)
    config_path = _resolve_config_path(config)

    filesystem = LocalFilesystem(dist)
    generator = Generator(
        filesystem,
        base_href,
        diagnostics=RichDiagnosticReporter(),
        executor=create_executor(workers),
    )

    try:
        manifest = generator.generate(load_config(config_path))
        if stdout:
            typer.echo(manifest.to_json())
            return
        written = publish_manifest(manifest, filesystem, "/" + output.lstrip("/"))
    except SwManifestError as e:
        _echo_error(e)
        raise typer.Exit(1) from None

    console = Console()
    console.print(_build_summary_table(manifest))
    typer.echo(
        f"Wrote {dist / written.lstrip('/')} "
        f"({len(manifest.hash_table)} hashed files)"
    )


def main() -> None:
    """Entry point for the CLI."""
    app()
