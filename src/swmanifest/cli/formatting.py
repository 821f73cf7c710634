"""Formatting helpers for CLI output."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer
from rich.table import Table


if TYPE_CHECKING:
    from swmanifest.core.exceptions import SwManifestError
    from swmanifest.core.models import Manifest


def _echo_error(error: SwManifestError) -> None:
    """Print an error and its recovery hint to stderr."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)


def _mode_with_color(mode: str) -> str:
    """Highlight prefetch groups, which are downloaded at install time."""
    color = "green" if mode == "prefetch" else "cyan"
    return f"[{color}]{mode}[/{color}]"


def _build_summary_table(manifest: Manifest) -> Table:
    """Build a Rich table summarizing the manifest's groups."""
    table = Table(title="Asset groups")
    table.add_column("Name")
    table.add_column("Install")
    table.add_column("Update")
    table.add_column("Files", justify="right")
    table.add_column("URL patterns", justify="right")

    for group in manifest.asset_groups:
        table.add_row(
            group.name,
            _mode_with_color(group.install_mode),
            _mode_with_color(group.update_mode),
            str(len(group.urls)),
            str(len(group.patterns)),
        )

    return table
