"""Features command -- clustered units of work, newest first."""

from pathlib import Path

import typer
from rich.table import Table

from ..analysis.change_types import change_type_color, change_type_label, dominant_change_type
from . import app
from ._common import SNAPSHOT_ARGUMENT_HELP, console, format_number, open_workspace, print_json


@app.command()
def features(
    ctx: typer.Context,
    snapshot: Path = typer.Argument(..., help=SNAPSHOT_ARGUMENT_HELP),
    fmt: str = typer.Option("rich", "--format", "-f", help="Output format: rich or json"),
):
    """
    List features with their dominant change type and line deltas.
    """
    workspace = open_workspace(ctx, snapshot)
    ordered = workspace.features()

    if fmt == "json":
        print_json(
            [
                {
                    "cluster_id": f.cluster_id,
                    "title": f.display_title,
                    "dominant_change_type": dominant_change_type(f),
                    "commits": len(f.commit_hashes),
                    "lines_added": f.total_lines_added,
                    "lines_removed": f.total_lines_removed,
                }
                for f in ordered
            ]
        )
        return

    if not ordered:
        console.print("[yellow]No features detected yet.[/yellow]")
        return

    table = Table(title=f"Features ({len(ordered)})")
    table.add_column("Feature", overflow="fold")
    table.add_column("Type")
    table.add_column("Commits", justify="right")
    table.add_column("Lines", justify="right")
    for feature in ordered:
        dominant = dominant_change_type(feature)
        color = change_type_color(dominant)
        title = feature.display_title
        if feature.narrative:
            title += f"\n[dim]{feature.narrative}[/dim]"
        table.add_row(
            title,
            f"[{color}]{change_type_label(dominant)}[/{color}]",
            str(len(feature.commit_hashes)),
            f"[green]+{format_number(feature.total_lines_added)}[/green] / "
            f"[red]-{format_number(feature.total_lines_removed)}[/red]",
        )
    console.print(table)
