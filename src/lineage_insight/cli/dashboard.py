"""Dashboard command -- headline analytics, change types and velocity."""

from pathlib import Path

import typer
from rich.table import Table

from ..temporal.velocity import velocity_bars
from . import app
from ._common import (
    SNAPSHOT_ARGUMENT_HELP,
    bar,
    console,
    format_number,
    open_workspace,
    percent,
    print_json,
    sparkline,
)


@app.command()
def dashboard(
    ctx: typer.Context,
    snapshot: Path = typer.Argument(..., help=SNAPSHOT_ARGUMENT_HELP),
    fmt: str = typer.Option("rich", "--format", "-f", help="Output format: rich or json"),
):
    """
    Show project-wide analytics.

    [bold cyan]Examples:[/bold cyan]

      lineage-insight dashboard lineage.json

      lineage-insight dashboard ./repo --format json
    """
    workspace = open_workspace(ctx, snapshot)
    project = workspace.snapshot
    analytics = project.analytics
    top = workspace.config.top_files
    shares = workspace.change_types()
    velocity = workspace.velocity()

    if fmt == "json":
        print_json(
            {
                "analytics": analytics,
                "change_types": [
                    {"change_type": s.change_type, "count": s.count, "share": s.share}
                    for s in shares
                ],
                "velocity": velocity,
            }
        )
        return

    name = project.repository.name or project.repository.path
    console.print()
    console.print(f"[bold cyan]LINEAGE INSIGHT[/bold cyan] — {name}")
    console.print()

    stats = Table(show_header=False, box=None, padding=(0, 2))
    stats.add_column(style="bold")
    stats.add_column()
    stats.add_row("Features", format_number(analytics.total_features))
    stats.add_row("Functions Modified", format_number(analytics.total_functions_modified))
    stats.add_row("Prompts Detected", format_number(analytics.total_prompts_detected))
    stats.add_row("Assistant Commits", percent(analytics.assistant_commit_percentage))
    stats.add_row("Avg Match", percent(analytics.avg_prompt_similarity))
    console.print(stats)
    console.print()

    modified = Table(title="Most Modified", show_lines=False)
    modified.add_column("Files", style="cyan")
    modified.add_column("Functions", style="green")
    files = list(analytics.most_modified_files[:top])
    funcs = list(analytics.most_modified_functions[:top])
    for i in range(max(len(files), len(funcs))):
        modified.add_row(
            files[i] if i < len(files) else "",
            funcs[i] if i < len(funcs) else "",
        )
    console.print(modified)
    console.print()

    if shares:
        console.print("[bold]Change Types[/bold]")
        for share in shares:
            console.print(
                f"  [{share.color}]{share.label:<12}[/{share.color}] "
                f"{bar(share.share)} {share.count}"
            )
        console.print()

    if velocity:
        heights = velocity_bars(velocity)
        console.print(f"[bold]Velocity[/bold] (last {len(velocity)} weeks)")
        console.print(f"  {sparkline(heights)}  {velocity[0].week} → {velocity[-1].week}")
        console.print()
