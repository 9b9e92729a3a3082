"""Patterns command -- activity heatmap, weekday bars and file couplings."""

from pathlib import Path

import typer

from ..temporal.activity import DAY_LABELS
from . import app
from ._common import SNAPSHOT_ARGUMENT_HELP, bar, console, open_workspace, percent, print_json

_HEAT = " ░▒▓█"


def _heat_cell(count: int, scale: int) -> str:
    if count == 0:
        return "·"
    return _HEAT[max(1, min(4, round(count / scale * 4)))]


@app.command()
def patterns(
    ctx: typer.Context,
    snapshot: Path = typer.Argument(..., help=SNAPSHOT_ARGUMENT_HELP),
    fmt: str = typer.Option("rich", "--format", "-f", help="Output format: rich or json"),
):
    """
    Show when the author works and which files change together.
    """
    workspace = open_workspace(ctx, snapshot)
    report = workspace.patterns()
    couplings = report.couplings[: workspace.config.max_couplings]

    if fmt == "json":
        print_json(
            {
                "profile": report.profile,
                "hour_counts": report.hour_counts,
                "day_counts": report.day_counts,
                "couplings": [
                    {"file_a": a, "file_b": b, "count": n} for a, b, n in couplings
                ],
            }
        )
        return

    profile = report.profile
    console.print()
    console.print("[bold cyan]Developer Profile[/bold cyan]")
    console.print(f"  Languages          {', '.join(profile.languages) or '-'}")
    console.print(f"  Peak Hours         {profile.peak_hours_label}")
    console.print(f"  Commit Granularity {profile.avg_granularity} files/commit")
    console.print(f"  Total Commits      {profile.total_commits:,}")
    console.print(f"  Assistant Prompts  {profile.total_sessions:,}")
    console.print(f"  Assistant %        {percent(profile.assistant_percentage)}")
    console.print()

    scale = report.hour_scale
    console.print("[bold]Commit Activity by Hour[/bold]")
    console.print("  " + "".join(_heat_cell(c, scale) for c in report.hour_counts))
    console.print("  " + "".join(str(h % 10) if h % 3 == 0 else " " for h in range(24)))
    console.print()

    day_scale = report.day_scale
    console.print("[bold]Commit Activity by Day[/bold]")
    for label, count in zip(DAY_LABELS, report.day_counts):
        console.print(f"  {label} {bar(count / day_scale)} {count}")
    console.print()

    console.print("[bold]File Couplings[/bold] (frequently co-edited)")
    if not couplings:
        console.print("  [dim]No significant file couplings detected.[/dim]")
    for a, b, count in couplings:
        console.print(f"  {a} [dim]↔[/dim] {b}  [yellow]{count}x[/yellow]")
    console.print()
