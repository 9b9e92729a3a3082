"""Prompts command -- prompt sessions grouped into time buckets."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis.features import feature_titles
from ..exceptions import InvalidGroupingError
from ..temporal.timestamps import parse_timestamp
from . import app
from ._common import SNAPSHOT_ARGUMENT_HELP, console, open_workspace, print_json, truncate


def _clock(timestamp: str, tz) -> str:
    moment = parse_timestamp(timestamp, tz)
    if moment is None:
        return ""
    suffix = "PM" if moment.hour >= 12 else "AM"
    return f"{moment.hour % 12 or 12}:{moment.minute:02d} {suffix}"


def _plural(n: int, word: str) -> str:
    return f"{n} {word}{'' if n == 1 else 's'}"


@app.command()
def prompts(
    ctx: typer.Context,
    snapshot: Path = typer.Argument(..., help=SNAPSHOT_ARGUMENT_HELP),
    group_by: Optional[str] = typer.Option(
        None, "--group-by", "-g", help="Bucket size: hour, day, week or month"
    ),
    fmt: str = typer.Option("rich", "--format", "-f", help="Output format: rich or json"),
):
    """
    List prompt sessions grouped by hour, day, week or month.

    [bold cyan]Examples:[/bold cyan]

      lineage-insight prompts lineage.json --group-by week
    """
    workspace = open_workspace(ctx, snapshot)
    try:
        groups = workspace.prompts(group_by)
    except InvalidGroupingError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if fmt == "json":
        print_json([{"label": g.label, "sessions": g.sessions} for g in groups])
        return

    project = workspace.snapshot
    sessions = project.prompt_sessions
    if not sessions:
        console.print("[yellow]No prompts detected.[/yellow]")
        return

    titles = feature_titles(project)
    tz = workspace.config.tzinfo
    preview = workspace.config.prompt_preview_chars

    console.print()
    console.print(
        f"{_plural(len(sessions), 'prompt')} across {_plural(project.session_count, 'session')}"
    )
    for group in groups:
        console.print()
        console.print(f"[bold cyan]{group.label}[/bold cyan] [dim]({len(group)})[/dim]")
        for session in group.sessions:
            console.print(f"  {truncate(session.prompt_text, preview)}")
            meta = [
                _clock(session.timestamp, tz),
                f"{len(session.files_written)} files written",
                f"{len(session.files_read)} files read",
            ]
            if session.model:
                meta.insert(0, session.model)
            if session.total_tokens > 0:
                meta.append(f"{session.total_tokens:,} tokens")
            if session.associated_commit_hashes:
                meta.append(_plural(len(session.associated_commit_hashes), "commit"))
            linked = [titles[i] for i in session.associated_feature_ids if i in titles]
            if linked:
                meta.append("features: " + ", ".join(linked))
            console.print("    [dim]" + " · ".join(m for m in meta if m) + "[/dim]")
