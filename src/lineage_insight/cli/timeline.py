"""Timeline command -- filtered commit list."""

from pathlib import Path
from typing import List, Optional

import typer

from ..analysis.change_types import change_type_color
from ..analysis.timeline import TimelineFilter
from . import app
from ._common import SNAPSHOT_ARGUMENT_HELP, console, open_workspace, print_json


@app.command()
def timeline(
    ctx: typer.Context,
    snapshot: Path = typer.Argument(..., help=SNAPSHOT_ARGUMENT_HELP),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Exact author name"),
    change_types: Optional[List[str]] = typer.Option(
        None, "--type", "-t", help="Change type to keep (repeatable)"
    ),
    assistant_only: bool = typer.Option(
        False, "--assistant-only", help="Only assistant-authored commits"
    ),
    since: Optional[str] = typer.Option(None, "--since", help="Earliest ISO-8601 timestamp"),
    until: Optional[str] = typer.Option(None, "--until", help="Latest ISO-8601 timestamp"),
    fmt: str = typer.Option("rich", "--format", "-f", help="Output format: rich or json"),
):
    """
    List commits matching every given filter, in snapshot order.
    """
    workspace = open_workspace(ctx, snapshot)
    commit_filter = TimelineFilter.create(
        author=author,
        change_types=change_types or (),
        assistant_only=assistant_only,
        start=since,
        end=until,
    )
    commits = workspace.timeline(commit_filter)

    if fmt == "json":
        print_json(
            [
                {
                    "hash": c.hash,
                    "timestamp": c.timestamp,
                    "author": c.author_name,
                    "subject": c.subject,
                    "change_type": c.change_type,
                    "is_assistant": c.is_assistant,
                }
                for c in commits
            ]
        )
        return

    console.print(f"[bold]{len(commits)} commits[/bold]")
    for commit in commits:
        color = change_type_color(commit.change_type)
        tag = " [magenta]assistant[/magenta]" if commit.is_assistant else ""
        console.print(
            f"[{color}]●[/{color}] {commit.subject}\n"
            f"    [dim]{commit.short_hash} {commit.author_name}[/dim]{tag}"
        )
