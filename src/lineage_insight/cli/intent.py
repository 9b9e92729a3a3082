"""Intent command -- what prompts led to."""

from pathlib import Path

import typer
from rich.table import Table

from ..analysis.outcomes import OUTCOME_COLORS, OUTCOME_LABELS
from . import app
from ._common import SNAPSHOT_ARGUMENT_HELP, console, open_workspace, percent, print_json, truncate


@app.command()
def intent(
    ctx: typer.Context,
    snapshot: Path = typer.Argument(..., help=SNAPSHOT_ARGUMENT_HELP),
    fmt: str = typer.Option("rich", "--format", "-f", help="Output format: rich or json"),
    show_sessions: bool = typer.Option(
        True, "--sessions/--no-sessions", help="List every prompt with its outcome"
    ),
):
    """
    Classify prompts as completed, partial or abandoned and count re-prompts.
    """
    workspace = open_workspace(ctx, snapshot)
    summary = workspace.intent()
    sessions = workspace.snapshot.prompt_sessions

    if fmt == "json":
        print_json(summary)
        return

    console.print()
    console.print(f"[bold]Total Prompts[/bold]   {summary.total_prompts}")
    console.print(f"[bold]Completion Rate[/bold] {percent(summary.completion_rate)}")
    console.print(f"[bold]Re-prompts[/bold]      {summary.reprompt_count}")
    console.print(f"[bold]Avg Tool Calls[/bold]  {summary.avg_tool_calls}")
    console.print()

    if summary.outcome_counts:
        console.print("[bold]Outcome Distribution[/bold]")
        for outcome, count in summary.outcome_counts.items():
            color = OUTCOME_COLORS.get(outcome.value, "white")
            label = OUTCOME_LABELS.get(outcome.value, outcome.value)
            console.print(f"  [{color}]{label:<10}[/{color}] {count}")
        console.print()

    if not show_sessions or not sessions:
        return

    table = Table(title=f"Prompt Sessions ({summary.total_prompts})")
    table.add_column("Prompt", overflow="fold")
    table.add_column("Outcome")
    table.add_column("Tools", justify="right")
    table.add_column("Writes", justify="right")
    for session, outcome in zip(sessions, summary.outcomes):
        color = OUTCOME_COLORS.get(outcome.value, "white")
        table.add_row(
            truncate(session.prompt_text, 80),
            f"[{color}]{OUTCOME_LABELS.get(outcome.value, outcome.value)}[/{color}]",
            str(session.tool_call_count),
            str(len(session.files_written)),
        )
    console.print(table)
