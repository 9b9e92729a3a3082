"""Functions command -- touched functions per file."""

from pathlib import Path

import typer
from rich.tree import Tree

from . import app
from ._common import SNAPSHOT_ARGUMENT_HELP, console, open_workspace, print_json


@app.command()
def functions(
    ctx: typer.Context,
    snapshot: Path = typer.Argument(..., help=SNAPSHOT_ARGUMENT_HELP),
    fmt: str = typer.Option("rich", "--format", "-f", help="Output format: rich or json"),
):
    """
    Show each changed file with the functions its commits touched.
    """
    workspace = open_workspace(ctx, snapshot)
    tree = workspace.functions()

    if fmt == "json":
        print_json(tree)
        return

    if not tree:
        console.print("[yellow]No function data available.[/yellow]")
        return

    root = Tree("[bold]Files[/bold]")
    for path, names in tree.items():
        branch = root.add(f"[cyan]{path}[/cyan]")
        for name in names:
            branch.add(name)
    console.print(root)
