"""CLI entry point: registers all subcommands."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="lineage-insight",
    help="Lineage Insight - Commit and prompt-session behaviour analytics",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"lineage-insight {__version__}")
        raise typer.Exit()


@app.callback()
def _global_options(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all but ERROR logging"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also append log records to this file", dir_okay=False
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Derive behavioural insight from an exported project snapshot."""
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["log_file"] = log_file


# Import subcommands to register them
from .dashboard import dashboard as _dashboard  # noqa: F401, E402
from .features import features as _features  # noqa: F401, E402
from .functions import functions as _functions  # noqa: F401, E402
from .intent import intent as _intent  # noqa: F401, E402
from .patterns import patterns as _patterns  # noqa: F401, E402
from .prompts import prompts as _prompts  # noqa: F401, E402
from .timeline import timeline as _timeline  # noqa: F401, E402


def main() -> None:
    app()
