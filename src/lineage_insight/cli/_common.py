"""Shared CLI helpers."""

import dataclasses
import json
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from ..config import InsightConfig, load_config
from ..exceptions import LineageInsightError
from ..logging_config import setup_logging
from ..sources import JsonSnapshotSource
from ..workspace import Workspace

console = Console()

SPARK_BLOCKS = " ▁▂▃▄▅▆▇█"

SNAPSHOT_ARGUMENT_HELP = "Snapshot JSON file, or a directory containing lineage.json"


def truncate(text: str, length: int) -> str:
    if len(text) <= length:
        return text
    return text[:length] + "..."


def format_number(n: int) -> str:
    """Compact count for stat tiles: 1234 -> '1.2k'."""
    if n >= 1000:
        return f"{n / 1000:.1f}k"
    return str(n)


def percent(fraction: float) -> str:
    return f"{round(fraction * 100)}%"


def sparkline(values: list) -> str:
    """ASCII sparkline scaled between the smallest and largest value."""
    if not values:
        return ""
    mn, mx = min(values), max(values)
    if mx == mn:
        return SPARK_BLOCKS[4] * len(values)
    return "".join(SPARK_BLOCKS[min(8, int((v - mn) / (mx - mn) * 8))] for v in values)


def bar(fraction: float, width: int = 20) -> str:
    filled = int(round(max(0.0, min(fraction, 1.0)) * width))
    return "█" * filled + "·" * (width - filled)


def resolve_config(ctx: typer.Context) -> InsightConfig:
    """Build config from the global CLI options, then set up logging from it."""
    obj = ctx.obj or {}
    overrides = {"verbose": bool(obj.get("verbose")), "quiet": bool(obj.get("quiet"))}
    if obj.get("log_file") is not None:
        overrides["log_file"] = str(obj["log_file"])
    try:
        config = load_config(config_file=obj.get("config_file"), **overrides)
    except LineageInsightError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    setup_logging(config)
    return config


def open_workspace(ctx: typer.Context, snapshot: Path) -> Workspace:
    """Load the snapshot into a fresh workspace or exit with an error."""
    workspace = Workspace(JsonSnapshotSource(), config=resolve_config(ctx))
    outcome = workspace.scan(snapshot)
    if not outcome.ok:
        console.print(f"[red]Error:[/red] {outcome.error}")
        raise typer.Exit(1)
    return workspace


def _jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(_jsonable(k)): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_jsonable(v) for v in value]
    return value


def print_json(data: Any) -> None:
    print(json.dumps(_jsonable(data), indent=2))
