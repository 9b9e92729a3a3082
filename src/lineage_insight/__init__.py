"""
Lineage Insight - behavioural analytics over commit history and prompt sessions.

Turns an exported project snapshot (commits, features, assistant prompt
sessions, upstream analytics) into activity distributions, file couplings,
prompt outcomes, re-prompt counts and grouped timelines.
"""

__version__ = "0.1.0"

from .models import ChangeType, Outcome, ProjectData
from .snapshot import load_project
from .sources import JsonSnapshotSource, ProjectSource
from .workspace import RefreshOutcome, Workspace

__all__ = [
    "ChangeType",
    "JsonSnapshotSource",
    "Outcome",
    "ProjectData",
    "ProjectSource",
    "RefreshOutcome",
    "Workspace",
    "load_project",
]
